# bit_cli/commands/info.py
"""Summarise the repository state."""
from __future__ import annotations

from rich.console import Console
from rich.table import Table

from bit_cli.git.backend import GitBackend
from bit_cli.ui.colors import BRANCH_COLOR, TEXT_DEEMPHASIS


def info_action(git: GitBackend, *, console: Console | None = None) -> None:
    console = console or Console()
    if not git.is_repository():
        console.print("[red]Not inside a git repository.[/red]")
        return
    branch = git.current_branch()
    if branch is None:
        console.print("[yellow]HEAD does not point at a branch or commit yet.[/yellow]")
        return

    console.print(f"On branch [{BRANCH_COLOR}]{branch}[/{BRANCH_COLOR}]")
    changed = git.changed_files()
    if not changed:
        console.print(f"[{TEXT_DEEMPHASIS}]Working tree clean.[/{TEXT_DEEMPHASIS}]")
        return

    table = Table(title="Changed files")
    table.add_column("Path", style="yellow")
    for path in changed:
        table.add_row(path)
    console.print(table)
