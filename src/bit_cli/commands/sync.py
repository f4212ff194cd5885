# bit_cli/commands/sync.py
"""Bring the current branch in line with its upstream."""
from __future__ import annotations

import logging

from rich.console import Console
from rich.markup import escape

from bit_cli.git.backend import GitBackend
from bit_cli.git.runner import SubprocessFailure

logger = logging.getLogger(__name__)


def sync_action(git: GitBackend, *, console: Console | None = None) -> bool:
    """Rebase onto the upstream, then push. Stops at the first failure."""
    console = console or Console()
    for step in (["pull", "--rebase"], ["push"]):
        try:
            git.run(step)
        except SubprocessFailure as exc:
            logger.debug("sync step %s failed", step, exc_info=True)
            console.print(f"[red]Sync stopped at 'git {' '.join(step)}':[/red] {escape(str(exc.cause))}")
            return False
    console.print("[green]Branch synced.[/green]")
    return True
