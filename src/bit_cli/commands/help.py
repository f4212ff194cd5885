# bit_cli/commands/help.py
"""
Help for the built-in commands, shared by the process CLI and the shell.
"""
from __future__ import annotations

from typing import Dict, Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from bit_cli.cli.registry import CommandRegistry


def _get_commands() -> Dict[str, object]:
    """Return the mapping of command-name → command-object."""
    return CommandRegistry.get_all_commands()


# ──────────────────────────────────────────────────────────────────
# public API
# ──────────────────────────────────────────────────────────────────
def help_action(command_name: Optional[str] = None, *, console: Console | None = None) -> None:
    """
    Print help for *all* built-in commands, or a specific command if
    `command_name` is supplied.

    Parameters
    ----------
    command_name
        Optional – the command to describe in detail.
    console
        Optional – Rich Console; one is created automatically if omitted.
    """
    console = console or Console()
    commands = _get_commands()

    # ── detailed help for one command ────────────────────────────────
    if command_name:
        cmd = CommandRegistry.get_command(command_name)
        if not cmd:
            console.print(
                f"[red]Unknown command:[/red] {command_name} "
                "[dim](anything else is passed to git)[/dim]"
            )
            return

        md = Markdown(f"## `{cmd.name}`\n\n{cmd.help or '_No description provided._'}")
        console.print(Panel(md, title="Command Help", border_style="cyan"))
        if cmd.aliases:
            console.print(f"[dim]Aliases:[/dim] {', '.join(cmd.aliases)}")
        return

    # ── full list ────────────────────────────────────────────────────
    table = Table(title="Bit Commands")
    table.add_column("Command", style="green")
    table.add_column("Aliases", style="cyan")
    table.add_column("Description")

    for name, cmd in sorted(commands.items()):
        desc = (cmd.help or "").split("\n", 1)[0]
        alias_str = ", ".join(cmd.aliases) if cmd.aliases else "-"
        table.add_row(name, alias_str, desc or "-")

    console.print(table)
    console.print(
        "[dim]Type 'help <command>' for details. Any other command is run by git.[/dim]"
    )
