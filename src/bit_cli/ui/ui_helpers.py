# bit_cli/ui/ui_helpers.py
"""
Shared Rich helpers for the bit-cli UI.
"""
from __future__ import annotations

import os
import sys

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel

from bit_cli.ui.colors import BORDER_PRIMARY, TEXT_ERROR

# --------------------------------------------------------------------------- #
# generic helpers                                                             #
# --------------------------------------------------------------------------- #
_console = Console()


def restore_terminal() -> None:
    """Restore terminal settings after prompt_toolkit or a child process."""
    if os.name == "posix" and sys.stdin.isatty():
        os.system("stty sane")


def print_error(message: str, console: Console | None = None) -> None:
    (console or _console).print(f"[{TEXT_ERROR}]{escape(message)}[/{TEXT_ERROR}]", highlight=False)


# --------------------------------------------------------------------------- #
# Interactive welcome banner                                                  #
# --------------------------------------------------------------------------- #
def display_welcome_banner(version: str, console: Console | None = None) -> None:
    """Print the banner shown when the interactive shell starts."""
    (console or _console).print(
        Panel(
            Markdown(
                f"# bit {version}\n\n"
                "Type a git command or a bit command; **Tab** completes.\n"
                "Type **`help`** for bit commands, **`exit`** to quit."
            ),
            title="Bit Interactive Shell",
            border_style=BORDER_PRIMARY,
            expand=True,
        )
    )
