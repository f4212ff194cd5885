# bit_cli/commands/version.py
from __future__ import annotations

from rich.console import Console

from bit_cli import __version__


def version_action(*, console: Console | None = None) -> str:
    (console or Console()).print(f"bit {__version__}")
    return __version__
