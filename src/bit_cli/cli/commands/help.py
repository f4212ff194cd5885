# bit_cli/cli/commands/help.py
from __future__ import annotations

import logging
from typing import Any, List, Optional

from rich.console import Console

from bit_cli.cli.commands.base import BaseCommand
from bit_cli.commands.help import help_action

logger = logging.getLogger(__name__)


class HelpCommand(BaseCommand):
    """Display available built-ins or detailed help for one of them."""

    def __init__(self) -> None:
        super().__init__(
            name="help",
            help_text="Display bit commands or help for a specific command.",
            aliases=["?"],
        )

    def execute(self, **params: Any) -> None:
        args: List[str] = params.get("args") or []
        command: Optional[str] = args[0] if args else None
        logger.debug("Executing HelpCommand for: %r", command)
        help_action(command, console=Console())
