# bit_cli/cli/commands/base.py
"""Base command classes for bit-cli.

This module defines the abstract base class used by every built-in command
that can be run both from the process command line (``bit save``) and from
inside the interactive shell.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional

import typer

logger = logging.getLogger(__name__)


class BaseCommand(ABC):
    """Abstract base class for all bit built-in commands."""

    name: str
    help: str
    aliases: List[str]

    def __init__(self, name: str, help_text: str = "", aliases: Optional[List[str]] = None):
        self.name = name
        self.help = help_text or "Run the command."
        self.aliases = aliases or []

    @abstractmethod
    def execute(self, **params: Any) -> Any:
        """Execute the command with the given parameters."""

    def register(self, app: typer.Typer) -> None:
        """Register this command (and its aliases) with the Typer app."""
        # Default implementation - override in subclasses needing options
        def _command_wrapper(
            args: Optional[List[str]] = typer.Argument(None, help="Command arguments"),
        ) -> None:
            self.wrapped_execute(args=args or [])

        _command_wrapper.__doc__ = self.help
        for name in (self.name, *self.aliases):
            app.command(
                name,
                help=self.help,
                hidden=name != self.name,
                context_settings={"ignore_unknown_options": True},
            )(_command_wrapper)

    def wrapped_execute(self, **kwargs: Any) -> Any:
        """Standard wrapper for execute to ensure consistent behavior."""
        logger.debug("Executing command: %s with params: %s", self.name, kwargs)
        return self.execute(**kwargs)
