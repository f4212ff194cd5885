# bit_cli/cli/registry.py
"""
Command registry for bit-cli - central place to register & discover the
built-in commands that take precedence over git pass-through.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional

import typer

from bit_cli.cli.commands.base import BaseCommand
from bit_cli.completion.router import Suggestion

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Central registry holding every built-in command object."""
    _commands: Dict[str, BaseCommand] = {}
    _aliases: Dict[str, str] = {}

    # ── registration helpers ─────────────────────────────────────────
    @classmethod
    def register(cls, command: BaseCommand) -> None:
        """Register a command under its name and any aliases."""
        cls._commands[command.name] = command
        for alias in command.aliases:
            cls._aliases[alias] = command.name

    # ── retrieval helpers ────────────────────────────────────────────
    @classmethod
    def get_command(cls, name: str) -> Optional[BaseCommand]:
        """Retrieve a command by name or alias."""
        if name in cls._aliases:
            name = cls._aliases[name]
        return cls._commands.get(name)

    @classmethod
    def get_all_commands(cls) -> Dict[str, BaseCommand]:
        return cls._commands

    @classmethod
    def command_names(cls) -> List[str]:
        """Every name and alias that routes to a built-in."""
        return [*cls._commands.keys(), *cls._aliases.keys()]

    @classmethod
    def suggestions(cls) -> List[Suggestion]:
        """Built-ins as completion candidates for the first token."""
        return [
            Suggestion.of(name, (cmd.help or "").split("\n", 1)[0])
            for name, cmd in cls._commands.items()
        ]

    # ── bulk registration into a Typer app ───────────────────────────
    @classmethod
    def register_with_typer(cls, app: typer.Typer) -> None:
        for cmd in cls._commands.values():
            logger.debug("Registering '%s' with Typer", cmd.name)
            cmd.register(app)
