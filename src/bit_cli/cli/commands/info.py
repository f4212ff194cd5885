# bit_cli/cli/commands/info.py
from __future__ import annotations

from typing import Any

from bit_cli.cli.commands.base import BaseCommand
from bit_cli.commands.info import info_action
from bit_cli.git.backend import get_git_backend


class InfoCommand(BaseCommand):
    def __init__(self) -> None:
        super().__init__(
            name="info",
            help_text="Show the current branch and changed files.",
        )

    def execute(self, **params: Any) -> None:
        info_action(get_git_backend())
