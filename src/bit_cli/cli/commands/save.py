# bit_cli/cli/commands/save.py
from __future__ import annotations

from typing import Any

from bit_cli.cli.commands.base import BaseCommand
from bit_cli.commands.save import save_action
from bit_cli.git.backend import get_git_backend


class SaveCommand(BaseCommand):
    def __init__(self) -> None:
        super().__init__(
            name="save",
            help_text=(
                "Stage all changes and commit them.\n\n"
                "Remaining words form the commit message, e.g. `save fix typo`."
            ),
        )

    def execute(self, **params: Any) -> bool:
        return save_action(get_git_backend(), params.get("args") or [])
