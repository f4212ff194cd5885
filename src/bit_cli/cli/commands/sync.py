# bit_cli/cli/commands/sync.py
from __future__ import annotations

from typing import Any

from bit_cli.cli.commands.base import BaseCommand
from bit_cli.commands.sync import sync_action
from bit_cli.git.backend import get_git_backend


class SyncCommand(BaseCommand):
    def __init__(self) -> None:
        super().__init__(
            name="sync",
            help_text="Pull with rebase from the upstream branch, then push.",
        )

    def execute(self, **params: Any) -> bool:
        return sync_action(get_git_backend())
