# bit_cli/cli/commands/version.py
from __future__ import annotations

from typing import Any

from bit_cli.cli.commands.base import BaseCommand
from bit_cli.commands.version import version_action


class VersionCommand(BaseCommand):
    def __init__(self) -> None:
        super().__init__(name="version", help_text="Print the bit version.")

    def execute(self, **params: Any) -> str:
        return version_action()
