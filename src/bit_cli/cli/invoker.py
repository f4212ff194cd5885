# bit_cli/cli/invoker.py
"""Run built-in commands in-process from the interactive shell."""
from __future__ import annotations

import logging
from typing import List, Type

import typer

from bit_cli.cli.registry import CommandRegistry

logger = logging.getLogger(__name__)


def _usage_error_base() -> Type[Exception]:
    # Typer may ship its own copy of click; take the base class from the
    # exceptions Typer itself raises rather than from a separately installed click.
    for cls in typer.BadParameter.__mro__:
        if cls.__name__ == "ClickException":
            return cls
    return typer.BadParameter


UsageFailure = _usage_error_base()


class TyperInvoker:
    """
    Hand a full argv to the Typer app without leaving the process.

    Usage errors are shown and swallowed so one bad line never ends the
    session.
    """

    def __init__(self, app: typer.Typer, prog_name: str = "bit"):
        self.app = app
        self.prog_name = prog_name

    def is_builtin(self, name: str) -> bool:
        return CommandRegistry.get_command(name) is not None

    def invoke(self, argv: List[str]) -> None:
        command = typer.main.get_command(self.app)
        try:
            command.main(args=list(argv), prog_name=self.prog_name, standalone_mode=False)
        except typer.Exit:
            pass
        except typer.Abort:
            logger.debug("Built-in %s aborted", argv[0])
        except UsageFailure as exc:
            exc.show()
