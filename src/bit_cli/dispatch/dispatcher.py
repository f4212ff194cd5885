# bit_cli/dispatch/dispatcher.py
"""
Route a tokenized line to a built-in command or to git.

``checkout``/``switch``/``co`` get a two-step flow instead of a plain
pass-through: switch if the branch already exists, otherwise offer to
create it.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Protocol, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm

from bit_cli.errors import MissingBranchArgumentError
from bit_cli.git.runner import SubprocessFailure

logger = logging.getLogger(__name__)

CHECKOUT_ALIASES = frozenset({"checkout", "switch", "co"})
CREATE_FLAG = "-b"


class Builtins(Protocol):
    def is_builtin(self, name: str) -> bool: ...

    def invoke(self, argv: List[str]) -> None: ...


class Git(Protocol):
    remote: str

    def run(self, args: Sequence[str]) -> None: ...

    def branch_exists(self, name: str) -> bool: ...

    def switch_branch(self, name: str) -> None: ...

    def refresh_current_branch(self) -> None: ...


def _ask_confirm(message: str) -> bool:
    return Confirm.ask(message, default=False)


class CommandDispatcher:
    """Execute one argument vector produced by the tokenizer."""

    def __init__(
        self,
        builtins: Builtins,
        git: Git,
        confirm: Callable[[str], bool] = _ask_confirm,
        console: Optional[Console] = None,
    ):
        self.builtins = builtins
        self.git = git
        self.confirm = confirm
        self.console = console or Console()

    def dispatch(self, argv: Sequence[str]) -> None:
        if not argv:
            return
        argv = list(argv)
        if self.builtins.is_builtin(argv[0]):
            logger.debug("Built-in command: %s", argv)
            self.builtins.invoke(argv)
            return
        if argv[0] in CHECKOUT_ALIASES:
            self._checkout(argv)
            return
        self._run_git(argv)

    # ── helpers ──────────────────────────────────────────────────────
    def _branch_name(self, raw: str) -> str:
        name = raw.strip()
        prefix = f"{self.git.remote}/"
        if name.startswith(prefix):
            name = name[len(prefix):]
        return name.strip()

    def _checkout(self, argv: List[str]) -> None:
        if len(argv) < 2:
            raise MissingBranchArgumentError(argv[0])

        branch = self._branch_name(argv[-1])
        create_branch = len(argv) == 3 and argv[-2] == CREATE_FLAG

        if self.git.branch_exists(branch):
            logger.debug("Branch '%s' exists; switching", branch)
            try:
                self.git.switch_branch(branch)
            except SubprocessFailure as exc:
                logger.debug("switch to %s failed", branch, exc_info=True)
                self.console.print(
                    f"[red]Could not switch to '{escape(branch)}':[/red] {escape(exc.detail)}"
                )
                return
            self.git.refresh_current_branch()
            return

        if not create_branch and not self.confirm(
            "Branch does not exist. Do you want to create it?"
        ):
            self.console.print("[yellow]Cancelling...[/yellow]")
            return

        self._run_git(["checkout", CREATE_FLAG, branch])

    def _run_git(self, argv: List[str]) -> None:
        try:
            self.git.run(argv)
        except SubprocessFailure as exc:
            logger.debug("git %s failed", argv, exc_info=True)
            self.console.print(f"[red]Command may not exist:[/red] {escape(str(exc.cause))}")
