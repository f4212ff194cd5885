# bit_cli/commands/save.py
"""Stage everything and commit in one step."""
from __future__ import annotations

import logging
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from bit_cli.git.backend import GitBackend
from bit_cli.git.runner import SubprocessFailure

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "save"


def save_action(
    git: GitBackend,
    words: Sequence[str] = (),
    *,
    console: Console | None = None,
) -> bool:
    """
    ``git add -A`` followed by ``git commit -m <message>``.

    *words* are joined with spaces to form the message (a leading ``-m`` is
    accepted and dropped); an empty message falls back to
    ``DEFAULT_MESSAGE``. Returns ``True`` when both steps succeeded.
    """
    console = console or Console()
    words = list(words)
    if words[:1] == ["-m"]:
        words = words[1:]
    message = " ".join(words).strip() or DEFAULT_MESSAGE
    try:
        git.run(["add", "-A"])
        git.run(["commit", "-m", message])
    except SubprocessFailure as exc:
        logger.debug("save failed", exc_info=True)
        console.print(f"[red]Save failed:[/red] {escape(str(exc))}")
        return False
    return True
