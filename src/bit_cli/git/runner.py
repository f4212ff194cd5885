# bit_cli/git/runner.py
"""
Subprocess helpers for the wrapped tool.

Two flavours:

* :func:`run_in_terminal` - inherits the terminal so the user sees the
  tool's own (coloured) output; used for pass-through commands.
* :func:`capture` - runs quietly and returns stdout; used for queries that
  feed completion and the checkout flow.
"""
from __future__ import annotations

import logging
import os
import subprocess
from typing import List, Optional, Sequence

from bit_cli.errors import BitError

logger = logging.getLogger(__name__)


class SubprocessFailure(BitError):
    """The wrapped tool could not be started or exited non-zero."""

    def __init__(self, argv: Sequence[str], cause: Exception, stderr: str = ""):
        self.argv = list(argv)
        self.cause = cause
        self.stderr = (stderr or "").strip()
        super().__init__(f"{' '.join(self.argv)}: {cause}")

    @property
    def detail(self) -> str:
        """The tool's own error output when there is any, else the cause."""
        return self.stderr or str(self.cause)


def _with_color(tool: str, args: Sequence[str]) -> List[str]:
    if os.path.basename(tool) in ("git", "git.exe"):
        return [tool, "-c", "color.ui=always", *args]
    return [tool, *args]


def run_in_terminal(tool: str, args: Sequence[str]) -> None:
    """
    Run *tool* with *args* attached to the current terminal.

    Raises
    ------
    SubprocessFailure
        If the executable is missing or exits with a non-zero status.
    """
    argv = _with_color(tool, args)
    logger.debug("Running %s", argv)
    try:
        subprocess.run(argv, check=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise SubprocessFailure(argv, exc) from exc


def capture(
    tool: str,
    args: Sequence[str],
    cwd: Optional[str] = None,
    ok_codes: Sequence[int] = (0,),
) -> Optional[str]:
    """Return stdout of ``tool args`` or ``None`` when it fails."""
    argv = [tool, *args]
    try:
        proc = subprocess.run(
            argv,
            capture_output=True,
            text=True,
            cwd=cwd,
            check=False,
        )
    except OSError as exc:
        logger.debug("Could not start %s: %s", argv, exc)
        return None
    if proc.returncode not in ok_codes:
        logger.debug("%s exited %s: %s", argv, proc.returncode, proc.stderr.strip())
        return None
    return proc.stdout


def run_quiet(tool: str, args: Sequence[str]) -> str:
    """
    Run ``tool args`` without touching the terminal and return stdout.

    Raises
    ------
    SubprocessFailure
        Carrying the tool's stderr, if it cannot start or exits non-zero.
    """
    argv = [tool, *args]
    try:
        proc = subprocess.run(argv, capture_output=True, text=True, check=True)
    except subprocess.CalledProcessError as exc:
        raise SubprocessFailure(argv, exc, stderr=exc.stderr) from exc
    except OSError as exc:
        raise SubprocessFailure(argv, exc) from exc
    return proc.stdout
