# bit_cli/git/backend.py
"""Thin object wrapper over the git executable used by the dispatcher."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from bit_cli.git.runner import capture, run_in_terminal, run_quiet

logger = logging.getLogger(__name__)


class GitBackend:
    """All git access for one shell session."""

    def __init__(self, executable: str = "git", remote: str = "origin"):
        self.executable = executable
        self.remote = remote

    # ── pass-through ─────────────────────────────────────────────────
    def run(self, args: Sequence[str]) -> None:
        """Run ``git args`` in the terminal; raises ``SubprocessFailure``."""
        run_in_terminal(self.executable, args)

    def _query(self, *args: str) -> Optional[str]:
        return capture(self.executable, args)

    # ── branches ─────────────────────────────────────────────────────
    def branch_exists(self, name: str) -> bool:
        """True if *name* is a local branch or a branch on the configured remote."""
        for ref in (f"refs/heads/{name}", f"refs/remotes/{self.remote}/{name}"):
            if self._query("rev-parse", "--verify", "--quiet", ref) is not None:
                return True
        return False

    def switch_branch(self, name: str) -> None:
        """
        Quietly check out an existing branch.

        Raises ``SubprocessFailure`` carrying git's stderr when the checkout
        is refused (local changes in the way, for instance).
        """
        run_quiet(self.executable, ["checkout", name])

    def is_repository(self) -> bool:
        out = self._query("rev-parse", "--is-inside-work-tree")
        return out is not None and out.strip() == "true"

    def current_branch(self) -> Optional[str]:
        """
        Name of the checked-out branch, or the abbreviated commit when HEAD
        is detached. A branch with no commits yet still has a name.
        """
        out = self._query("symbolic-ref", "--short", "-q", "HEAD")
        if out and out.strip():
            return out.strip()
        out = self._query("rev-parse", "--short", "HEAD")
        return out.strip() if out else None

    def refresh_current_branch(self) -> None:
        """Fast-forward the current branch from its upstream, if it has one."""
        upstream = self._query("rev-parse", "--abbrev-ref", "--symbolic-full-name", "@{u}")
        if not upstream:
            logger.debug("Current branch has no upstream; nothing to refresh")
            return
        if self._query("pull", "--ff-only") is None:
            logger.warning("Could not fast-forward from %s", upstream.strip())

    def list_branches(self) -> List[str]:
        """Local branches followed by remote-tracking ones, most recent first."""
        out = self._query(
            "for-each-ref",
            "--sort=-committerdate",
            "--format=%(refname:short)",
            "refs/heads",
            f"refs/remotes/{self.remote}",
        )
        if not out:
            return []
        names = []
        for line in out.splitlines():
            name = line.strip()
            if not name or name == self.remote or name.endswith("/HEAD"):
                continue
            names.append(name)
        return names

    def changed_files(self) -> List[str]:
        """Paths reported by ``git status --porcelain``."""
        out = self._query("status", "--porcelain")
        if not out:
            return []
        return [line[3:] for line in out.splitlines() if len(line) > 3]


# --------------------------------------------------------------------------- #
# process-wide instance                                                       #
# --------------------------------------------------------------------------- #
_git_backend: Optional[GitBackend] = None


def get_git_backend() -> GitBackend:
    """Return the session's backend, building one from ``ShellConfig`` if unset."""
    global _git_backend
    if _git_backend is None:
        from bit_cli.config import ShellConfig

        cfg = ShellConfig()
        _git_backend = GitBackend(cfg.git_executable, cfg.remote)
    return _git_backend


def set_git_backend(backend: Optional[GitBackend]) -> None:
    """Set (or with ``None`` reset) the global backend instance."""
    global _git_backend
    _git_backend = backend
