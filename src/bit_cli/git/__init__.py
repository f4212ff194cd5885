# bit_cli/git/__init__.py
"""Access to the wrapped git executable."""
from .backend import GitBackend, get_git_backend, set_git_backend
from .runner import SubprocessFailure, capture, run_in_terminal, run_quiet

__all__ = [
    "GitBackend",
    "SubprocessFailure",
    "capture",
    "get_git_backend",
    "run_in_terminal",
    "run_quiet",
    "set_git_backend",
]
