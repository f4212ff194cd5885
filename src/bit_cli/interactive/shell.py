# bit_cli/interactive/shell.py
"""Interactive shell: prompt with predictive completion, tokenize, dispatch."""
from __future__ import annotations

import logging
from functools import partial
from typing import Any, Optional

from rich.console import Console

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from bit_cli import __version__
from bit_cli.cli.registry import CommandRegistry
from bit_cli.completion import BitCompleter, CompletionRouter
from bit_cli.config import ShellConfig
from bit_cli.dispatch import CommandDispatcher
from bit_cli.dispatch.dispatcher import Builtins
from bit_cli.errors import BitError
from bit_cli.git.backend import GitBackend, set_git_backend
from bit_cli.git.suggestions import build_suggestion_map, flag_suggestions_for_command
from bit_cli.parsing import tokenize
from bit_cli.ui.ui_helpers import display_welcome_banner, print_error

logger = logging.getLogger(__name__)

EXIT_WORDS = frozenset({"exit", "quit"})


def build_router(git: GitBackend) -> CompletionRouter:
    """Build the session's router; the suggestion map is fixed from here on."""
    suggestion_map = build_suggestion_map(git, CommandRegistry.suggestions())
    flags = partial(flag_suggestions_for_command, executable=git.executable)
    return CompletionRouter(suggestion_map, flags)


def _build_session(config: ShellConfig, router: CompletionRouter) -> PromptSession:
    history_path = config.history_file
    history_path.parent.mkdir(parents=True, exist_ok=True)
    return PromptSession(
        completer=BitCompleter(router),
        complete_while_typing=True,
        history=FileHistory(str(history_path)),
    )


def run_line(line: str, dispatcher: CommandDispatcher, console: Console) -> None:
    """Tokenize and dispatch one line; errors abort only this line."""
    try:
        dispatcher.dispatch(tokenize(line))
    except BitError as exc:
        print_error(str(exc), console)


def interactive_mode(
    builtins: Builtins,
    *,
    config: Optional[ShellConfig] = None,
    git: Optional[GitBackend] = None,
    session: Any = None,
    console: Optional[Console] = None,
) -> bool:
    """
    Launch the interactive shell. Returns ``True`` once the user leaves.
    """
    config = config or ShellConfig()
    if git is None:
        git = GitBackend(config.git_executable, config.remote)
        set_git_backend(git)
    console = console or Console()

    if session is None:
        session = _build_session(config, build_router(git))
    dispatcher = CommandDispatcher(builtins, git, console=console)

    display_welcome_banner(__version__, console)

    while True:
        try:
            line = session.prompt(config.prompt).strip()
            if not line:
                continue
            if line.lower() in EXIT_WORDS:
                console.print("[yellow]Goodbye![/yellow]")
                return True
            run_line(line, dispatcher, console)

        except KeyboardInterrupt:
            console.print("\n[yellow]Interrupted. Type 'exit' to quit.[/yellow]")
        except EOFError:
            console.print("\n[yellow]EOF detected. Exiting.[/yellow]")
            return True
