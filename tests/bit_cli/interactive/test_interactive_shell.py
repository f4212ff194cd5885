# tests/bit_cli/interactive/test_interactive_shell.py
import io

import pytest
import typer
from rich.console import Console

from bit_cli.cli.commands.base import BaseCommand
from bit_cli.cli.invoker import TyperInvoker
from bit_cli.cli.registry import CommandRegistry
from bit_cli.completion import CompletionRouter
from bit_cli.config import ShellConfig
from bit_cli.interactive import shell as shell_mod
from bit_cli.interactive.shell import build_router, interactive_mode


class ScriptedSession:
    """Stands in for PromptSession: replays lines, then raises EOFError."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def prompt(self, message):
        self.prompts.append(message)
        if not self.lines:
            raise EOFError
        item = self.lines.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


class FakeBuiltins:
    def __init__(self):
        self.invoked = []

    def is_builtin(self, name):
        return name == "save"

    def invoke(self, argv):
        self.invoked.append(argv)


class FakeGit:
    executable = "git"
    remote = "origin"

    def __init__(self):
        self.runs = []

    def run(self, args):
        self.runs.append(list(args))

    def branch_exists(self, name):
        return True

    def switch_branch(self, name):
        return True

    def refresh_current_branch(self):
        pass

    def current_branch(self):
        return "main"

    def list_branches(self):
        return ["main"]

    def changed_files(self):
        return []


@pytest.fixture
def config(tmp_path):
    return ShellConfig(str(tmp_path / "config.json"))


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120)


def _run(lines, config, console):
    session = ScriptedSession(lines)
    builtins, git = FakeBuiltins(), FakeGit()
    result = interactive_mode(builtins, config=config, git=git, session=session, console=console)
    return result, session, builtins, git


def test_lines_are_tokenized_and_dispatched(config, console):
    result, session, builtins, git = _run(
        ['commit -m "two words"', "", "save wip now"], config, console
    )
    assert result is True
    assert git.runs == [["commit", "-m", "two words"]]
    assert builtins.invoked == [["save", "wip", "now"]]
    assert session.prompts[0] == "> bit "


def test_tokenizer_error_aborts_only_that_line(config, console):
    _, _, _, git = _run(['commit -m "oops', "status"], config, console)
    assert git.runs == [["status"]]
    assert "Unclosed quote" in console.file.getvalue()


def test_missing_branch_is_reported(config, console):
    _, _, _, git = _run(["checkout", "log"], config, console)
    assert git.runs == [["log"]]
    assert "expected branch name" in console.file.getvalue()


def test_exit_word_stops_loop(config, console):
    _, session, _, git = _run(["exit", "status"], config, console)
    assert git.runs == []
    assert session.lines == ["status"]


def test_keyboard_interrupt_continues(config, console):
    _, _, _, git = _run([KeyboardInterrupt(), "status"], config, console)
    assert git.runs == [["status"]]
    assert "Interrupted" in console.file.getvalue()


def test_build_router_wires_suggestions(monkeypatch):
    monkeypatch.setattr(shell_mod, "flag_suggestions_for_command", lambda *a, **kw: [])
    router = build_router(FakeGit())
    assert isinstance(router, CompletionRouter)
    assert [s.text for s in router.suggest("checkout ma")] == ["main"]


class NoteCommand(BaseCommand):
    def __init__(self):
        super().__init__("note", "Record arguments.")
        self.seen = []

    def execute(self, **params):
        self.seen.append(params["args"])


@pytest.fixture
def typer_builtins():
    saved = dict(CommandRegistry._commands), dict(CommandRegistry._aliases)
    CommandRegistry._commands.clear()
    CommandRegistry._aliases.clear()

    note = NoteCommand()
    CommandRegistry.register(note)
    app = typer.Typer()

    @app.callback()
    def _root() -> None:
        """test root"""

    CommandRegistry.register_with_typer(app)
    yield TyperInvoker(app), note

    CommandRegistry._commands.clear()
    CommandRegistry._aliases.clear()
    CommandRegistry._commands.update(saved[0])
    CommandRegistry._aliases.update(saved[1])


def test_builtin_usage_error_keeps_shell_running(config, console, typer_builtins):
    invoker, note = typer_builtins
    git = FakeGit()
    session = ScriptedSession(["note --help=1", "note ok", "status"])
    assert interactive_mode(invoker, config=config, git=git, session=session, console=console)
    assert note.seen == [["ok"]]
    assert git.runs == [["status"]]
