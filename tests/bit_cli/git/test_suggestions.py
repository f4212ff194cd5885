# tests/bit_cli/git/test_suggestions.py
import pytest

import bit_cli.git.suggestions as sugg_mod
from bit_cli.completion.router import ROOT_KEY, Suggestion
from bit_cli.git.suggestions import (
    build_suggestion_map,
    flag_suggestions_for_command,
    git_command_suggestions,
    parse_flag_help,
)

CHECKOUT_HELP = """\
usage: git checkout [<options>] <branch>
   or: git checkout [<options>] [<branch>] -- <file>...

    -b <branch>           create and checkout a new branch
    -B <branch>           create/reset and checkout a branch
    -q, --quiet           suppress progress reporting
    --[no-]track[=(direct|inherit)]
                          set branch tracking configuration
    -f, --force           force checkout (throw away local modifications)
"""


@pytest.fixture(autouse=True)
def clear_flag_cache():
    sugg_mod._flags_for.cache_clear()
    sugg_mod._installed_commands.cache_clear()
    yield
    sugg_mod._flags_for.cache_clear()
    sugg_mod._installed_commands.cache_clear()


def test_parse_flag_help_extracts_short_and_long():
    texts = [s.text for s in parse_flag_help(CHECKOUT_HELP)]
    assert texts == ["-b", "-B", "-q", "--quiet", "--track", "--no-track", "-f", "--force"]


def test_parse_flag_help_keeps_descriptions():
    flags = {s.text: s.description for s in parse_flag_help(CHECKOUT_HELP)}
    assert flags["--quiet"] == "suppress progress reporting"
    assert flags["-b"] == "create and checkout a new branch"


def test_flag_lookup_filters_long_style(monkeypatch):
    monkeypatch.setattr(sugg_mod, "capture", lambda *a, **kw: CHECKOUT_HELP)
    texts = [s.text for s in flag_suggestions_for_command("checkout", "--")]
    assert texts == ["--quiet", "--track", "--no-track", "--force"]


def test_flag_lookup_short_style_returns_all(monkeypatch):
    monkeypatch.setattr(sugg_mod, "capture", lambda *a, **kw: CHECKOUT_HELP)
    assert len(flag_suggestions_for_command("checkout", "-")) == 8


def test_flag_lookup_is_cached(monkeypatch):
    calls = []

    def fake_capture(tool, args, **kw):
        calls.append(args)
        return CHECKOUT_HELP

    monkeypatch.setattr(sugg_mod, "capture", fake_capture)
    flag_suggestions_for_command("checkout", "-")
    flag_suggestions_for_command("checkout", "--")
    assert calls == [["checkout", "-h"]]


def test_flag_lookup_unknown_command(monkeypatch):
    monkeypatch.setattr(sugg_mod, "capture", lambda *a, **kw: None)
    assert flag_suggestions_for_command("frobnicate", "--") == []


def _recording_capture(monkeypatch, installed="worktree\nsparse-checkout\n"):
    calls = []

    def fake_capture(tool, args, **kw):
        calls.append(list(args))
        if args == ["--list-cmds=main"]:
            return installed
        return CHECKOUT_HELP

    monkeypatch.setattr(sugg_mod, "capture", fake_capture)
    return calls


def test_unknown_word_is_never_run_for_help(monkeypatch):
    calls = _recording_capture(monkeypatch)
    assert flag_suggestions_for_command("deploy-prod", "-") == []
    assert ["deploy-prod", "-h"] not in calls
    assert all(args[-1] != "-h" for args in calls)


def test_installed_command_gets_flags(monkeypatch):
    calls = _recording_capture(monkeypatch)
    assert flag_suggestions_for_command("worktree", "--")
    assert calls == [["--list-cmds=main"], ["worktree", "-h"]]


def test_builtin_list_skips_installed_lookup(monkeypatch):
    calls = _recording_capture(monkeypatch)
    flag_suggestions_for_command("commit", "-")
    assert calls == [["commit", "-h"]]


def test_co_shorthand_uses_checkout_flags(monkeypatch):
    calls = _recording_capture(monkeypatch)
    flag_suggestions_for_command("co", "-")
    flag_suggestions_for_command("checkout", "-")
    assert calls == [["checkout", "-h"]]


def test_flag_cache_is_bounded():
    assert sugg_mod._flags_for.cache_info().maxsize is not None


class FakeGit:
    executable = "git"
    remote = "origin"

    def current_branch(self):
        return "main"

    def list_branches(self):
        return ["main", "feature"]

    def changed_files(self):
        return ["README.md"]


def test_build_suggestion_map_keys_and_values():
    builtin = [Suggestion("save", "Stage and commit")]
    smap = build_suggestion_map(FakeGit(), builtin)

    assert smap[ROOT_KEY][0] == builtin[0]
    assert smap[ROOT_KEY][1:] == tuple(git_command_suggestions())
    assert smap["checkout"] == smap["switch"] == smap["co"] == smap["merge"]
    assert smap["checkout"][0] == Suggestion("main", "current branch")
    assert [s.text for s in smap["add"]] == [".", "README.md"]
    assert "--hard" in [s.text for s in smap["reset"]]


def test_build_suggestion_map_is_immutable():
    smap = build_suggestion_map(FakeGit())
    with pytest.raises(TypeError):
        smap["push"] = ()  # type: ignore[index]
