# tests/bit_cli/completion/test_router.py
from types import MappingProxyType

import pytest

from bit_cli.completion.router import (
    ROOT_KEY,
    CompletionRouter,
    Suggestion,
    filter_contains,
    freeze_suggestion_map,
    word_before_cursor,
)

B1 = Suggestion("main", "branch")
B2 = Suggestion("feature/login", "branch")
B3 = Suggestion("master-old", "branch")

ROOT = [
    Suggestion("checkout", "Switch branches"),
    Suggestion("commit", "Record changes"),
    Suggestion("status", "Show status"),
]


class FlagSpy:
    """Records (command, prefix) lookups and returns canned flags."""

    def __init__(self):
        self.calls = []

    def __call__(self, command, prefix):
        self.calls.append((command, prefix))
        return [Suggestion("--amend", "amend"), Suggestion("-m", "message")]


@pytest.fixture
def flags():
    return FlagSpy()


@pytest.fixture
def router(flags):
    suggestion_map = freeze_suggestion_map(
        {
            ROOT_KEY: ROOT,
            "checkout": [B1, B2, B3],
            "merge": [B1, B2],
        }
    )
    return CompletionRouter(suggestion_map, flags)


# ─── helpers ─────────────────────────────────────────────────────────────────
def test_word_before_cursor():
    assert word_before_cursor("") == ""
    assert word_before_cursor("chec") == "chec"
    assert word_before_cursor("checkout ma") == "ma"
    assert word_before_cursor("checkout ") == ""


def test_filter_contains_is_case_insensitive_and_ordered():
    got = filter_contains([B3, B1, B2], "MA")
    assert got == [B3, B1]


def test_filter_contains_case_sensitive():
    assert filter_contains([B1], "MA", ignore_case=False) == []


def test_filter_contains_empty_word_keeps_all():
    assert filter_contains([B1, B2], "") == [B1, B2]


def test_frozen_map_is_read_only():
    frozen = freeze_suggestion_map({"x": [B1]})
    assert isinstance(frozen, MappingProxyType)
    assert frozen["x"] == (B1,)
    with pytest.raises(TypeError):
        frozen["y"] = ()  # type: ignore[index]


def test_suggestion_of_rejects_empty_text():
    with pytest.raises(ValueError):
        Suggestion.of("")


# ─── routing ─────────────────────────────────────────────────────────────────
def test_first_token_uses_root_set(router):
    assert router.suggest("chec") == [ROOT[0]]


def test_first_token_ignores_other_keys(router):
    # "ma" matches branches under "checkout" but only the root set applies
    assert router.suggest("ma") == []


def test_empty_buffer_offers_whole_root_set(router):
    assert router.suggest("") == ROOT


def test_keyword_set_filtered_by_word(router):
    assert router.suggest("checkout ma") == [B1, B3]


def test_unknown_keyword_gives_nothing(router):
    assert router.suggest("frobnicate ma") == []


def test_single_token_with_trailing_space_gives_empty(router):
    assert router.suggest("checkout ") == []


def test_lone_flag_after_command_is_kept(router, flags):
    router.suggest("commit --am")
    assert flags.calls == [("commit", "--")]


def test_long_flag_lookup(router, flags):
    got = router.suggest("commit --am")
    assert got == [Suggestion("--amend", "amend")]


def test_short_flag_lookup(router, flags):
    got = router.suggest("commit -m")
    assert flags.calls == [("commit", "-")]
    assert got == [Suggestion("-m", "message")]


def test_earlier_flags_are_ignored_for_lookup(router, flags):
    assert router.suggest("checkout -q --force fea") == [B2]
    assert flags.calls == []


def test_only_flags_degrade_to_empty(router):
    assert router.suggest("-q --verbose ") == []


def test_cursor_limits_the_buffer(router):
    text = "checkout ma and more"
    assert router.suggest(text, cursor=len("checkout ma")) == [B1, B3]
