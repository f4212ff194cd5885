# bit_cli/completion/router.py
"""
Decide which suggestion set applies to the current input buffer.

The router is a pure function of the text before the cursor plus the
session's read-only :data:`SuggestionMap`; it runs on every keystroke and
must not block.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Iterable, List, Mapping, NamedTuple, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

# key of the suggestion set offered while the first token is being typed
ROOT_KEY = ""

FLAG_PREFIX = "-"
LONG_FLAG_PREFIX = "--"


class Suggestion(NamedTuple):
    """A completion candidate: what to insert and a one-line description."""

    text: str
    description: str = ""

    @classmethod
    def of(cls, text: str, description: str = "") -> "Suggestion":
        if not text:
            raise ValueError("suggestion text must not be empty")
        return cls(text, description)


SuggestionMap = Mapping[str, Tuple[Suggestion, ...]]
FlagLookup = Callable[[str, str], Sequence[Suggestion]]


def freeze_suggestion_map(raw: Mapping[str, Iterable[Suggestion]]) -> SuggestionMap:
    """Return a read-only copy of *raw* with every value turned into a tuple."""
    return MappingProxyType({key: tuple(values) for key, values in raw.items()})


def word_before_cursor(text: str) -> str:
    """Trailing token fragment of *text*; empty when *text* ends in whitespace."""
    if not text or text[-1].isspace():
        return ""
    parts = text.split()
    return parts[-1] if parts else ""


def filter_contains(
    suggestions: Iterable[Suggestion],
    word: str,
    ignore_case: bool = True,
) -> List[Suggestion]:
    """Keep suggestions whose text contains *word*, preserving order."""
    if not word:
        return list(suggestions)
    needle = word.lower() if ignore_case else word
    matches = []
    for suggestion in suggestions:
        haystack = suggestion.text.lower() if ignore_case else suggestion.text
        if needle in haystack:
            matches.append(suggestion)
    return matches


class CompletionRouter:
    """Pick and filter the suggestion set for the text before the cursor."""

    def __init__(self, suggestion_map: SuggestionMap, flag_suggestions: FlagLookup):
        self.suggestion_map = suggestion_map
        self.flag_suggestions = flag_suggestions

    def suggest(self, text: str, cursor: Optional[int] = None) -> List[Suggestion]:
        before = text if cursor is None else text[:cursor]
        word = word_before_cursor(before)

        # still typing the first token
        if len(word) == len(before):
            return filter_contains(self.suggestion_map.get(ROOT_KEY, ()), word)

        return filter_contains(self._candidates(before), word)

    def _candidates(self, before: str) -> Sequence[Suggestion]:
        tokens = before.split()
        last = len(tokens) - 1
        # drop every flag except a trailing one so ``prev`` stays the command
        kept = [
            tok for i, tok in enumerate(tokens)
            if not tok.startswith(FLAG_PREFIX) or i == last
        ]
        if len(kept) < 2:
            return ()

        prev, curr = kept[0], kept[-1]
        if curr.startswith(LONG_FLAG_PREFIX):
            return self.flag_suggestions(prev, LONG_FLAG_PREFIX)
        if curr.startswith(FLAG_PREFIX):
            return self.flag_suggestions(prev, FLAG_PREFIX)
        return self.suggestion_map.get(prev, ())
