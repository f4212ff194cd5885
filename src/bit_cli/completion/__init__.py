# bit_cli/completion/__init__.py
"""Keystroke-time completion: routing, filtering and the prompt adapter."""
from .completer import BitCompleter
from .router import (
    ROOT_KEY,
    CompletionRouter,
    Suggestion,
    SuggestionMap,
    filter_contains,
    freeze_suggestion_map,
    word_before_cursor,
)

__all__ = [
    "ROOT_KEY",
    "BitCompleter",
    "CompletionRouter",
    "Suggestion",
    "SuggestionMap",
    "filter_contains",
    "freeze_suggestion_map",
    "word_before_cursor",
]
