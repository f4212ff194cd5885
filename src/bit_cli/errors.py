# bit_cli/errors.py
"""Exception types shared by the tokenizer, dispatcher and shell loop."""
from __future__ import annotations


class BitError(Exception):
    """Base class for errors that abort a single shell line."""


class UnclosedQuoteError(BitError):
    """A quoted span was still open when the input line ended."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Unclosed quote in command line: {line}")


class MissingBranchArgumentError(BitError):
    """``checkout``/``switch``/``co`` was entered without a branch name."""

    def __init__(self, command: str):
        self.command = command
        super().__init__("invalid command: expected branch name")
