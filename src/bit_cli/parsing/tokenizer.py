# bit_cli/parsing/tokenizer.py
"""
Shell-style tokenizer turning one line of user input into an argv list.

Rules
-----
* Whitespace (space / tab) separates tokens.
* A quote (``"`` or ``'``) opens a quoted span only when it is the first
  character of a token.  Inside the span every character is literal until
  the *same* quote character closes it, so ``'b"c'`` yields ``b"c``.
  An empty span (``""``) yields an empty-string argument.
* Inside a bare token a backslash makes the next character literal
  (``a\\ b`` is one argument); quotes inside a bare token are literal.
* An unterminated quoted span raises :class:`UnclosedQuoteError`; no
  partial result is ever returned.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from bit_cli.errors import UnclosedQuoteError

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(" \t")
QUOTES = frozenset("\"'")
BACKSLASH = "\\"


class TokenizerState(Enum):
    START = "start"
    IN_TOKEN = "in-token"
    IN_QUOTES = "in-quotes"


class _Tokenizer:
    """Single-use scanner; one instance per parsed line."""

    def __init__(self, line: str) -> None:
        self.line = line
        self.state = TokenizerState.START
        self.buffer: List[str] = []
        self.quote: Optional[str] = None
        self.escape_next = False
        self.args: List[str] = []

    # ── token helpers ────────────────────────────────────────────────
    def _emit(self) -> None:
        self.args.append("".join(self.buffer))
        self.buffer = []

    # ── per-state transitions ────────────────────────────────────────
    def _start(self, ch: str) -> None:
        if ch in WHITESPACE:
            return
        if ch in QUOTES:
            self.quote = ch
            self.state = TokenizerState.IN_QUOTES
        elif ch == BACKSLASH:
            self.escape_next = True
            self.state = TokenizerState.IN_TOKEN
        else:
            self.buffer.append(ch)
            self.state = TokenizerState.IN_TOKEN

    def _in_token(self, ch: str) -> None:
        if self.escape_next:
            self.buffer.append(ch)
            self.escape_next = False
        elif ch == BACKSLASH:
            self.escape_next = True
        elif ch in WHITESPACE:
            self._emit()
            self.state = TokenizerState.START
        else:
            # quotes are literal once a bare token has started
            self.buffer.append(ch)

    def _in_quotes(self, ch: str) -> None:
        if ch == self.quote:
            self._emit()
            self.quote = None
            self.state = TokenizerState.START
        else:
            self.buffer.append(ch)

    # ── driver ───────────────────────────────────────────────────────
    def run(self) -> List[str]:
        handlers = {
            TokenizerState.START: self._start,
            TokenizerState.IN_TOKEN: self._in_token,
            TokenizerState.IN_QUOTES: self._in_quotes,
        }
        for ch in self.line:
            handlers[self.state](ch)

        if self.state is TokenizerState.IN_QUOTES:
            raise UnclosedQuoteError(self.line)
        if self.state is TokenizerState.IN_TOKEN and self.buffer:
            self._emit()
        return self.args


def tokenize(line: str) -> List[str]:
    """
    Split *line* into an argument vector.

    Raises
    ------
    UnclosedQuoteError
        If a quoted span is still open at the end of *line*.
    """
    args = _Tokenizer(line).run()
    logger.debug("Tokenized %r -> %r", line, args)
    return list(args)
