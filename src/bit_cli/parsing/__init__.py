# bit_cli/parsing/__init__.py
"""Command-line parsing helpers."""
from .tokenizer import TokenizerState, tokenize

__all__ = ["TokenizerState", "tokenize"]
