# bit_cli/dispatch/__init__.py
from .dispatcher import CHECKOUT_ALIASES, CommandDispatcher

__all__ = ["CHECKOUT_ALIASES", "CommandDispatcher"]
