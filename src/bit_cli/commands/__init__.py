# bit_cli/commands/__init__.py
"""Shared implementations behind the built-in commands."""
