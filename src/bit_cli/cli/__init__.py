# bit_cli/cli/__init__.py
"""Built-in command framework (Typer based)."""
