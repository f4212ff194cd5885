# bit_cli/interactive/__init__.py
"""Interactive shell package."""
