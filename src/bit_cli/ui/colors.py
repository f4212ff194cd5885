"""
Color definitions for the bit-cli UI elements.
"""

# Border colors
BORDER_PRIMARY = "yellow"

# Text colors and styles
TEXT_DEEMPHASIS = "dim"
TEXT_SUCCESS = "green"
TEXT_ERROR = "red"
TEXT_WARNING = "yellow"
TEXT_INFO = "cyan"

# Component-specific colors
BRANCH_COLOR = "magenta"
TITLE_COLOR = "bold cyan"
