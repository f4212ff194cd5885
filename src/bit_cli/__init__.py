# bit_cli/__init__.py
"""
bit-cli package root.

Early-loads environment variables from a .env file so that overrides such
as ``BIT_GIT_EXECUTABLE`` can live next to the repository instead of the
user's shell profile.

Nothing else should be imported from here to keep side-effects minimal.
"""
from __future__ import annotations

import logging

from dotenv import load_dotenv

__version__ = "0.4.14"

if load_dotenv():  # returns True if a .env file was found
    logging.getLogger(__name__).debug(".env loaded successfully")
