"""
Shell configuration management for bit-cli.

Behaviour
---------
* The user's on-disk configuration (``~/.bit-cli/config.json``) is merged
  over the baked-in ``DEFAULTS`` on every load.
    • Missing keys are filled in.
    • User-overridden keys always take precedence.
* The merged structure is written back to disk if it differs, so the file
  always lists every available setting.
* ``BIT_GIT_EXECUTABLE`` / ``BIT_REMOTE`` environment variables win over
  both for the current process only.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# global defaults
# ---------------------------------------------------------------------------
DEFAULTS: Dict[str, Any] = {
    "git_executable": "git",
    "remote": "origin",
    "prompt": "> bit ",
    "history_file": "~/.bit-cli/history",
}

ENV_OVERRIDES: Dict[str, str] = {
    "git_executable": "BIT_GIT_EXECUTABLE",
    "remote": "BIT_REMOTE",
}

CFG_PATH = Path(os.path.expanduser("~/.bit-cli/config.json"))


class ShellConfig:
    """Load / mutate / persist shell settings with default syncing."""

    # ------------------------------------------------------------------
    # construction & I/O
    # ------------------------------------------------------------------
    def __init__(self, config_path: Optional[str] = None) -> None:
        self._path = Path(os.path.expanduser(config_path)) if config_path else CFG_PATH
        self.settings: Dict[str, Any] = self._load_and_sync()

    # ------------------------------------------------------------------
    # private helpers
    # ------------------------------------------------------------------
    def _load_and_sync(self) -> Dict[str, Any]:
        """Return the merged settings and flush to disk if they changed."""
        on_disk: Dict[str, Any] = {}
        if self._path.is_file():
            try:
                loaded = json.loads(self._path.read_text())
                if isinstance(loaded, dict):
                    on_disk = loaded
            except json.JSONDecodeError:
                logger.warning("Ignoring invalid JSON in %s", self._path)

        merged: Dict[str, Any] = {**DEFAULTS, **on_disk}

        if merged != on_disk:
            try:
                self._save(merged)
            except OSError as exc:
                logger.debug("Could not write %s: %s", self._path, exc)

        return merged

    def _save(self, settings: Optional[Dict[str, Any]] = None) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(settings or self.settings, indent=2))

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------
    def get(self, key: str) -> Any:
        env = ENV_OVERRIDES.get(key)
        if env and (value := os.getenv(env)):
            return value
        return self.settings.get(key, DEFAULTS.get(key))

    def set(self, key: str, value: Any) -> None:
        self.settings[key] = value
        self._save()

    @property
    def git_executable(self) -> str:
        return self.get("git_executable")

    @property
    def remote(self) -> str:
        return self.get("remote")

    @property
    def prompt(self) -> str:
        return self.get("prompt")

    @property
    def history_file(self) -> Path:
        return Path(os.path.expanduser(self.get("history_file")))
