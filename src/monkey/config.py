"""Persistent user configuration for the Monkey tools.

Settings live in ``~/.monkey/config.json`` (or the file named by the
``MONKEY_CONFIG`` environment variable)::

    {"debug_level": "debug", "prompt": ">> "}

A missing or malformed file silently yields the defaults.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from rich.logging import RichHandler

logger = logging.getLogger("monkey.config")

DEFAULTS: Dict[str, Any] = {
    "debug_level": "none",
    "prompt": ">> ",
}

_LEVELS = {
    "none": logging.CRITICAL + 10,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def default_config_path() -> Path:
    override = os.environ.get("MONKEY_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".monkey" / "config.json"


class Config:
    """User settings with JSON persistence."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else default_config_path()
        self._data: Dict[str, Any] = dict(DEFAULTS)
        self.load()

    def load(self) -> None:
        try:
            with open(self.path, "r") as f:
                raw = json.load(f)
        except FileNotFoundError:
            return
        except (OSError, ValueError) as e:
            logger.warning("ignoring unreadable config %s: %s", self.path, e)
            return

        if not isinstance(raw, dict):
            logger.warning("ignoring config %s: expected a JSON object", self.path)
            return

        for key in DEFAULTS:
            if key in raw:
                self._data[key] = raw[key]

        if not isinstance(self._data["debug_level"], str) or self.debug_level not in _LEVELS:
            logger.warning("unknown debug_level %r, using 'none'", self.debug_level)
            self._data["debug_level"] = "none"

        if not isinstance(self._data["prompt"], str):
            logger.warning("prompt must be a string, using %r", DEFAULTS["prompt"])
            self._data["prompt"] = DEFAULTS["prompt"]

    def save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(self._data, f, indent=2)

    @property
    def debug_level(self) -> str:
        return self._data["debug_level"]

    @debug_level.setter
    def debug_level(self, value: str) -> None:
        if value not in _LEVELS:
            raise ValueError(f"unknown debug level: {value!r}")
        self._data["debug_level"] = value

    @property
    def prompt(self) -> str:
        return self._data["prompt"]

    @prompt.setter
    def prompt(self, value: str) -> None:
        if not isinstance(value, str):
            raise ValueError(f"prompt must be a string, not {type(value).__name__}")
        self._data["prompt"] = value

    def should_log(self, level: str) -> bool:
        """Return True if messages at ``level`` pass the configured threshold."""
        threshold = _LEVELS[self.debug_level]
        return _LEVELS.get(level, logging.DEBUG) >= threshold

    def logging_level(self) -> int:
        return _LEVELS[self.debug_level]


config = Config()


def configure_logging(cfg: Optional[Config] = None) -> None:
    """Route the ``monkey`` loggers through rich at the configured level."""
    cfg = cfg or config
    root = logging.getLogger("monkey")
    root.setLevel(cfg.logging_level())
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(RichHandler(show_path=False))
