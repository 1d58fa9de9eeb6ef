"""Read viewer configuration documents from disk.

Loading never validates; pass the result to ``ConfigValidator``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

__all__ = [
    "ViewerConfigError",
    "ConfigLoadError",
    "load_config",
]

_JSON_SUFFIXES = {".json"}


class ViewerConfigError(Exception):
    """Base class for configuration handling errors."""

    pass


class ConfigLoadError(ViewerConfigError):
    """The configuration document could not be read or parsed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load configuration from {path}: {reason}")


def load_config(path: str | Path) -> Any:
    """Parse a JSON or YAML configuration document.

    Files ending in ``.json`` are parsed with :mod:`json`; anything else is
    parsed with ``yaml.safe_load`` (JSON documents are valid YAML too).

    Raises:
        ConfigLoadError: the file is missing, unreadable, not UTF-8 or malformed.
    """
    config_path = Path(path)
    logger.debug("Loading viewer configuration from %s", config_path)

    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigLoadError(config_path, getattr(exc, "strerror", None) or str(exc)) from exc

    try:
        if config_path.suffix.lower() in _JSON_SUFFIXES:
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigLoadError(config_path, str(exc)) from exc
