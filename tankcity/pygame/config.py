"""Persistent configuration and level files for the pygame client."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from tankcity.core.level import Level

logger = logging.getLogger(__name__)

_SETTINGS_PATH = Path(__file__).resolve().parent / "user_settings.json"


def load_user_settings() -> Dict[str, Any]:
    """Load persisted key bindings; an empty dict when nothing usable is stored."""
    try:
        with _SETTINGS_PATH.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError:
        return {}
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring user settings %s: %s", _SETTINGS_PATH, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("User settings %s are not a mapping", _SETTINGS_PATH)
        return {}
    return data


def save_user_settings(settings: Dict[str, Any]) -> None:
    """Persist user settings; failures are logged and never fatal."""
    try:
        _SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
        with _SETTINGS_PATH.open("w", encoding="utf-8") as handle:
            json.dump(settings, handle, indent=2, sort_keys=True)
    except OSError as exc:
        logger.warning("Could not save user settings %s: %s", _SETTINGS_PATH, exc)


def load_level_file(path: Path) -> Optional[Level]:
    """Read a level saved by :func:`save_level_file`; ``None`` if unusable."""
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError:
        return None
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Could not read level %s: %s", path, exc)
        return None
    if not isinstance(data, list):
        logger.warning("Level %s is not a list of elements", path)
        return None
    try:
        return Level.from_records(data)
    except (KeyError, TypeError, ValueError) as exc:
        logger.warning("Level %s contains an invalid element: %s", path, exc)
        return None


def save_level_file(path: Path, level: Level) -> bool:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            json.dump(level.to_records(), handle, indent=2)
    except OSError as exc:
        logger.warning("Could not save level %s: %s", path, exc)
        return False
    return True


__all__ = ["load_level_file", "load_user_settings", "save_level_file", "save_user_settings"]
