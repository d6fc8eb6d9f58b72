from __future__ import annotations

"""
Utility Settings Management.

Holds the small set of tunables used by the filesystem and I/O helpers and
persists them as JSON in the application configuration directory. Missing
keys fall back to defaults; a corrupted file yields the defaults.
"""

import codecs
import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional

from vimbutil.infra.fs import APP_DIR_NAME, get_config_dir

logger = logging.getLogger(__name__)

SETTINGS_FILE_NAME = "settings.json"


@dataclass(frozen=True)
class UtilSettings:
    """
    Tunables for the utility layer.

    Attributes:
        project: Application name used as the temporary file prefix.
        encoding: Text encoding for reading list files and writing temp files.
    """
    project: str = APP_DIR_NAME
    encoding: str = "utf-8"

    @property
    def tmp_prefix(self) -> str:
        """Name prefix for temporary files, e.g. 'vimb-'."""
        return f"{self.project}-"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UtilSettings":
        """Build settings from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


def get_settings_path() -> str:
    return os.path.join(get_config_dir(), SETTINGS_FILE_NAME)


def load_settings(path: Optional[str] = None) -> UtilSettings:
    """
    Load settings from disk.

    Args:
        path: Settings file; defaults to settings.json in the config dir.

    Returns:
        UtilSettings: Loaded settings, or defaults when the file is missing
        or unreadable.
    """
    path = path or get_settings_path()
    defaults = UtilSettings()

    if not os.path.exists(path):
        logger.debug("Settings file not found. Using defaults.")
        return defaults

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load settings from {path}: {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning("Corrupted settings file. Using defaults.")
        return defaults

    merged = asdict(defaults)
    merged.update(data)
    try:
        settings = UtilSettings.from_dict(merged)
        _check_values(settings)
    except (TypeError, LookupError) as e:
        logger.warning(f"Invalid settings in {path}: {e}. Using defaults.")
        return defaults

    return settings


def _check_values(settings: UtilSettings) -> None:
    """Raise TypeError or LookupError for values the I/O helpers cannot use."""
    for name in ("project", "encoding"):
        value = getattr(settings, name)
        if not isinstance(value, str):
            raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    codecs.lookup(settings.encoding)


def save_settings(settings: UtilSettings, path: Optional[str] = None) -> bool:
    """
    Persist settings as JSON.

    Returns:
        bool: True on success.
    """
    path = path or get_settings_path()
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(asdict(settings), f, ensure_ascii=False, indent=4)
    except OSError as e:
        logger.error(f"Failed to save settings: {e}")
        return False

    logger.debug(f"Settings saved to {path}")
    return True
