# -*- coding: utf-8 -*-
"""Reading and writing the local config.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from ..constant import CONFIG_FILE, WORKING_DIR
from ..exceptions import SettingsWriteError
from .config import AppConfig

logger = logging.getLogger(__name__)

# Fields update_config() may touch.
_FIELDS = frozenset(AppConfig.model_fields)


def get_config_path(working_dir: Optional[Path] = None) -> Path:
    """Return the config.json path inside *working_dir*."""
    return (working_dir or WORKING_DIR) / CONFIG_FILE


def is_first_run(path: Optional[Path] = None) -> bool:
    """True until a config.json has been written."""
    if path is None:
        path = get_config_path()
    return not path.is_file()


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load config.json; a missing or broken file yields the defaults."""
    if path is None:
        path = get_config_path()
    if not path.is_file():
        return AppConfig()
    try:
        with open(path, "r", encoding="utf-8") as fh:
            raw = json.load(fh)
        if not isinstance(raw, dict):
            raise ValueError("config root is not an object")
        return AppConfig.model_validate(raw)
    except (OSError, ValueError, ValidationError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return AppConfig()


def save_config(config: AppConfig, path: Optional[Path] = None) -> None:
    """Write *config* to config.json, replacing the whole document."""
    if path is None:
        path = get_config_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as fh:
            json.dump(
                config.model_dump(mode="json", exclude_none=True),
                fh,
                indent=2,
                ensure_ascii=False,
            )
    except OSError as exc:
        logger.error("Failed to save config %s: %s", path, exc)
        raise SettingsWriteError(path, str(exc)) from exc


def update_config(path: Optional[Path] = None, **updates: Any) -> AppConfig:
    """Load, apply *updates* (``None`` clears a field), save, return."""
    unknown = set(updates) - _FIELDS
    if unknown:
        raise TypeError(f"Unknown config fields: {sorted(unknown)}")
    config = load_config(path)
    config = config.model_copy(update=updates)
    save_config(config, path)
    return config


def mask_api_key(api_key: Optional[str], visible_chars: int = 4) -> str:
    """Mask an API key for safe display.

    Example: ``"sk-abcdefghijk"`` → ``"sk-****hijk"``
    """
    if not api_key:
        return ""
    if len(api_key) <= visible_chars:
        return "*" * len(api_key)
    prefix = api_key[:3] if len(api_key) > 3 else ""
    suffix = api_key[-visible_chars:]
    hidden_len = len(api_key) - len(prefix) - visible_chars
    return f"{prefix}{'*' * max(hidden_len, 4)}{suffix}"
