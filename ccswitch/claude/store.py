# -*- coding: utf-8 -*-
"""Reading and writing Claude Code's settings.json and .claude.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from ..exceptions import SettingsWriteError

logger = logging.getLogger(__name__)

Settings = Dict[str, Any]


def read_json_object(path: Path) -> Settings:
    """Load a JSON object from *path*.

    A missing, unreadable or non-object file counts as empty: callers treat
    it as "nothing configured yet" rather than failing.
    """
    if not path.is_file():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as fh:
            raw = json.load(fh)
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable JSON file %s: %s", path, exc)
        return {}
    if not isinstance(raw, dict):
        logger.warning("Ignoring %s: top-level value is not an object", path)
        return {}
    return raw


def write_json_object(path: Path, data: Settings) -> None:
    """Write *data* as indented JSON, creating parent directories."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=2, ensure_ascii=False)
    except OSError as exc:
        logger.error("Failed to write %s: %s", path, exc)
        raise SettingsWriteError(path, str(exc)) from exc


class SettingsStore:
    """File access for the two documents Claude Code reads.

    ``settings_path`` is the settings.json ccswitch edits;
    ``claude_config_path`` is .claude.json, touched only for the
    onboarding flag.
    """

    def __init__(self, settings_path: Path, claude_config_path: Path):
        self.settings_path = settings_path
        self.claude_config_path = claude_config_path

    def read_settings(self) -> Settings:
        return read_json_object(self.settings_path)

    def write_settings(self, settings: Settings) -> None:
        write_json_object(self.settings_path, settings)
        logger.debug("Wrote settings to %s", self.settings_path)

    def read_claude_config(self) -> Settings:
        return read_json_object(self.claude_config_path)

    def ensure_onboarding(self) -> bool:
        """Mark onboarding complete so Claude Code skips its login screen.

        Returns True if the file had to be updated.
        """
        config = self.read_claude_config()
        if config.get("hasCompletedOnboarding"):
            return False
        config["hasCompletedOnboarding"] = True
        write_json_object(self.claude_config_path, config)
        logger.debug(
            "Set hasCompletedOnboarding in %s",
            self.claude_config_path,
        )
        return True
