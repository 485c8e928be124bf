# -*- coding: utf-8 -*-
"""Claude Code settings: merge, backup, detection and file access."""

from .backup import BackupEntry, BackupManager
from .detect import DetectedConfig, detect_config
from .manager import ClaudeCodeManager
from .merge import (
    MANAGED_ENV_KEYS,
    apply_provider_config,
    map_model_to_setting,
    unload_provider_config,
)
from .store import SettingsStore

__all__ = [
    "BackupEntry",
    "BackupManager",
    "ClaudeCodeManager",
    "DetectedConfig",
    "MANAGED_ENV_KEYS",
    "SettingsStore",
    "apply_provider_config",
    "detect_config",
    "map_model_to_setting",
    "unload_provider_config",
]
