# -*- coding: utf-8 -*-
"""Apply, remove and inspect provider configuration in Claude Code."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..constant import BACKUP_DIR, CLAUDE_CONFIG_PATH, CLAUDE_SETTINGS_PATH
from ..providers.models import ProviderDefinition
from .backup import BackupEntry, BackupManager
from .detect import DetectedConfig, detect_config
from .merge import apply_provider_config, unload_provider_config
from .store import SettingsStore

logger = logging.getLogger(__name__)


class ClaudeCodeManager:
    """Edits Claude Code's settings.json, backing it up before each write.

    Assumes a single ccswitch process at a time; there is no file locking.
    """

    def __init__(
        self,
        settings_path: Path,
        claude_config_path: Path,
        backup_dir: Path,
        backups: Optional[BackupManager] = None,
    ):
        self.store = SettingsStore(settings_path, claude_config_path)
        self.backups = backups or BackupManager(settings_path, backup_dir)

    @classmethod
    def from_defaults(cls) -> "ClaudeCodeManager":
        return cls(CLAUDE_SETTINGS_PATH, CLAUDE_CONFIG_PATH, BACKUP_DIR)

    @property
    def settings_path(self) -> Path:
        return self.store.settings_path

    def get_settings(self) -> Dict[str, Any]:
        return self.store.read_settings()

    # -- backup & restore ---------------------------------------------------

    def create_backup(self) -> Path:
        return self.backups.create_backup()

    def list_backups(self) -> List[BackupEntry]:
        return self.backups.list_backups()

    def latest_backup(self) -> Optional[BackupEntry]:
        return self.backups.latest_backup()

    def restore_backup(self, backup_path: Path) -> None:
        self.backups.restore_backup(backup_path)

    # -- provider config ----------------------------------------------------

    def load_provider_config(
        self,
        provider: ProviderDefinition,
        region_id: str,
        model_id: str,
        api_key: str,
    ) -> Path:
        """Write *provider* into settings.json. Returns the backup path.

        Raises ``UnknownRegionError`` before anything is written.
        """
        settings = self.store.read_settings()
        new_settings = apply_provider_config(
            provider,
            region_id,
            model_id,
            api_key,
            settings,
        )
        backup_path = self.backups.create_backup()
        self.store.ensure_onboarding()
        self.store.write_settings(new_settings)
        logger.info(
            "Applied provider %s (region=%s, model=%s) to %s",
            provider.id,
            region_id,
            model_id,
            self.settings_path,
        )
        return backup_path

    def unload_provider_config(self) -> Optional[Path]:
        """Remove ccswitch's keys from settings.json.

        Returns the backup path, or None when there was nothing to remove
        (the settings file is then left untouched).
        """
        backup_path = self.backups.create_backup()
        new_settings = unload_provider_config(self.store.read_settings())
        if new_settings is None:
            logger.info("Nothing to remove from %s", self.settings_path)
            return None
        self.store.write_settings(new_settings)
        logger.info("Removed provider config from %s", self.settings_path)
        return backup_path

    def detect_current_config(self) -> DetectedConfig:
        return detect_config(self.store.read_settings())
