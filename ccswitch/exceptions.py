# -*- coding: utf-8 -*-
"""Errors raised by ccswitch."""

from __future__ import annotations

from pathlib import Path


class CCSwitchError(Exception):
    """Base class for all ccswitch errors."""


class UnknownRegionError(CCSwitchError, ValueError):
    """The region id is not offered by the provider."""

    def __init__(self, provider_id: str, region_id: str) -> None:
        super().__init__(
            f"Unknown region {region_id!r} for provider {provider_id!r}",
        )
        self.provider_id = provider_id
        self.region_id = region_id


class BackupNotFoundError(CCSwitchError, FileNotFoundError):
    """The backup file to restore does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Backup file not found: {path}")
        self.path = path


class InvalidBackupError(CCSwitchError, ValueError):
    """The backup file is not a valid settings document."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid backup file {path}: {reason}")
        self.path = path
        self.reason = reason


class SettingsWriteError(CCSwitchError, OSError):
    """Writing a settings document to disk failed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to write {path}: {reason}")
        self.path = path
        self.reason = reason
