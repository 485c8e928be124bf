# -*- coding: utf-8 -*-
"""Timestamped backups of settings.json."""

from __future__ import annotations

import json
import logging
import re
import shutil
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, List, Optional

from pydantic import BaseModel

from ..exceptions import (
    BackupNotFoundError,
    InvalidBackupError,
    SettingsWriteError,
)

logger = logging.getLogger(__name__)

BACKUP_PREFIX = "settings-"
BACKUP_SUFFIX = ".json"
_TIMESTAMP_FORMAT = "%Y-%m-%dT%H-%M-%S-%fZ"

# settings-2026-02-15T14-30-00-000000Z.json; older backups carry
# milliseconds instead of microseconds.
_BACKUP_NAME_RE = re.compile(
    r"^settings-(\d{4})-(\d{2})-(\d{2})T(\d{2})-(\d{2})-(\d{2})"
    r"-(\d{3}|\d{6})Z\.json$",
)


class BackupEntry(BaseModel):
    """A backup file on disk."""

    path: Path
    name: str
    timestamp: datetime


def format_backup_name(moment: datetime) -> str:
    """File name for a backup taken at *moment* (converted to UTC)."""
    moment = moment.astimezone(timezone.utc)
    stamp = moment.strftime(_TIMESTAMP_FORMAT)
    return f"{BACKUP_PREFIX}{stamp}{BACKUP_SUFFIX}"


def parse_backup_name(name: str) -> Optional[datetime]:
    """Timestamp embedded in a backup file name, or None if it is not one."""
    match = _BACKUP_NAME_RE.match(name)
    if match is None:
        return None
    year, month, day, hour, minute, second, fraction = match.groups()
    try:
        return datetime(
            int(year),
            int(month),
            int(day),
            int(hour),
            int(minute),
            int(second),
            int(fraction.ljust(6, "0")),
            tzinfo=timezone.utc,
        )
    except ValueError:
        return None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BackupManager:
    """Create, list and restore copies of a settings file."""

    def __init__(
        self,
        settings_path: Path,
        backup_dir: Path,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.settings_path = settings_path
        self.backup_dir = backup_dir
        self._clock = clock

    def _next_backup_path(self) -> Path:
        moment = self._clock()
        path = self.backup_dir / format_backup_name(moment)
        # Two backups in the same microsecond: step forward until free.
        while path.exists():
            moment += timedelta(microseconds=1)
            path = self.backup_dir / format_backup_name(moment)
        return path

    def create_backup(self) -> Path:
        """Copy the live settings file into the backup directory.

        Writes ``{}`` when there is no settings file yet, so every backup
        is restorable.
        """
        try:
            self.backup_dir.mkdir(parents=True, exist_ok=True)
            backup_path = self._next_backup_path()
            if self.settings_path.is_file():
                shutil.copyfile(self.settings_path, backup_path)
            else:
                backup_path.write_text("{}", encoding="utf-8")
        except OSError as exc:
            logger.error(
                "Failed to create backup in %s: %s",
                self.backup_dir,
                exc,
            )
            raise SettingsWriteError(self.backup_dir, str(exc)) from exc
        logger.info("Backed up %s to %s", self.settings_path, backup_path)
        return backup_path

    def list_backups(self) -> List[BackupEntry]:
        """Backups in the backup directory, most recent first."""
        if not self.backup_dir.is_dir():
            return []
        entries: List[BackupEntry] = []
        for path in self.backup_dir.iterdir():
            timestamp = parse_backup_name(path.name)
            if timestamp is None or not path.is_file():
                continue
            entries.append(
                BackupEntry(path=path, name=path.name, timestamp=timestamp),
            )
        entries.sort(key=lambda e: (e.timestamp, e.name), reverse=True)
        return entries

    def latest_backup(self) -> Optional[BackupEntry]:
        backups = self.list_backups()
        return backups[0] if backups else None

    def restore_backup(self, backup_path: Path) -> None:
        """Overwrite the live settings file with *backup_path* verbatim."""
        backup_path = Path(backup_path)
        if not backup_path.is_file():
            raise BackupNotFoundError(backup_path)
        try:
            with open(backup_path, "r", encoding="utf-8") as fh:
                content = json.load(fh)
        except (OSError, ValueError) as exc:
            raise InvalidBackupError(backup_path, str(exc)) from exc
        if not isinstance(content, dict):
            raise InvalidBackupError(
                backup_path,
                "top-level value is not an object",
            )

        try:
            self.settings_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(backup_path, self.settings_path)
        except OSError as exc:
            logger.error("Failed to restore %s: %s", backup_path, exc)
            raise SettingsWriteError(self.settings_path, str(exc)) from exc
        logger.info("Restored %s from %s", self.settings_path, backup_path)
