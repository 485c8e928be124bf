"""Tests for settings.json backups."""

import json
from datetime import datetime, timezone

import pytest

from ccswitch.claude.backup import (
    BackupManager,
    format_backup_name,
    parse_backup_name,
)
from ccswitch.exceptions import BackupNotFoundError, InvalidBackupError


def _fixed_clock(*moments):
    items = list(moments)

    def _clock():
        return items.pop(0) if len(items) > 1 else items[0]

    return _clock


@pytest.fixture
def settings_path(tmp_path):
    return tmp_path / "settings.json"


@pytest.fixture
def backup_dir(tmp_path):
    return tmp_path / "backups"


def test_backup_name_round_trip():
    moment = datetime(2026, 2, 15, 14, 30, 0, 123456, tzinfo=timezone.utc)
    name = format_backup_name(moment)
    assert name == "settings-2026-02-15T14-30-00-123456Z.json"
    assert parse_backup_name(name) == moment


def test_parse_legacy_millisecond_name():
    parsed = parse_backup_name("settings-2026-02-15T14-30-00-123Z.json")
    assert parsed == datetime(
        2026, 2, 15, 14, 30, 0, 123000, tzinfo=timezone.utc
    )


@pytest.mark.parametrize(
    "name",
    [
        "settings.json",
        "settings-latest.json",
        "settings-2026-02-15T14-30-00-123Z.json.bak",
        "other-2026-02-15T14-30-00-123Z.json",
        "settings-2026-13-45T14-30-00-123Z.json",
    ],
)
def test_parse_rejects_foreign_names(name):
    assert parse_backup_name(name) is None


def test_create_backup_copies_settings(settings_path, backup_dir):
    settings_path.write_text('{"model": "opus"}', encoding="utf-8")
    manager = BackupManager(settings_path, backup_dir)

    path = manager.create_backup()

    assert path.parent == backup_dir
    assert path.read_bytes() == settings_path.read_bytes()


def test_create_backup_without_settings_writes_empty_object(
    settings_path,
    backup_dir,
):
    path = BackupManager(settings_path, backup_dir).create_backup()
    assert json.loads(path.read_text(encoding="utf-8")) == {}


def test_same_timestamp_does_not_overwrite(settings_path, backup_dir):
    moment = datetime(2026, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
    manager = BackupManager(
        settings_path,
        backup_dir,
        clock=_fixed_clock(moment),
    )
    settings_path.write_text('{"n": 1}', encoding="utf-8")
    first = manager.create_backup()
    settings_path.write_text('{"n": 2}', encoding="utf-8")
    second = manager.create_backup()

    assert first != second
    assert json.loads(first.read_text())["n"] == 1
    assert json.loads(second.read_text())["n"] == 2
    # The later backup lists first.
    assert [e.path for e in manager.list_backups()] == [second, first]


def test_list_backups_sorted_most_recent_first(settings_path, backup_dir):
    moments = [
        datetime(2026, 3, 1, 9, 0, 0, tzinfo=timezone.utc),
        datetime(2025, 12, 31, 23, 59, 59, tzinfo=timezone.utc),
        datetime(2026, 3, 1, 9, 0, 1, tzinfo=timezone.utc),
    ]
    manager = BackupManager(
        settings_path,
        backup_dir,
        clock=_fixed_clock(*moments),
    )
    for _ in moments:
        manager.create_backup()
    (backup_dir / "notes.txt").write_text("x")
    (backup_dir / "settings-broken.json").write_text("{}")

    entries = manager.list_backups()

    assert [e.timestamp for e in entries] == sorted(moments, reverse=True)
    assert all(e.name.startswith("settings-") for e in entries)
    assert manager.latest_backup() == entries[0]


def test_list_backups_missing_dir(settings_path, backup_dir):
    manager = BackupManager(settings_path, backup_dir)
    assert manager.list_backups() == []
    assert manager.latest_backup() is None


def test_restore_reproduces_backup_time_document(settings_path, backup_dir):
    original = '{\n  "env": {"A": "1"},\n  "model": "opus"\n}'
    settings_path.write_text(original, encoding="utf-8")
    manager = BackupManager(settings_path, backup_dir)
    backup = manager.create_backup()

    settings_path.write_text('{"model": "changed"}', encoding="utf-8")
    manager.restore_backup(backup)
    assert settings_path.read_text(encoding="utf-8") == original

    # Restoring twice gives the same result.
    manager.restore_backup(backup)
    assert settings_path.read_text(encoding="utf-8") == original


def test_restore_creates_missing_settings_dir(tmp_path, backup_dir):
    settings_path = tmp_path / "nested" / "settings.json"
    backup_dir.mkdir()
    backup = backup_dir / "settings-2026-01-01T00-00-00-000000Z.json"
    backup.write_text('{"a": 1}', encoding="utf-8")

    BackupManager(settings_path, backup_dir).restore_backup(backup)

    assert json.loads(settings_path.read_text()) == {"a": 1}


def test_restore_missing_backup(settings_path, backup_dir):
    manager = BackupManager(settings_path, backup_dir)
    with pytest.raises(BackupNotFoundError):
        manager.restore_backup(backup_dir / "settings-nope.json")


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", ""])
def test_restore_invalid_backup_leaves_settings_alone(
    settings_path,
    backup_dir,
    content,
):
    settings_path.write_text('{"keep": true}', encoding="utf-8")
    backup_dir.mkdir()
    bad = backup_dir / "settings-2026-01-01T00-00-00-000000Z.json"
    bad.write_text(content, encoding="utf-8")

    with pytest.raises(InvalidBackupError):
        BackupManager(settings_path, backup_dir).restore_backup(bad)
    assert settings_path.read_text(encoding="utf-8") == '{"keep": true}'
