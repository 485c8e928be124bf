"""Pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from ccswitch.claude import ClaudeCodeManager


@pytest.fixture
def claude_paths(tmp_path: Path) -> dict:
    """Isolated locations for settings.json, .claude.json and backups."""
    return {
        "settings_path": tmp_path / "claude" / "settings.json",
        "claude_config_path": tmp_path / "claude.json",
        "backup_dir": tmp_path / "ccswitch" / "backups",
    }


@pytest.fixture
def manager(claude_paths: dict) -> ClaudeCodeManager:
    return ClaudeCodeManager(**claude_paths)


@pytest.fixture
def write_settings(claude_paths: dict):
    """Write a settings document to the isolated settings.json."""

    def _write(data) -> Path:
        path = claude_paths["settings_path"]
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path

    return _write
