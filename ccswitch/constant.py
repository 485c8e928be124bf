# -*- coding: utf-8 -*-
import os
from pathlib import Path

WORKING_DIR = (
    Path(os.environ.get("CCSWITCH_WORKING_DIR", "~/.ccswitch"))
    .expanduser()
    .resolve()
)

CONFIG_FILE = os.environ.get("CCSWITCH_CONFIG_FILE", "config.json")

BACKUP_DIR_NAME = "backups"

BACKUP_DIR = WORKING_DIR / BACKUP_DIR_NAME

LOG_FILE = "debug.log"

# Env key for app log level (used by CLI).
LOG_LEVEL_ENV = "CCSWITCH_LOG_LEVEL"

# Claude Code owns these two files; ccswitch only edits them.
CLAUDE_SETTINGS_PATH = (
    Path(
        os.environ.get(
            "CCSWITCH_CLAUDE_SETTINGS",
            "~/.claude/settings.json",
        ),
    )
    .expanduser()
    .resolve()
)

CLAUDE_CONFIG_PATH = (
    Path(os.environ.get("CCSWITCH_CLAUDE_CONFIG", "~/.claude.json"))
    .expanduser()
    .resolve()
)

# Timeout for API key validation requests, in seconds.
VALIDATE_TIMEOUT = 15.0

DEFAULT_LANG = "en_US"
