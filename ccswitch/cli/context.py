# -*- coding: utf-8 -*-
"""Per-invocation services shared by all CLI commands."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import click

from ..claude import ClaudeCodeManager
from ..config import (
    AppConfig,
    get_config_path,
    is_first_run,
    load_config,
    update_config,
)
from ..constant import BACKUP_DIR_NAME
from ..exceptions import CCSwitchError
from ..i18n import Translator, detect_locale

logger = logging.getLogger(__name__)


class AppContext:
    """Paths, the Claude Code manager and the translator for one run."""

    def __init__(
        self,
        working_dir: Path,
        settings_path: Path,
        claude_config_path: Path,
    ):
        self.working_dir = working_dir
        self.config_path = get_config_path(working_dir)
        self.manager = ClaudeCodeManager(
            settings_path,
            claude_config_path,
            working_dir / BACKUP_DIR_NAME,
        )
        if self.is_first_run():
            locale = detect_locale()
        else:
            locale = self.load_config().lang
        self.translator = Translator(locale)

    def t(self, key: str, **params: Any) -> str:
        return self.translator.t(key, **params)

    def is_first_run(self) -> bool:
        return is_first_run(self.config_path)

    def load_config(self) -> AppConfig:
        return load_config(self.config_path)

    def update_config(self, **updates: Any) -> AppConfig:
        """Persist *updates*; a failed write becomes a ClickException."""
        try:
            return update_config(self.config_path, **updates)
        except CCSwitchError as exc:
            logger.error("Saving %s failed: %s", self.config_path, exc)
            raise click.ClickException(str(exc)) from exc


pass_app = click.make_pass_decorator(AppContext)
