# -*- coding: utf-8 -*-
"""Interactive main menu shown by a bare ``ccswitch`` after setup."""
from __future__ import annotations

import logging
from typing import Callable, Dict

import click

from .backup_cmd import restore_backup_interactive
from .context import AppContext
from .providers_cmd import (
    apply_config,
    configure_api_key_interactive,
    configure_provider_interactive,
    select_language_interactive,
    unload_config,
)
from .status_cmd import show_status
from .utils import print_error, prompt_choice

logger = logging.getLogger(__name__)

_EXIT = "exit"

# Menu order; each key doubles as the ``menu.<key>`` message id.
_ACTIONS: Dict[str, Callable[[AppContext], object]] = {
    "language": select_language_interactive,
    "provider": configure_provider_interactive,
    "api_key": configure_api_key_interactive,
    "apply": apply_config,
    "unload": unload_config,
    "backup_restore": restore_backup_interactive,
    "status": show_status,
}


def _print_header(app: AppContext) -> None:
    click.echo(
        click.style(f"\n  {app.t('menu.title')}", fg="magenta", bold=True),
    )
    detected = app.manager.detect_current_config()
    if detected.provider is not None:
        state = click.style(
            app.t("menu.claude_active", provider=detected.provider.name),
            fg="green",
        )
    else:
        state = app.t("status.not_configured")
    click.echo(f"  {app.t('status.claude_title')}: {state}")


def main_menu(app: AppContext) -> None:
    """Loop over the menu until the user picks exit."""
    while True:
        _print_header(app)
        keys = [*_ACTIONS, _EXIT]
        # Rebuilt every pass: the language entry can change the locale.
        labels = [app.t(f"menu.{key}") for key in keys]
        chosen = prompt_choice(app.t("menu.select_operation"), options=labels)
        action = keys[labels.index(chosen)]
        if action == _EXIT:
            click.echo(click.style(app.t("menu.goodbye"), fg="green"))
            return

        logger.debug("Menu action: %s", action)
        try:
            _ACTIONS[action](app)
        except click.ClickException as exc:
            print_error(exc.format_message())
