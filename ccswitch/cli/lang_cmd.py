# -*- coding: utf-8 -*-
"""CLI commands for the interface language."""
from __future__ import annotations

import click

from ..i18n import available_locales
from .context import AppContext, pass_app
from .utils import print_error, print_success


@click.group("lang")
def lang_group() -> None:
    """Show or change the interface language."""


@lang_group.command("set")
@click.argument("locale")
@pass_app
def set_cmd(app: AppContext, locale: str) -> None:
    """Set language (en_US, de_DE, zh_CN)."""
    locales = available_locales()
    if locale not in locales:
        print_error(app.t("lang.unknown", locale=locale))
        click.echo(app.t("lang.available", locales=", ".join(locales)))
        raise SystemExit(1)
    app.update_config(lang=locale)
    app.translator.set_locale(locale)
    print_success(app.t("lang.set", locale=locale))


@lang_group.command("show")
@pass_app
def show_cmd(app: AppContext) -> None:
    """Show the current language."""
    click.echo(app.t("lang.current", locale=app.translator.locale))
    click.echo(
        app.t("lang.available", locales=", ".join(available_locales())),
    )
