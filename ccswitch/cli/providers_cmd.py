# -*- coding: utf-8 -*-
"""CLI commands for choosing a provider and applying it to Claude Code."""
from __future__ import annotations

import logging
from typing import Optional

import click

from ..config import mask_api_key
from ..exceptions import CCSwitchError
from ..i18n import LANGUAGE_NAMES, available_locales
from ..providers import (
    ProviderDefinition,
    get_provider,
    list_providers,
    validate_api_key,
)
from .context import AppContext, pass_app
from .utils import (
    print_error,
    print_success,
    print_warning,
    prompt_choice,
    prompt_confirm,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Reusable interactive helpers
# ---------------------------------------------------------------------------


def _require_provider(app: AppContext, provider_id: str) -> ProviderDefinition:
    provider = get_provider(provider_id)
    if provider is None:
        raise click.ClickException(
            app.t("errors.unknown_provider", provider=provider_id),
        )
    return provider


def select_language_interactive(app: AppContext) -> str:
    """Prompt for the UI language and persist it. Returns the locale."""
    locales = available_locales()
    labels = [LANGUAGE_NAMES.get(loc, loc) for loc in locales]
    current = LANGUAGE_NAMES.get(app.translator.locale)
    chosen = prompt_choice(
        app.t("wizard.select_language"),
        options=labels,
        default=current,
    )
    locale = locales[labels.index(chosen)]
    app.update_config(lang=locale)
    app.translator.set_locale(locale)
    return locale


def _select_provider(app: AppContext, current_id: Optional[str]) -> str:
    providers = list_providers()
    labels = [
        f"{p.name} - {p.description}" + (" ✓" if p.id == current_id else "")
        for p in providers
    ]
    ids = [p.id for p in providers]
    default_label = (
        labels[ids.index(current_id)] if current_id in ids else None
    )
    chosen = prompt_choice(
        app.t("wizard.select_provider"),
        options=labels,
        default=default_label,
    )
    return ids[labels.index(chosen)]


def _select_region(
    app: AppContext,
    provider: ProviderDefinition,
    region_id: Optional[str],
) -> str:
    if region_id is not None:
        if provider.get_region(region_id) is None:
            raise click.ClickException(
                app.t("errors.unknown_region", region=region_id),
            )
        return region_id
    if len(provider.regions) == 1:
        region = provider.regions[0]
        click.echo(
            f"  {app.t('wizard.provider_single_region')} → {region.name}",
        )
        return region.id

    labels = [f"{r.name} ({r.base_url})" for r in provider.regions]
    chosen = prompt_choice(app.t("wizard.select_region"), options=labels)
    return provider.regions[labels.index(chosen)].id


def _model_label(app: AppContext, model) -> str:
    label = model.name
    if model.thinking:
        label += f" [{app.t('wizard.thinking')}]"
    if model.default:
        label += f" ({app.t('wizard.recommended')})"
    return label


def _select_model(
    app: AppContext,
    provider: ProviderDefinition,
    model_id: Optional[str],
) -> str:
    if model_id is not None:
        if provider.get_model(model_id) is None:
            raise click.ClickException(
                app.t("errors.unknown_model", model=model_id),
            )
        return model_id
    if len(provider.models) == 1:
        return provider.models[0].id

    labels = [_model_label(app, m) for m in provider.models]
    default_model = provider.default_model()
    default_label = (
        labels[provider.models.index(default_model)] if default_model else None
    )
    chosen = prompt_choice(
        app.t("wizard.select_model"),
        options=labels,
        default=default_label,
    )
    return provider.models[labels.index(chosen)].id


def configure_provider_interactive(
    app: AppContext,
    provider_id: Optional[str] = None,
    region_id: Optional[str] = None,
    model_id: Optional[str] = None,
) -> ProviderDefinition:
    """Pick provider, region and model (prompting for what is missing)."""
    cfg = app.load_config()
    if provider_id is None:
        provider_id = _select_provider(app, cfg.provider)
    provider = _require_provider(app, provider_id)

    region_id = _select_region(app, provider, region_id)
    model_id = _select_model(app, provider, model_id)

    app.update_config(provider=provider.id, region=region_id, model=model_id)
    print_success(
        app.t(
            "wizard.provider_saved",
            provider=provider.name,
            region=region_id,
            model=model_id,
        ),
    )
    return provider


def configure_api_key_interactive(
    app: AppContext,
    api_key: Optional[str] = None,
    *,
    skip_validation: bool = False,
) -> bool:
    """Ask for an API key, validate it, save it. Returns True if saved.

    A key the provider rejects is not saved; a key that could not be
    checked (network trouble) is saved with a warning.
    """
    cfg = app.load_config()
    if not cfg.provider:
        print_warning(app.t("wizard.missing_config"))
        return False
    provider = _require_provider(app, cfg.provider)
    region = provider.get_region(cfg.region or "") or provider.regions[0]

    if api_key is None:
        if cfg.api_key:
            click.echo(
                f"  {app.t('status.api_key')}: {mask_api_key(cfg.api_key)}",
            )
        click.echo(
            click.style(
                app.t("wizard.api_key_get_hint", url=region.api_key_url),
                fg="blue",
            ),
        )
        api_key = click.prompt(
            app.t("wizard.input_your_api_key"),
            hide_input=True,
            default="",
            show_default=False,
        )
    api_key = (api_key or "").strip()
    if not api_key:
        print_error(app.t("wizard.api_key_required"))
        return False

    if not skip_validation:
        click.echo(app.t("wizard.validating_api_key"))
        result = validate_api_key(api_key, provider, region.id)
        if result.error == "invalid_api_key":
            print_error(app.t("wizard.api_key_invalid"))
            return False
        if not result.valid:
            print_warning(
                app.t("wizard.api_key_network_error", message=result.message),
            )

    app.update_config(api_key=api_key)
    print_success(app.t("wizard.set_success"))
    return True


def apply_config(app: AppContext) -> bool:
    """Write the locally selected provider into Claude Code's settings."""
    cfg = app.load_config()
    if not cfg.is_complete():
        print_warning(app.t("wizard.missing_config"))
        return False
    provider = _require_provider(app, cfg.provider)

    click.echo(app.t("wizard.applying_config"))
    try:
        backup_path = app.manager.load_provider_config(
            provider,
            cfg.region,
            cfg.model,
            cfg.api_key,
        )
    except CCSwitchError as exc:
        logger.exception("Applying provider %s failed", provider.id)
        print_error(f"{app.t('wizard.config_apply_failed')} {exc}")
        return False
    print_success(app.t("wizard.config_applied"))
    click.echo(app.t("wizard.backup_saved", path=backup_path))
    return True


def unload_config(app: AppContext, *, confirm: bool = True) -> bool:
    """Strip the provider settings from Claude Code. False on failure."""
    if confirm and not prompt_confirm(app.t("wizard.confirm_remove")):
        return True
    try:
        backup_path = app.manager.unload_provider_config()
    except CCSwitchError as exc:
        logger.exception("Unloading provider config failed")
        print_error(f"{app.t('wizard.config_remove_failed')} {exc}")
        return False
    if backup_path is None:
        click.echo(app.t("wizard.nothing_to_remove"))
        return True
    print_success(app.t("wizard.config_removed"))
    click.echo(app.t("wizard.backup_saved", path=backup_path))
    return True


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@click.command("init")
@pass_app
def init_cmd(app: AppContext) -> None:
    """Run the first-time setup: language, provider, API key, apply."""
    click.echo(click.style(app.t("wizard.welcome"), fg="magenta", bold=True))
    click.echo(app.t("wizard.privacy_note"))
    select_language_interactive(app)
    configure_provider_interactive(app)
    if not configure_api_key_interactive(app):
        raise SystemExit(1)
    if not apply_config(app):
        raise SystemExit(1)


@click.command("provider")
@click.option("--provider", "provider_id", default=None, help="Provider id")
@click.option("--region", "region_id", default=None, help="Region id")
@click.option("--model", "model_id", default=None, help="Model id")
@pass_app
def provider_cmd(
    app: AppContext,
    provider_id: Optional[str],
    region_id: Optional[str],
    model_id: Optional[str],
) -> None:
    """Select provider, region and model (prompts for missing values)."""
    configure_provider_interactive(app, provider_id, region_id, model_id)


@click.command("auth")
@click.argument(
    "action",
    required=False,
    type=click.Choice(["revoke"]),
)
@click.option(
    "--api-key",
    default=None,
    help="API key to store (prompted for when omitted)",
)
@click.option(
    "--skip-validation",
    is_flag=True,
    help="Store the key without checking it against the provider",
)
@pass_app
def auth_cmd(
    app: AppContext,
    action: Optional[str],
    api_key: Optional[str],
    skip_validation: bool,
) -> None:
    """Configure the API key, or `auth revoke` to forget it."""
    if action == "revoke":
        app.update_config(api_key=None)
        print_success(app.t("wizard.api_key_revoked"))
        return
    if not configure_api_key_interactive(
        app,
        api_key,
        skip_validation=skip_validation,
    ):
        raise SystemExit(1)


@click.command("apply")
@pass_app
def apply_cmd(app: AppContext) -> None:
    """Apply the selected provider to Claude Code's settings.json."""
    if not apply_config(app):
        raise SystemExit(1)


@click.command("unload")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@pass_app
def unload_cmd(app: AppContext, yes: bool) -> None:
    """Remove the provider configuration from Claude Code."""
    if not unload_config(app, confirm=not yes):
        raise SystemExit(1)
