# -*- coding: utf-8 -*-
"""CLI commands that report state: status and doctor."""
from __future__ import annotations

import json
import platform
import shutil
from typing import List, NamedTuple, Optional

import click

from ..config import mask_api_key
from ..providers import get_provider, validate_api_key
from .context import AppContext, pass_app

_LABEL_WIDTH = 10


def _row(label: str, value: str) -> None:
    click.echo(f"    {label:{_LABEL_WIDTH}s}: {value}")


def _value(app: AppContext, value: Optional[str]) -> str:
    if value:
        return click.style(value, fg="green")
    return click.style(app.t("status.not_set"), fg="red")


def _status_payload(app: AppContext) -> dict:
    cfg = app.load_config()
    detected = app.manager.detect_current_config()
    provider = detected.provider
    return {
        "local": {
            "lang": cfg.lang,
            "provider": cfg.provider,
            "region": cfg.region,
            "model": cfg.model,
            "api_key": mask_api_key(cfg.api_key) or None,
        },
        "claude_code": {
            "configured": detected.is_configured,
            "provider": provider.id if provider else None,
            "region": detected.region_id,
            "base_url": detected.base_url,
            "model": detected.model,
            "api_key": mask_api_key(detected.api_key) or None,
        },
    }


def show_status(app: AppContext) -> None:
    """Print the local selection and the detected Claude Code setup."""
    cfg = app.load_config()
    provider = get_provider(cfg.provider) if cfg.provider else None
    detected = app.manager.detect_current_config()

    click.echo(click.style(f"\n  {app.t('status.local_title')}:", fg="cyan"))
    _row(
        app.t("status.provider"),
        _value(app, provider.name if provider else cfg.provider),
    )
    _row(app.t("status.region"), _value(app, cfg.region))
    _row(app.t("status.model"), _value(app, cfg.model))
    _row(app.t("status.api_key"), _value(app, mask_api_key(cfg.api_key)))

    click.echo(
        click.style(f"\n  {app.t('status.claude_title')}:", fg="yellow"),
    )
    if detected.provider is not None:
        _row(
            app.t("status.provider"),
            click.style(detected.provider.name, fg="green"),
        )
        _row(app.t("status.region"), detected.region_id or "?")
        _row(app.t("status.base_url"), detected.base_url or "")
        _row(
            app.t("status.model"),
            detected.model or app.t("status.default_model"),
        )
        _row(app.t("status.api_key"), mask_api_key(detected.api_key))
    elif detected.base_url:
        click.echo(
            f"    {app.t('status.unknown_provider')} ({detected.base_url})",
        )
    else:
        click.echo(f"    {app.t('status.not_configured')}")
    click.echo()


@click.command("status")
@click.option("--json", "as_json", is_flag=True, help="Output JSON")
@pass_app
def status_cmd(app: AppContext, as_json: bool) -> None:
    """Show the local selection and what Claude Code is configured with."""
    if as_json:
        click.echo(
            json.dumps(_status_payload(app), ensure_ascii=False, indent=2),
        )
        return
    show_status(app)


class _Check(NamedTuple):
    label: str
    ok: bool
    detail: str = ""


def _run_checks(app: AppContext, *, skip_network: bool) -> List[_Check]:
    cfg = app.load_config()
    checks = [
        _Check(
            app.t("doctor.python_version"),
            True,
            platform.python_version(),
        ),
        _Check(
            app.t("doctor.claude_installed"),
            shutil.which("claude") is not None,
        ),
        _Check(app.t("doctor.config_exists"), not app.is_first_run()),
        _Check(app.t("doctor.provider_configured"), bool(cfg.provider)),
        _Check(app.t("doctor.api_key_set"), bool(cfg.api_key)),
    ]

    provider = get_provider(cfg.provider) if cfg.provider else None
    if not skip_network and provider and cfg.api_key and cfg.region:
        result = validate_api_key(cfg.api_key, provider, cfg.region)
        checks.append(
            _Check(
                app.t("doctor.api_key_valid"),
                result.valid,
                "" if result.valid else result.message,
            ),
        )
    return checks


@click.command("doctor")
@click.option(
    "--skip-network",
    is_flag=True,
    help="Do not contact the provider to validate the API key",
)
@pass_app
def doctor_cmd(app: AppContext, skip_network: bool) -> None:
    """Run a health check of the local setup."""
    click.echo(click.style(f"\n  {app.t('doctor.title')}\n", fg="cyan"))
    checks = _run_checks(app, skip_network=skip_network)

    for check in checks:
        if check.ok:
            icon = click.style("✓", fg="green")
        else:
            icon = click.style("✗", fg="red")
        detail = f" ({check.detail})" if check.detail else ""
        click.echo(f"  {icon}  {check.label}{detail}")

    if all(c.ok for c in checks):
        message = click.style(app.t("doctor.all_good"), fg="green")
    else:
        message = click.style(app.t("doctor.issues_found"), fg="yellow")
    click.echo(f"\n  {message}\n")
