# -*- coding: utf-8 -*-
"""CLI commands for settings.json backups."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click

from ..exceptions import CCSwitchError
from .context import AppContext, pass_app
from .utils import print_error, print_success, prompt_choice

logger = logging.getLogger(__name__)

# How many backups the interactive restore offers.
_RESTORE_CHOICES = 10


def _pick_backup(app: AppContext) -> Optional[Path]:
    backups = app.manager.list_backups()
    if not backups:
        click.echo(app.t("backup.none"))
        return None
    candidates = backups[:_RESTORE_CHOICES]
    labels = [
        entry.timestamp.astimezone().strftime("%Y-%m-%d %H:%M:%S")
        + f" ({entry.name})"
        for entry in candidates
    ]
    chosen = prompt_choice(app.t("backup.select"), options=labels)
    return candidates[labels.index(chosen)].path


def restore_backup(app: AppContext, path: Path) -> bool:
    """Copy *path* over settings.json, reporting the outcome."""
    try:
        app.manager.restore_backup(path)
    except CCSwitchError as exc:
        logger.error("Restoring backup %s failed: %s", path, exc)
        print_error(f"{app.t('backup.restore_failed')} {exc}")
        return False
    print_success(app.t("backup.restored", path=path))
    return True


def restore_backup_interactive(app: AppContext) -> bool:
    """Offer the newest backups and restore the chosen one."""
    path = _pick_backup(app)
    if path is None:
        return False
    return restore_backup(app, path)


@click.group("backup")
def backup_group() -> None:
    """Create, list and restore backups of Claude Code's settings.json.

    \b
    Examples:
      ccswitch backup list
      ccswitch backup create
      ccswitch backup restore --latest
      ccswitch backup restore ~/.ccswitch/backups/settings-...json
    """


@backup_group.command("list")
@pass_app
def list_cmd(app: AppContext) -> None:
    """List backups, most recent first."""
    backups = app.manager.list_backups()
    if not backups:
        click.echo(app.t("backup.none"))
        return
    click.echo(app.t("backup.count", count=len(backups)))
    for idx, entry in enumerate(backups, start=1):
        local_time = entry.timestamp.astimezone().strftime("%Y-%m-%d %H:%M:%S")
        click.echo(f"  {idx:>3}) {local_time}  {entry.path}")


@backup_group.command("create")
@pass_app
def create_cmd(app: AppContext) -> None:
    """Back up the current settings.json."""
    try:
        path = app.manager.create_backup()
    except CCSwitchError as exc:
        raise click.ClickException(str(exc)) from exc
    print_success(app.t("backup.created", path=path))


@backup_group.command("restore")
@click.argument(
    "path",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option("--latest", is_flag=True, help="Restore the newest backup")
@pass_app
def restore_cmd(app: AppContext, path: Optional[Path], latest: bool) -> None:
    """Overwrite settings.json with a backup."""
    if path is not None and latest:
        raise click.UsageError("PATH and --latest are mutually exclusive.")
    if path is None:
        if latest:
            entry = app.manager.latest_backup()
            if entry is None:
                click.echo(app.t("backup.none"))
                raise SystemExit(1)
            path = entry.path
        else:
            path = _pick_backup(app)
            if path is None:
                raise SystemExit(1)

    if not restore_backup(app, path):
        raise SystemExit(1)
