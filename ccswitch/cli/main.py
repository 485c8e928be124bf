# -*- coding: utf-8 -*-
"""Entry point of the ``ccswitch`` command."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..constant import (
    CLAUDE_CONFIG_PATH,
    CLAUDE_SETTINGS_PATH,
    LOG_FILE,
    LOG_LEVEL_ENV,
    WORKING_DIR,
)
from ..utils.log import setup_logger
from .backup_cmd import backup_group
from .context import AppContext
from .lang_cmd import lang_group
from .menu import main_menu
from .providers_cmd import (
    apply_cmd,
    auth_cmd,
    init_cmd,
    provider_cmd,
    unload_cmd,
)
from .status_cmd import doctor_cmd, status_cmd

logger = logging.getLogger(__name__)

_PATH = click.Path(path_type=Path)


@click.group(invoke_without_command=True)
@click.version_option(__version__, "-v", "--version")
@click.option(
    "--working-dir",
    type=_PATH,
    default=None,
    envvar="CCSWITCH_WORKING_DIR",
    help="Where ccswitch keeps config.json, backups and logs",
)
@click.option(
    "--settings-file",
    type=_PATH,
    default=None,
    envvar="CCSWITCH_CLAUDE_SETTINGS",
    help="Claude Code settings.json to edit",
)
@click.option(
    "--claude-config",
    type=_PATH,
    default=None,
    envvar="CCSWITCH_CLAUDE_CONFIG",
    help="Claude Code .claude.json (onboarding flag)",
)
@click.option(
    "--log-level",
    default="warning",
    envvar=LOG_LEVEL_ENV,
    show_default=True,
    help="Console log level (debug, info, warning, error)",
)
@click.pass_context
def cli(
    ctx: click.Context,
    working_dir: Optional[Path],
    settings_file: Optional[Path],
    claude_config: Optional[Path],
    log_level: str,
) -> None:
    """Switch Claude Code between API providers.

    \b
    Examples:
      ccswitch                     # setup on first run, menu afterwards
      ccswitch init                # re-run setup
      ccswitch provider            # switch provider
      ccswitch auth                # configure API key
      ccswitch auth revoke         # remove API key
      ccswitch apply               # apply to Claude Code
      ccswitch unload              # remove from Claude Code
      ccswitch status              # show config
      ccswitch doctor              # health check
      ccswitch backup list         # list settings.json backups
      ccswitch lang set de_DE      # switch to German
    """
    working_dir = (working_dir or WORKING_DIR).expanduser()
    setup_logger(log_level, working_dir / LOG_FILE)

    ctx.obj = AppContext(
        working_dir=working_dir,
        settings_path=(settings_file or CLAUDE_SETTINGS_PATH).expanduser(),
        claude_config_path=(claude_config or CLAUDE_CONFIG_PATH).expanduser(),
    )
    logger.debug(
        "ccswitch %s: working_dir=%s settings=%s",
        __version__,
        working_dir,
        ctx.obj.manager.settings_path,
    )

    if ctx.invoked_subcommand is None:
        if ctx.obj.is_first_run():
            ctx.invoke(init_cmd)
        else:
            main_menu(ctx.obj)


cli.add_command(init_cmd)
cli.add_command(provider_cmd)
cli.add_command(auth_cmd)
cli.add_command(apply_cmd)
cli.add_command(unload_cmd)
cli.add_command(status_cmd)
cli.add_command(doctor_cmd)
cli.add_command(backup_group)
cli.add_command(lang_group)
