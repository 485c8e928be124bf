# -*- coding: utf-8 -*-
"""Small interactive prompt helpers built on click."""
from __future__ import annotations

from typing import Optional, Sequence

import click


def prompt_choice(
    prompt_text: str,
    options: Sequence[str],
    default: Optional[str] = None,
) -> str:
    """Show a numbered list and return the chosen option label."""
    if not options:
        raise click.ClickException("No options to choose from.")
    click.echo(f"\n{prompt_text}")
    for idx, label in enumerate(options, start=1):
        marker = "*" if label == default else " "
        click.echo(f" {marker} {idx}) {label}")

    default_idx = options.index(default) + 1 if default in options else None
    choice = click.prompt(
        "Enter number",
        type=click.IntRange(1, len(options)),
        default=default_idx,
        show_default=default_idx is not None,
    )
    return options[choice - 1]


def prompt_confirm(prompt_text: str, *, default: bool = False) -> bool:
    return click.confirm(prompt_text, default=default)


def print_error(message: str) -> None:
    click.echo(click.style(message, fg="red"), err=True)


def print_warning(message: str) -> None:
    click.echo(click.style(message, fg="yellow"))


def print_success(message: str) -> None:
    click.echo(click.style(f"✓ {message}", fg="green"))
