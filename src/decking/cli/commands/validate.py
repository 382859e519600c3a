"""Validate command for checking deck configuration files.

This module provides the `validate` command that checks a JSON configuration
file for errors, and reports values the quote engine would adjust.
"""

from pathlib import Path
from typing import Annotated

import typer

from decking.application import DeckInput
from decking.application.config import ConfigError, config_to_deck_config, load_config


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a deck configuration file.

    Checks the configuration file for:
    - JSON syntax errors
    - Schema validation errors (missing fields, unknown shapes, etc.)
    - Sizes below the minimums the quote engine enforces

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but has warnings

    Example:
        decking validate my-deck.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    deck_config = config_to_deck_config(config)
    warnings = DeckInput.from_deck_config(deck_config).validate()

    if warnings:
        typer.echo("Warnings:")
        for warning in warnings:
            typer.echo(f"  {warning}")
        typer.echo()
        typer.echo(f"Validation passed with {len(warnings)} warning(s)")
        raise typer.Exit(code=2)

    typer.echo("Validation passed. Configuration is valid.")


def _display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error."""
    typer.echo("Errors:", err=True)
    match error.error_type:
        case "file_not_found":
            typer.echo(f"  File not found: {error.path}", err=True)
        case "json_parse":
            typer.echo("  Invalid JSON syntax", err=True)
            for detail in error.details:
                line = detail.get("line", "?")
                column = detail.get("column", "?")
                message = detail.get("message", "Unknown error")
                typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
        case "validation":
            for detail in error.details:
                path = detail.get("path", "unknown")
                message = detail.get("message", "Unknown error")
                typer.echo(f"  {path}: {message}", err=True)
                value = detail.get("value")
                if value is not None:
                    typer.echo(f"    Value: {value!r}", err=True)
        case _:
            typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)
