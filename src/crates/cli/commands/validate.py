"""Validate command for checking crate configuration files.

The command loads a JSON configuration, reports schema errors, and warns
about manifest lines that can never be placed on an empty crate.
"""

from pathlib import Path
from typing import Annotated

import typer

from crates.application import ManifestLine, find_unplaceable_lines
from crates.application.config import (
    ConfigError,
    config_to_crate_config,
    config_to_manifest,
    load_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a crate configuration file.

    Checks the configuration file for:
    - JSON syntax errors
    - Schema validation errors (unknown keys, invalid limits, etc.)
    - Manifest items too large or heavy for an empty crate

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but some items will never fit

    Example:
        crates validate my-shipment.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    unplaceable = find_unplaceable_lines(
        config_to_manifest(config), config_to_crate_config(config)
    )
    _display_fit_warnings(unplaceable)
    raise typer.Exit(code=2 if unplaceable else 0)


def _display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None:
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _display_fit_warnings(unplaceable: list[ManifestLine]) -> None:
    if not unplaceable:
        typer.echo("Validation passed. Configuration is valid.")
        return

    typer.echo("Warnings:")
    for line in unplaceable:
        typer.echo(
            f"  manifest.{line.item_number}: will not fit on an empty crate "
            f"({line.height:g} x {line.width:g} x {line.length:g} in, {line.weight:g} lb)"
        )
    typer.echo()
    typer.echo(f"Validation passed with {len(unplaceable)} warning(s)")
