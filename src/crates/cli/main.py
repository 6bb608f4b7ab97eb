"""Typer CLI for crate packing and framing."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from crates.application import (
    ManifestError,
    ManifestLine,
    PackCratesCommand,
    PackingOutput,
    demo_manifest,
    load_manifest,
)
from crates.application.config import (
    ConfigError,
    CrateConfiguration,
    config_to_crate_config,
    config_to_manifest,
    has_manifest,
    load_config,
    merge_config_with_cli,
)
from crates.infrastructure import (
    CrateJsonExporter,
    CrateSummaryFormatter,
    LumberListFormatter,
    PlacementFormatter,
)
from crates.infrastructure.exporters import ExporterRegistry, ExportManager
from crates.cli.commands import validate_command


def _handle_multi_format_export(
    formats: list[str],
    output_dir: Path | None,
    project_name: str,
    output: PackingOutput,
) -> None:
    """Export packing output to every requested file format.

    Args:
        formats: Format names, or ["all"] for every registered exporter.
        output_dir: Output directory for exported files.
        project_name: Project name for file naming.
        output: The packing output to export.
    """
    formats, unknown = ExporterRegistry.partition(formats)
    if unknown:
        available = ExporterRegistry.available_formats()
        typer.echo(f"Unknown formats: {', '.join(unknown)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    if not output.crates and "stl" in formats:
        typer.echo("Warning: STL export skipped - no crates were built.", err=True)
        formats = [f for f in formats if f != "stl"]

    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir or Path("."))
    try:
        files = manager.export_all(formats, output, project_name)
    except (OSError, ValueError) as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("\nExported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


def _resolve_manifest(
    manifest_file: Path | None,
    demo: bool,
    config: CrateConfiguration,
) -> list[ManifestLine]:
    """Pick the manifest source: CSV file, then demo data, then the config."""
    if manifest_file is not None:
        try:
            return load_manifest(manifest_file)
        except ManifestError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
    if demo:
        return demo_manifest()
    if has_manifest(config):
        return config_to_manifest(config)

    typer.echo(
        "Error: no items to pack. Use --manifest, --demo, or a config with a manifest",
        err=True,
    )
    raise typer.Exit(code=1)


def _print_output(output: PackingOutput, output_format: str) -> None:
    if output_format == "json":
        typer.echo(CrateJsonExporter().export_string(output))
    elif output_format == "lumber":
        typer.echo(LumberListFormatter().format(output))
    elif output_format == "placements":
        typer.echo(PlacementFormatter().format(output))
    elif output_format == "summary":
        typer.echo(CrateSummaryFormatter().format(output))
    else:  # "all"
        typer.echo(CrateSummaryFormatter().format(output))
        typer.echo()
        typer.echo(LumberListFormatter().format(output))
        typer.echo()
        typer.echo(PlacementFormatter().format(output))


app = typer.Typer(
    name="crates",
    help="Pack long items into framed shipping crates and estimate the lumber.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.command()
def pack(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    manifest_file: Annotated[
        Path | None,
        typer.Option("--manifest", "-m", help="Manifest CSV: item number, height, width, length, weight, quantity"),
    ] = None,
    demo: Annotated[
        bool,
        typer.Option("--demo", help="Pack the built-in sample manifest"),
    ] = False,
    pallet_length: Annotated[
        float | None,
        typer.Option("--pallet-length", help="Pallet length in inches"),
    ] = None,
    pallet_width: Annotated[
        float | None,
        typer.Option("--pallet-width", help="Pallet width in inches"),
    ] = None,
    max_height: Annotated[
        float | None,
        typer.Option("--max-height", help="Maximum crate height in inches"),
    ] = None,
    max_weight: Annotated[
        float | None,
        typer.Option("--max-weight", help="Maximum crate payload in pounds"),
    ] = None,
    safety_gap: Annotated[
        float | None,
        typer.Option("--safety-gap", help="Edge clearance in inches"),
    ] = None,
    framing_spacing: Annotated[
        float | None,
        typer.Option("--framing-spacing", help="Cradle spacing along each item in inches"),
    ] = None,
    bracing: Annotated[
        bool | None,
        typer.Option("--bracing/--no-bracing", help="Add diagonal braces between cradles"),
    ] = None,
    vertical: Annotated[
        bool | None,
        typer.Option("--vertical/--no-vertical", help="Stand short items on end in the base layer"),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: summary, lumber, placements, json, all"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats: json,stl,bom (or 'all')",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for exported files"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log packing decisions"),
    ] = False,
) -> None:
    """Pack a manifest into crates and print the result.

    Items come from --manifest, --demo, or the manifest embedded in --config,
    in that order. CLI options override config file values.

    Exit codes:
        0 - Every item was packed
        1 - Input or configuration error
        2 - Some items could not be placed (completed crates are still shown)

    Examples:
        crates pack --demo
        crates pack --manifest load.csv --max-weight 2000 --format all
        crates pack --config shipment.json --output-formats json,stl --output-dir ./out
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        config = load_config(config_file) if config_file is not None else CrateConfiguration()
        config = merge_config_with_cli(
            config,
            pallet_length=pallet_length,
            pallet_width=pallet_width,
            max_height=max_height,
            max_weight=max_weight,
            safety_gap=safety_gap,
            framing_spacing=framing_spacing,
            add_bracing=bracing,
            allow_vertical=vertical,
            output_format=output_format.lower() if output_format else None,
        )
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    lines = _resolve_manifest(manifest_file, demo, config)

    command = PackCratesCommand()
    result = command.execute(lines, config_to_crate_config(config))

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    _print_output(result, config.output.format.value)

    if output_formats is not None:
        formats = [f.strip().lower() for f in output_formats.split(",") if f.strip()]
    else:
        formats = list(config.output.formats)
    if formats:
        if output_dir is None and config.output.output_dir:
            output_dir = Path(config.output.output_dir)
        _handle_multi_format_export(
            formats,
            output_dir,
            project_name or config.output.project_name,
            result,
        )

    if result.fit_failure is not None:
        raise typer.Exit(code=2)


if __name__ == "__main__":
    app()
