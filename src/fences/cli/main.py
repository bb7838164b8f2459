"""Typer CLI for fence planning."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from fences.application import ComputeLayoutCommand, LayoutOutput, SidePreset
from fences.application.config import (
    ConfigError,
    FencePlanConfiguration,
    config_to_input,
    load_config,
    merge_config_with_cli,
)
from fences.cli.commands import display_load_error, validate_command
from fences.domain import LengthUnit, SideName
from fences.infrastructure import (
    BomExporter,
    BomTableFormatter,
    ExporterRegistry,
    ExportManager,
    JsonLayoutExporter,
    PerimeterSummaryFormatter,
    SideLayoutFormatter,
    WarningsFormatter,
)


def _handle_multi_format_export(
    output_formats_str: str,
    output_dir: Path | None,
    project_name: str,
    result: LayoutOutput,
) -> None:
    """Export to several formats via --output-formats."""
    if output_formats_str.lower() == "all":
        formats = ExporterRegistry.available_formats()
    else:
        formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]

    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir or Path("."))
    try:
        files = manager.export_all(formats, result, project_name)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("\nExported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


def _render(result: LayoutOutput, output_format: str) -> str:
    assert result.totals is not None and result.bill_of_materials is not None

    if output_format == "summary":
        return PerimeterSummaryFormatter().format(result.totals, result.unit)
    if output_format == "sides":
        return SideLayoutFormatter().format(result.totals, result.unit)
    if output_format == "bom":
        return BomTableFormatter().format(result.bill_of_materials)
    if output_format == "json":
        return JsonLayoutExporter().export_string(result)
    if output_format == "csv":
        return BomExporter(output_format="csv").export_string(result)

    parts = [
        PerimeterSummaryFormatter().format(result.totals, result.unit),
        SideLayoutFormatter().format(result.totals, result.unit),
        BomTableFormatter().format(result.bill_of_materials),
    ]
    warnings = WarningsFormatter().format(result)
    if warnings:
        parts.append(warnings)
    return "\n\n".join(parts)


app = typer.Typer(
    name="fences",
    help="Plan fence panels, posts and plinths around a property.",
)

app.command(name="validate")(validate_command)


@app.command()
def plan(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    unit: Annotated[
        LengthUnit | None,
        typer.Option("--unit", "-u", help="Unit of all lengths: mm, cm or m"),
    ] = None,
    panel_width: Annotated[
        float | None,
        typer.Option("--panel-width", help="Panel width"),
    ] = None,
    panel_height: Annotated[
        float | None,
        typer.Option("--panel-height", help="Panel height"),
    ] = None,
    min_gap: Annotated[
        float | None,
        typer.Option("--min-gap", help="Minimum gap between panels"),
    ] = None,
    max_gap: Annotated[
        float | None,
        typer.Option("--max-gap", help="Maximum gap between panels"),
    ] = None,
    corrugations: Annotated[
        int | None,
        typer.Option("--corrugations", help="Clamps per post (overrides the height lookup)"),
    ] = None,
    preset: Annotated[
        SidePreset | None,
        typer.Option("--preset", "-p", help="Which sides are fenced"),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: summary, sides, bom, json, csv, all"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the formatted output to a file"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option("--output-formats", help="Comma-separated export formats: bom,csv,json (or 'all')"),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for multi-format export"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Compute panel layout and bill of materials for a property."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(config_file) if config_file else FencePlanConfiguration()
        config = merge_config_with_cli(
            config,
            unit=unit,
            panel_width=panel_width,
            panel_height=panel_height,
            min_gap=min_gap,
            max_gap=max_gap,
            corrugations=corrugations,
            preset=preset,
            output_format=output_format,
        )
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = ComputeLayoutCommand().execute(config_to_input(config))
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if output_formats:
        _handle_multi_format_export(
            output_formats, output_dir, project_name or config.output.project_name, result
        )
        return

    text = _render(result, config.output.format)
    if output_file:
        output_file.write_text(text + "\n", encoding="utf-8")
        typer.echo(f"Written {config.output.format} output to {output_file}")
    else:
        typer.echo(text)


@app.command()
def presets() -> None:
    """List side presets."""
    for preset in SidePreset:
        sides = ", ".join(
            side.value for side in SideName.cyclic_order() if side in preset.enabled_sides
        )
        typer.echo(f"{preset.value:<12} {sides}")


if __name__ == "__main__":
    app()
