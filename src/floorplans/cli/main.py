"""Typer CLI for floor-plan layout generation."""

import logging
from pathlib import Path
from typing import Annotated

import pydantic
import typer

from floorplans.application import FloorPlanOutput, GenerateLayoutsCommand
from floorplans.application.config import (
    ConfigError,
    FloorPlanConfiguration,
    load_config,
    merge_config_with_cli,
)
from floorplans.cli.commands import validate_command
from floorplans.cli.reporting import report_load_error, report_override_error
from floorplans.infrastructure import (
    ExporterRegistry,
    ExportManager,
    LayoutDiagramFormatter,
    LayoutSummaryFormatter,
)


def _parse_formats(output_formats_str: str) -> list[str]:
    """Parse a comma-separated format list or "all".

    Exits with code 1 if any format is unknown.
    """
    available = ExporterRegistry.available_formats()
    if output_formats_str.strip().lower() == "all":
        return available

    formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    return formats


def _handle_export(config: FloorPlanConfiguration, output: FloorPlanOutput) -> None:
    """Export the selected layout to every configured format."""
    formats = config.output.formats
    if not formats:
        return

    if output.selected_layout is None:
        typer.echo(
            f"Error: layout index {config.output.layout_index} is out of range "
            f"(1-{len(output.layouts)})",
            err=True,
        )
        raise typer.Exit(code=1)

    out_dir = Path(config.output.output_dir) if config.output.output_dir else Path(".")
    manager = ExportManager(out_dir)
    try:
        files = manager.export_all(formats, output, config.output.project_name)
    except (KeyError, ValueError, OSError) as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("\nExported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


app = typer.Typer(
    name="floorplans",
    help="Generate ranked floor-plan layouts from room types and a floor outline.",
)

app.command(name="validate")(validate_command)


@app.command()
def generate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    trials: Annotated[
        int | None,
        typer.Option("--trials", "-n", help="Number of placement trials (default: 200)"),
    ] = None,
    top: Annotated[
        int | None,
        typer.Option("--top", "-t", help="Number of ranked layouts to keep (default: 10)"),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Random seed for reproducible layouts"),
    ] = None,
    deadline: Annotated[
        float | None,
        typer.Option("--deadline", help="Stop generating after this many seconds"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats: dxf,json,svg (or 'all')",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for exported files"),
    ] = None,
    layout_index: Annotated[
        int | None,
        typer.Option("--layout-index", "-i", help="1-based rank of the layout to export"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = None,
    diagram: Annotated[
        bool,
        typer.Option("--diagram/--no-diagram", help="Print an ASCII diagram of the best layout"),
    ] = True,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Generate ranked floor-plan layouts from a configuration file.

    CLI options override values from the configuration file.

    Examples:
        floorplans generate house.json
        floorplans generate house.json --trials 500 --seed 42
        floorplans generate house.json --output-formats dxf,json --output-dir ./out
        floorplans generate house.json --output-formats all --layout-index 2
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        config = load_config(config_file)
    except ConfigError as e:
        report_load_error(e)
        raise typer.Exit(code=1)

    formats = _parse_formats(output_formats) if output_formats is not None else None

    try:
        config = merge_config_with_cli(
            config,
            trials=trials,
            top_n=top,
            seed=seed,
            deadline_seconds=deadline,
            formats=formats,
            output_dir=output_dir,
            layout_index=layout_index,
            project_name=project_name,
        )
    except pydantic.ValidationError as e:
        report_override_error(e)
        raise typer.Exit(code=1)

    # Formats named in the config file are checked here too
    if output_formats is None and config.output.formats:
        _parse_formats(",".join(config.output.formats))

    command = GenerateLayoutsCommand()
    output = command.execute_config(config)

    if not output.is_valid:
        for error in output.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if not output.has_layouts:
        typer.echo(output.message)
        return

    summary = LayoutSummaryFormatter()
    typer.echo(summary.format(output))

    if diagram:
        typer.echo()
        typer.echo("BEST LAYOUT")
        typer.echo(LayoutDiagramFormatter().format(output, index=0))
        typer.echo()
        typer.echo(summary.format_room_counts(output.layouts[0], output.room_types))

    _handle_export(config, output)


@app.command()
def formats() -> None:
    """List the registered export formats."""
    for name in ExporterRegistry.available_formats():
        exporter_cls = ExporterRegistry.get(name)
        typer.echo(f"{name:<8} .{exporter_cls.file_extension}")


if __name__ == "__main__":
    app()
