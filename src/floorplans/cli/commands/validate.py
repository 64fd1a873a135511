"""The ``validate`` command: check a configuration file without generating."""

from pathlib import Path
from typing import Annotated

import typer

from floorplans.application.config import ConfigError, load_config, validate_config
from floorplans.cli.reporting import report_load_error, report_validation_result


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a floor-plan configuration file.

    Reports JSON syntax errors, schema errors, cross-field errors such as
    blocked areas outside the floor, and placement warnings for rooms that
    can never be placed.

    Exits 0 when the file is clean, 1 on any error and 2 when it is usable
    but has warnings.

    Example:
        floorplans validate my-floor.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        report_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    report_validation_result(result)
    raise typer.Exit(code=result.exit_code)
