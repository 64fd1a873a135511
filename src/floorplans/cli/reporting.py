"""Console reporting of configuration problems.

Every problem is printed as an indented ``path: message`` line with an
optional note underneath, whether it came from loading a file, from a CLI
override or from cross-field validation.
"""

from collections.abc import Iterable
from typing import Any

import pydantic
import typer

from floorplans.application.config import ConfigError, ValidationResult

Issue = tuple[str, str, str | None]


def _value_note(value: Any) -> str | None:
    return f"Value: {value!r}" if value is not None else None


def echo_issues(title: str, issues: Iterable[Issue], *, err: bool = True) -> None:
    """Print a titled block of issues followed by a blank line."""
    typer.echo(title, err=err)
    for path, message, note in issues:
        typer.echo(f"  {path}: {message}", err=err)
        if note:
            typer.echo(f"    {note}", err=err)
    typer.echo(err=err)


def load_error_issues(error: ConfigError) -> list[Issue]:
    """Flatten a ConfigError into issue lines."""
    if error.error_type == "file_not_found":
        return [("File not found", str(error.path), None)]
    if error.error_type == "json_parse":
        return [
            (
                f"Line {d.get('line', '?')}, Column {d.get('column', '?')}",
                d.get("message", "Unknown error"),
                None,
            )
            for d in error.details
        ]
    if error.details:
        return [
            (d.get("path", "unknown"), d.get("message", "Unknown error"), _value_note(d.get("value")))
            for d in error.details
        ]
    return [("Error", error.message, None)]


def report_load_error(error: ConfigError) -> None:
    """Print a configuration loading failure on stderr."""
    title = "Invalid JSON syntax:" if error.error_type == "json_parse" else "Errors:"
    echo_issues(title, load_error_issues(error))
    typer.echo("Validation failed.", err=True)


def report_override_error(error: pydantic.ValidationError) -> None:
    """Print CLI override values rejected by the configuration schema."""
    issues = [
        (".".join(str(part) for part in e["loc"]), e["msg"], _value_note(e.get("input")))
        for e in error.errors()
    ]
    echo_issues("Error: invalid option value", issues)


def report_validation_result(result: ValidationResult) -> None:
    """Print errors and warnings followed by a one-line summary."""
    if result.errors:
        echo_issues(
            "Errors:",
            ((e.path, e.message, _value_note(e.value)) for e in result.errors),
        )
    if result.warnings:
        echo_issues(
            "Warnings:",
            (
                (w.path, w.message, f"Suggestion: {w.suggestion}" if w.suggestion else None)
                for w in result.warnings
            ),
            err=False,
        )

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")
