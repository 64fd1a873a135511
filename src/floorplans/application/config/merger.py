"""Merging of CLI overrides into a loaded configuration.

CLI options take precedence over values from the configuration file. Only
options the user actually supplied (not None) are applied.
"""

from __future__ import annotations

from pathlib import Path

from floorplans.application.config.schema import FloorPlanConfiguration


def merge_config_with_cli(
    config: FloorPlanConfiguration,
    *,
    trials: int | None = None,
    top_n: int | None = None,
    seed: int | None = None,
    deadline_seconds: float | None = None,
    formats: list[str] | None = None,
    output_dir: Path | None = None,
    layout_index: int | None = None,
    project_name: str | None = None,
) -> FloorPlanConfiguration:
    """Return a copy of ``config`` with CLI overrides applied.

    The merged result is re-validated so that an out-of-range override
    (for example ``--trials 0``) fails the same way a bad file value would.

    Args:
        config: Configuration loaded from file.
        trials: Override for generation.trials.
        top_n: Override for generation.top_n.
        seed: Override for generation.seed.
        deadline_seconds: Override for generation.deadline_seconds.
        formats: Override for output.formats.
        output_dir: Override for output.output_dir.
        layout_index: Override for output.layout_index.
        project_name: Override for output.project_name.

    Returns:
        New validated FloorPlanConfiguration.

    Raises:
        pydantic.ValidationError: If an override is out of range.
    """
    data = config.model_dump(mode="json")

    generation_overrides = {
        "trials": trials,
        "top_n": top_n,
        "seed": seed,
        "deadline_seconds": deadline_seconds,
    }
    for key, value in generation_overrides.items():
        if value is not None:
            data["generation"][key] = value

    output_overrides = {
        "formats": formats,
        "output_dir": str(output_dir) if output_dir is not None else None,
        "layout_index": layout_index,
        "project_name": project_name,
    }
    for key, value in output_overrides.items():
        if value is not None:
            data["output"][key] = value

    return FloorPlanConfiguration.model_validate(data)
