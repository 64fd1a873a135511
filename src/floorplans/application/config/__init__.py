"""Configuration schema and loading system for floor-plan generation.

This package provides JSON-based configuration loading and validation. It
includes pydantic models for schema validation, a loader with comprehensive
error handling, cross-field validation, and conversion to domain objects.

Example:
    >>> from pathlib import Path
    >>> from floorplans.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("my-floor.json"))
    ...     print(f"Floor: {config.floor.width}x{config.floor.height}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from floorplans.application.config.adapter import (
    config_to_blocked_areas,
    config_to_floor,
    config_to_generation_settings,
    config_to_room_types,
)
from floorplans.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from floorplans.application.config.merger import merge_config_with_cli
from floorplans.application.config.schema import (
    SUPPORTED_VERSIONS,
    BlockedAreaConfig,
    FloorConfig,
    FloorPlanConfiguration,
    GenerationConfigSchema,
    OutputConfig,
    RoomTypeConfig,
)
from floorplans.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "BlockedAreaConfig",
    "ConfigError",
    "FloorConfig",
    "FloorPlanConfiguration",
    "GenerationConfigSchema",
    "OutputConfig",
    "RoomTypeConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_blocked_areas",
    "config_to_floor",
    "config_to_generation_settings",
    "config_to_room_types",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validate_config",
]
