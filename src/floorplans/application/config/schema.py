"""Pydantic models for JSON floor-plan configuration files.

The root model is FloorPlanConfiguration. Unknown fields are rejected at
every level so that typos surface as validation errors instead of being
silently ignored.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from floorplans.domain.value_objects import Unit

# Version 1.0: floor, rooms, blocked areas, generation and output settings
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class FloorConfig(BaseModel):
    """Rectangular buildable area."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)


class RoomTypeConfig(BaseModel):
    """Room type definition.

    Width and height are deliberately unconstrained: a room type with a
    non-positive width or height is accepted and simply never placed (the
    validator reports it as a warning).

    Attributes:
        id: Unique room type identifier.
        name: Display name (defaults to the id).
        width: Declared width.
        height: Declared height.
        color: Display color as a hex string.
        quantity: Number of instances to attempt. Omit to auto-fit.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str | None = None
    width: float
    height: float
    color: str = "#cccccc"
    quantity: int | None = Field(default=None, ge=1)

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        if not HEX_COLOR_PATTERN.match(v):
            raise ValueError(f"color must be a hex string like '#4f8ef7', got '{v}'")
        return v

    @property
    def display_name(self) -> str:
        return self.name or self.id


class BlockedAreaConfig(BaseModel):
    """Fixed obstacle on the floor."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str | None = None
    x: float = Field(..., ge=0)
    y: float = Field(..., ge=0)
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

    @property
    def display_name(self) -> str:
        return self.name or self.id


class GenerationConfigSchema(BaseModel):
    """Generation settings.

    Attributes:
        trials: Total number of trials (1 deterministic + randomized).
        top_n: Maximum number of ranked layouts to keep.
        seed: Random seed; set it to make every trial reproducible.
        deadline_seconds: Optional wall-clock budget for generation.
    """

    model_config = ConfigDict(extra="forbid")

    trials: int = Field(default=200, ge=1, le=10000)
    top_n: int = Field(default=10, ge=1, le=100)
    seed: int | None = None
    deadline_seconds: float | None = Field(default=None, ge=0)


class OutputConfig(BaseModel):
    """Export settings.

    Attributes:
        formats: Export format names (e.g. ["dxf", "json"]).
        output_dir: Directory for exported files.
        layout_index: 1-based index of the ranked layout to export.
        project_name: Base name for exported files.
    """

    model_config = ConfigDict(extra="forbid")

    formats: list[str] = Field(default_factory=list)
    output_dir: str | None = None
    layout_index: int = Field(default=1, ge=1)
    project_name: str = "floorplan"


class FloorPlanConfiguration(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    floor: FloorConfig
    units: Unit = Unit.METERS
    rooms: list[RoomTypeConfig] = Field(default_factory=list)
    blocked_areas: list[BlockedAreaConfig] = Field(default_factory=list)
    generation: GenerationConfigSchema = Field(default_factory=GenerationConfigSchema)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v
