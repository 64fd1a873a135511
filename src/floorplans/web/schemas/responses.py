"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from floorplans.web.schemas.common import FloorSchema, PlacedRoomSchema


class LayoutSchema(BaseModel):
    """One ranked layout."""

    rank: int = Field(..., description="1-based rank")
    score: float = Field(..., description="Total placed room area")
    diversity: int = Field(..., description="Number of distinct room types placed")
    room_count: int = Field(..., description="Number of placed rooms")
    covers_all_room_types: bool = Field(
        ..., description="Whether every room type has at least one instance"
    )
    placed_rooms: list[PlacedRoomSchema] = Field(
        default_factory=list, description="Placed rooms"
    )


class GenerationStatsSchema(BaseModel):
    """Statistics about a generation run."""

    instance_count: int = Field(..., description="Room instances after expansion")
    trials_run: int = Field(..., description="Trials executed")
    trials_with_rooms: int = Field(..., description="Trials that placed at least one room")
    unique_layouts: int = Field(..., description="Distinct layouts before ranking")
    deadline_expired: bool = Field(default=False, description="Whether the deadline cut the run")


class GenerateResponseSchema(BaseModel):
    """Response for layout generation."""

    is_valid: bool = Field(..., description="Whether the inputs were accepted")
    errors: list[str] = Field(default_factory=list, description="Error messages")
    message: str | None = Field(default=None, description="Informational message")
    floor: FloorSchema = Field(..., description="Floor dimensions")
    units: str = Field(..., description="Unit label")
    layouts: list[LayoutSchema] = Field(default_factory=list, description="Ranked layouts")
    stats: GenerationStatsSchema | None = Field(default=None, description="Run statistics")


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ExportFormatsSchema(BaseModel):
    """Response for available export formats."""

    formats: list[str] = Field(..., description="Available format names")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
