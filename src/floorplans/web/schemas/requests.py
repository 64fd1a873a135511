"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class GenerateFromConfigRequest(BaseModel):
    """Request for generating layouts from a full configuration."""

    config: dict[str, Any] = Field(..., description="Full floor-plan configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Floor-plan configuration JSON")


class ExportRequest(BaseModel):
    """Request for exporting one ranked layout to a specific format."""

    config: dict[str, Any] = Field(..., description="Full floor-plan configuration JSON")
    layout_index: int | None = Field(
        default=None,
        ge=1,
        description="1-based rank of the layout to export; defaults to output.layout_index",
    )
