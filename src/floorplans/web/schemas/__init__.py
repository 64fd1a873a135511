"""Pydantic schemas for the REST API."""

from floorplans.web.schemas.common import FloorSchema, PlacedRoomSchema
from floorplans.web.schemas.requests import (
    ConfigValidateRequest,
    ExportRequest,
    GenerateFromConfigRequest,
)
from floorplans.web.schemas.responses import (
    ErrorResponseSchema,
    ExportFormatsSchema,
    GenerateResponseSchema,
    GenerationStatsSchema,
    LayoutSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "FloorSchema",
    "PlacedRoomSchema",
    # Requests
    "ConfigValidateRequest",
    "ExportRequest",
    "GenerateFromConfigRequest",
    # Responses
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "GenerateResponseSchema",
    "GenerationStatsSchema",
    "LayoutSchema",
    "ValidationResultSchema",
]
