"""FastAPI REST API for floor-plan generation.

This module provides a REST API for generating ranked layouts, validating
configurations, and exporting a chosen layout to DXF, JSON or SVG.

Usage:
    uvicorn floorplans.web:app --reload
"""

from floorplans.web.app import app, create_app

__all__ = ["app", "create_app"]
