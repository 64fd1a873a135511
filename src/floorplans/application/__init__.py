"""Application layer - use cases and orchestration."""

from .commands import GenerateLayoutsCommand
from .dtos import NO_LAYOUTS_MESSAGE, FloorPlanOutput

__all__ = [
    "NO_LAYOUTS_MESSAGE",
    "FloorPlanOutput",
    "GenerateLayoutsCommand",
]
