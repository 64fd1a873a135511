"""Domain layer - core layout generation logic."""

from .services import (
    GenerationResult,
    GenerationSettings,
    LayoutCanonicalizer,
    LayoutGenerator,
    LayoutRanker,
    PlacementSearch,
    SearchMode,
    TrialOrchestrator,
    expand_room_instances,
)
from .value_objects import (
    BlockedArea,
    Dimension,
    Layout,
    PlacedRoom,
    Rect,
    RoomInstance,
    RoomType,
    Unit,
)

__all__ = [
    "BlockedArea",
    "Dimension",
    "GenerationResult",
    "GenerationSettings",
    "Layout",
    "LayoutCanonicalizer",
    "LayoutGenerator",
    "LayoutRanker",
    "PlacedRoom",
    "PlacementSearch",
    "Rect",
    "RoomInstance",
    "RoomType",
    "SearchMode",
    "TrialOrchestrator",
    "Unit",
    "expand_room_instances",
]
