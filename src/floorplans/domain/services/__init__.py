"""Domain services for layout generation."""

from .canonical import LayoutCanonicalizer, layout_signature
from .expander import expand_room_instances, instance_quantity
from .generator import GenerationResult, LayoutGenerator
from .orchestrator import GenerationSettings, TrialBatch, TrialOrchestrator, greedy_order
from .placement import PlacementSearch, SearchMode, collides
from .ranking import DEFAULT_TOP_N, LayoutRanker, rank_key

__all__ = [
    "DEFAULT_TOP_N",
    "GenerationResult",
    "GenerationSettings",
    "LayoutCanonicalizer",
    "LayoutGenerator",
    "LayoutRanker",
    "PlacementSearch",
    "SearchMode",
    "TrialBatch",
    "TrialOrchestrator",
    "collides",
    "expand_room_instances",
    "greedy_order",
    "instance_quantity",
    "layout_signature",
    "rank_key",
]
