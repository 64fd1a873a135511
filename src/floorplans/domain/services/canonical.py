"""Canonical layout signatures and duplicate removal.

Two trials describe the same layout when they occupy the same positions
with the same room types, regardless of which physical instance of a type
landed in which slot. The signature groups placements by their room-type
back-reference and sorts positions within each group, so it is invariant
under permuting same-type rooms.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable, Sequence

from floorplans.domain.value_objects import Layout, LayoutSignature, PlacedRoom

logger = logging.getLogger(__name__)


def layout_signature(placed_rooms: Sequence[PlacedRoom]) -> LayoutSignature:
    """Compute the canonical signature of a set of placements.

    Args:
        placed_rooms: Placed rooms of one trial, in any order.

    Returns:
        Tuple of (room type id, sorted (x, y, rotated) tuples) pairs,
        ordered by room type id. Empty for an empty trial.
    """
    groups: dict[str, list[tuple[int, int, bool]]] = defaultdict(list)
    for room in placed_rooms:
        groups[room.type_id].append((room.x, room.y, room.rotated))

    return tuple(
        (type_id, tuple(sorted(groups[type_id]))) for type_id in sorted(groups)
    )


class LayoutCanonicalizer:
    """Collapses duplicate trials into unique, scored layouts.

    Attributes:
        required_type_ids: Room types a layout must contain to count as
            covering the required set.
    """

    def __init__(self, required_type_ids: Iterable[str] = ()) -> None:
        self.required_type_ids = frozenset(required_type_ids)

    def to_layout(self, placed_rooms: Sequence[PlacedRoom]) -> Layout:
        """Materialize an immutable Layout from a completed trial."""
        rooms = tuple(placed_rooms)
        type_ids = {room.type_id for room in rooms}
        return Layout(
            placed_rooms=rooms,
            score=sum(room.area for room in rooms),
            diversity=len(type_ids),
            signature=layout_signature(rooms),
            covers_required=self.required_type_ids <= type_ids,
        )

    def deduplicate(self, trials: Iterable[Sequence[PlacedRoom]]) -> list[Layout]:
        """Keep the first trial for every distinct signature.

        Args:
            trials: Placed-room sequences in discovery order. The
                deterministic trial comes first and therefore wins ties.

        Returns:
            Unique layouts in discovery order.
        """
        seen: set[LayoutSignature] = set()
        layouts: list[Layout] = []
        duplicates = 0
        for placed_rooms in trials:
            if not placed_rooms:
                continue
            layout = self.to_layout(placed_rooms)
            if layout.signature in seen:
                duplicates += 1
                continue
            seen.add(layout.signature)
            layouts.append(layout)

        logger.debug(
            "Kept %d unique layouts, discarded %d duplicates", len(layouts), duplicates
        )
        return layouts
