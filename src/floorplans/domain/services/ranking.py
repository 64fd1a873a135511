"""Multi-criteria ranking of unique layouts."""

from __future__ import annotations

from typing import Sequence

from floorplans.domain.value_objects import Layout

DEFAULT_TOP_N = 10


def rank_key(layout: Layout) -> tuple[bool, int, int, float]:
    """Sort key, compared in strict priority order.

    1. covers every caller-supplied room type
    2. number of placed rooms
    3. diversity (distinct room types)
    4. score (total placed area)
    """
    return (layout.covers_required, layout.room_count, layout.diversity, layout.score)


class LayoutRanker:
    """Orders layouts best-first and keeps the top entries."""

    def __init__(self, top_n: int = DEFAULT_TOP_N) -> None:
        if top_n < 1:
            raise ValueError("top_n must be at least 1")
        self.top_n = top_n

    def rank(self, layouts: Sequence[Layout]) -> list[Layout]:
        """Sort layouts descending by rank_key.

        The sort is stable, so layouts that tie on every criterion keep
        their discovery order.

        Args:
            layouts: Unique layouts in discovery order.

        Returns:
            At most ``top_n`` layouts, best first.
        """
        ranked = sorted(layouts, key=rank_key, reverse=True)
        return ranked[: self.top_n]
