"""Grid-based placement search for a single room instance.

The search enumerates every integer grid position at which the room fits
inside the floor, in its declared orientation and (for non-square rooms)
rotated by 90 degrees, and returns the first candidate that does not
collide with anything already occupying the floor.
"""

from __future__ import annotations

import logging
import math
import random
from enum import Enum
from typing import Iterator, Sequence

from floorplans.domain.value_objects import Dimension, PlacedRoom, Rect, RoomInstance

logger = logging.getLogger(__name__)


class SearchMode(str, Enum):
    """Order in which candidate placements are tried.

    - DETERMINISTIC: row-major (y, then x), unrotated before rotated
    - RANDOMIZED: uniformly shuffled candidate list
    """

    DETERMINISTIC = "deterministic"
    RANDOMIZED = "randomized"


Candidate = tuple[int, int, bool]


def collides(rect: Rect, occupied: Sequence[Rect]) -> bool:
    """Check whether ``rect`` strictly overlaps any occupied rectangle."""
    return any(rect.overlaps(other) for other in occupied)


def orientations(instance: RoomInstance, floor: Dimension) -> list[bool]:
    """Orientations in which the instance fits the floor.

    Args:
        instance: Room instance to place.
        floor: Floor dimensions.

    Returns:
        List of rotation flags, unrotated first. Rotated is only included
        for non-square rooms whose swapped dimensions fit.
    """
    result: list[bool] = []
    if instance.dimensions.fits_within(floor):
        result.append(False)
    if not instance.is_square and instance.dimensions.swapped().fits_within(floor):
        result.append(True)
    return result


def _positions(effective: Dimension, floor: Dimension) -> Iterator[tuple[int, int]]:
    """Yield integer grid positions in row-major order."""
    max_x = math.floor(floor.width - effective.width)
    max_y = math.floor(floor.height - effective.height)
    for y in range(max_y + 1):
        for x in range(max_x + 1):
            yield x, y


def candidate_placements(instance: RoomInstance, floor: Dimension) -> Iterator[Candidate]:
    """Yield every (x, y, rotated) candidate in deterministic order."""
    for rotated in orientations(instance, floor):
        effective = instance.dimensions.swapped() if rotated else instance.dimensions
        for x, y in _positions(effective, floor):
            yield x, y, rotated


class PlacementSearch:
    """Finds a collision-free grid position for one room instance.

    Attributes:
        rng: Random source used by the randomized search mode.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        """Initialize the search.

        Args:
            rng: Random source for RANDOMIZED mode. A fresh unseeded
                ``random.Random`` is used if omitted.
        """
        self.rng = rng or random.Random()

    def find_placement(
        self,
        instance: RoomInstance,
        floor: Dimension,
        occupied: Sequence[Rect],
        mode: SearchMode = SearchMode.DETERMINISTIC,
    ) -> PlacedRoom | None:
        """Place an instance on the floor.

        Args:
            instance: Room instance to place.
            floor: Floor dimensions.
            occupied: Rectangles already covering the floor (placed rooms
                and blocked areas).
            mode: Candidate ordering.

        Returns:
            The placed room, or None if no collision-free position exists.
            None is an expected outcome, not an error.
        """
        if mode is SearchMode.DETERMINISTIC:
            candidates: Iterator[Candidate] = candidate_placements(instance, floor)
        else:
            candidates = self._shuffled(list(candidate_placements(instance, floor)))

        for x, y, rotated in candidates:
            placement = PlacedRoom(instance=instance, x=x, y=y, rotated=rotated)
            if not collides(placement.rect, occupied):
                return placement

        logger.debug("No placement for '%s'", instance.instance_id)
        return None

    def _shuffled(self, candidates: list[Candidate]) -> Iterator[Candidate]:
        """Yield candidates in uniformly random order.

        Lazy Fisher-Yates: each step draws the next element of a uniform
        permutation of the full list.
        """
        n = len(candidates)
        for i in range(n):
            j = self.rng.randrange(i, n)
            candidates[i], candidates[j] = candidates[j], candidates[i]
            yield candidates[i]
