"""Multi-trial exploration of room placements.

One deterministic greedy trial establishes a reproducible baseline; the
remaining trials shuffle the placement order and the candidate positions
to explore different packings. Trials are independent: each starts from a
floor that is occupied only by the blocked areas.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Callable, Sequence

from floorplans.domain.services.placement import PlacementSearch, SearchMode
from floorplans.domain.value_objects import (
    BlockedArea,
    Dimension,
    PlacedRoom,
    Rect,
    RoomInstance,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationSettings:
    """Configuration for layout generation.

    Attributes:
        trials: Total number of trials, including the deterministic one.
        top_n: Maximum number of ranked layouts returned.
        seed: Seed for the random source. With a seed every trial is
            reproducible; without one only the deterministic trial is.
        deadline_seconds: Optional wall-clock budget for all trials.
    """

    trials: int = 200
    top_n: int = 10
    seed: int | None = None
    deadline_seconds: float | None = None

    def __post_init__(self) -> None:
        if self.trials < 1:
            raise ValueError("Trial count must be at least 1")
        if self.top_n < 1:
            raise ValueError("top_n must be at least 1")
        if self.deadline_seconds is not None and self.deadline_seconds < 0:
            raise ValueError("Deadline must be non-negative")


@dataclass
class TrialBatch:
    """Raw output of the orchestrator.

    Attributes:
        trials: Placed-room sequences of the trials that placed at least
            one room, in the order the trials ran.
        trials_run: Number of trials started.
        deadline_expired: True if the deadline cut generation short.
    """

    trials: list[tuple[PlacedRoom, ...]] = field(default_factory=list)
    trials_run: int = 0
    deadline_expired: bool = False


def greedy_order(instances: Sequence[RoomInstance]) -> list[RoomInstance]:
    """Placement order for the deterministic trial.

    The first instance of every room type comes first ("required"), largest
    area first, followed by all remaining instances, also largest first.
    Ties keep their input order.

    Args:
        instances: Expanded room instances.

    Returns:
        New list in greedy placement order.
    """
    required: list[RoomInstance] = []
    extra: list[RoomInstance] = []
    seen: set[str] = set()
    for instance in instances:
        if instance.type_id in seen:
            extra.append(instance)
        else:
            seen.add(instance.type_id)
            required.append(instance)

    return sorted(required, key=_area, reverse=True) + sorted(
        extra, key=_area, reverse=True
    )


def _area(instance: RoomInstance) -> float:
    return instance.area


class _Deadline:
    """Wall-clock budget checked between trials and placement attempts."""

    def __init__(self, seconds: float | None, clock: Callable[[], float]) -> None:
        self._clock = clock
        self._expires_at = None if seconds is None else clock() + seconds

    def expired(self) -> bool:
        return self._expires_at is not None and self._clock() >= self._expires_at


class TrialOrchestrator:
    """Runs the deterministic trial followed by randomized trials.

    Attributes:
        settings: Generation settings (trial count, seed, deadline).
        rng: Random source shared by instance shuffling and placement search.
        search: Placement search driven by each trial.
    """

    def __init__(
        self,
        settings: GenerationSettings | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            settings: Generation settings. Defaults to GenerationSettings().
            rng: Random source. If omitted, one is created from
                ``settings.seed``.
            clock: Monotonic clock in seconds, used for the deadline.
        """
        self.settings = settings or GenerationSettings()
        self.rng = rng or random.Random(self.settings.seed)
        self.search = PlacementSearch(self.rng)
        self._clock = clock

    def run(
        self,
        instances: Sequence[RoomInstance],
        floor: Dimension,
        blocked_areas: Sequence[BlockedArea],
    ) -> TrialBatch:
        """Run all trials.

        Args:
            instances: Expanded room instances.
            floor: Floor dimensions.
            blocked_areas: Fixed obstacles seeded into every trial.

        Returns:
            TrialBatch with the non-empty trials in execution order.
        """
        batch = TrialBatch()
        deadline = _Deadline(self.settings.deadline_seconds, self._clock)
        blocked = [area.rect for area in blocked_areas]

        for index in range(self.settings.trials):
            if deadline.expired():
                batch.deadline_expired = True
                break

            if index == 0:
                order = greedy_order(instances)
                mode = SearchMode.DETERMINISTIC
            else:
                order = list(instances)
                self.rng.shuffle(order)
                mode = SearchMode.RANDOMIZED

            placed, cut_short = self._run_trial(order, floor, blocked, mode, deadline)
            batch.trials_run += 1
            if placed:
                batch.trials.append(placed)
            logger.debug("Trial %d (%s): placed %d rooms", index + 1, mode.value, len(placed))

            if cut_short:
                batch.deadline_expired = True
                break

        if batch.deadline_expired:
            logger.info(
                "Deadline expired after %d of %d trials",
                batch.trials_run,
                self.settings.trials,
            )
        return batch

    def _run_trial(
        self,
        order: Sequence[RoomInstance],
        floor: Dimension,
        blocked: list[Rect],
        mode: SearchMode,
        deadline: _Deadline,
    ) -> tuple[tuple[PlacedRoom, ...], bool]:
        """Place instances sequentially, accumulating occupancy.

        Returns:
            Tuple of (placed rooms, True if the deadline interrupted the trial).
        """
        occupied = list(blocked)
        placed: list[PlacedRoom] = []
        for instance in order:
            if deadline.expired():
                return tuple(placed), True
            placement = self.search.find_placement(instance, floor, occupied, mode)
            if placement is not None:
                placed.append(placement)
                occupied.append(placement.rect)
        return tuple(placed), False
