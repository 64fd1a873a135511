"""Layout generation pipeline.

Wires the stages together: room types are expanded into instances, the
orchestrator runs the trials, duplicates are collapsed into unique layouts
and the ranker returns the best ones.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, Sequence

from floorplans.domain.services.canonical import LayoutCanonicalizer
from floorplans.domain.services.expander import expand_room_instances
from floorplans.domain.services.orchestrator import GenerationSettings, TrialOrchestrator
from floorplans.domain.services.ranking import LayoutRanker
from floorplans.domain.value_objects import BlockedArea, Dimension, Layout, RoomType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    """Ranked layouts together with run statistics.

    Attributes:
        layouts: Up to ``top_n`` layouts, best first.
        instance_count: Number of room instances that were attempted.
        trials_run: Number of trials started.
        trials_with_rooms: Trials that placed at least one room.
        unique_layouts: Distinct layouts before truncation to ``top_n``.
        deadline_expired: True if the deadline stopped generation early.
    """

    layouts: tuple[Layout, ...]
    instance_count: int
    trials_run: int
    trials_with_rooms: int
    unique_layouts: int
    deadline_expired: bool = False

    @property
    def has_layouts(self) -> bool:
        return bool(self.layouts)

    @property
    def best(self) -> Layout | None:
        return self.layouts[0] if self.layouts else None


class LayoutGenerator:
    """Generates ranked candidate floor-plan layouts.

    Example:
        generator = LayoutGenerator(GenerationSettings(seed=7))
        result = generator.generate(
            Dimension(10, 10),
            [RoomType(id="bed", name="Bedroom", dimensions=Dimension(4, 5))],
            [],
        )
    """

    def __init__(
        self,
        settings: GenerationSettings | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.settings = settings or GenerationSettings()
        self._rng = rng
        self._clock = clock

    def generate(
        self,
        floor: Dimension,
        room_types: Sequence[RoomType],
        blocked_areas: Sequence[BlockedArea] = (),
    ) -> GenerationResult:
        """Run the full pipeline.

        Args:
            floor: Floor dimensions.
            room_types: Room types in caller order. Every supplied type is
                treated as required for ranking.
            blocked_areas: Fixed obstacles.

        Returns:
            GenerationResult. An empty ``layouts`` tuple means no trial
            could place any room; this is not an error.
        """
        instances = expand_room_instances(room_types, floor)

        # A fresh random source per call unless one was injected, so a
        # seeded generator reproduces the same layouts on every call.
        rng = self._rng or random.Random(self.settings.seed)
        orchestrator = TrialOrchestrator(self.settings, rng=rng, clock=self._clock)
        batch = orchestrator.run(instances, floor, blocked_areas)

        canonicalizer = LayoutCanonicalizer(room_type.id for room_type in room_types)
        unique = canonicalizer.deduplicate(batch.trials)
        ranked = LayoutRanker(self.settings.top_n).rank(unique)

        logger.info(
            "Generated %d unique layouts from %d trials (%d instances), returning %d",
            len(unique),
            batch.trials_run,
            len(instances),
            len(ranked),
        )

        return GenerationResult(
            layouts=tuple(ranked),
            instance_count=len(instances),
            trials_run=batch.trials_run,
            trials_with_rooms=len(batch.trials),
            unique_layouts=len(unique),
            deadline_expired=batch.deadline_expired,
        )
