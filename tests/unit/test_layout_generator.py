"""Tests for the end-to-end layout generation pipeline."""

from __future__ import annotations

import random

import pytest

from floorplans.domain import (
    BlockedArea,
    Dimension,
    GenerationSettings,
    LayoutGenerator,
    RoomType,
)
from floorplans.domain.value_objects import Layout


def assert_valid_layout(layout: Layout, floor: Dimension, blocked: list[BlockedArea]) -> None:
    rects = [room.rect for room in layout.placed_rooms]
    for i, rect in enumerate(rects):
        assert rect.x >= 0 and rect.y >= 0
        assert rect.right <= floor.width and rect.top <= floor.height
        for area in blocked:
            assert not rect.overlaps(area.rect)
        for other in rects[i + 1 :]:
            assert not rect.overlaps(other)


# =============================================================================
# Scenarios
# =============================================================================


class TestScenarios:
    """Reference scenarios."""

    def test_single_room_single_trial(self, floor: Dimension, bedroom: RoomType) -> None:
        """One 4x5 room on a 10x10 floor: one layout, room at the origin."""
        result = LayoutGenerator(GenerationSettings(trials=1)).generate(floor, [bedroom])

        assert len(result.layouts) == 1
        layout = result.layouts[0]
        assert layout.room_count == 1
        room = layout.placed_rooms[0]
        assert (room.x, room.y, room.rotated) == (0, 0, False)
        assert layout.score == 20

    def test_single_room_best_layout_is_greedy(self, floor: Dimension, bedroom: RoomType) -> None:
        """Randomized trials tie with the greedy layout, which keeps first place."""
        result = LayoutGenerator(GenerationSettings(seed=3)).generate(floor, [bedroom])

        assert 1 <= len(result.layouts) <= 10
        best = result.best
        assert best is not None
        assert (best.placed_rooms[0].x, best.placed_rooms[0].y) == (0, 0)
        assert not best.placed_rooms[0].rotated
        assert best.score == 20

    def test_corridor_is_never_covered(
        self, floor: Dimension, bedroom: RoomType, corridor: BlockedArea
    ) -> None:
        result = LayoutGenerator(GenerationSettings(seed=21)).generate(
            floor, [bedroom], [corridor]
        )

        assert result.has_layouts
        for layout in result.layouts:
            for room in layout.placed_rooms:
                assert room.rect.top <= 4 or room.y >= 6

    def test_room_larger_than_floor_yields_no_layouts(self, floor: Dimension) -> None:
        huge = RoomType(id="hall", name="Hall", dimensions=Dimension(11, 12), quantity=1)
        result = LayoutGenerator(GenerationSettings(trials=20, seed=1)).generate(floor, [huge])

        assert result.layouts == ()
        assert not result.has_layouts
        assert result.best is None
        assert result.trials_with_rooms == 0

    def test_top_layout_covers_every_room_type(
        self, floor: Dimension, bathroom: RoomType
    ) -> None:
        bedroom = RoomType(id="bed", name="Bedroom", dimensions=Dimension(4, 5))
        result = LayoutGenerator(GenerationSettings(seed=5)).generate(floor, [bedroom, bathroom])

        best = result.best
        assert best is not None
        assert best.covers_required
        assert best.type_ids == frozenset({"bed", "bath"})


# =============================================================================
# Invariants
# =============================================================================


class TestInvariants:
    """Properties that hold for every returned layout."""

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_layouts_are_valid(
        self,
        seed: int,
        floor: Dimension,
        bedroom: RoomType,
        bathroom: RoomType,
        corridor: BlockedArea,
    ) -> None:
        result = LayoutGenerator(GenerationSettings(trials=50, seed=seed)).generate(
            floor, [bedroom, bathroom], [corridor]
        )
        for layout in result.layouts:
            assert_valid_layout(layout, floor, [corridor])

    def test_signatures_are_unique(
        self, floor: Dimension, bedroom: RoomType, bathroom: RoomType
    ) -> None:
        result = LayoutGenerator(GenerationSettings(trials=60, top_n=50, seed=9)).generate(
            floor, [bedroom, bathroom]
        )
        signatures = [layout.signature for layout in result.layouts]
        assert len(signatures) == len(set(signatures))

    def test_layouts_sorted_by_rank(
        self, floor: Dimension, bedroom: RoomType, bathroom: RoomType
    ) -> None:
        result = LayoutGenerator(GenerationSettings(trials=60, top_n=20, seed=10)).generate(
            floor, [bedroom, bathroom]
        )
        keys = [
            (l.covers_required, l.room_count, l.diversity, l.score) for l in result.layouts
        ]
        assert keys == sorted(keys, reverse=True)

    def test_at_most_top_n(self, floor: Dimension, bathroom: RoomType) -> None:
        result = LayoutGenerator(GenerationSettings(trials=50, top_n=3, seed=2)).generate(
            floor, [bathroom]
        )
        assert len(result.layouts) <= 3
        assert result.unique_layouts >= len(result.layouts)


# =============================================================================
# Reproducibility and statistics
# =============================================================================


class TestReproducibility:
    """Tests for seeded and deterministic generation."""

    def test_same_seed_same_layouts(
        self, floor: Dimension, bedroom: RoomType, bathroom: RoomType
    ) -> None:
        settings = GenerationSettings(trials=40, seed=1234)
        first = LayoutGenerator(settings).generate(floor, [bedroom, bathroom])
        second = LayoutGenerator(settings).generate(floor, [bedroom, bathroom])
        assert first.layouts == second.layouts

    def test_generator_is_reusable(
        self, floor: Dimension, bedroom: RoomType, bathroom: RoomType
    ) -> None:
        """A seeded generator starts from the seed on every call."""
        generator = LayoutGenerator(GenerationSettings(trials=40, seed=8))
        assert generator.generate(floor, [bedroom, bathroom]).layouts == generator.generate(
            floor, [bedroom, bathroom]
        ).layouts

    def test_deterministic_trial_without_seed(
        self, floor: Dimension, bedroom: RoomType, bathroom: RoomType
    ) -> None:
        settings = GenerationSettings(trials=1)
        first = LayoutGenerator(settings).generate(floor, [bedroom, bathroom])
        second = LayoutGenerator(settings).generate(floor, [bedroom, bathroom])
        assert first.layouts == second.layouts

    def test_injected_rng(self, floor: Dimension, bathroom: RoomType) -> None:
        settings = GenerationSettings(trials=30)
        first = LayoutGenerator(settings, rng=random.Random(5)).generate(floor, [bathroom])
        second = LayoutGenerator(settings, rng=random.Random(5)).generate(floor, [bathroom])
        assert first.layouts == second.layouts


class TestGenerationStatistics:
    """Tests for GenerationResult statistics."""

    def test_counts(self, floor: Dimension, bedroom: RoomType) -> None:
        result = LayoutGenerator(GenerationSettings(trials=15, seed=4)).generate(floor, [bedroom])
        assert result.instance_count == 1
        assert result.trials_run == 15
        assert result.trials_with_rooms == 15
        assert not result.deadline_expired

    def test_zero_deadline(self, floor: Dimension, bedroom: RoomType) -> None:
        result = LayoutGenerator(
            GenerationSettings(trials=15, deadline_seconds=0), clock=lambda: 0.0
        ).generate(floor, [bedroom])
        assert result.deadline_expired
        assert result.trials_run == 0
        assert result.layouts == ()

    def test_empty_room_list(self, floor: Dimension) -> None:
        result = LayoutGenerator(GenerationSettings(trials=5)).generate(floor, [])
        assert result.layouts == ()
        assert result.instance_count == 0

    def test_negative_room_dimensions_are_never_placed(
        self, floor: Dimension, bedroom: RoomType
    ) -> None:
        odd = RoomType(id="odd", name="Odd", dimensions=Dimension(-2, -3), quantity=2)
        result = LayoutGenerator(GenerationSettings(trials=5, seed=1)).generate(
            floor, [odd, bedroom]
        )

        assert result.instance_count == 1
        for layout in result.layouts:
            assert "odd" not in layout.type_ids
            assert_valid_layout(layout, floor, [])
