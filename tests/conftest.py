"""Pytest configuration and shared fixtures for floor-plan tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from floorplans.application import FloorPlanOutput, GenerateLayoutsCommand
from floorplans.domain import (
    BlockedArea,
    Dimension,
    GenerationResult,
    GenerationSettings,
    Layout,
    PlacedRoom,
    RoomInstance,
    RoomType,
    Unit,
)
from floorplans.domain.services.canonical import layout_signature


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def floor() -> Dimension:
    """A 10x10 floor."""
    return Dimension(10, 10)


@pytest.fixture
def bedroom() -> RoomType:
    """A 4x5 bedroom type with a single instance."""
    return RoomType(
        id="bed", name="Bedroom", dimensions=Dimension(4, 5), color="#4f8ef7", quantity=1
    )


@pytest.fixture
def bathroom() -> RoomType:
    """A 2x3 bathroom type with auto-fit quantity."""
    return RoomType(id="bath", name="Bathroom", dimensions=Dimension(2, 3), color="#f7b24f")


@pytest.fixture
def corridor() -> BlockedArea:
    """Full-width corridor across a 10x10 floor from y=4 to y=6."""
    return BlockedArea(id="hall", name="Hallway", x=0, y=4, dimensions=Dimension(10, 2))


@pytest.fixture
def seeded_settings() -> GenerationSettings:
    """Small, reproducible generation settings."""
    return GenerationSettings(trials=40, top_n=5, seed=1234)


@pytest.fixture
def generated_output(
    floor: Dimension,
    bedroom: RoomType,
    bathroom: RoomType,
    corridor: BlockedArea,
    seeded_settings: GenerationSettings,
) -> FloorPlanOutput:
    """Output of a seeded generation run with two room types and a corridor."""
    return GenerateLayoutsCommand().execute(
        floor,
        [bedroom, bathroom],
        [corridor],
        settings=seeded_settings,
        units=Unit.METERS,
    )


# =============================================================================
# Configuration fixtures
# =============================================================================


@pytest.fixture
def config_data() -> dict[str, Any]:
    """A valid configuration dictionary."""
    return {
        "schema_version": "1.0",
        "floor": {"width": 10, "height": 10},
        "units": "m",
        "rooms": [
            {"id": "bed", "name": "Bedroom", "width": 4, "height": 5,
             "color": "#4f8ef7", "quantity": 1},
            {"id": "bath", "name": "Bathroom", "width": 2, "height": 3,
             "color": "#f7b24f"},
        ],
        "blocked_areas": [
            {"id": "hall", "name": "Hallway", "x": 0, "y": 4, "width": 10, "height": 2},
        ],
        "generation": {"trials": 30, "top_n": 5, "seed": 7},
    }


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[Any], Path]:
    """Write a configuration (dict or raw text) to a temp file and return its path."""

    def _write(data: Any, name: str = "floorplan.json") -> Path:
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data)
        else:
            path.write_text(json.dumps(data))
        return path

    return _write


@pytest.fixture
def manual_output(
    floor: Dimension, bedroom: RoomType, bathroom: RoomType, corridor: BlockedArea
) -> FloorPlanOutput:
    """Output with one hand-built layout: a rotated bedroom below the
    corridor and one bathroom above it."""
    placed = (
        PlacedRoom(RoomInstance(bedroom, 0), x=0, y=0, rotated=True),
        PlacedRoom(RoomInstance(bathroom, 0), x=0, y=6),
    )
    layout = Layout(
        placed_rooms=placed,
        score=26,
        diversity=2,
        signature=layout_signature(placed),
        covers_required=True,
    )
    result = GenerationResult(
        layouts=(layout,),
        instance_count=2,
        trials_run=1,
        trials_with_rooms=1,
        unique_layouts=1,
    )
    return FloorPlanOutput(
        floor=floor,
        units=Unit.METERS,
        room_types=[bedroom, bathroom],
        blocked_areas=[corridor],
        result=result,
    )
