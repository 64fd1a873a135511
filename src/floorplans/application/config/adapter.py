"""Conversion from configuration models to domain objects."""

from __future__ import annotations

from floorplans.application.config.schema import (
    BlockedAreaConfig,
    FloorPlanConfiguration,
    GenerationConfigSchema,
    RoomTypeConfig,
)
from floorplans.domain.services import GenerationSettings
from floorplans.domain.value_objects import BlockedArea, Dimension, RoomType


def config_to_floor(config: FloorPlanConfiguration) -> Dimension:
    return Dimension(width=config.floor.width, height=config.floor.height)


def room_config_to_room_type(room: RoomTypeConfig) -> RoomType:
    return RoomType(
        id=room.id,
        name=room.display_name,
        dimensions=Dimension(width=room.width, height=room.height),
        color=room.color,
        quantity=room.quantity,
    )


def blocked_config_to_blocked_area(area: BlockedAreaConfig) -> BlockedArea:
    return BlockedArea(
        id=area.id,
        name=area.display_name,
        x=area.x,
        y=area.y,
        dimensions=Dimension(width=area.width, height=area.height),
    )


def config_to_room_types(config: FloorPlanConfiguration) -> list[RoomType]:
    """Convert room configurations, preserving caller order."""
    return [room_config_to_room_type(room) for room in config.rooms]


def config_to_blocked_areas(config: FloorPlanConfiguration) -> list[BlockedArea]:
    return [blocked_config_to_blocked_area(area) for area in config.blocked_areas]


def config_to_generation_settings(
    generation: GenerationConfigSchema,
) -> GenerationSettings:
    """Convert the generation schema to domain GenerationSettings.

    Args:
        generation: Generation section of the configuration.

    Returns:
        GenerationSettings with the same trial count, top_n, seed and deadline.
    """
    return GenerationSettings(
        trials=generation.trials,
        top_n=generation.top_n,
        seed=generation.seed,
        deadline_seconds=generation.deadline_seconds,
    )
