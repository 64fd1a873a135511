"""Application commands (use cases) for floor-plan generation."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from floorplans.application.config import (
    FloorPlanConfiguration,
    config_to_blocked_areas,
    config_to_floor,
    config_to_generation_settings,
    config_to_room_types,
    validate_config,
)
from floorplans.domain import (
    BlockedArea,
    Dimension,
    GenerationSettings,
    LayoutGenerator,
    RoomType,
    Unit,
)

from .dtos import FloorPlanOutput

logger = logging.getLogger(__name__)


class GenerateLayoutsCommand:
    """Command to generate ranked floor-plan layouts.

    Attributes:
        generator_factory: Builds a LayoutGenerator from settings. Tests
            inject a factory with a fixed random source or clock.
    """

    def __init__(
        self,
        generator_factory: Callable[[GenerationSettings], LayoutGenerator] | None = None,
    ) -> None:
        self.generator_factory = generator_factory or LayoutGenerator

    def execute(
        self,
        floor: Dimension,
        room_types: Sequence[RoomType],
        blocked_areas: Sequence[BlockedArea] = (),
        settings: GenerationSettings | None = None,
        units: Unit = Unit.METERS,
    ) -> FloorPlanOutput:
        """Execute layout generation.

        Args:
            floor: Floor dimensions.
            room_types: Room types in caller order.
            blocked_areas: Fixed obstacles.
            settings: Generation settings; defaults to GenerationSettings().
            units: Display unit carried to exporters.

        Returns:
            FloorPlanOutput. When no layout could be produced the output
            carries an informational message instead of raising.
        """
        output = FloorPlanOutput(
            floor=floor,
            units=units,
            room_types=list(room_types),
            blocked_areas=list(blocked_areas),
        )

        if not floor.is_positive:
            output.errors.append(
                f"Floor dimensions must be positive (got {floor.width}x{floor.height})"
            )
            return output

        generator = self.generator_factory(settings or GenerationSettings())
        output.result = generator.generate(floor, room_types, blocked_areas)

        if not output.has_layouts:
            logger.info("No valid layouts produced for %d room types", len(room_types))
        return output

    def execute_config(self, config: FloorPlanConfiguration) -> FloorPlanOutput:
        """Execute layout generation for a loaded configuration.

        The configuration is cross-validated first; validation errors (not
        warnings) are returned on the output and generation is skipped. The
        configured output layout index (1-based) becomes the selected
        layout of the returned output.
        """
        validation = validate_config(config)
        if not validation.is_valid:
            return FloorPlanOutput(
                floor=config_to_floor(config),
                units=config.units,
                room_types=config_to_room_types(config),
                blocked_areas=config_to_blocked_areas(config),
                errors=[f"{e.path}: {e.message}" for e in validation.errors],
            )

        output = self.execute(
            floor=config_to_floor(config),
            room_types=config_to_room_types(config),
            blocked_areas=config_to_blocked_areas(config),
            settings=config_to_generation_settings(config.generation),
            units=config.units,
        )
        output.selected_index = config.output.layout_index - 1
        return output
