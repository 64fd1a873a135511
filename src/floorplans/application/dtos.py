"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from floorplans.domain import (
    BlockedArea,
    Dimension,
    GenerationResult,
    Layout,
    RoomType,
    Unit,
)

NO_LAYOUTS_MESSAGE = (
    "No valid layouts could be generated. Check that the rooms fit the floor "
    "and are not fully obstructed by blocked areas."
)


@dataclass
class FloorPlanOutput:
    """Output DTO consumed by formatters, exporters and the REST layer.

    Carries the generation inputs alongside the ranked layouts so that an
    exporter can serialize a chosen layout together with the floor, room
    type and blocked area definitions it was generated from.

    Attributes:
        floor: Floor dimensions.
        units: Display unit label.
        room_types: Room type definitions in caller order.
        blocked_areas: Fixed obstacles.
        result: Generation result, or None if generation did not run.
        selected_index: 0-based index of the layout chosen for export.
        errors: Input errors that prevented generation.
    """

    floor: Dimension
    units: Unit
    room_types: list[RoomType]
    blocked_areas: list[BlockedArea]
    result: GenerationResult | None = None
    selected_index: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def layouts(self) -> tuple[Layout, ...]:
        return self.result.layouts if self.result is not None else ()

    @property
    def has_layouts(self) -> bool:
        return bool(self.layouts)

    @property
    def message(self) -> str | None:
        """Informational message for the user, if any."""
        if self.errors:
            return "; ".join(self.errors)
        if not self.has_layouts:
            return NO_LAYOUTS_MESSAGE
        return None

    @property
    def selected_layout(self) -> Layout | None:
        """The layout chosen for export, or None if out of range."""
        if 0 <= self.selected_index < len(self.layouts):
            return self.layouts[self.selected_index]
        return None

    def with_selection(self, index: int) -> FloorPlanOutput:
        """Return a copy of this output with a different selected layout."""
        return FloorPlanOutput(
            floor=self.floor,
            units=self.units,
            room_types=self.room_types,
            blocked_areas=self.blocked_areas,
            result=self.result,
            selected_index=index,
            errors=self.errors,
        )
