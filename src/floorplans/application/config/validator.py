"""Validation structures and layout advisory checks.

Schema validation (types, ranges, unknown fields) is handled by pydantic
when the configuration is loaded. This module adds the cross-field checks
pydantic cannot express: unique identifiers, blocked areas inside the floor,
and advisories about room types that can never be placed.
"""

from dataclasses import dataclass, field
from typing import Any

from floorplans.application.config.schema import FloorPlanConfiguration
from floorplans.domain.value_objects import Dimension, Rect


@dataclass
class ValidationError:
    """Blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "rooms[0].id")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 valid, 1 errors, 2 valid with warnings."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_unique_ids(config: FloorPlanConfiguration) -> ValidationResult:
    """Room type ids and blocked area ids must each be unique."""
    result = ValidationResult()

    seen: set[str] = set()
    for i, room in enumerate(config.rooms):
        if room.id in seen:
            result.add_error(f"rooms[{i}].id", "Duplicate room type id", room.id)
        seen.add(room.id)

    seen = set()
    for i, area in enumerate(config.blocked_areas):
        if area.id in seen:
            result.add_error(f"blocked_areas[{i}].id", "Duplicate blocked area id", area.id)
        seen.add(area.id)

    return result


def check_blocked_areas(config: FloorPlanConfiguration) -> ValidationResult:
    """Blocked areas must lie on the floor; overlaps are reported as warnings."""
    result = ValidationResult()
    floor_rect = Rect(0, 0, config.floor.width, config.floor.height)

    rects: list[Rect] = []
    for i, area in enumerate(config.blocked_areas):
        rect = Rect(area.x, area.y, area.width, area.height)
        if not floor_rect.contains(rect):
            result.add_error(
                f"blocked_areas[{i}]",
                f"Blocked area '{area.id}' extends beyond the floor "
                f"({config.floor.width}x{config.floor.height})",
                {"x": area.x, "y": area.y, "width": area.width, "height": area.height},
            )
        for j, other in enumerate(rects):
            if rect.overlaps(other):
                result.add_warning(
                    f"blocked_areas[{i}]",
                    f"Blocked area '{area.id}' overlaps "
                    f"'{config.blocked_areas[j].id}'",
                    suggestion="Merge overlapping blocked areas into one",
                )
        rects.append(rect)

    return result


def check_room_advisories(config: FloorPlanConfiguration) -> ValidationResult:
    """Warn about room types that cannot be placed as requested."""
    result = ValidationResult()
    floor = Dimension(config.floor.width, config.floor.height)

    if not config.rooms:
        result.add_warning(
            "rooms",
            "No room types defined; no layouts can be generated",
            suggestion="Add at least one room type",
        )

    for i, room in enumerate(config.rooms):
        path = f"rooms[{i}]"
        dims = Dimension(room.width, room.height)
        if not dims.is_positive:
            result.add_warning(
                path,
                f"Room type '{room.id}' has non-positive dimensions "
                f"({room.width}x{room.height}) and will be skipped",
            )
            continue

        if not dims.fits_within(floor) and not dims.swapped().fits_within(floor):
            result.add_warning(
                path,
                f"Room type '{room.id}' ({room.width}x{room.height}) does not fit "
                f"the floor in either orientation",
                suggestion="Reduce the room dimensions or enlarge the floor",
            )
            continue

        if room.quantity is not None and room.quantity * dims.area > floor.area:
            result.add_warning(
                f"{path}.quantity",
                f"{room.quantity} x '{room.id}' need more area than the floor has; "
                f"not all instances can be placed",
            )

    return result


def validate_config(config: FloorPlanConfiguration) -> ValidationResult:
    """Run all cross-field checks on a loaded configuration.

    Args:
        config: Schema-valid configuration.

    Returns:
        ValidationResult with errors and warnings from every check.
    """
    result = ValidationResult()
    result.merge(check_unique_ids(config))
    result.merge(check_blocked_areas(config))
    result.merge(check_room_advisories(config))
    return result
