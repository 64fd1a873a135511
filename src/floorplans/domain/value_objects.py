"""Value objects for the floor-plan domain.

All value objects are frozen dataclasses so they are hashable and can be
shared freely between trials without defensive copies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Unit(str, Enum):
    """Display unit for floor and room dimensions.

    The generator itself is unit-agnostic; only exporters and formatters
    use the unit label.
    """

    METERS = "m"
    CENTIMETERS = "cm"
    MILLIMETERS = "mm"
    FEET = "ft"
    INCHES = "in"


@dataclass(frozen=True)
class Dimension:
    """Width/height pair.

    Non-positive values are allowed so that malformed room types can be
    carried through the pipeline and filtered at expansion time.
    """

    width: float
    height: float

    @property
    def area(self) -> float:
        """Area (width x height)."""
        return self.width * self.height

    @property
    def is_positive(self) -> bool:
        """True if both width and height are strictly positive."""
        return self.width > 0 and self.height > 0

    def swapped(self) -> Dimension:
        """Return the dimension rotated by 90 degrees."""
        return Dimension(width=self.height, height=self.width)

    def fits_within(self, other: Dimension) -> bool:
        """Check whether this dimension fits inside ``other`` unrotated."""
        return self.width <= other.width and self.height <= other.height


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle, origin at its lower-left corner."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    def overlaps(self, other: Rect) -> bool:
        """Check strict overlap on both axes.

        Rectangles that only share an edge or a corner do not overlap.

        Args:
            other: Rectangle to test against.

        Returns:
            True if the interiors of the two rectangles intersect.
        """
        return (
            self.x < other.right
            and self.right > other.x
            and self.y < other.top
            and self.top > other.y
        )

    def contains(self, other: Rect) -> bool:
        """Check whether ``other`` lies entirely within this rectangle."""
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.right <= self.right
            and other.top <= self.top
        )


@dataclass(frozen=True)
class RoomType:
    """A reusable room template.

    Attributes:
        id: Unique identifier of the room type.
        name: Display name.
        dimensions: Declared (unrotated) dimensions.
        color: Display color as a hex string (e.g. "#4f8ef7").
        quantity: Number of instances to attempt. None or a non-positive
            value means auto-fit (as many as the floor area allows).
    """

    id: str
    name: str
    dimensions: Dimension
    color: str = "#cccccc"
    quantity: int | None = None

    @property
    def area(self) -> float:
        return self.dimensions.area

    @property
    def has_explicit_quantity(self) -> bool:
        return self.quantity is not None and self.quantity > 0


@dataclass(frozen=True)
class RoomInstance:
    """One concrete, individually addressable unit of a room type.

    Attributes:
        room_type: The originating room type.
        ordinal: Zero-based index of this instance within its type.
    """

    room_type: RoomType
    ordinal: int

    @property
    def type_id(self) -> str:
        return self.room_type.id

    @property
    def instance_id(self) -> str:
        """Display identifier, e.g. "bed-0". Never parsed back."""
        return f"{self.room_type.id}-{self.ordinal}"

    @property
    def name(self) -> str:
        return self.room_type.name

    @property
    def color(self) -> str:
        return self.room_type.color

    @property
    def dimensions(self) -> Dimension:
        return self.room_type.dimensions

    @property
    def width(self) -> float:
        return self.room_type.dimensions.width

    @property
    def height(self) -> float:
        return self.room_type.dimensions.height

    @property
    def area(self) -> float:
        return self.room_type.area

    @property
    def is_square(self) -> bool:
        return self.width == self.height


@dataclass(frozen=True)
class BlockedArea:
    """Fixed rectangle on the floor that no room may cover."""

    id: str
    name: str
    x: float
    y: float
    dimensions: Dimension

    @property
    def rect(self) -> Rect:
        return Rect(
            x=self.x,
            y=self.y,
            width=self.dimensions.width,
            height=self.dimensions.height,
        )


@dataclass(frozen=True)
class PlacedRoom:
    """A room instance placed at a grid position.

    Attributes:
        instance: The room instance being placed.
        x: Horizontal grid position of the lower-left corner.
        y: Vertical grid position of the lower-left corner.
        rotated: True if the room is turned 90 degrees, swapping its
            effective width and height.
    """

    instance: RoomInstance
    x: int
    y: int
    rotated: bool = False

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError("Position coordinates must be non-negative")

    @property
    def effective_dimensions(self) -> Dimension:
        """Dimensions as placed (accounts for rotation)."""
        declared = self.instance.dimensions
        return declared.swapped() if self.rotated else declared

    @property
    def rect(self) -> Rect:
        """Effective footprint on the floor."""
        effective = self.effective_dimensions
        return Rect(x=self.x, y=self.y, width=effective.width, height=effective.height)

    @property
    def type_id(self) -> str:
        return self.instance.type_id

    @property
    def area(self) -> float:
        return self.instance.area


LayoutSignature = tuple[tuple[str, tuple[tuple[int, int, bool], ...]], ...]
"""Canonical signature: (type id, sorted (x, y, rotated) positions) pairs."""


@dataclass(frozen=True)
class Layout:
    """A unique, scored candidate layout.

    Attributes:
        placed_rooms: Placed rooms in placement order within their trial.
        score: Sum of the placed rooms' areas.
        diversity: Number of distinct room types represented.
        signature: Canonical signature used to detect duplicates.
        covers_required: True if every caller-supplied room type is placed
            at least once.
    """

    placed_rooms: tuple[PlacedRoom, ...]
    score: float
    diversity: int
    signature: LayoutSignature = ()
    covers_required: bool = False

    @property
    def room_count(self) -> int:
        return len(self.placed_rooms)

    @property
    def type_ids(self) -> frozenset[str]:
        """Distinct room-type ids represented in this layout."""
        return frozenset(room.type_id for room in self.placed_rooms)

    def rooms_of_type(self, type_id: str) -> tuple[PlacedRoom, ...]:
        return tuple(room for room in self.placed_rooms if room.type_id == type_id)


__all__ = [
    "BlockedArea",
    "Dimension",
    "Layout",
    "LayoutSignature",
    "PlacedRoom",
    "Rect",
    "RoomInstance",
    "RoomType",
    "Unit",
]
