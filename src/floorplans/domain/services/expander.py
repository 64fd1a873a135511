"""Expansion of room types into individually placeable room instances."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from floorplans.domain.value_objects import Dimension, RoomInstance, RoomType

logger = logging.getLogger(__name__)


def instance_quantity(room_type: RoomType, floor: Dimension) -> int:
    """Number of instances to attempt for a room type.

    An explicit positive quantity is used as-is. Otherwise the quantity is
    the number of copies whose combined area fits the floor area, which is
    only an upper bound on placement attempts.

    Args:
        room_type: Room type to expand. Must have a positive area.
        floor: Floor dimensions.

    Returns:
        Number of instances to create (may be zero).
    """
    if room_type.has_explicit_quantity:
        return int(room_type.quantity)  # type: ignore[arg-type]
    return max(0, math.floor(floor.area / room_type.area))


def expand_room_instances(
    room_types: Sequence[RoomType],
    floor: Dimension,
) -> list[RoomInstance]:
    """Expand room types into a flat list of room instances.

    Room types with a non-positive width or height are skipped without
    error, even when their area is positive; they can never be placed.

    Args:
        room_types: Room type definitions in caller order.
        floor: Floor dimensions, used for auto-fit quantities.

    Returns:
        Instances grouped by room type in input order, ordinals ascending.
    """
    instances: list[RoomInstance] = []
    for room_type in room_types:
        if not room_type.dimensions.is_positive:
            logger.debug(
                "Skipping room type '%s': non-positive dimensions (%sx%s)",
                room_type.id,
                room_type.dimensions.width,
                room_type.dimensions.height,
            )
            continue

        quantity = instance_quantity(room_type, floor)
        instances.extend(
            RoomInstance(room_type=room_type, ordinal=i) for i in range(quantity)
        )

    logger.debug(
        "Expanded %d room types into %d instances", len(room_types), len(instances)
    )
    return instances
