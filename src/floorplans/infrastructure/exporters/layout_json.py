"""JSON exporter for a chosen floor-plan layout.

The document contains everything needed to reproduce or re-render the
layout: metadata, the floor, the unit label, the input room type and
blocked area definitions, and the placed rooms with their positions,
declared and effective dimensions, rotation flags and colors.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from floorplans.infrastructure.exporters.base import ExporterRegistry, require_layout

if TYPE_CHECKING:
    from floorplans.application.dtos import FloorPlanOutput
    from floorplans.domain.value_objects import (
        BlockedArea,
        Layout,
        PlacedRoom,
        RoomType,
    )


logger = logging.getLogger(__name__)


APP_NAME = "floorplans"
SCHEMA_VERSION = "1.0"


@ExporterRegistry.register("json")
class JsonLayoutExporter:
    """Exports the selected layout with its inputs as JSON.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2, include_timestamp: bool = True) -> None:
        """Initialize the JSON exporter.

        Args:
            indent: JSON indentation level.
            include_timestamp: Whether to write the export time into the
                metadata block. Disable for byte-stable output.
        """
        self.indent = indent
        self.include_timestamp = include_timestamp

    def export(self, output: FloorPlanOutput, path: Path) -> None:
        content = self.export_string(output)
        path.write_text(content, encoding="utf-8")
        logger.info(f"Exported layout JSON to {path}")

    def export_string(self, output: FloorPlanOutput) -> str:
        return json.dumps(self.build(output), indent=self.indent)

    def build(self, output: FloorPlanOutput) -> dict[str, Any]:
        """Build the JSON structure for the selected layout.

        Raises:
            ValueError: If there is no layout to export.
        """
        layout = require_layout(output)

        metadata: dict[str, Any] = {
            "app_name": APP_NAME,
            "schema_version": SCHEMA_VERSION,
            "layout_index": output.selected_index + 1,
        }
        if self.include_timestamp:
            metadata["exported_at"] = datetime.now(timezone.utc).isoformat()

        return {
            "metadata": metadata,
            "floor": {"width": output.floor.width, "height": output.floor.height},
            "units": output.units.value,
            "rooms": [self._room_type(rt) for rt in output.room_types],
            "blocked_areas": [self._blocked_area(a) for a in output.blocked_areas],
            "layout": self._layout(layout),
        }

    def _room_type(self, room_type: RoomType) -> dict[str, Any]:
        return {
            "id": room_type.id,
            "name": room_type.name,
            "width": room_type.dimensions.width,
            "height": room_type.dimensions.height,
            "color": room_type.color,
            "quantity": room_type.quantity,
        }

    def _blocked_area(self, area: BlockedArea) -> dict[str, Any]:
        return {
            "id": area.id,
            "name": area.name,
            "x": area.x,
            "y": area.y,
            "width": area.dimensions.width,
            "height": area.dimensions.height,
        }

    def _placed_room(self, room: PlacedRoom) -> dict[str, Any]:
        effective = room.effective_dimensions
        return {
            "instance_id": room.instance.instance_id,
            "room_type_id": room.type_id,
            "name": room.instance.name,
            "x": room.x,
            "y": room.y,
            "width": room.instance.width,
            "height": room.instance.height,
            "effective_width": effective.width,
            "effective_height": effective.height,
            "rotated": room.rotated,
            "color": room.instance.color,
        }

    def _layout(self, layout: Layout) -> dict[str, Any]:
        return {
            "placed_rooms": [self._placed_room(room) for room in layout.placed_rooms],
            "score": layout.score,
            "diversity": layout.diversity,
            "covers_all_room_types": layout.covers_required,
        }
