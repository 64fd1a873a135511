"""DXF format exporter for floor-plan layouts.

Generates a 2D DXF drawing (R2010 format) of the selected layout: the floor
outline, each placed room on its own per-type layer, blocked areas, linear
dimensions and a legend to the right of the floor.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import ezdxf
from ezdxf.enums import TextEntityAlignment

from floorplans.infrastructure.exporters.base import ExporterRegistry, require_layout

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from floorplans.application.dtos import FloorPlanOutput
    from floorplans.domain.value_objects import BlockedArea, Layout, RoomType


logger = logging.getLogger(__name__)


# Static layers and their ACI colors
LAYERS = {
    "FLOOR_OUTLINE": 5,  # Blue - floor boundary
    "BLOCKED": 8,  # Gray - obstacles
    "DIMENSIONS_FLOOR": 5,
    "DIMENSIONS_BLOCKED": 8,
    "LEGEND_TITLE": 4,  # Cyan
    "LEGEND_BLOCKED": 8,
}

# Blue (5) is reserved for the floor outline
DISTINCT_ACI_COLORS = (1, 3, 2, 4, 6, 30, 142, 211, 40, 150, 52, 94, 20)

_UNSAFE_LAYER_CHARS = re.compile(r"[^a-zA-Z0-9_]")


def sanitize_layer_name(name: str) -> str:
    """Replace characters that are unsafe in DXF layer names with '_'."""
    return _UNSAFE_LAYER_CHARS.sub("_", name)


def hex_to_true_color(color: str) -> int | None:
    """Convert '#rrggbb' or '#rgb' to a DXF true color integer, or None if malformed."""
    value = color.lstrip("#")
    if len(value) == 3:
        value = "".join(c * 2 for c in value)
    if len(value) != 6:
        return None
    try:
        r, g, b = (int(value[i : i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return None
    return (r << 16) | (g << 8) | b


@dataclass(frozen=True)
class RoomLayers:
    """Layer names and ACI color assigned to one placed room type."""

    geometry: str
    dimensions: str
    legend: str
    color: int


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports the selected layout to DXF format for CAD tools.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"

    def __init__(self, dimensions: bool = True, legend: bool = True) -> None:
        """Initialize the DXF exporter.

        Args:
            dimensions: Draw linear dimensions for the floor, the first
                instance of each room type and every blocked area.
            legend: Draw the legend to the right of the floor.
        """
        self.dimensions = dimensions
        self.legend = legend

    def export(self, output: FloorPlanOutput, path: Path) -> None:
        doc = self.build(output)
        doc.saveas(path)
        logger.info(f"Exported layout DXF to {path}")

    def export_string(self, output: FloorPlanOutput) -> str:
        doc = self.build(output)
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def build(self, output: FloorPlanOutput) -> Drawing:
        """Build the DXF document for the selected layout.

        Raises:
            ValueError: If there is no layout to export.
        """
        layout = require_layout(output)
        if not layout.placed_rooms:
            logger.warning("Exporting a layout with no placed rooms")

        doc = ezdxf.new("R2010", setup=True)
        for name, color in LAYERS.items():
            doc.layers.add(name, color=color)

        placed_types = self._placed_room_types(layout, output.room_types)
        room_layers = self._setup_room_layers(doc, placed_types)

        msp = doc.modelspace()
        floor_w = output.floor.width
        floor_h = output.floor.height
        basis = max(floor_w, floor_h, 10.0)
        units = output.units.value

        self._draw_rect(msp, 0.0, 0.0, floor_w, floor_h, "FLOOR_OUTLINE")

        if self.dimensions:
            self._draw_dimensions(msp, output, layout, room_layers, basis, units)

        for room in layout.placed_rooms:
            layers = room_layers[room.type_id]
            effective = room.effective_dimensions
            self._draw_rect(
                msp,
                float(room.x),
                float(room.y),
                effective.width,
                effective.height,
                layers.geometry,
                true_color=hex_to_true_color(room.instance.color),
            )

        for area in output.blocked_areas:
            self._draw_rect(
                msp, area.x, area.y, area.dimensions.width, area.dimensions.height, "BLOCKED"
            )

        if self.legend:
            self._draw_legend(
                msp, placed_types, room_layers, output.blocked_areas, floor_w, floor_h, basis, units
            )

        return doc

    def _placed_room_types(
        self, layout: Layout, room_types: list[RoomType]
    ) -> list[RoomType]:
        """Room types with at least one placed instance, in definition order."""
        placed_ids = layout.type_ids
        return [rt for rt in room_types if rt.id in placed_ids]

    def _setup_room_layers(
        self, doc: Drawing, placed_types: list[RoomType]
    ) -> dict[str, RoomLayers]:
        """Create three layers per placed room type, keyed by type id.

        Types whose sanitized names collide share one set of layers.
        """
        by_layer: dict[str, RoomLayers] = {}
        by_type: dict[str, RoomLayers] = {}
        for room_type in placed_types:
            base = f"ROOM_{sanitize_layer_name(room_type.name)}"
            layers = by_layer.get(base)
            if layers is None:
                color = DISTINCT_ACI_COLORS[len(by_layer) % len(DISTINCT_ACI_COLORS)]
                layers = RoomLayers(
                    geometry=base,
                    dimensions=f"DIM_{base}",
                    legend=f"LEGEND_{base}",
                    color=color,
                )
                for name in (layers.geometry, layers.dimensions, layers.legend):
                    doc.layers.add(name, color=color)
                by_layer[base] = layers
            by_type[room_type.id] = layers
        return by_type

    def _draw_rect(
        self,
        msp: Modelspace,
        x: float,
        y: float,
        width: float,
        height: float,
        layer: str,
        true_color: int | None = None,
    ) -> None:
        attribs: dict[str, object] = {"layer": layer}
        if true_color is not None:
            attribs["true_color"] = true_color
        points = [(x, y), (x + width, y), (x + width, y + height), (x, y + height)]
        msp.add_lwpolyline(points, close=True, dxfattribs=attribs)

    def _draw_dimension_pair(
        self,
        msp: Modelspace,
        x: float,
        y: float,
        width: float,
        height: float,
        offset: float,
        text_size: float,
        layer: str,
        units: str,
    ) -> None:
        """Draw a horizontal dimension below and a vertical one left of a rectangle."""
        override = {"dimtxt": text_size, "dimasz": text_size * 0.6, "dimpost": f"<>{units}"}
        msp.add_linear_dim(
            base=(x, y - offset),
            p1=(x, y),
            p2=(x + width, y),
            dimstyle="EZDXF",
            override=override,
            dxfattribs={"layer": layer},
        ).render()
        msp.add_linear_dim(
            base=(x - offset, y),
            p1=(x, y),
            p2=(x, y + height),
            angle=90,
            dimstyle="EZDXF",
            override=override,
            dxfattribs={"layer": layer},
        ).render()

    def _draw_dimensions(
        self,
        msp: Modelspace,
        output: FloorPlanOutput,
        layout: Layout,
        room_layers: dict[str, RoomLayers],
        basis: float,
        units: str,
    ) -> None:
        outer_offset = basis * 0.15
        inner_offset = basis * 0.05

        self._draw_dimension_pair(
            msp,
            0.0,
            0.0,
            output.floor.width,
            output.floor.height,
            outer_offset,
            basis * 0.025,
            "DIMENSIONS_FLOOR",
            units,
        )

        # Only the first instance of each type is dimensioned
        dimensioned: set[str] = set()
        for room in layout.placed_rooms:
            if room.type_id in dimensioned:
                continue
            dimensioned.add(room.type_id)
            effective = room.effective_dimensions
            self._draw_dimension_pair(
                msp,
                float(room.x),
                float(room.y),
                effective.width,
                effective.height,
                inner_offset,
                basis * 0.02,
                room_layers[room.type_id].dimensions,
                units,
            )

        for area in output.blocked_areas:
            self._draw_dimension_pair(
                msp,
                area.x,
                area.y,
                area.dimensions.width,
                area.dimensions.height,
                inner_offset,
                basis * 0.02,
                "DIMENSIONS_BLOCKED",
                units,
            )

    def _add_text(
        self, msp: Modelspace, text: str, x: float, y: float, height: float, layer: str
    ) -> None:
        msp.add_text(
            text,
            height=height,
            dxfattribs={"layer": layer},
        ).set_placement((x, y), align=TextEntityAlignment.LEFT)

    def _draw_legend(
        self,
        msp: Modelspace,
        placed_types: list[RoomType],
        room_layers: dict[str, RoomLayers],
        blocked_areas: list[BlockedArea],
        floor_w: float,
        floor_h: float,
        basis: float,
        units: str,
    ) -> None:
        text_size = basis * 0.03
        line_height = text_size * 1.5
        x = floor_w + basis * 0.15 * 0.75
        indent = x + text_size
        y = floor_h

        self._add_text(msp, "Legend", x, y, text_size * 1.2, "LEGEND_TITLE")
        y -= line_height * 1.5

        if placed_types:
            self._add_text(msp, "Rooms", x, y, text_size * 1.1, "LEGEND_TITLE")
            y -= line_height
            for room_type in placed_types:
                w = room_type.dimensions.width
                h = room_type.dimensions.height
                self._add_text(
                    msp,
                    f"{room_type.name} ({w:g}{units} x {h:g}{units})",
                    indent,
                    y,
                    text_size,
                    room_layers[room_type.id].legend,
                )
                y -= line_height

        # One entry per blocked area name
        seen: set[str] = set()
        unique_blocked = []
        for area in blocked_areas:
            if area.name not in seen:
                seen.add(area.name)
                unique_blocked.append(area)

        if unique_blocked:
            if placed_types:
                y -= line_height * 0.5
            self._add_text(msp, "Blocked Areas", x, y, text_size * 1.1, "LEGEND_TITLE")
            y -= line_height
            for area in unique_blocked:
                w = area.dimensions.width
                h = area.dimensions.height
                self._add_text(
                    msp,
                    f"{area.name} ({w:g}{units} x {h:g}{units})",
                    indent,
                    y,
                    text_size,
                    "LEGEND_BLOCKED",
                )
                y -= line_height
