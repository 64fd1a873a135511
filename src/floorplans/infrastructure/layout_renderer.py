"""Floor-plan rendering for layout visualization.

This module provides SVG and ASCII rendering of a layout showing the floor
outline, placed rooms with their effective size and color, hatched blocked
areas, labels and a legend. Floor coordinates have their origin at the
bottom-left corner; SVG output flips the y axis so the drawing matches the
DXF export.
"""

from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from floorplans.domain.value_objects import (
        BlockedArea,
        Dimension,
        Layout,
        PlacedRoom,
        RoomType,
    )


class LayoutRenderer:
    """Renders floor-plan layouts in SVG and ASCII formats.

    Attributes:
        scale: Pixels per floor unit for SVG rendering.
        floor_fill: Fill color for the floor.
        stroke: Stroke color for outlines.
        blocked_fill: Fill color behind the blocked-area hatching.
        text_color: Color for labels and dimensions.
        show_dimensions: Whether to show room dimensions under labels.
        show_labels: Whether to show room labels.
        show_legend: Whether to render the legend below the floor.
    """

    def __init__(
        self,
        scale: float = 40.0,
        floor_fill: str = "#FAFAFA",
        stroke: str = "#000000",
        blocked_fill: str = "#D3D3D3",
        text_color: str = "#000000",
        show_dimensions: bool = True,
        show_labels: bool = True,
        show_legend: bool = True,
    ) -> None:
        if scale <= 0:
            raise ValueError(f"Scale must be positive, got {scale}")
        self.scale = scale
        self.floor_fill = floor_fill
        self.stroke = stroke
        self.blocked_fill = blocked_fill
        self.text_color = text_color
        self.show_dimensions = show_dimensions
        self.show_labels = show_labels
        self.show_legend = show_legend

    def render_svg(
        self,
        floor: Dimension,
        layout: Layout,
        blocked_areas: list[BlockedArea],
        room_types: list[RoomType],
        units: str = "m",
        title: str = "",
    ) -> str:
        """Generate an SVG drawing of a single layout.

        Args:
            floor: Floor dimensions.
            layout: Layout with placed rooms.
            blocked_areas: Obstacles to draw hatched.
            room_types: Room type definitions, used for the legend.
            units: Unit label for dimension text.
            title: Header text; defaults to a score summary.

        Returns:
            SVG string representation of the layout.
        """
        header_height = 30
        placed_types = [rt for rt in room_types if rt.id in layout.type_ids]
        legend_entries = len(placed_types) + (1 if blocked_areas else 0)
        legend_height = self._calculate_legend_height(legend_entries)

        floor_px_w = floor.width * self.scale
        floor_px_h = floor.height * self.scale
        svg_width = floor_px_w
        svg_height = header_height + floor_px_h + legend_height

        if not title:
            title = (
                f"{layout.room_count} rooms - {layout.diversity} types - "
                f"area {layout.score:g} of {floor.area:g} {units}²"
            )

        parts: list[str] = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            "  <defs>",
            '    <pattern id="hatch" patternUnits="userSpaceOnUse" width="8" height="8">',
            f'      <rect width="8" height="8" fill="{self.blocked_fill}"/>',
            f'      <path d="M0,8 L8,0" stroke="{self.stroke}" stroke-width="1"/>',
            "    </pattern>",
            "  </defs>",
            "",
            "  <!-- Background -->",
            f'  <rect x="0" y="0" width="{svg_width}" height="{svg_height}" '
            f'fill="white"/>',
            "",
            "  <!-- Header -->",
            f'  <rect x="0" y="0" width="{svg_width}" height="{header_height}" '
            f'fill="#E0E0E0"/>',
            f'  <text x="10" y="{header_height - 8}" '
            f'font-family="Arial, sans-serif" font-size="14" '
            f'fill="{self.text_color}">{escape(title)}</text>',
            "",
            "  <!-- Floor outline -->",
            f'  <rect x="0" y="{header_height}" width="{floor_px_w}" '
            f'height="{floor_px_h}" fill="{self.floor_fill}" '
            f'stroke="{self.stroke}" stroke-width="2"/>',
            "",
            "  <!-- Blocked areas -->",
        ]

        for area in blocked_areas:
            parts.append(self._render_blocked_area(area, floor, header_height))

        parts.append("")
        parts.append("  <!-- Placed rooms -->")
        for room in layout.placed_rooms:
            parts.append(self._render_room(room, floor, header_height, units))

        if self.show_legend and legend_entries:
            parts.append("")
            parts.append("  <!-- Legend -->")
            parts.append(
                self._render_legend(
                    placed_types,
                    bool(blocked_areas),
                    svg_width,
                    header_height + floor_px_h,
                    units,
                )
            )

        parts.append("")
        parts.append("</svg>")
        return "\n".join(parts)

    def _to_svg(
        self, x: float, y: float, height: float, floor: Dimension, header_height: float
    ) -> tuple[float, float]:
        """Convert a bottom-left floor rectangle origin to the SVG top-left."""
        return x * self.scale, header_height + (floor.height - y - height) * self.scale

    def _render_blocked_area(
        self, area: BlockedArea, floor: Dimension, header_height: float
    ) -> str:
        w = area.dimensions.width * self.scale
        h = area.dimensions.height * self.scale
        x, y = self._to_svg(area.x, area.y, area.dimensions.height, floor, header_height)
        svg = (
            f'  <rect x="{x}" y="{y}" width="{w}" height="{h}" '
            f'fill="url(#hatch)" stroke="{self.stroke}" stroke-dasharray="4,2"/>'
        )
        font_size = min(12, min(w, h) / 4)
        if self.show_labels and font_size >= 6:
            svg += (
                f'\n  <text x="{x + w / 2}" y="{y + h / 2}" text-anchor="middle" '
                f'font-family="Arial, sans-serif" font-size="{font_size}" '
                f'fill="{self.text_color}">{escape(area.name)}</text>'
            )
        return svg

    def _render_room(
        self, room: PlacedRoom, floor: Dimension, header_height: float, units: str
    ) -> str:
        """Render a single placed room as SVG rect and text."""
        effective = room.effective_dimensions
        w = effective.width * self.scale
        h = effective.height * self.scale
        x, y = self._to_svg(room.x, room.y, effective.height, floor, header_height)

        rect = (
            f'<rect x="{x}" y="{y}" width="{w}" height="{h}" '
            f'fill="{room.instance.color}" stroke="{self.stroke}"/>'
        )

        font_size = min(12, min(w, h) / 6)
        if font_size < 6:
            # Too small for text
            return f"  {rect}"

        text_x = x + w / 2
        text_y = y + h / 2
        svg_parts = ["  <g>", f"    {rect}"]

        if self.show_labels:
            svg_parts.append(
                f'    <text x="{text_x}" y="{text_y - font_size / 2}" '
                f'text-anchor="middle" font-family="Arial, sans-serif" '
                f'font-size="{font_size}" fill="{self.text_color}">'
                f"{escape(room.instance.name)}</text>"
            )

        if self.show_dimensions:
            dims = f"{effective.width:g}{units} x {effective.height:g}{units}"
            if room.rotated:
                dims += " (R)"
            dims_y = text_y + font_size / 2 + 2 if self.show_labels else text_y
            svg_parts.append(
                f'    <text x="{text_x}" y="{dims_y}" '
                f'text-anchor="middle" font-family="Arial, sans-serif" '
                f'font-size="{font_size * 0.8}" fill="{self.text_color}">{dims}</text>'
            )

        svg_parts.append("  </g>")
        return "\n".join(svg_parts)

    def _calculate_legend_height(self, entries: int) -> float:
        """Height in pixels needed for the legend, or 0 if there is none."""
        if not entries or not self.show_legend:
            return 0.0
        # Title (20px) + padding (10px) + rows (25px each) + bottom padding (10px)
        return 20 + 10 + entries * 25 + 10

    def _render_legend(
        self,
        placed_types: list[RoomType],
        has_blocked: bool,
        svg_width: float,
        y_offset: float,
        units: str,
    ) -> str:
        entries = len(placed_types) + (1 if has_blocked else 0)
        parts: list[str] = [
            f'  <rect x="0" y="{y_offset}" width="{svg_width}" '
            f'height="{self._calculate_legend_height(entries)}" '
            f'fill="#F5F5F5" stroke="#CCCCCC"/>',
            f'  <text x="10" y="{y_offset + 18}" '
            f'font-family="Arial, sans-serif" font-size="12" font-weight="bold" '
            f'fill="{self.text_color}">Legend</text>',
        ]

        swatch_size = 15
        y = y_offset + 35
        for room_type in placed_types:
            label = (
                f"{room_type.name} ({room_type.dimensions.width:g}{units} x "
                f"{room_type.dimensions.height:g}{units})"
            )
            parts.append(self._legend_item(room_type.color, label, y, swatch_size))
            y += 25

        if has_blocked:
            parts.append(self._legend_item("url(#hatch)", "Blocked area", y, swatch_size))

        return "\n".join(parts)

    def _legend_item(self, fill: str, label: str, y: float, swatch_size: int) -> str:
        return (
            f'  <rect x="15" y="{y}" width="{swatch_size}" height="{swatch_size}" '
            f'fill="{fill}" stroke="{self.stroke}"/>\n'
            f'  <text x="{15 + swatch_size + 5}" y="{y + swatch_size - 3}" '
            f'font-family="Arial, sans-serif" font-size="10" '
            f'fill="{self.text_color}">{escape(label)}</text>'
        )

    def render_ascii(
        self,
        floor: Dimension,
        layout: Layout,
        blocked_areas: list[BlockedArea],
        width: int = 80,
    ) -> str:
        """Generate an ASCII diagram of a single layout.

        Rooms are drawn as boxes labelled with their type name; blocked
        areas are filled with '#'. The top row of the diagram is the far
        (high-y) edge of the floor.

        Args:
            floor: Floor dimensions.
            layout: Layout with placed rooms.
            blocked_areas: Obstacles to draw.
            width: Terminal width in characters (default 80).

        Returns:
            ASCII string representation of the layout.
        """
        usable_width = max(width - 2, 10)
        scale_x = usable_width / floor.width
        # 0.5 for character aspect ratio
        grid_height = max(int(usable_width * (floor.height / floor.width) * 0.5), 10)
        scale_y = grid_height / floor.height

        grid = [[" " for _ in range(usable_width)] for _ in range(grid_height)]

        for area in blocked_areas:
            x1, y1, x2, y2 = self._grid_box(
                grid,
                area.x,
                area.y,
                area.dimensions.width,
                area.dimensions.height,
                floor,
                scale_x,
                scale_y,
            )
            for row in range(y1, y2 + 1):
                for col in range(x1, x2 + 1):
                    grid[row][col] = "#"

        for room in layout.placed_rooms:
            self._draw_room_ascii(grid, room, floor, scale_x, scale_y)

        lines = [
            f"{layout.room_count} rooms, {layout.diversity} types, "
            f"area {layout.score:g} of {floor.area:g}",
            "+" + "-" * usable_width + "+",
        ]
        for row in grid:
            lines.append("|" + "".join(row) + "|")
        lines.append("+" + "-" * usable_width + "+")
        return "\n".join(lines)

    def _grid_box(
        self,
        grid: list[list[str]],
        x: float,
        y: float,
        w: float,
        h: float,
        floor: Dimension,
        scale_x: float,
        scale_y: float,
    ) -> tuple[int, int, int, int]:
        """Map a floor rectangle to clamped grid cells (x1, y1, x2, y2)."""
        grid_height = len(grid)
        grid_width = len(grid[0]) if grid else 0
        x1 = int(x * scale_x)
        x2 = int((x + w) * scale_x)
        # Flip so the top grid row is the far edge of the floor
        y1 = int((floor.height - y - h) * scale_y)
        y2 = int((floor.height - y) * scale_y)
        x1 = max(0, min(x1, grid_width - 1))
        x2 = max(0, min(x2, grid_width - 1))
        y1 = max(0, min(y1, grid_height - 1))
        y2 = max(0, min(y2, grid_height - 1))
        return x1, y1, x2, y2

    def _draw_room_ascii(
        self,
        grid: list[list[str]],
        room: PlacedRoom,
        floor: Dimension,
        scale_x: float,
        scale_y: float,
    ) -> None:
        effective = room.effective_dimensions
        x1, y1, x2, y2 = self._grid_box(
            grid,
            room.x,
            room.y,
            effective.width,
            effective.height,
            floor,
            scale_x,
            scale_y,
        )

        for x in range(x1, x2 + 1):
            grid[y1][x] = "-"
            grid[y2][x] = "-"
        for y in range(y1, y2 + 1):
            grid[y][x1] = "|"
            grid[y][x2] = "|"
        for y, x in ((y1, x1), (y1, x2), (y2, x1), (y2, x2)):
            grid[y][x] = "+"

        label_row = y1 + 1
        if label_row < y2:
            label = room.instance.name[: max(x2 - x1 - 1, 0)]
            for i, char in enumerate(label):
                grid[label_row][x1 + 1 + i] = char

        dims_row = y1 + 2
        if dims_row < y2:
            dims = f"{effective.width:g}x{effective.height:g}"
            if room.rotated:
                dims += "R"
            dims = dims[: max(x2 - x1 - 1, 0)]
            for i, char in enumerate(dims):
                grid[dims_row][x1 + 1 + i] = char
