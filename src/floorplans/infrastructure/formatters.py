"""Console formatters for generated layouts."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from floorplans.infrastructure.layout_renderer import LayoutRenderer

if TYPE_CHECKING:
    from floorplans.application.dtos import FloorPlanOutput
    from floorplans.domain.value_objects import Layout, RoomType


class LayoutSummaryFormatter:
    """Formats the ranked layouts as a table with per-type room counts."""

    def format(self, output: FloorPlanOutput) -> str:
        if not output.has_layouts:
            return output.message or ""

        units = output.units.value
        lines = [
            "RANKED LAYOUTS",
            "=" * 70,
            f"Floor: {output.floor.width:g}{units} x {output.floor.height:g}{units} "
            f"({output.floor.area:g} {units}²)",
            "-" * 70,
            f"{'Rank':<6} {'Rooms':<7} {'Types':<7} {'Area':<10} {'Fill':<7} {'Complete':<9}",
            "-" * 70,
        ]

        for rank, layout in enumerate(output.layouts, start=1):
            fill = f"{layout.score / output.floor.area * 100:.1f}%"
            complete = "yes" if layout.covers_required else "no"
            marker = " *" if rank - 1 == output.selected_index else ""
            lines.append(
                f"{rank:<6} {layout.room_count:<7} {layout.diversity:<7} "
                f"{layout.score:<10.2f} {fill:<7} {complete:<9}{marker}"
            )

        lines.append("-" * 70)
        lines.append(self._stats(output))
        return "\n".join(lines)

    def format_room_counts(self, layout: Layout, room_types: list[RoomType]) -> str:
        """Format how many instances of each room type a layout placed."""
        counts = Counter(room.type_id for room in layout.placed_rooms)
        lines = [f"{'Room':<24} {'Placed':<8}", "-" * 32]
        for room_type in room_types:
            lines.append(f"{room_type.name:<24} {counts.get(room_type.id, 0):<8}")
        return "\n".join(lines)

    def _stats(self, output: FloorPlanOutput) -> str:
        result = output.result
        if result is None:
            return ""
        text = (
            f"{result.trials_run} trials, {result.trials_with_rooms} with rooms, "
            f"{result.unique_layouts} unique layouts, {result.instance_count} room instances"
        )
        if result.deadline_expired:
            text += " (stopped at deadline)"
        return text


class LayoutDiagramFormatter:
    """Formats a layout as an ASCII floor diagram."""

    def __init__(self, width: int = 80) -> None:
        self.width = width
        self._renderer = LayoutRenderer()

    def format(self, output: FloorPlanOutput, index: int | None = None) -> str:
        """Format the layout at ``index`` (0-based), or the selected one."""
        selected = output.selected_index if index is None else index
        if not 0 <= selected < len(output.layouts):
            return output.message or "No layout to display."
        return self._renderer.render_ascii(
            output.floor,
            output.layouts[selected],
            output.blocked_areas,
            width=self.width,
        )
