"""SVG exporter for floor-plan layouts.

This module provides an SVG exporter that wraps LayoutRenderer to draw the
selected layout as a 2D plan.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from floorplans.infrastructure.exporters.base import ExporterRegistry, require_layout
from floorplans.infrastructure.layout_renderer import LayoutRenderer

if TYPE_CHECKING:
    from floorplans.application.dtos import FloorPlanOutput


logger = logging.getLogger(__name__)


@ExporterRegistry.register("svg")
class SvgExporter:
    """SVG exporter for floor-plan layouts.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for SVG files.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"

    def __init__(
        self,
        scale: float = 40.0,
        show_dimensions: bool = True,
        show_labels: bool = True,
        show_legend: bool = True,
    ) -> None:
        """Initialize the SVG exporter.

        Args:
            scale: Pixels per floor unit (default 40.0).
            show_dimensions: Whether to show room dimensions (default True).
            show_labels: Whether to show room labels (default True).
            show_legend: Whether to render the legend (default True).
        """
        self.renderer = LayoutRenderer(
            scale=scale,
            show_dimensions=show_dimensions,
            show_labels=show_labels,
            show_legend=show_legend,
        )

    def export(self, output: FloorPlanOutput, path: Path) -> None:
        content = self.export_string(output)
        path.write_text(content, encoding="utf-8")
        logger.info(f"Exported layout SVG to {path}")

    def export_string(self, output: FloorPlanOutput) -> str:
        """Render the selected layout as an SVG string.

        Raises:
            ValueError: If there is no layout to export.
        """
        layout = require_layout(output)
        return self.renderer.render_svg(
            output.floor,
            layout,
            output.blocked_areas,
            output.room_types,
            units=output.units.value,
            title=f"Layout {output.selected_index + 1} of {len(output.layouts)}",
        )
