"""Infrastructure layer - exporters, rendering and console formatters."""

from .exporters import (
    DxfExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonLayoutExporter,
    SvgExporter,
)
from .formatters import LayoutDiagramFormatter, LayoutSummaryFormatter
from .layout_renderer import LayoutRenderer

__all__ = [
    # Exporter framework
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    "DxfExporter",
    "JsonLayoutExporter",
    "SvgExporter",
    # Rendering
    "LayoutRenderer",
    # Formatters
    "LayoutDiagramFormatter",
    "LayoutSummaryFormatter",
]
