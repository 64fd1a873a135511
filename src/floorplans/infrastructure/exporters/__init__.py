"""Exporter framework for floor-plan layouts.

This package provides a unified exporter framework with:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- dxf: DXF drawing with per-room-type layers, dimensions and a legend
- json: Layout with its floor, room types and blocked areas
- svg: 2D plan rendering

Usage:
    from floorplans.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()

    manager = ExportManager(output_dir=Path("./output"))
    results = manager.export_all(["dxf", "json"], floor_plan_output, project_name="house")
"""

from floorplans.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
    export_filename,
    require_layout,
)
from floorplans.infrastructure.exporters.dxf import DxfExporter
from floorplans.infrastructure.exporters.layout_json import JsonLayoutExporter
from floorplans.infrastructure.exporters.svg import SvgExporter

__all__ = [
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonLayoutExporter",
    "SvgExporter",
    "export_filename",
    "require_layout",
]
