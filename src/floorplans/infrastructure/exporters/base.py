"""Exporter protocol, format registry and the multi-format export manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from floorplans.application.dtos import FloorPlanOutput
    from floorplans.domain.value_objects import Layout


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Serializes the selected layout of a FloorPlanOutput.

    The floor, room types and blocked areas travel with the layout so an
    export is self-contained.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, output: FloorPlanOutput, path: Path) -> None: ...

    def export_string(self, output: FloorPlanOutput) -> str:
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


def require_layout(output: FloorPlanOutput) -> Layout:
    """Return the selected layout or raise if there is none.

    Raises:
        ValueError: If generation produced no layouts or the selected
            index is out of range.
    """
    layout = output.selected_layout
    if layout is None:
        if not output.has_layouts:
            raise ValueError("No layouts to export")
        raise ValueError(
            f"Layout index {output.selected_index + 1} is out of range "
            f"(1-{len(output.layouts)})"
        )
    return layout


def export_filename(project_name: str, output: FloorPlanOutput, extension: str) -> str:
    """File name for the selected layout: ``{project}_layout{rank}.{ext}``."""
    return f"{project_name}_layout{output.selected_index + 1}.{extension}"


class ExporterRegistry:
    """Maps format names to exporter classes.

    Each exporter module registers its class on import:

        @ExporterRegistry.register("svg")
        class SvgExporter: ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Look up an exporter class.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        try:
            return cls._exporters[format_name]
        except KeyError:
            available = ", ".join(cls.available_formats()) or "none"
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available}"
            ) from None

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Writes the selected layout of one output to several formats at once."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: FloorPlanOutput,
        project_name: str = "floorplan",
    ) -> dict[str, Path]:
        """Export the selected layout once per format.

        Nothing is written, and the output directory is not created, when
        there is no layout to export.

        Returns:
            Format name to written file path.

        Raises:
            KeyError: If any format is not registered.
            ValueError: If there is no layout to export.
            OSError: If file operations fail.
        """
        require_layout(output)
        exporters = [(name, ExporterRegistry.get(name)()) for name in formats]
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name, exporter in exporters:
            filepath = self.output_dir / export_filename(
                project_name, output, exporter.file_extension
            )
            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(output, filepath)
            results[format_name] = filepath

        return results
