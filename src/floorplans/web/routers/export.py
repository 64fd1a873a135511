"""Export format endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from floorplans.application.config import load_config_from_dict
from floorplans.infrastructure.exporters import ExporterRegistry, export_filename
from floorplans.web.dependencies import GenerateCommandDep
from floorplans.web.exceptions import (
    ExportError,
    FloorPlanGenerationError,
    LayoutNotFoundError,
    UnsupportedFormatError,
)
from floorplans.web.schemas.requests import ExportRequest
from floorplans.web.schemas.responses import ErrorResponseSchema, ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])

MEDIA_TYPES = {
    "dxf": "application/dxf",
    "json": "application/json",
    "svg": "image/svg+xml",
}


@router.get("/formats", response_model=ExportFormatsSchema)
def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post(
    "/{format_name}",
    responses={
        400: {"model": ErrorResponseSchema},
        404: {"model": ErrorResponseSchema},
        422: {"model": ErrorResponseSchema},
    },
)
def export_layout(
    format_name: str,
    request: ExportRequest,
    command: GenerateCommandDep,
) -> Response:
    """Generate layouts and download one of them in the requested format.

    Args:
        format_name: Registered export format (dxf, json, svg).
        request: Configuration and optional 1-based layout index.
        command: Injected GenerateLayoutsCommand.

    Returns:
        The exported file as an attachment.

    Raises:
        UnsupportedFormatError: If the format is not registered (400).
        LayoutNotFoundError: If the layout index is outside the results (404).
        ExportError: If the exporter rejects the layout (400).
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    config = load_config_from_dict(request.config)
    output = command.execute_config(config)
    if not output.is_valid:
        raise FloorPlanGenerationError(output.errors)

    layout_index = request.layout_index or config.output.layout_index
    output = output.with_selection(layout_index - 1)
    if output.selected_layout is None:
        raise LayoutNotFoundError(layout_index, len(output.layouts))

    exporter = ExporterRegistry.get(format_name)()
    try:
        content = exporter.export_string(output)
    except (ValueError, NotImplementedError) as e:
        raise ExportError(str(e), format_name) from e

    filename = export_filename(config.output.project_name, output, exporter.file_extension)
    return Response(
        content=content,
        media_type=MEDIA_TYPES.get(format_name, "application/octet-stream"),
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
