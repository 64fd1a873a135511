"""Layout generation endpoints."""

from fastapi import APIRouter

from floorplans.application.config import load_config_from_dict
from floorplans.application.dtos import FloorPlanOutput
from floorplans.domain.value_objects import Layout, PlacedRoom
from floorplans.web.dependencies import GenerateCommandDep
from floorplans.web.exceptions import FloorPlanGenerationError
from floorplans.web.schemas.common import FloorSchema, PlacedRoomSchema
from floorplans.web.schemas.requests import GenerateFromConfigRequest
from floorplans.web.schemas.responses import (
    GenerateResponseSchema,
    ErrorResponseSchema,
    GenerationStatsSchema,
    LayoutSchema,
)

router = APIRouter(prefix="/generate", tags=["generate"])


def _placed_room_to_schema(room: PlacedRoom) -> PlacedRoomSchema:
    effective = room.effective_dimensions
    return PlacedRoomSchema(
        instance_id=room.instance.instance_id,
        room_type_id=room.type_id,
        name=room.instance.name,
        x=room.x,
        y=room.y,
        width=room.instance.width,
        height=room.instance.height,
        effective_width=effective.width,
        effective_height=effective.height,
        rotated=room.rotated,
        color=room.instance.color,
    )


def _layout_to_schema(rank: int, layout: Layout) -> LayoutSchema:
    return LayoutSchema(
        rank=rank,
        score=layout.score,
        diversity=layout.diversity,
        room_count=layout.room_count,
        covers_all_room_types=layout.covers_required,
        placed_rooms=[_placed_room_to_schema(room) for room in layout.placed_rooms],
    )


def output_to_schema(output: FloorPlanOutput) -> GenerateResponseSchema:
    """Convert FloorPlanOutput to response schema."""
    stats = None
    if output.result is not None:
        result = output.result
        stats = GenerationStatsSchema(
            instance_count=result.instance_count,
            trials_run=result.trials_run,
            trials_with_rooms=result.trials_with_rooms,
            unique_layouts=result.unique_layouts,
            deadline_expired=result.deadline_expired,
        )

    return GenerateResponseSchema(
        is_valid=output.is_valid,
        errors=output.errors,
        message=output.message,
        floor=FloorSchema(width=output.floor.width, height=output.floor.height),
        units=output.units.value,
        layouts=[
            _layout_to_schema(rank, layout)
            for rank, layout in enumerate(output.layouts, start=1)
        ],
        stats=stats,
    )


@router.post(
    "",
    response_model=GenerateResponseSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
def generate_layouts(
    request: GenerateFromConfigRequest,
    command: GenerateCommandDep,
) -> GenerateResponseSchema:
    """Generate ranked layouts from a full configuration.

    A configuration for which no layout can be produced is not an error:
    the response carries an empty layout list and an informational message.

    Raises:
        ConfigError: If the configuration fails validation (422).
        FloorPlanGenerationError: If the inputs are rejected (422).
    """
    config = load_config_from_dict(request.config)
    output = command.execute_config(config)

    if not output.is_valid:
        raise FloorPlanGenerationError(output.errors)

    return output_to_schema(output)
