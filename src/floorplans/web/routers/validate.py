"""Configuration validation endpoints."""

from fastapi import APIRouter

from floorplans.application.config import load_config_from_dict, validate_config
from floorplans.web.schemas.requests import ConfigValidateRequest
from floorplans.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a floor-plan configuration without generating.

    Schema failures are reported through the ConfigError handler (422);
    cross-field errors and advisories come back in the response body.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
