"""Configuration validation endpoints."""

from fastapi import APIRouter

from wardrobes.application.config import load_config_from_dict, validate_config
from wardrobes.web.schemas.requests import ConfigValidateRequest
from wardrobes.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a wardrobe configuration without suggesting.

    Schema failures are reported by the ConfigError handler; a config that
    loads is checked for inconsistent standards and advisory warnings.
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
