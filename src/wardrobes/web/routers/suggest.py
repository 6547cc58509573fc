"""Wardrobe suggestion endpoints."""

from fastapi import APIRouter, HTTPException

from wardrobes.application import SuggestDefaultsCommand, build_configuration_input
from wardrobes.application.config import standards_from_schema
from wardrobes.domain import map_to_smart_default_type
from wardrobes.web.dependencies import SuggestCommandDep
from wardrobes.web.schemas.requests import SuggestRequest
from wardrobes.web.schemas.responses import SuggestionResponseSchema

router = APIRouter(prefix="/suggest", tags=["suggest"])


@router.post("", response_model=SuggestionResponseSchema)
async def suggest_layout(
    request: SuggestRequest,
    command: SuggestCommandDep,
) -> SuggestionResponseSchema:
    """Suggest a wardrobe layout and its hardware.

    Args:
        request: Dimensions, unit, type and optional standards overrides.
        command: Default suggestion command (injected).

    Returns:
        Suggested layout, advisory notes and hardware schedule.

    Raises:
        HTTPException: If the standards overrides are inconsistent.
    """
    wardrobe_type = (
        map_to_smart_default_type(request.label)
        if request.label is not None
        else request.type
    )
    config_input = build_configuration_input(
        request.width,
        request.height,
        request.depth,
        unit=request.unit,
        wardrobe_type=wardrobe_type,
    )

    if request.standards is not None:
        try:
            standards = standards_from_schema(request.standards)
        except ValueError as e:
            raise HTTPException(
                status_code=422,
                detail={"error": str(e), "error_type": "invalid_standards"},
            ) from e
        command = SuggestDefaultsCommand(standards=standards)

    output = command.execute(config_input)
    return SuggestionResponseSchema.model_validate(output.to_dict())
