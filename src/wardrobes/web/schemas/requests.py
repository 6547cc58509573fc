"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from wardrobes.application.config import StandardsConfig


class SuggestRequest(BaseModel):
    """Request for a wardrobe layout suggestion.

    ``type`` must be an exact wardrobe type (OPENABLE, SLIDING, WALKIN,
    case-insensitive). ``label`` takes free text instead and is mapped
    leniently; when given it wins over ``type``.
    """

    unit: str = Field(default="mm", description="Dimension unit: mm or ft")
    width: float = Field(..., gt=0, allow_inf_nan=False, description="Overall width")
    height: float = Field(..., gt=0, allow_inf_nan=False, description="Overall height")
    depth: float = Field(..., gt=0, allow_inf_nan=False, description="Overall depth")
    type: str = Field(default="OPENABLE", description="Wardrobe type")
    label: str | None = Field(
        default=None, description="Free-text type label, e.g. 'walk-in'"
    )
    standards: StandardsConfig | None = Field(
        default=None, description="Optional industry standards overrides"
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Wardrobe configuration JSON")
