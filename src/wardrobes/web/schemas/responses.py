"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from wardrobes.web.schemas.common import AdvisorySchema, HardwareItemSchema


class SuggestionInputSchema(BaseModel):
    """Echo of the input a suggestion was made for."""

    unit: str = Field(..., description="Dimension unit")
    width: float = Field(..., description="Overall width")
    height: float = Field(..., description="Overall height")
    depth: float = Field(..., description="Overall depth")
    type: str = Field(..., description="Resolved wardrobe type")


class SuggestionResponseSchema(BaseModel):
    """Response for a wardrobe suggestion, in camelCase."""

    model_config = ConfigDict(populate_by_name=True)

    columns: int = Field(..., description="Vertical modules")
    shutters: int = Field(..., description="Doors")
    hinges_per_shutter: int = Field(..., alias="hingesPerShutter")
    straightener_per_shutter: bool = Field(..., alias="straightenerPerShutter")
    drawers: int = Field(..., description="Total drawers")
    shelves: int = Field(..., description="Total shelves")
    rods: int = Field(..., description="Hanging rods")
    foldable_shelf: bool = Field(..., alias="foldableShelf")
    notes: list[str] = Field(default_factory=list, description="Advisory messages")
    advisories: list[AdvisorySchema] = Field(default_factory=list)
    input: SuggestionInputSchema
    hardware: list[HardwareItemSchema] = Field(default_factory=list)


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class WardrobeTypeSchema(BaseModel):
    """A wardrobe type and the free-text labels that map to it."""

    value: str = Field(..., description="Wardrobe type")
    labels: list[str] = Field(default_factory=list, description="Accepted labels")


class WardrobeTypeListSchema(BaseModel):
    """Response for wardrobe type listing."""

    types: list[WardrobeTypeSchema]
    default: str = Field(..., description="Type used for unrecognized labels")


class ErrorResponseSchema(BaseModel):
    """Error body returned by the exception handlers."""

    error: str
    error_type: str
    details: Any = None
