"""Configuration schema for wardrobe suggestion files.

This module contains the Pydantic models that describe a wardrobe
configuration file: the wardrobe itself and optional overrides of the
industry standards used by the advisor.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from wardrobes.domain import LengthUnit

# Supported schema versions for configuration files
# Version 1.0: Initial schema with wardrobe dimensions and standards overrides
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class WardrobeConfig(BaseModel):
    """Wardrobe dimensions and type.

    Attributes:
        unit: Unit of the three dimensions ("mm" or "ft")
        width: Overall width, must be positive and finite
        height: Overall height, must be positive and finite
        depth: Overall depth, must be positive and finite
        type: Free-text type label ("openable", "sliding", "walk-in", ...)
    """

    model_config = ConfigDict(extra="forbid")

    unit: LengthUnit = Field(default=LengthUnit.MM, description="Dimension unit")
    width: float = Field(..., gt=0, allow_inf_nan=False, description="Overall width")
    height: float = Field(..., gt=0, allow_inf_nan=False, description="Overall height")
    depth: float = Field(..., gt=0, allow_inf_nan=False, description="Overall depth")
    type: str = Field(default="openable", min_length=1, description="Wardrobe type label")


class StandardsConfig(BaseModel):
    """Optional overrides for the advisor's industry standards.

    Every field left unset keeps its default. Lengths are in millimeters.
    """

    model_config = ConfigDict(extra="forbid")

    module_width: float | None = Field(default=None, gt=0)
    sliding_min_shutter: float | None = Field(default=None, gt=0)
    sliding_max_shutter: float | None = Field(default=None, gt=0)
    sliding_two_shutter_max_width: float | None = Field(default=None, gt=0)
    min_depth_for_rod: float | None = Field(default=None, gt=0)
    double_hang_min_height: float | None = Field(default=None, gt=0)
    straightener_min_height: float | None = Field(default=None, gt=0)
    hinge_bands: list[tuple[float, int]] | None = Field(default=None, min_length=1)
    max_hinges: int | None = Field(default=None, ge=0)
    drawer_width: float | None = Field(default=None, gt=0)
    min_drawers: int | None = Field(default=None, ge=0)
    max_drawers: int | None = Field(default=None, ge=0)
    shelves_per_shelved_column: int | None = Field(default=None, ge=0)
    shelves_per_open_column: int | None = Field(default=None, ge=0)
    rods_per_hanging_column: int | None = Field(default=None, ge=1)


class WardrobeConfiguration(BaseModel):
    """Root configuration model for wardrobe suggestion files.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        wardrobe: Wardrobe dimensions and type
        standards: Optional industry standards overrides

    Example:
        >>> config = WardrobeConfiguration(
        ...     schema_version="1.0",
        ...     wardrobe=WardrobeConfig(width=1200, height=2400, depth=600)
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    wardrobe: WardrobeConfig
    standards: StandardsConfig | None = Field(
        default=None, description="Industry standards overrides (optional)"
    )

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions of a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
