"""Adapters from configuration models to domain objects."""

from __future__ import annotations

from wardrobes.application.config.schema import StandardsConfig, WardrobeConfiguration
from wardrobes.domain import (
    ConfigurationInput,
    IndustryStandards,
    map_to_smart_default_type,
)


def config_to_input(config: WardrobeConfiguration) -> ConfigurationInput:
    """Build the advisor input from a configuration.

    The free-text type label is mapped leniently, so unknown labels
    become OPENABLE.
    """
    wardrobe = config.wardrobe
    return ConfigurationInput(
        unit=wardrobe.unit,
        width=wardrobe.width,
        height=wardrobe.height,
        depth=wardrobe.depth,
        type=map_to_smart_default_type(wardrobe.type),
    )


def standards_from_schema(schema: StandardsConfig | None) -> IndustryStandards:
    """Build IndustryStandards with any overrides from ``schema`` applied.

    Raises:
        ValueError: If the overrides are inconsistent (e.g. min above max).
    """
    if schema is None:
        return IndustryStandards()

    overrides = schema.model_dump(exclude_none=True)
    if "hinge_bands" in overrides:
        overrides["hinge_bands"] = tuple(
            (float(height), int(hinges)) for height, hinges in overrides["hinge_bands"]
        )
    return IndustryStandards(**overrides)


def config_to_standards(config: WardrobeConfiguration) -> IndustryStandards:
    return standards_from_schema(config.standards)
