"""Configuration merging utilities for CLI override support.

Precedence is CLI args > config values > defaults. Only non-None CLI
arguments override configuration values.
"""

from typing import Any

from wardrobes.application.config.schema import (
    WardrobeConfig,
    WardrobeConfiguration,
)


def merge_config_with_cli(
    config: WardrobeConfiguration,
    *,
    width: float | None = None,
    height: float | None = None,
    depth: float | None = None,
    unit: str | None = None,
    wardrobe_type: str | None = None,
) -> WardrobeConfiguration:
    """Merge CLI arguments with configuration values.

    Args:
        config: The base WardrobeConfiguration to merge with
        width: Override for wardrobe.width (if not None)
        height: Override for wardrobe.height (if not None)
        depth: Override for wardrobe.depth (if not None)
        unit: Override for wardrobe.unit (if not None)
        wardrobe_type: Override for wardrobe.type (if not None)

    Returns:
        A new WardrobeConfiguration with merged values

    Raises:
        pydantic.ValidationError: If an override is invalid.

    Example:
        >>> merged = merge_config_with_cli(config, width=1800.0)
        >>> merged.wardrobe.width
        1800.0
    """
    wardrobe = config.wardrobe
    wardrobe_data: dict[str, Any] = {
        "unit": unit if unit is not None else wardrobe.unit,
        "width": width if width is not None else wardrobe.width,
        "height": height if height is not None else wardrobe.height,
        "depth": depth if depth is not None else wardrobe.depth,
        "type": wardrobe_type if wardrobe_type is not None else wardrobe.type,
    }

    return WardrobeConfiguration(
        schema_version=config.schema_version,
        wardrobe=WardrobeConfig.model_validate(wardrobe_data),
        standards=config.standards,
    )
