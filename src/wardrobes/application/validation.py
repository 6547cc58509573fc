"""Boundary validation for wardrobe input.

The domain advisor never rejects input. Everything that reaches it from a
user goes through here first.
"""

from __future__ import annotations

import math
from typing import Any

from wardrobes.domain import (
    ConfigurationInput,
    InvalidDimensionError,
    LengthUnit,
    WardrobeType,
    to_millimeters,
)


def validate_dimension(
    name: str,
    value: Any,
    unit: LengthUnit | str = LengthUnit.MM,
) -> float:
    """Return ``value`` as a float if it is a positive finite number.

    The value must also stay finite once converted to millimeters, so a
    huge length in feet cannot overflow inside the advisor.

    Args:
        name: Dimension name used in the error (width, height, depth).
        value: Raw value to check.
        unit: Unit ``value`` is expressed in.

    Returns:
        The value as a float, still in ``unit``.

    Raises:
        InvalidDimensionError: If the value is not numeric, not finite,
            not strictly positive or overflows in millimeters.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidDimensionError(name, value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidDimensionError(name, value)
    if not math.isfinite(to_millimeters(float(value), unit)):
        raise InvalidDimensionError(name, value)
    return float(value)


def validate_dimensions(
    width: Any,
    height: Any,
    depth: Any,
    unit: LengthUnit | str = LengthUnit.MM,
) -> tuple[float, float, float]:
    """Validate all three dimensions, in width, height, depth order."""
    return (
        validate_dimension("width", width, unit),
        validate_dimension("height", height, unit),
        validate_dimension("depth", depth, unit),
    )


def build_configuration_input(
    width: Any,
    height: Any,
    depth: Any,
    unit: LengthUnit | str = LengthUnit.MM,
    wardrobe_type: WardrobeType | str = WardrobeType.OPENABLE,
) -> ConfigurationInput:
    """Validate raw values and build a ConfigurationInput.

    Raises:
        InvalidDimensionError: For a non-positive or non-finite dimension.
        UnknownUnitError: If ``unit`` is not mm or ft.
        UnknownWardrobeTypeError: If ``wardrobe_type`` is not a member name.
    """
    unit = LengthUnit.parse(unit)
    width, height, depth = validate_dimensions(width, height, depth, unit)
    return ConfigurationInput(
        unit=unit,
        width=width,
        height=height,
        depth=depth,
        type=WardrobeType.parse(wardrobe_type),
    )
