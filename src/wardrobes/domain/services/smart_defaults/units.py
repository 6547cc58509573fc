"""Unit normalization and rounding helpers."""

from __future__ import annotations

import math
import sys

from wardrobes.domain.value_objects import LengthUnit

from .constants import FT_TO_MM


def to_millimeters(value: float, unit: LengthUnit | str) -> float:
    """Convert a length to millimeters.

    Args:
        value: Length expressed in ``unit``.
        unit: ``mm`` (identity) or ``ft``.

    Returns:
        Length in millimeters.
    """
    if LengthUnit.parse(unit) == LengthUnit.FT:
        return value * FT_TO_MM
    return value


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going up.

    Python's round() uses banker's rounding (2.5 -> 2); module and drawer
    counts need 2.5 -> 3. Infinities saturate at +/-sys.maxsize and NaN
    rounds to 0, so the result is always an int.
    """
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return sys.maxsize if value > 0 else -sys.maxsize
    return math.floor(value + 0.5)


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))
