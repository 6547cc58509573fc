"""Unit tests for unit normalization and rounding helpers."""

import math
import sys

import pytest

from wardrobes.domain import LengthUnit, UnknownUnitError
from wardrobes.domain.services.smart_defaults import (
    FT_TO_MM,
    clamp,
    round_half_up,
    to_millimeters,
)


class TestToMillimeters:
    """Tests for to_millimeters()."""

    def test_mm_is_identity(self) -> None:
        assert to_millimeters(1234.5, LengthUnit.MM) == 1234.5

    def test_feet_convert_exactly(self) -> None:
        assert FT_TO_MM == 304.8
        assert to_millimeters(1, LengthUnit.FT) == pytest.approx(304.8)
        assert to_millimeters(7, "ft") == pytest.approx(2133.6)

    def test_accepts_string_units(self) -> None:
        assert to_millimeters(600, "mm") == 600
        assert to_millimeters(2, "FT") == pytest.approx(609.6)

    @pytest.mark.parametrize("value", [0.5, 1.5, 3.0, 7.25])
    def test_idempotent_once_in_mm(self, value: float) -> None:
        once = to_millimeters(value, "ft")
        assert to_millimeters(once, "mm") == once

    def test_unknown_unit_rejected(self) -> None:
        with pytest.raises(UnknownUnitError):
            to_millimeters(10, "inch")


class TestRoundHalfUp:
    """Tests for round_half_up()."""

    @pytest.mark.parametrize(
        "value,expected",
        [(1.5, 2), (2.5, 3), (0.5, 1), (1.49, 1), (3.0, 3), (0.0, 0)],
    )
    def test_halves_round_up(self, value: float, expected: int) -> None:
        assert round_half_up(value) == expected

    def test_differs_from_builtin_round(self) -> None:
        # builtin round() would give 2
        assert round_half_up(2.5) == 3
        assert round(2.5) == 2

    def test_non_finite_values_still_round(self) -> None:
        assert round_half_up(math.inf) == sys.maxsize
        assert round_half_up(-math.inf) == -sys.maxsize
        assert round_half_up(math.nan) == 0


class TestClamp:
    """Tests for clamp()."""

    def test_within_range_unchanged(self) -> None:
        assert clamp(4, 2, 6) == 4

    def test_bounds(self) -> None:
        assert clamp(0, 2, 6) == 2
        assert clamp(9, 2, 6) == 6
