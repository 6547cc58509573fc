"""Unit tests for boundary validation of wardrobe input."""

import math

import pytest

from wardrobes.application import (
    build_configuration_input,
    validate_dimension,
    validate_dimensions,
)
from wardrobes.domain import (
    InvalidDimensionError,
    LengthUnit,
    UnknownUnitError,
    UnknownWardrobeTypeError,
    WardrobeInputError,
    WardrobeType,
)


class TestValidateDimension:
    """Tests for validate_dimension()."""

    @pytest.mark.parametrize("value", [1, 0.5, 2400, 1e6])
    def test_accepts_positive_finite(self, value) -> None:
        assert validate_dimension("width", value) == float(value)

    @pytest.mark.parametrize(
        "value", [0, -1, -0.0, math.nan, math.inf, -math.inf, "1200", None, True]
    )
    def test_rejects(self, value) -> None:
        with pytest.raises(InvalidDimensionError) as exc_info:
            validate_dimension("depth", value)
        assert exc_info.value.dimension == "depth"

    def test_error_message_names_dimension(self) -> None:
        with pytest.raises(InvalidDimensionError, match="Height must be a positive"):
            validate_dimension("height", 0)

    def test_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            validate_dimension("width", -5)

    def test_rejects_overflow_in_millimeters(self) -> None:
        """1e306 ft is finite but not once multiplied by 304.8."""
        assert validate_dimension("width", 1e306) == 1e306
        with pytest.raises(InvalidDimensionError) as exc_info:
            validate_dimension("width", 1e306, LengthUnit.FT)
        assert exc_info.value.value == 1e306


class TestValidateDimensions:
    """Tests for validate_dimensions()."""

    def test_returns_floats_in_order(self) -> None:
        assert validate_dimensions(1200, 2400, 600) == (1200.0, 2400.0, 600.0)

    def test_reports_first_bad_dimension(self) -> None:
        with pytest.raises(InvalidDimensionError) as exc_info:
            validate_dimensions(1200, 0, -1)
        assert exc_info.value.dimension == "height"

    def test_unit_is_applied_to_every_dimension(self) -> None:
        with pytest.raises(InvalidDimensionError) as exc_info:
            validate_dimensions(3, 1e306, 2, unit="ft")
        assert exc_info.value.dimension == "height"


class TestBuildConfigurationInput:
    """Tests for build_configuration_input()."""

    def test_defaults(self) -> None:
        config_input = build_configuration_input(1200, 2400, 600)
        assert config_input.unit is LengthUnit.MM
        assert config_input.type is WardrobeType.OPENABLE

    def test_parses_strings(self) -> None:
        config_input = build_configuration_input(3, 7, 2, unit="FT", wardrobe_type="sliding")
        assert config_input.unit is LengthUnit.FT
        assert config_input.type is WardrobeType.SLIDING

    def test_unknown_type_is_rejected(self) -> None:
        with pytest.raises(UnknownWardrobeTypeError):
            build_configuration_input(1200, 2400, 600, wardrobe_type="walk-in")

    def test_unknown_unit_is_rejected(self) -> None:
        with pytest.raises(UnknownUnitError):
            build_configuration_input(1200, 2400, 600, unit="inch")

    def test_feet_overflow_is_rejected(self) -> None:
        with pytest.raises(InvalidDimensionError, match="Width"):
            build_configuration_input(1e306, 2400, 600, unit="ft")

    @pytest.mark.parametrize("bad", [0, math.nan])
    def test_bad_dimension(self, bad) -> None:
        with pytest.raises(WardrobeInputError):
            build_configuration_input(bad, 2400, 600)
