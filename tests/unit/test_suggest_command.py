"""Unit tests for SuggestDefaultsCommand."""

import logging
import math

import pytest

from wardrobes.application import SuggestDefaultsCommand
from wardrobes.domain import (
    IndustryStandards,
    InvalidDimensionError,
    WardrobeConfigurationAdvisor,
)


class TestSuggestDefaultsCommand:
    """Tests for SuggestDefaultsCommand.execute()."""

    def test_returns_result_and_hardware(self, make_input) -> None:
        config_input = make_input(1200, 2400, 600)
        output = SuggestDefaultsCommand().execute(config_input)

        assert output.input is config_input
        assert output.result.columns == 2
        assert output.hardware.quantity_of("Hinge") == 8
        assert output.hardware.total_quantity == 106

    def test_uses_given_standards(self, make_input) -> None:
        command = SuggestDefaultsCommand(standards=IndustryStandards(module_width=400))
        assert command.execute(make_input(1200)).result.columns == 3

    def test_uses_given_advisor(self, make_input) -> None:
        advisor = WardrobeConfigurationAdvisor(IndustryStandards(min_depth_for_rod=700))
        output = SuggestDefaultsCommand(advisor=advisor).execute(make_input(depth=600))
        assert output.result.rods == 0

    @pytest.mark.parametrize(
        "overrides,dimension",
        [
            ({"width": 0}, "width"),
            ({"height": -2400}, "height"),
            ({"depth": math.nan}, "depth"),
            ({"width": math.inf}, "width"),
        ],
    )
    def test_rejects_bad_dimensions(self, make_input, overrides, dimension) -> None:
        with pytest.raises(InvalidDimensionError) as exc_info:
            SuggestDefaultsCommand().execute(make_input(**overrides))
        assert exc_info.value.dimension == dimension

    def test_rejects_feet_overflowing_in_millimeters(self, make_input) -> None:
        with pytest.raises(InvalidDimensionError) as exc_info:
            SuggestDefaultsCommand().execute(make_input(1e306, 7, 2, unit="ft"))
        assert exc_info.value.dimension == "width"

    def test_rejection_is_logged(self, make_input, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="wardrobes.application.commands"):
            with pytest.raises(InvalidDimensionError):
                SuggestDefaultsCommand().execute(make_input(depth=0))
        assert "Rejected wardrobe input" in caplog.text
