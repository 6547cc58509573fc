"""Unit tests for the wardrobe configuration advisor facade."""

import pytest

from wardrobes.domain import (
    ConfigurationInput,
    IndustryStandards,
    NoteSeverity,
    WardrobeConfigurationAdvisor,
    WardrobeType,
    suggest_defaults,
)


class TestScenarios:
    """End-to-end suggestions for reference wardrobes."""

    def test_tall_openable(self, advisor: WardrobeConfigurationAdvisor, make_input) -> None:
        result = advisor.suggest(make_input(1200, 2400, 600, WardrobeType.OPENABLE))

        assert result.columns == 2
        assert result.shutters == 2
        assert result.hinges_per_shutter == 4
        assert result.straightener_per_shutter is True
        assert result.rods == 3
        assert result.shelves == 3
        assert result.drawers == 4
        assert result.foldable_shelf is False
        assert len(result.notes) == 1
        assert "straightener" in result.notes[0]

    def test_sliding_in_feet_with_shallow_depth(
        self, advisor: WardrobeConfigurationAdvisor, make_input
    ) -> None:
        result = advisor.suggest(make_input(3, 7, 1.5, WardrobeType.SLIDING, unit="ft"))

        assert result.columns == 2
        assert result.shutters == 2
        assert result.hinges_per_shutter == 0
        assert result.straightener_per_shutter is False
        assert result.rods == 0
        assert result.foldable_shelf is True
        assert result.shelves == 8
        assert result.drawers == 3
        # layout notes come before storage notes
        assert result.notes == (
            "Sliding shutter width ≈ 457mm (target 750-950mm).",
            "Depth < 550mm: hangers not recommended. Added 1 foldable shelf.",
        )

    def test_shallow_walk_in(self, advisor: WardrobeConfigurationAdvisor, make_input) -> None:
        result = advisor.suggest(make_input(600, 2000, 300, WardrobeType.WALKIN))

        assert result.columns == 1
        assert result.shutters == 0
        assert result.hinges_per_shutter == 0
        assert result.rods == 0
        assert result.foldable_shelf is True
        assert result.shelves == 4
        assert result.drawers == 2

    def test_wide_low_openable(self, advisor: WardrobeConfigurationAdvisor, make_input) -> None:
        result = advisor.suggest(make_input(2000, 900, 600, WardrobeType.OPENABLE))

        assert result.columns == 3
        assert result.shutters == 3
        assert result.hinges_per_shutter == 2
        assert result.straightener_per_shutter is False
        assert result.rods == 2
        assert result.shelves == 6
        assert result.drawers == 6
        assert result.notes == ()


class TestProperties:
    """Invariants that hold across inputs."""

    @pytest.mark.parametrize("wardrobe_type", list(WardrobeType))
    @pytest.mark.parametrize("width", [100, 600, 1234, 1800, 1801, 4000])
    def test_drawers_clamped(
        self, advisor: WardrobeConfigurationAdvisor, make_input, wardrobe_type, width
    ) -> None:
        result = advisor.suggest(make_input(width=width, wardrobe_type=wardrobe_type))
        assert 2 <= result.drawers <= 6

    @pytest.mark.parametrize("wardrobe_type", list(WardrobeType))
    @pytest.mark.parametrize("height", [800, 2100, 2500])
    @pytest.mark.parametrize("depth,unit", [(549, "mm"), (1.8, "ft"), (300, "mm")])
    def test_depth_threshold_any_unit(
        self,
        advisor: WardrobeConfigurationAdvisor,
        make_input,
        wardrobe_type,
        height,
        depth,
        unit,
    ) -> None:
        if unit == "ft":
            height = height / 304.8
        result = advisor.suggest(
            make_input(width=4 if unit == "ft" else 1200, height=height, depth=depth,
                       wardrobe_type=wardrobe_type, unit=unit)
        )
        assert result.rods == 0
        assert result.foldable_shelf is True

    @pytest.mark.parametrize("width", [300, 1200, 2400, 5000])
    @pytest.mark.parametrize("height", [800, 2400])
    def test_walk_in_has_no_shutters(
        self, advisor: WardrobeConfigurationAdvisor, make_input, width, height
    ) -> None:
        result = advisor.suggest(make_input(width, height, 600, WardrobeType.WALKIN))
        assert result.shutters == 0
        assert result.hinges_per_shutter == 0

    def test_sliding_shutter_boundary(
        self, advisor: WardrobeConfigurationAdvisor, make_input
    ) -> None:
        assert advisor.suggest(make_input(1800, wardrobe_type="SLIDING")).shutters == 2
        assert advisor.suggest(make_input(1801, wardrobe_type="SLIDING")).shutters == 3

    def test_no_rod_configuration_always_has_foldable_shelf(
        self, advisor: WardrobeConfigurationAdvisor, make_input
    ) -> None:
        for depth in (100, 300, 549):
            result = advisor.suggest(make_input(depth=depth))
            assert result.rods == 0
            assert result.foldable_shelf is True

    def test_idempotent(self, advisor: WardrobeConfigurationAdvisor, make_input) -> None:
        config_input = make_input(1500, 2300, 580, WardrobeType.SLIDING)
        assert advisor.suggest(config_input) == advisor.suggest(config_input)

    def test_fresh_result_each_call(
        self, advisor: WardrobeConfigurationAdvisor, make_input
    ) -> None:
        config_input = make_input()
        assert advisor.suggest(config_input) is not advisor.suggest(config_input)


class TestTotality:
    """The advisor never rejects finite input."""

    @pytest.mark.parametrize("width", [0, -1200])
    def test_non_positive_width_still_suggests(
        self, advisor: WardrobeConfigurationAdvisor, make_input, width
    ) -> None:
        result = advisor.suggest(make_input(width=width))
        assert result.columns == 1
        assert result.drawers == 2

    def test_zero_depth_is_shelved(
        self, advisor: WardrobeConfigurationAdvisor, make_input
    ) -> None:
        result = advisor.suggest(make_input(depth=0))
        assert result.rods == 0

    @pytest.mark.parametrize("wardrobe_type", list(WardrobeType))
    def test_width_overflowing_to_infinity(self, make_input, wardrobe_type) -> None:
        """1e306 ft is finite but exceeds the float range once in millimeters."""
        result = suggest_defaults(make_input(1e306, 7, 2, wardrobe_type, unit="ft"))
        assert result.drawers == 6
        assert result.columns > 1

    def test_nan_dimensions(self, make_input) -> None:
        nan = float("nan")
        result = suggest_defaults(make_input(nan, nan, nan))
        assert result.columns == 1
        assert result.drawers == 2


class TestSuggestDefaults:
    """Tests for the module-level entry point."""

    def test_matches_advisor(self, make_input) -> None:
        config_input = make_input(1200, 2400, 600)
        assert suggest_defaults(config_input) == WardrobeConfigurationAdvisor().suggest(
            config_input
        )

    def test_accepts_standards(self) -> None:
        config_input = ConfigurationInput(
            unit="mm", width=1800, height=2000, depth=600, type="OPENABLE"
        )
        result = suggest_defaults(config_input, IndustryStandards(module_width=900))
        assert result.columns == 2
        assert result.shutters == 2

    def test_severities_preserved(self, make_input) -> None:
        result = suggest_defaults(make_input(1200, 2400, 400))
        assert [note.severity for note in result.advisories] == [
            NoteSeverity.WARNING,
            NoteSeverity.WARNING,
        ]
        assert len(result.warnings) == 2


class TestHardwareFor:
    """Tests for the advisor's hardware schedule shortcut."""

    def test_hardware_for_tall_openable(
        self, advisor: WardrobeConfigurationAdvisor, make_input
    ) -> None:
        result = advisor.suggest(make_input(1200, 2400, 600))
        schedule = advisor.hardware_for(result)
        assert schedule.quantity_of("Hinge") == 8
        assert schedule.quantity_of("Straightener") == 2
