"""Unit tests for validate_config() and ValidationResult."""

from pathlib import Path

import pytest

from wardrobes.application.config import (
    ValidationResult,
    load_config,
    validate_config,
)


class TestValidationResult:
    """Tests for ValidationResult exit codes."""

    def test_empty_is_valid(self) -> None:
        result = ValidationResult()
        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0

    def test_warnings_exit_code(self) -> None:
        result = ValidationResult().add_warning("wardrobe", "Shallow")
        assert result.is_valid
        assert result.exit_code == 2

    def test_errors_win_over_warnings(self) -> None:
        result = ValidationResult()
        result.add_warning("wardrobe", "Shallow").add_error("standards", "Broken")
        assert not result.is_valid
        assert result.exit_code == 1


class TestValidateConfig:
    """Tests for validate_config() against fixture files."""

    def _validate(self, fixtures_path: Path, name: str) -> ValidationResult:
        return validate_config(load_config(fixtures_path / name))

    def test_clean_config(self, fixtures_path: Path) -> None:
        result = self._validate(fixtures_path, "valid_minimal.json")
        assert result.errors == []
        assert result.warnings == []

    def test_advisories_become_warnings(self, fixtures_path: Path) -> None:
        result = self._validate(fixtures_path, "valid_with_warnings.json")

        assert result.is_valid
        assert len(result.warnings) == 2
        assert all(w.path == "wardrobe" for w in result.warnings)
        assert "straightener" in result.warnings[0].message
        assert "foldable shelf" in result.warnings[1].message

    def test_feet_config_sliding_notes(self, fixtures_path: Path) -> None:
        result = self._validate(fixtures_path, "valid_feet.json")
        assert result.exit_code == 2
        assert result.warnings[0].message.startswith("Sliding shutter width")

    def test_unknown_type_label(self, fixtures_path: Path) -> None:
        result = self._validate(fixtures_path, "unknown_type_label.json")

        assert result.exit_code == 2
        assert len(result.warnings) == 1
        warning = result.warnings[0]
        assert warning.path == "wardrobe.type"
        assert "treated as openable" in warning.message
        assert warning.suggestion is not None

    def test_custom_standards_applied(self, fixtures_path: Path) -> None:
        """Depth 450 is fine once min_depth_for_rod is lowered to 400."""
        result = self._validate(fixtures_path, "custom_standards.json")
        assert result.exit_code == 0

    def test_inconsistent_standards(self, fixtures_path: Path) -> None:
        result = self._validate(fixtures_path, "bad_standards.json")

        assert result.exit_code == 1
        assert result.errors[0].path == "standards"
        assert "min_drawers" in result.errors[0].message

    def test_overflowing_dimension_is_an_error(self, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "valid_feet.json")
        config = config.model_copy(
            update={"wardrobe": config.wardrobe.model_copy(update={"depth": 1e306})}
        )
        result = validate_config(config)

        assert result.exit_code == 1
        assert result.errors[0].path == "wardrobe.depth"
        assert result.warnings == []

    @pytest.mark.parametrize("label", ["walkin", "WALK-IN", " Sliding ", "OPENABLE"])
    def test_known_labels_do_not_warn(self, fixtures_path: Path, label: str) -> None:
        config = load_config(fixtures_path / "valid_minimal.json")
        config = config.model_copy(
            update={"wardrobe": config.wardrobe.model_copy(update={"type": label})}
        )
        result = validate_config(config)
        assert not any(w.path == "wardrobe.type" for w in result.warnings)
