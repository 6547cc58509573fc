"""Validation structures and advisory checks for wardrobe configurations.

A configuration that passes the Pydantic schema can still be unusable
(inconsistent standards overrides) or produce a wardrobe the advisor has
concerns about. validate_config() reports the first as errors and the
second as warnings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from wardrobes.application.config.adapter import config_to_input, config_to_standards
from wardrobes.application.config.schema import WardrobeConfiguration
from wardrobes.application.validation import validate_dimensions
from wardrobes.domain import (
    InvalidDimensionError,
    WardrobeConfigurationAdvisor,
    WardrobeType,
)
from wardrobes.domain.services.smart_defaults import TYPE_LABELS


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "standards")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 valid, 1 errors, 2 valid with warnings."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def _check_type_label(config: WardrobeConfiguration, result: ValidationResult) -> None:
    """Warn when the wardrobe type label falls back to OPENABLE.

    Args:
        config: Loaded configuration.
        result: Result the warning is added to.
    """
    label = config.wardrobe.type.strip().lower()
    if label in TYPE_LABELS or label == WardrobeType.OPENABLE.value.lower():
        return
    result.add_warning(
        path="wardrobe.type",
        message=f"Unrecognized wardrobe type '{config.wardrobe.type}', treated as openable",
        suggestion="Use one of: openable, sliding, walkin, walk-in",
    )


def validate_config(config: WardrobeConfiguration) -> ValidationResult:
    """Run full validation on a loaded configuration.

    Args:
        config: Configuration that already passed schema validation.

    Returns:
        ValidationResult with standards or dimension errors and advisory
        warnings.
    """
    result = ValidationResult()

    try:
        standards = config_to_standards(config)
    except ValueError as e:
        return result.add_error(path="standards", message=str(e))

    wardrobe = config.wardrobe
    try:
        validate_dimensions(
            wardrobe.width, wardrobe.height, wardrobe.depth, wardrobe.unit
        )
    except InvalidDimensionError as e:
        return result.add_error(
            path=f"wardrobe.{e.dimension}", message=str(e), value=e.value
        )

    _check_type_label(config, result)

    suggestion = WardrobeConfigurationAdvisor(standards).suggest(config_to_input(config))
    for note in suggestion.advisories:
        result.add_warning(path="wardrobe", message=note.message)

    return result
