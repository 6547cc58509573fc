"""Pytest configuration and shared fixtures for wardrobe tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from wardrobes.domain import (
    ConfigurationInput,
    LengthUnit,
    WardrobeConfigurationAdvisor,
    WardrobeType,
)

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def advisor() -> WardrobeConfigurationAdvisor:
    """Advisor using default industry standards."""
    return WardrobeConfigurationAdvisor()


@pytest.fixture
def make_input():
    """Factory for ConfigurationInput with millimeter defaults."""

    def _make(
        width: float = 1200,
        height: float = 2100,
        depth: float = 600,
        wardrobe_type: WardrobeType | str = WardrobeType.OPENABLE,
        unit: LengthUnit | str = LengthUnit.MM,
    ) -> ConfigurationInput:
        return ConfigurationInput(
            unit=unit, width=width, height=height, depth=depth, type=wardrobe_type
        )

    return _make


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding JSON configuration fixtures."""
    return FIXTURES_PATH
