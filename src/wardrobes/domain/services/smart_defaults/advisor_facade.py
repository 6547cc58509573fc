"""WardrobeConfigurationAdvisor facade service.

This module provides the WardrobeConfigurationAdvisor class and the
suggest_defaults() entry point, which coordinate unit normalization,
layout rules and storage allocation into one ConfigurationResult.
"""

from __future__ import annotations

import logging

from wardrobes.domain.value_objects import ConfigurationInput, ConfigurationResult

from .config import IndustryStandards
from .hardware_schedule import HardwareScheduleCalculator
from .layout_engine import LayoutRuleEngine
from .models import HardwareSchedule
from .storage_allocator import StorageAllocator
from .units import to_millimeters

logger = logging.getLogger(__name__)


class WardrobeConfigurationAdvisor:
    """Suggests an internal wardrobe layout from its dimensions.

    The pipeline is a single pass: normalize to millimeters, decide columns
    and shutters, then rods, drawers and shelves. Notes from the layout step
    come before notes from the storage step.

    Example:
        >>> from wardrobes.domain import ConfigurationInput, WardrobeType
        >>> advisor = WardrobeConfigurationAdvisor()
        >>> result = advisor.suggest(
        ...     ConfigurationInput(unit="mm", width=1200, height=2400, depth=600,
        ...                        type=WardrobeType.OPENABLE)
        ... )
        >>> result.columns, result.rods
        (2, 3)
    """

    def __init__(self, standards: IndustryStandards | None = None) -> None:
        """Initialize the advisor.

        Args:
            standards: Optional threshold overrides. Uses defaults if not provided.
        """
        self.standards = standards or IndustryStandards()

        self._layout_engine = LayoutRuleEngine(self.standards)
        self._storage_allocator = StorageAllocator(self.standards)
        self._hardware_calculator = HardwareScheduleCalculator()

    def suggest(self, config_input: ConfigurationInput) -> ConfigurationResult:
        """Suggest a configuration for a wardrobe.

        Never raises for finite dimensions; rejecting bad input is the
        caller's responsibility.

        Args:
            config_input: Dimensions, unit and type.

        Returns:
            A freshly built ConfigurationResult.
        """
        width = to_millimeters(config_input.width, config_input.unit)
        height = to_millimeters(config_input.height, config_input.unit)
        depth = to_millimeters(config_input.depth, config_input.unit)
        logger.debug(
            f"Normalized {config_input.type.value} wardrobe to "
            f"{width:.1f} x {height:.1f} x {depth:.1f} mm"
        )

        layout = self._layout_engine.derive_layout(width, height, config_input.type)
        storage = self._storage_allocator.derive_storage(
            width, depth, height, layout.columns
        )

        return ConfigurationResult(
            columns=layout.columns,
            shutters=layout.shutters,
            hinges_per_shutter=layout.hinges_per_shutter,
            straightener_per_shutter=layout.straightener_per_shutter,
            drawers=storage.drawers,
            shelves=storage.shelves,
            rods=storage.rods,
            foldable_shelf=storage.foldable_shelf,
            advisories=layout.notes + storage.notes,
        )

    def hardware_for(self, result: ConfigurationResult) -> HardwareSchedule:
        """Hardware schedule for a suggested configuration."""
        return self._hardware_calculator.calculate(result)


def suggest_defaults(
    config_input: ConfigurationInput,
    standards: IndustryStandards | None = None,
) -> ConfigurationResult:
    """Suggest a wardrobe configuration using the given or default standards."""
    return WardrobeConfigurationAdvisor(standards).suggest(config_input)
