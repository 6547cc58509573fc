"""Domain services for wardrobe configuration."""

from .smart_defaults import (
    HardwareSchedule,
    HardwareScheduleCalculator,
    IndustryStandards,
    WardrobeConfigurationAdvisor,
    map_to_smart_default_type,
    suggest_defaults,
    to_millimeters,
)

__all__ = [
    "HardwareSchedule",
    "HardwareScheduleCalculator",
    "IndustryStandards",
    "WardrobeConfigurationAdvisor",
    "map_to_smart_default_type",
    "suggest_defaults",
    "to_millimeters",
]
