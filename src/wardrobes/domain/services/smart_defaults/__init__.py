"""Wardrobe smart-defaults domain services and data models.

This package provides:
- IndustryStandards with every sizing threshold
- Unit normalization to millimeters
- LayoutRuleEngine for columns, shutters and hinges
- StorageAllocator for rods, drawers and shelves
- HardwareScheduleCalculator for derived hardware quantities
- WardrobeConfigurationAdvisor facade and suggest_defaults() entry point
"""

from __future__ import annotations

from .constants import FT_TO_MM
from .config import IndustryStandards
from .units import clamp, round_half_up, to_millimeters
from .models import (
    HardwareItem,
    HardwareSchedule,
    LayoutDecision,
    StorageAllocation,
)
from .layout_engine import LayoutRuleEngine
from .storage_allocator import StorageAllocator
from .hardware_schedule import HardwareScheduleCalculator
from .type_mapping import TYPE_LABELS, map_to_smart_default_type
from .advisor_facade import WardrobeConfigurationAdvisor, suggest_defaults

__all__ = [
    # Constants
    "FT_TO_MM",
    "TYPE_LABELS",
    # Config
    "IndustryStandards",
    # Units
    "clamp",
    "round_half_up",
    "to_millimeters",
    # Models
    "HardwareItem",
    "HardwareSchedule",
    "LayoutDecision",
    "StorageAllocation",
    # Specialized services
    "LayoutRuleEngine",
    "StorageAllocator",
    "HardwareScheduleCalculator",
    "map_to_smart_default_type",
    # Main facade
    "WardrobeConfigurationAdvisor",
    "suggest_defaults",
]
