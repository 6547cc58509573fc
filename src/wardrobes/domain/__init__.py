"""Domain layer - core business logic."""

from .exceptions import (
    InvalidDimensionError,
    UnknownUnitError,
    UnknownWardrobeTypeError,
    WardrobeInputError,
)
from .services import (
    HardwareSchedule,
    IndustryStandards,
    WardrobeConfigurationAdvisor,
    map_to_smart_default_type,
    suggest_defaults,
    to_millimeters,
)
from .value_objects import (
    AdvisoryNote,
    ConfigurationInput,
    ConfigurationResult,
    LengthUnit,
    NoteSeverity,
    WardrobeType,
)

__all__ = [
    "AdvisoryNote",
    "ConfigurationInput",
    "ConfigurationResult",
    "HardwareSchedule",
    "IndustryStandards",
    "InvalidDimensionError",
    "LengthUnit",
    "NoteSeverity",
    "UnknownUnitError",
    "UnknownWardrobeTypeError",
    "WardrobeConfigurationAdvisor",
    "WardrobeInputError",
    "WardrobeType",
    "map_to_smart_default_type",
    "suggest_defaults",
    "to_millimeters",
]
