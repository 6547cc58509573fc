"""Infrastructure layer - output formatting."""

from .formatters import HardwareScheduleFormatter, JsonExporter, SuggestionFormatter

__all__ = [
    "HardwareScheduleFormatter",
    "JsonExporter",
    "SuggestionFormatter",
]
