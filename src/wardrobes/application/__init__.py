"""Application layer - use cases and orchestration."""

from .commands import SuggestDefaultsCommand
from .dtos import SuggestionOutput
from .validation import (
    build_configuration_input,
    validate_dimension,
    validate_dimensions,
)

__all__ = [
    "SuggestDefaultsCommand",
    "SuggestionOutput",
    "build_configuration_input",
    "validate_dimension",
    "validate_dimensions",
]
