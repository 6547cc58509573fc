"""Pydantic schemas for the REST API."""

from wardrobes.web.schemas.common import AdvisorySchema, HardwareItemSchema
from wardrobes.web.schemas.requests import ConfigValidateRequest, SuggestRequest
from wardrobes.web.schemas.responses import (
    ErrorResponseSchema,
    SuggestionInputSchema,
    SuggestionResponseSchema,
    ValidationResultSchema,
    WardrobeTypeListSchema,
    WardrobeTypeSchema,
)

__all__ = [
    # Common
    "AdvisorySchema",
    "HardwareItemSchema",
    # Requests
    "ConfigValidateRequest",
    "SuggestRequest",
    # Responses
    "ErrorResponseSchema",
    "SuggestionInputSchema",
    "SuggestionResponseSchema",
    "ValidationResultSchema",
    "WardrobeTypeListSchema",
    "WardrobeTypeSchema",
]
