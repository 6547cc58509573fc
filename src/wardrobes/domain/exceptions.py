"""Exceptions raised when wardrobe input fails boundary validation."""

from __future__ import annotations

from typing import Any


class WardrobeInputError(ValueError):
    """Base class for rejected wardrobe input."""


class InvalidDimensionError(WardrobeInputError):
    """Raised when a dimension is not a positive finite number.

    Attributes:
        dimension: Name of the offending dimension (width, height, depth).
        value: The rejected value.
    """

    def __init__(self, dimension: str, value: Any) -> None:
        self.dimension = dimension
        self.value = value
        super().__init__(
            f"{dimension.capitalize()} must be a positive finite number, got {value!r}"
        )


class UnknownWardrobeTypeError(WardrobeInputError):
    """Raised when a value is not one of the supported wardrobe types."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"Unknown wardrobe type: {value!r}. Expected one of: OPENABLE, SLIDING, WALKIN"
        )


class UnknownUnitError(WardrobeInputError):
    """Raised when a value is not one of the supported length units."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Unknown unit: {value!r}. Expected one of: mm, ft")
