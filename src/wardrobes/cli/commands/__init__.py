"""CLI commands for wardrobe suggestions."""

from .validate import validate as validate_command

__all__ = ["validate_command"]
