"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wardrobes.domain import (
    ConfigurationInput,
    ConfigurationResult,
    HardwareSchedule,
)


@dataclass(frozen=True)
class SuggestionOutput:
    """Output DTO for a wardrobe suggestion.

    Attributes:
        input: The validated input the suggestion was made for.
        result: Suggested configuration.
        hardware: Hardware implied by the suggestion.
    """

    input: ConfigurationInput
    result: ConfigurationResult
    hardware: HardwareSchedule

    def to_dict(self) -> dict[str, Any]:
        data = self.result.to_dict()
        data["input"] = {
            "unit": self.input.unit.value,
            "width": self.input.width,
            "height": self.input.height,
            "depth": self.input.depth,
            "type": self.input.type.value,
        }
        data["hardware"] = [
            {"name": item.name, "quantity": item.quantity, "notes": item.notes}
            for item in self.hardware.items
        ]
        return data
