"""Output formatters and exporters for wardrobe suggestions."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wardrobes.application.dtos import SuggestionOutput
    from wardrobes.domain import HardwareSchedule


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


class SuggestionFormatter:
    """Formats a wardrobe suggestion as a readable report."""

    def format(self, output: "SuggestionOutput", title: str = "WARDROBE SUGGESTION") -> str:
        """Format the suggested layout with its input and notes.

        Args:
            output: Suggestion to format.
            title: Report title.

        Returns:
            Formatted report string.
        """
        config_input = output.input
        result = output.result
        lines = [
            title,
            "=" * 50,
            f"Type:   {config_input.type.value}",
            (
                f"Size:   {config_input.width:g} x {config_input.height:g} x "
                f"{config_input.depth:g} {config_input.unit.value} (W x H x D)"
            ),
            "",
            f"{'Item':<28} {'Value':>8}",
            "-" * 50,
            f"{'Columns':<28} {result.columns:>8}",
            f"{'Shutters':<28} {result.shutters:>8}",
            f"{'Hinges per shutter':<28} {result.hinges_per_shutter:>8}",
            f"{'Straightener per shutter':<28} {_yes_no(result.straightener_per_shutter):>8}",
            f"{'Hanging rods':<28} {result.rods:>8}",
            f"{'Shelves':<28} {result.shelves:>8}",
            f"{'Drawers':<28} {result.drawers:>8}",
            f"{'Foldable shelf':<28} {_yes_no(result.foldable_shelf):>8}",
        ]

        if result.advisories:
            lines.append("")
            lines.append("NOTES")
            for note in result.advisories:
                lines.append(f"  [{note.severity.value.upper()}] {note.message}")

        return "\n".join(lines)


class HardwareScheduleFormatter:
    """Formats a hardware schedule for display."""

    def format(self, schedule: "HardwareSchedule", title: str = "HARDWARE SCHEDULE") -> str:
        lines = [
            title,
            "=" * 50,
            "",
        ]

        if not schedule.items:
            lines.append("No hardware required.")
            return "\n".join(lines)

        lines.append(f"{'Item':<35} {'Qty':>8}")
        lines.append("-" * 50)
        for item in schedule.items:
            lines.append(f"  {item.name:<33} {item.quantity:>8}")
            if item.notes:
                lines.append(f"    ({item.notes})")

        lines.append("-" * 50)
        lines.append(f"  {'Total pieces':<33} {schedule.total_quantity:>8}")
        return "\n".join(lines)


class JsonExporter:
    """Exports suggestion data as JSON."""

    def export(self, output: "SuggestionOutput") -> str:
        """Export a suggestion as a JSON string."""
        return json.dumps(output.to_dict(), indent=2, ensure_ascii=False)
