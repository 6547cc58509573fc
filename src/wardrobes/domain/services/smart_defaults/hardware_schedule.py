"""Hardware schedule calculation.

This module provides HardwareScheduleCalculator for turning a suggested
wardrobe configuration into hardware quantities.
"""

from __future__ import annotations

from wardrobes.domain.value_objects import ConfigurationResult

from .constants import (
    CARCASS_BASE_JOINTS,
    CENTER_LOCK_SPEC,
    DOWEL_SPEC,
    DOWELS_PER_JOINT,
    DRAWER_SLIDE_SPEC,
    HANDLE_SPEC,
    HANGING_ROD_SPEC,
    HINGE_SPEC,
    JOINTS_PER_SHELF,
    LOCK_SPEC,
    MINIFIX_PER_JOINT,
    MINIFIX_SPEC,
    STRAIGHTENER_SPEC,
)
from .models import HardwareItem, HardwareSchedule


class HardwareScheduleCalculator:
    """Service for calculating hardware implied by a configuration.

    Rules:
        - Lock: one per shutter, plus a center lock set for a shutter pair
        - Handle: one per shutter and one per drawer
        - Hinge: hinges_per_shutter for every shutter
        - Drawer slide set: one per drawer
        - Minifix/dowel: per carcass joint (top, bottom and each shelf)
        - Hanging rod: one per rod
        - Straightener: one per shutter when flagged
    """

    def calculate(self, result: ConfigurationResult) -> HardwareSchedule:
        """Calculate the hardware schedule for a configuration.

        Items with zero quantity are left out.

        Args:
            result: Suggested configuration.

        Returns:
            HardwareSchedule in a stable order.
        """
        joints = CARCASS_BASE_JOINTS + result.shelves * JOINTS_PER_SHELF

        candidates = [
            HardwareItem(LOCK_SPEC, result.shutters, "One per shutter"),
            HardwareItem(
                CENTER_LOCK_SPEC,
                1 if result.shutters == 2 else 0,
                "Shutter pair",
            ),
            HardwareItem(HANDLE_SPEC, result.shutters + result.drawers, "Shutters and drawers"),
            HardwareItem(
                HINGE_SPEC,
                result.total_hinges,
                f"{result.hinges_per_shutter} per shutter",
            ),
            HardwareItem(DRAWER_SLIDE_SPEC, result.drawers, "2 pcs per set"),
            HardwareItem(MINIFIX_SPEC, joints * MINIFIX_PER_JOINT, "Carcass joints"),
            HardwareItem(DOWEL_SPEC, joints * DOWELS_PER_JOINT, "Carcass joints"),
            HardwareItem(HANGING_ROD_SPEC, result.rods),
            HardwareItem(
                STRAIGHTENER_SPEC,
                result.total_straighteners,
                "Tall shutter warp prevention",
            ),
        ]
        return HardwareSchedule(
            items=tuple(item for item in candidates if item.quantity > 0)
        )
