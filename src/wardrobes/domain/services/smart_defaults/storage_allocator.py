"""Hanging and storage allocation.

This module provides StorageAllocator, which decides rods, drawers and
shelves once the column count is known.
"""

from __future__ import annotations

import logging
import math

from wardrobes.domain.value_objects import AdvisoryNote

from .config import IndustryStandards
from .constants import SHALLOW_DEPTH_NOTE
from .models import StorageAllocation
from .units import clamp, round_half_up

logger = logging.getLogger(__name__)


class StorageAllocator:
    """Allocates hanging rods, drawers and shelves.

    Rods need at least min_depth_for_rod of depth; below that a foldable
    shelf is substituted. Tall wardrobes get a double-hang plus a long-hang
    column. Drawers scale with width and are clamped. Shelves sit above each
    hanging section, with extra shelves in columns that host no rod.
    """

    def __init__(self, standards: IndustryStandards | None = None) -> None:
        self.standards = standards or IndustryStandards()

    def derive_storage(
        self,
        width_mm: float,
        depth_mm: float,
        height_mm: float,
        columns: int,
    ) -> StorageAllocation:
        """Allocate storage for normalized dimensions.

        Args:
            width_mm: Wardrobe width in millimeters.
            depth_mm: Wardrobe depth in millimeters.
            height_mm: Wardrobe height in millimeters.
            columns: Column count chosen by the layout rule engine.

        Returns:
            StorageAllocation with any advisory notes raised.
        """
        notes: list[AdvisoryNote] = []
        rods, foldable_shelf = self._rods(depth_mm, height_mm, columns, notes)
        drawers = self.drawers_for(width_mm)

        if rods == 0:
            shelves = columns * self.standards.shelves_per_shelved_column
            foldable_shelf = True
        else:
            hanging_columns = min(
                columns, math.ceil(rods / self.standards.rods_per_hanging_column)
            )
            shelves = rods + (
                max(0, columns - hanging_columns)
                * self.standards.shelves_per_open_column
            )

        logger.debug(
            f"Storage: {rods} rods, {shelves} shelves, {drawers} drawers, "
            f"foldable_shelf={foldable_shelf}"
        )
        return StorageAllocation(
            rods=rods,
            foldable_shelf=foldable_shelf,
            drawers=drawers,
            shelves=shelves,
            notes=tuple(notes),
        )

    def drawers_for(self, width_mm: float) -> int:
        std = self.standards
        return clamp(
            round_half_up(width_mm / std.drawer_width), std.min_drawers, std.max_drawers
        )

    def _rods(
        self,
        depth_mm: float,
        height_mm: float,
        columns: int,
        notes: list[AdvisoryNote],
    ) -> tuple[int, bool]:
        std = self.standards
        if depth_mm < std.min_depth_for_rod:
            notes.append(
                AdvisoryNote.warning(
                    SHALLOW_DEPTH_NOTE.format(threshold=std.min_depth_for_rod)
                )
            )
            return 0, True

        if height_mm >= std.double_hang_min_height:
            # double-hang, plus a long-hang column when there is room
            return (2 if columns == 1 else 3), False
        return (1 if columns == 1 else 2), False
