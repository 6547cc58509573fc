"""Layout rule engine.

This module provides LayoutRuleEngine, which decides how many columns,
shutters and hinges a wardrobe gets from its width, height and type.
"""

from __future__ import annotations

import logging

from wardrobes.domain.exceptions import UnknownWardrobeTypeError
from wardrobes.domain.value_objects import AdvisoryNote, WardrobeType

from .config import IndustryStandards
from .constants import FT_TO_MM, SLIDING_WIDTH_NOTE, STRAIGHTENER_NOTE
from .models import LayoutDecision
from .units import round_half_up

logger = logging.getLogger(__name__)


class LayoutRuleEngine:
    """Derives columns, shutters and hinge hardware per wardrobe type.

    Rules:
        - Every type splits the width into ~module_width columns.
        - OPENABLE: one hinged shutter per column, hinges by height band,
          straightener above straightener_min_height.
        - SLIDING: two shutters up to sliding_two_shutter_max_width, three
          beyond; out-of-band shutter widths only raise a note.
        - WALKIN: no shutters.
    """

    def __init__(self, standards: IndustryStandards | None = None) -> None:
        self.standards = standards or IndustryStandards()

    def derive_layout(
        self,
        width_mm: float,
        height_mm: float,
        wardrobe_type: WardrobeType,
    ) -> LayoutDecision:
        """Decide the layout for normalized dimensions.

        Args:
            width_mm: Wardrobe width in millimeters.
            height_mm: Wardrobe height in millimeters.
            wardrobe_type: Construction type.

        Returns:
            LayoutDecision with any advisory notes raised.
        """
        columns = self.columns_for(width_mm)

        match wardrobe_type:
            case WardrobeType.OPENABLE:
                decision = self._openable(columns, height_mm)
            case WardrobeType.SLIDING:
                decision = self._sliding(columns, width_mm)
            case WardrobeType.WALKIN:
                decision = LayoutDecision(columns=columns, shutters=0)
            case _:
                raise UnknownWardrobeTypeError(wardrobe_type)

        logger.debug(
            f"{wardrobe_type.value} layout: {decision.columns} columns, "
            f"{decision.shutters} shutters, {decision.hinges_per_shutter} hinges each"
        )
        return decision

    def columns_for(self, width_mm: float) -> int:
        return max(1, round_half_up(width_mm / self.standards.module_width))

    def _openable(self, columns: int, height_mm: float) -> LayoutDecision:
        notes: list[AdvisoryNote] = []
        straightener = height_mm > self.standards.straightener_min_height
        if straightener:
            threshold = self.standards.straightener_min_height
            notes.append(
                AdvisoryNote.warning(
                    STRAIGHTENER_NOTE.format(
                        threshold=threshold, threshold_ft=threshold / FT_TO_MM
                    )
                )
            )
        return LayoutDecision(
            columns=columns,
            shutters=columns,
            hinges_per_shutter=self.standards.hinges_for(height_mm),
            straightener_per_shutter=straightener,
            notes=tuple(notes),
        )

    def _sliding(self, columns: int, width_mm: float) -> LayoutDecision:
        std = self.standards
        shutters = 2 if width_mm <= std.sliding_two_shutter_max_width else 3

        notes: list[AdvisoryNote] = []
        approx_shutter_width = width_mm / shutters
        if not std.sliding_min_shutter <= approx_shutter_width <= std.sliding_max_shutter:
            notes.append(
                AdvisoryNote.info(
                    SLIDING_WIDTH_NOTE.format(
                        width=round_half_up(approx_shutter_width),
                        minimum=std.sliding_min_shutter,
                        maximum=std.sliding_max_shutter,
                    )
                )
            )
        # sliding doors run on tracks, no hinges
        return LayoutDecision(columns=columns, shutters=shutters, notes=tuple(notes))
