"""Industry standards used by the wardrobe smart-defaults engine.

This module provides IndustryStandards, the single place every sizing
threshold of the rule engine is read from.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IndustryStandards:
    """Sizing thresholds for wardrobe layout suggestions.

    All lengths are in millimeters.

    Attributes:
        module_width: Standard width of one vertical module (column).
        sliding_min_shutter: Narrowest comfortable sliding shutter.
        sliding_max_shutter: Widest comfortable sliding shutter.
        sliding_two_shutter_max_width: Widest wardrobe served by two sliding
            shutters; anything wider gets three.
        min_depth_for_rod: Shallowest depth at which garments can hang.
        double_hang_min_height: Lowest height that fits two stacked rods.
        straightener_min_height: Shutters taller than this need a straightener.
        hinge_bands: Ascending (max_height, hinges) pairs for openable shutters.
        max_hinges: Hinge count for shutters taller than the last band.
        drawer_width: Wardrobe width that accounts for one drawer.
        min_drawers: Lower drawer clamp.
        max_drawers: Upper drawer clamp.
        shelves_per_shelved_column: Shelves per column when nothing hangs.
        shelves_per_open_column: Extra shelves per column with no rod.
        rods_per_hanging_column: Rods one column can host (double-hang).
    """

    module_width: float = 600.0
    sliding_min_shutter: float = 750.0
    sliding_max_shutter: float = 950.0
    sliding_two_shutter_max_width: float = 1800.0
    min_depth_for_rod: float = 550.0
    double_hang_min_height: float = 2100.0  # ~7 ft
    straightener_min_height: float = 2100.0
    hinge_bands: tuple[tuple[float, int], ...] = ((900.0, 2), (1500.0, 3), (2100.0, 4))
    max_hinges: int = 4
    drawer_width: float = 300.0
    min_drawers: int = 2
    max_drawers: int = 6
    shelves_per_shelved_column: int = 4
    shelves_per_open_column: int = 2
    rods_per_hanging_column: int = 2

    def __post_init__(self) -> None:
        for name in (
            "module_width",
            "sliding_min_shutter",
            "sliding_max_shutter",
            "sliding_two_shutter_max_width",
            "min_depth_for_rod",
            "double_hang_min_height",
            "straightener_min_height",
            "drawer_width",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.sliding_min_shutter > self.sliding_max_shutter:
            raise ValueError("sliding_min_shutter must not exceed sliding_max_shutter")
        if self.min_drawers < 0:
            raise ValueError("min_drawers must be non-negative")
        if self.min_drawers > self.max_drawers:
            raise ValueError("min_drawers must not exceed max_drawers")
        if self.rods_per_hanging_column < 1:
            raise ValueError("rods_per_hanging_column must be at least 1")
        if self.shelves_per_shelved_column < 0 or self.shelves_per_open_column < 0:
            raise ValueError("shelf counts must be non-negative")
        if not self.hinge_bands:
            raise ValueError("hinge_bands must not be empty")
        heights = [height for height, _ in self.hinge_bands]
        if heights != sorted(heights):
            raise ValueError("hinge_bands must be in ascending height order")
        if any(hinges < 0 for _, hinges in self.hinge_bands) or self.max_hinges < 0:
            raise ValueError("hinge counts must be non-negative")

    def hinges_for(self, height_mm: float) -> int:
        """Look up hinges per shutter for a shutter height."""
        for max_height, hinges in self.hinge_bands:
            if height_mm <= max_height:
                return hinges
        return self.max_hinges
