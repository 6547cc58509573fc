"""Smart-defaults data models.

This module provides dataclasses for:
- LayoutDecision: Column, shutter and hinge decisions for a wardrobe
- StorageAllocation: Rod, drawer and shelf decisions for a wardrobe
- HardwareItem: A single hardware line with quantity
- HardwareSchedule: Hardware implied by a suggested configuration
"""

from __future__ import annotations

from dataclasses import dataclass

from wardrobes.domain.value_objects import AdvisoryNote


@dataclass(frozen=True)
class LayoutDecision:
    """Output of the layout rule engine.

    Attributes:
        columns: Number of vertical modules.
        shutters: Number of doors.
        hinges_per_shutter: Hinges per openable shutter, 0 otherwise.
        straightener_per_shutter: Whether shutters are tall enough to warp.
        notes: Advisory notes raised while deciding the layout.
    """

    columns: int
    shutters: int
    hinges_per_shutter: int = 0
    straightener_per_shutter: bool = False
    notes: tuple[AdvisoryNote, ...] = ()

    def __post_init__(self) -> None:
        if self.columns < 1:
            raise ValueError("columns must be at least 1")
        if self.shutters < 0:
            raise ValueError("shutters must be non-negative")


@dataclass(frozen=True)
class StorageAllocation:
    """Output of the hanging/storage allocator.

    Attributes:
        rods: Hanging rod count.
        foldable_shelf: Whether a foldable shelf is included.
        drawers: Total drawer count.
        shelves: Total shelf count.
        notes: Advisory notes raised while allocating storage.
    """

    rods: int
    foldable_shelf: bool
    drawers: int
    shelves: int
    notes: tuple[AdvisoryNote, ...] = ()


@dataclass(frozen=True)
class HardwareItem:
    """Hardware required by a wardrobe.

    Attributes:
        name: Human-readable name of the hardware item.
        quantity: Number of items required.
        notes: Optional notes about usage.
    """

    name: str
    quantity: int
    notes: str | None = None

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError("Hardware quantity must be non-negative")


@dataclass(frozen=True)
class HardwareSchedule:
    """Hardware list for one suggested wardrobe configuration."""

    items: tuple[HardwareItem, ...] = ()

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)

    def quantity_of(self, name: str) -> int:
        """Quantity of the named item, or 0 when it is not scheduled."""
        return sum(item.quantity for item in self.items if item.name == name)

    def __contains__(self, name: object) -> bool:
        return any(item.name == name for item in self.items)

    def __len__(self) -> int:
        return len(self.items)
