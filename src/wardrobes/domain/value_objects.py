"""Value objects for wardrobe configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .exceptions import UnknownUnitError, UnknownWardrobeTypeError


class WardrobeType(str, Enum):
    """Construction type of a wardrobe."""

    OPENABLE = "OPENABLE"
    SLIDING = "SLIDING"
    WALKIN = "WALKIN"

    @classmethod
    def parse(cls, value: WardrobeType | str) -> WardrobeType:
        """Strictly parse an enum member or its string value.

        Raises:
            UnknownWardrobeTypeError: If the value is not a member.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise UnknownWardrobeTypeError(value) from None


class LengthUnit(str, Enum):
    """Units accepted for wardrobe dimensions."""

    MM = "mm"
    FT = "ft"

    @classmethod
    def parse(cls, value: LengthUnit | str) -> LengthUnit:
        """Strictly parse an enum member or its string value.

        Raises:
            UnknownUnitError: If the value is not a member.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise UnknownUnitError(value) from None


class NoteSeverity(str, Enum):
    """How strongly an advisory note should be surfaced."""

    INFO = "info"
    WARNING = "warning"


@dataclass(frozen=True)
class AdvisoryNote:
    """A human-readable recommendation attached to a suggestion."""

    severity: NoteSeverity
    message: str

    @classmethod
    def info(cls, message: str) -> AdvisoryNote:
        return cls(severity=NoteSeverity.INFO, message=message)

    @classmethod
    def warning(cls, message: str) -> AdvisoryNote:
        return cls(severity=NoteSeverity.WARNING, message=message)


@dataclass(frozen=True)
class ConfigurationInput:
    """Wardrobe dimensions and type as entered by the user.

    String values for ``unit`` and ``type`` are coerced to their enums.
    Dimensions are stored as given; checking them is the caller's job
    (see ``wardrobes.application.validation``).

    Attributes:
        unit: Unit the three dimensions are expressed in.
        width: Overall width.
        height: Overall height.
        depth: Overall depth.
        type: Wardrobe construction type.
    """

    unit: LengthUnit
    width: float
    height: float
    depth: float
    type: WardrobeType = WardrobeType.OPENABLE

    def __post_init__(self) -> None:
        object.__setattr__(self, "unit", LengthUnit.parse(self.unit))
        object.__setattr__(self, "type", WardrobeType.parse(self.type))


@dataclass(frozen=True)
class ConfigurationResult:
    """Recommended internal layout for a wardrobe.

    Attributes:
        columns: Number of vertical modules.
        shutters: Number of doors (0 for walk-in).
        hinges_per_shutter: Hinges per openable shutter, 0 otherwise.
        straightener_per_shutter: Whether each shutter needs a straightener.
        drawers: Total drawer count.
        shelves: Total shelf count.
        rods: Hanging rod count.
        foldable_shelf: Whether a foldable shelf is included.
        advisories: Ordered advisory notes, layout notes first.
    """

    columns: int
    shutters: int
    hinges_per_shutter: int
    straightener_per_shutter: bool
    drawers: int
    shelves: int
    rods: int
    foldable_shelf: bool
    advisories: tuple[AdvisoryNote, ...] = ()

    @property
    def notes(self) -> tuple[str, ...]:
        """Advisory messages in the order they were produced."""
        return tuple(note.message for note in self.advisories)

    @property
    def warnings(self) -> tuple[AdvisoryNote, ...]:
        return tuple(
            note for note in self.advisories if note.severity == NoteSeverity.WARNING
        )

    @property
    def total_hinges(self) -> int:
        return self.shutters * self.hinges_per_shutter

    @property
    def total_straighteners(self) -> int:
        return self.shutters if self.straightener_per_shutter else 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase shape used by JSON consumers."""
        return {
            "columns": self.columns,
            "shutters": self.shutters,
            "hingesPerShutter": self.hinges_per_shutter,
            "straightenerPerShutter": self.straightener_per_shutter,
            "drawers": self.drawers,
            "shelves": self.shelves,
            "rods": self.rods,
            "foldableShelf": self.foldable_shelf,
            "notes": list(self.notes),
            "advisories": [
                {"severity": note.severity.value, "message": note.message}
                for note in self.advisories
            ],
        }
