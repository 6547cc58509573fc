"""Free-text wardrobe type labels."""

from __future__ import annotations

from wardrobes.domain.value_objects import WardrobeType

# Labels as they appear in quote forms; anything else is treated as openable.
TYPE_LABELS: dict[str, WardrobeType] = {
    "sliding": WardrobeType.SLIDING,
    "walkin": WardrobeType.WALKIN,
    "walk-in": WardrobeType.WALKIN,
}


def map_to_smart_default_type(label: str) -> WardrobeType:
    """Map a free-text wardrobe label to a WardrobeType.

    Matching is case-insensitive and ignores surrounding whitespace.
    Unrecognized labels default to OPENABLE.

    Examples:
        >>> map_to_smart_default_type("Walk-In")
        <WardrobeType.WALKIN: 'WALKIN'>
        >>> map_to_smart_default_type("hinged")
        <WardrobeType.OPENABLE: 'OPENABLE'>
    """
    return TYPE_LABELS.get(label.strip().lower(), WardrobeType.OPENABLE)
