"""Wardrobe smart-default constants.

This module provides:
- The exact feet-to-millimeter conversion factor
- Advisory note templates
- Hardware item names and per-joint fastener counts
"""

from __future__ import annotations


FT_TO_MM: float = 304.8  # exact, by definition of the international foot


# --- Advisory note templates ---

STRAIGHTENER_NOTE = (
    "Door height > {threshold:g}mm (~{threshold_ft:.0f}ft): "
    "add straightener on each shutter."
)
SLIDING_WIDTH_NOTE = (
    "Sliding shutter width ≈ {width}mm (target {minimum:g}-{maximum:g}mm)."
)
SHALLOW_DEPTH_NOTE = (
    "Depth < {threshold:g}mm: hangers not recommended. Added 1 foldable shelf."
)


# --- Hardware schedule ---

LOCK_SPEC = "Lock"
CENTER_LOCK_SPEC = "Center Lock Set"
HANDLE_SPEC = "Handle"
HINGE_SPEC = "Hinge"
DRAWER_SLIDE_SPEC = "Drawer Slide Set"
MINIFIX_SPEC = "Minifix"
DOWEL_SPEC = "Dowel"
HANGING_ROD_SPEC = "Hanging Rod"
STRAIGHTENER_SPEC = "Straightener"

# top/bottom to both sides
CARCASS_BASE_JOINTS = 4
JOINTS_PER_SHELF = 2
MINIFIX_PER_JOINT = 3
DOWELS_PER_JOINT = 5
