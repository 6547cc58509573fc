"""Wardrobe type listing endpoint."""

from fastapi import APIRouter

from wardrobes.domain import WardrobeType
from wardrobes.domain.services.smart_defaults import TYPE_LABELS
from wardrobes.web.schemas.responses import WardrobeTypeListSchema, WardrobeTypeSchema

router = APIRouter(prefix="/wardrobe-types", tags=["types"])


@router.get("", response_model=WardrobeTypeListSchema)
async def list_wardrobe_types() -> WardrobeTypeListSchema:
    """List wardrobe types with the free-text labels that map to each."""
    types = []
    for wardrobe_type in WardrobeType:
        labels = [label for label, mapped in TYPE_LABELS.items() if mapped == wardrobe_type]
        if wardrobe_type == WardrobeType.OPENABLE:
            labels.append("openable")
        types.append(WardrobeTypeSchema(value=wardrobe_type.value, labels=labels))

    return WardrobeTypeListSchema(types=types, default=WardrobeType.OPENABLE.value)
