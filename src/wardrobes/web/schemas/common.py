"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, Field

from wardrobes.domain import NoteSeverity


class AdvisorySchema(BaseModel):
    """Advisory note attached to a suggestion."""

    severity: NoteSeverity = Field(..., description="info or warning")
    message: str = Field(..., description="Human-readable note")


class HardwareItemSchema(BaseModel):
    """Hardware line in the hardware schedule."""

    name: str = Field(..., description="Hardware item name")
    quantity: int = Field(..., ge=0, description="Number of items")
    notes: str | None = Field(default=None, description="Usage notes")
