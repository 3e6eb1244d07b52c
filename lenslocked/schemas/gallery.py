"""Gallery schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class GalleryCreate(BaseModel):
    """Create a new gallery."""

    title: str = Field("", max_length=255)


class GalleryResponse(BaseModel):
    """Gallery response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    created_at: datetime
    updated_at: datetime
