"""Student Council API — Announcement Schemas."""

from datetime import datetime

from pydantic import Field

from council.schemas.common import CamelModel


class AnnouncementCreate(CamelModel):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    priority: str = Field(default="normal", description="normal, high or urgent")


class AnnouncementResponse(CamelModel):
    id: int
    title: str
    content: str
    priority: str
    author: str = Field(description="Creator's display name at creation time")
    created_at: datetime


class AnnouncementEnvelope(CamelModel):
    success: bool = True
    announcement: AnnouncementResponse
