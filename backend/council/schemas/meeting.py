"""
Student Council API — Meeting and Minutes Schemas
===================================================

What:  Explicit request/response contracts for meetings and minutes.
How:   Create schemas list every field a client may submit; unknown keys
       are ignored rather than merged into stored records. Required fields
       are validated before a record is built.

Response Shape:
    `archived` and `archivedAt` are None until a meeting is archived. The
    meeting routes serialize with exclude_none, so both keys are absent from
    the JSON of an active meeting.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from council.schemas.common import CamelModel


# ══════════════════════════════════════════════════════════════════════════
# Meetings
# ══════════════════════════════════════════════════════════════════════════


class MeetingCreate(CamelModel):
    title: str = Field(min_length=1, description="Meeting title")
    date: str = Field(
        min_length=1,
        description="Meeting date, YYYY-MM-DD or ISO 8601 datetime",
    )
    time: Optional[str] = Field(default=None, description="Start time, free text (e.g. 14:00)")
    location: Optional[str] = None
    type: Optional[str] = Field(default=None, description="Meeting type, e.g. general, board")
    description: Optional[str] = None
    agenda: List[str] = Field(default_factory=list)
    attendees: List[str] = Field(default_factory=list)


class MeetingResponse(CamelModel):
    id: int
    title: str
    date: str
    time: Optional[str] = None
    location: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    agenda: List[str] = Field(default_factory=list)
    attendees: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
    archived: Optional[bool] = None
    archived_at: Optional[datetime] = None


class MeetingEnvelope(CamelModel):
    success: bool = True
    meeting: MeetingResponse


# ══════════════════════════════════════════════════════════════════════════
# Minutes
# ══════════════════════════════════════════════════════════════════════════


class MinutesCreate(CamelModel):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1, description="Body of the minutes")
    meeting_id: Optional[int] = Field(default=None, description="Meeting these minutes record")
    attendees: List[str] = Field(default_factory=list)
    decisions: List[str] = Field(default_factory=list)
    action_items: List[str] = Field(default_factory=list)


class MinutesResponse(CamelModel):
    id: int
    title: str
    content: str
    meeting_id: Optional[int] = None
    attendees: List[str] = Field(default_factory=list)
    decisions: List[str] = Field(default_factory=list)
    action_items: List[str] = Field(default_factory=list)
    created_by: int
    created_at: datetime


class MinutesEnvelope(CamelModel):
    success: bool = True
    minutes: MinutesResponse
