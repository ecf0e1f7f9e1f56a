"""
Student Council API — Meeting and Minutes Models
==================================================

What:  In-memory records for meetings and the minutes taken at them.
Who:   Created by MeetingService / MinutesService, held by InMemoryStore.

Lifecycle:
    Meeting:  created active → archived (one-way; re-archiving restamps
              archived_at). Never deleted.
    Minutes:  created once by a Secretary, immutable afterwards.

Identifiers are milliseconds since the epoch at creation time. Two records
created within the same millisecond get the same id; this is a known
limitation of the id scheme and is not corrected here.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class Meeting:
    id: int
    title: str
    date: str
    created_at: datetime
    updated_at: datetime
    time: Optional[str] = None
    location: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    agenda: List[str] = field(default_factory=list)
    attendees: List[str] = field(default_factory=list)
    # Both stay None until the first archive transition
    archived: Optional[bool] = None
    archived_at: Optional[datetime] = None

    def archive(self, now: datetime) -> None:
        """Mark the meeting archived; calling again only moves the timestamps."""
        self.archived = True
        self.archived_at = now
        self.updated_at = now


@dataclass
class Minutes:
    id: int
    title: str
    content: str
    created_by: int
    created_at: datetime
    meeting_id: Optional[int] = None
    attendees: List[str] = field(default_factory=list)
    decisions: List[str] = field(default_factory=list)
    action_items: List[str] = field(default_factory=list)
