"""
Student Council API — Meeting and Minutes Service
===================================================

What:  Creates, lists and archives meetings; records and lists minutes.
Who:   Called by routes/meetings.py and routes/minutes.py.

Rules:
    - Ids come from InMemoryStore.next_id() (epoch milliseconds).
    - Archiving is one-way and repeatable: a second archive keeps
      archived=True and only restamps archived_at/updated_at.
    - Minutes are immutable once created.
    Role checks happen in the route dependencies before these methods run.
"""

import logging
import re
from typing import List, Optional, Union

from council.exceptions import NotFoundError
from council.models.meeting import Meeting, Minutes
from council.schemas.meeting import (
    MeetingCreate,
    MeetingResponse,
    MinutesCreate,
    MinutesResponse,
)
from council.store import InMemoryStore

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_meeting_id(raw: str) -> Optional[int]:
    """Read the leading integer of a path id ("12abc" → 12, "abc" → None)."""
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # More digits than int() accepts from a string
        return None


class MeetingService:
    """Business logic for meetings and their minutes."""

    def list_meetings(self, store: InMemoryStore) -> List[MeetingResponse]:
        return [MeetingResponse.model_validate(m) for m in store.list_meetings()]

    def create_meeting(self, store: InMemoryStore, payload: MeetingCreate) -> MeetingResponse:
        now = store.now()
        meeting = store.add_meeting(
            Meeting(
                id=store.next_id(),
                created_at=now,
                updated_at=now,
                **payload.model_dump(),
            )
        )
        logger.info("Meeting %s created: %s on %s", meeting.id, meeting.title, meeting.date)
        return MeetingResponse.model_validate(meeting)

    def archive_meeting(self, store: InMemoryStore, meeting_id: Union[int, str]) -> MeetingResponse:
        """
        Archive a meeting by id.

        `meeting_id` may be the raw path segment; it is read with
        parse_meeting_id, so "12abc" archives meeting 12.

        Raises:
            NotFoundError: No meeting has that id, or the id has no
                leading integer (→ 404).
        """
        parsed = meeting_id if isinstance(meeting_id, int) else parse_meeting_id(meeting_id)
        meeting = store.get_meeting(parsed) if parsed is not None else None
        if meeting is None:
            raise NotFoundError(resource="meeting", resource_id=str(meeting_id))

        meeting.archive(store.now())
        logger.info("Meeting %s archived", meeting.id)
        return MeetingResponse.model_validate(meeting)

    # ── Minutes ───────────────────────────────────────────────────────────

    def list_minutes(self, store: InMemoryStore) -> List[MinutesResponse]:
        return [MinutesResponse.model_validate(m) for m in store.list_minutes()]

    def create_minutes(
        self,
        store: InMemoryStore,
        payload: MinutesCreate,
        created_by: int,
    ) -> MinutesResponse:
        minutes = store.add_minutes(
            Minutes(
                id=store.next_id(),
                created_by=created_by,
                created_at=store.now(),
                **payload.model_dump(),
            )
        )
        logger.info("Minutes %s recorded by user %s", minutes.id, created_by)
        return MinutesResponse.model_validate(minutes)


meeting_service = MeetingService()
