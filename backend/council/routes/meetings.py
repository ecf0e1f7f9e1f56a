"""
Student Council API — Meeting Routes
======================================

What:  List and create meetings (any authenticated caller) and archive them
       (Secretary only).

The meeting responses are serialized with exclude_none, so `archived` and
`archivedAt` only appear once a meeting has been archived.
"""

from typing import List

from fastapi import APIRouter, Depends

from council.models.user import Capability
from council.schemas.common import ErrorResponse
from council.schemas.meeting import MeetingCreate, MeetingEnvelope, MeetingResponse
from council.security import Identity, require_auth, require_capability
from council.services.meeting_service import meeting_service
from council.store import InMemoryStore, get_store

router = APIRouter(prefix="/api/meetings", tags=["Meetings"])


@router.get(
    "",
    response_model=List[MeetingResponse],
    response_model_exclude_none=True,
    summary="List all meetings in creation order",
)
async def list_meetings(
    identity: Identity = Depends(require_auth),
    store: InMemoryStore = Depends(get_store),
) -> List[MeetingResponse]:
    return meeting_service.list_meetings(store)


@router.post(
    "",
    response_model=MeetingEnvelope,
    response_model_exclude_none=True,
    summary="Create a meeting",
)
async def create_meeting(
    body: MeetingCreate,
    identity: Identity = Depends(require_auth),
    store: InMemoryStore = Depends(get_store),
) -> MeetingEnvelope:
    return MeetingEnvelope(meeting=meeting_service.create_meeting(store, body))


@router.put(
    "/{meeting_id}/archive",
    response_model=MeetingEnvelope,
    response_model_exclude_none=True,
    responses={
        403: {"description": "Caller is not the Secretary", "model": ErrorResponse},
        404: {"description": "Meeting not found", "model": ErrorResponse},
    },
    summary="Archive a meeting (Secretary only)",
)
async def archive_meeting(
    meeting_id: str,
    identity: Identity = Depends(require_capability(Capability.ARCHIVE_MEETINGS)),
    store: InMemoryStore = Depends(get_store),
) -> MeetingEnvelope:
    return MeetingEnvelope(meeting=meeting_service.archive_meeting(store, meeting_id))
