"""Student Council API — Announcement Routes."""

from typing import List

from fastapi import APIRouter, Depends

from council.schemas.announcement import (
    AnnouncementCreate,
    AnnouncementEnvelope,
    AnnouncementResponse,
)
from council.security import Identity, require_auth
from council.services.announcement_service import announcement_service
from council.store import InMemoryStore, get_store

router = APIRouter(prefix="/api/announcements", tags=["Announcements"])


@router.get("", response_model=List[AnnouncementResponse], summary="List announcements")
async def list_announcements(
    identity: Identity = Depends(require_auth),
    store: InMemoryStore = Depends(get_store),
) -> List[AnnouncementResponse]:
    return announcement_service.list_announcements(store)


@router.post("", response_model=AnnouncementEnvelope, summary="Post an announcement")
async def create_announcement(
    body: AnnouncementCreate,
    identity: Identity = Depends(require_auth),
    store: InMemoryStore = Depends(get_store),
) -> AnnouncementEnvelope:
    # Author is the caller's name now; it is not updated if the name changes later
    return AnnouncementEnvelope(
        announcement=announcement_service.create_announcement(
            store, body, author=identity.display_name
        ),
    )
