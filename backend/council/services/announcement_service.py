"""Student Council API — Announcement Service."""

import logging
from typing import List

from council.models.announcement import Announcement
from council.schemas.announcement import AnnouncementCreate, AnnouncementResponse
from council.store import InMemoryStore

logger = logging.getLogger(__name__)


class AnnouncementService:
    def list_announcements(self, store: InMemoryStore) -> List[AnnouncementResponse]:
        return [AnnouncementResponse.model_validate(a) for a in store.list_announcements()]

    def create_announcement(
        self,
        store: InMemoryStore,
        payload: AnnouncementCreate,
        author: str,
    ) -> AnnouncementResponse:
        """Store an announcement; `author` is frozen into the record."""
        announcement = store.add_announcement(
            Announcement(
                id=store.next_id(),
                author=author,
                created_at=store.now(),
                **payload.model_dump(),
            )
        )
        logger.info("Announcement %s posted by %s", announcement.id, author)
        return AnnouncementResponse.model_validate(announcement)


announcement_service = AnnouncementService()
