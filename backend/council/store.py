"""
Student Council API — In-Memory Store
=======================================

What:  Owns the four mutable collections (users, meetings, minutes,
       announcements) and the FastAPI dependency that hands the store to
       route handlers.
How:   One InMemoryStore is built by create_app(), attached to
       `app.state.store`, injected with `Depends(get_store)` and cleared
       when the application shuts down. There is no module-level instance.
Who:   Services read and write it; nothing else holds a reference.

Concurrency Model:
    The application runs in a single asyncio event loop. Store methods are
    synchronous and never await, so every read-modify-write against a
    collection finishes before another request can run. A multi-worker
    deployment would need one lock per collection (or a single writer task)
    in front of these methods.

Identifier Scheme:
    next_id() returns milliseconds since the epoch from the store clock.
    Records created within the same millisecond share an id.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional

from fastapi import Request

from council.models.announcement import Announcement
from council.models.meeting import Meeting, Minutes
from council.models.user import Role, User

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# ── Seed Accounts ─────────────────────────────────────────────────────────
# Loaded into every new store. Passwords are demo secrets compared verbatim.
SEED_USERS = (
    User(
        id=1,
        first_name="Ibrahim",
        last_name="Mohammed",
        email="president@sit.edu",
        role=Role.PRESIDENT,
        student_id="SIT2023001",
        avatar="IM",
        password="password123",
    ),
    User(
        id=2,
        first_name="Aisha",
        last_name="Rahman",
        email="vicepresident@sit.edu",
        role=Role.VICE_PRESIDENT,
        student_id="SIT2023002",
        avatar="AR",
        password="password123",
    ),
    User(
        id=3,
        first_name="Fatima",
        last_name="Ali",
        email="secretary@sit.edu",
        role=Role.SECRETARY,
        student_id="SIT2023003",
        avatar="FA",
        password="password123",
    ),
    User(
        id=4,
        first_name="Yusuf",
        last_name="Omar",
        email="treasurer@sit.edu",
        role=Role.TREASURER,
        student_id="SIT2023004",
        avatar="YO",
        password="password123",
    ),
    User(
        id=5,
        first_name="Mariam",
        last_name="Hassan",
        email="member@sit.edu",
        role=Role.MEMBER,
        student_id="SIT2023005",
        avatar="MH",
        password="password123",
    ),
)


class InMemoryStore:
    """
    Process-local holder of every mutable collection.

    Collections are plain lists kept in insertion order; listing operations
    return copies so callers cannot reorder the stored sequence.

    Args:
        users: Initial accounts (copied). Defaults to no users; use
               InMemoryStore.seeded() for the standard seed list.
        clock: Returns the current aware datetime. Tests inject a fixed or
               stepping clock to control ids and timestamps.
    """

    def __init__(
        self,
        users: Iterable[User] = (),
        clock: Optional[Clock] = None,
    ):
        self.clock: Clock = clock or utc_now
        self.users: List[User] = [
            User(**vars(user)) for user in users
        ]
        self.meetings: List[Meeting] = []
        self.minutes: List[Minutes] = []
        self.announcements: List[Announcement] = []

    @classmethod
    def seeded(cls, clock: Optional[Clock] = None) -> "InMemoryStore":
        """Build a store preloaded with SEED_USERS."""
        store = cls(users=SEED_USERS, clock=clock)
        logger.info("In-memory store created with %d seed users", len(store.users))
        return store

    def now(self) -> datetime:
        return self.clock()

    def next_id(self) -> int:
        return int(self.clock().timestamp() * 1000)

    # ── Users ─────────────────────────────────────────────────────────────

    def get_user(self, user_id: int) -> Optional[User]:
        return next((u for u in self.users if u.id == user_id), None)

    def find_user_by_credentials(self, email: str, password: str) -> Optional[User]:
        return next(
            (u for u in self.users if u.email == email and u.password == password),
            None,
        )

    # ── Meetings ──────────────────────────────────────────────────────────

    def list_meetings(self) -> List[Meeting]:
        return list(self.meetings)

    def add_meeting(self, meeting: Meeting) -> Meeting:
        self.meetings.append(meeting)
        return meeting

    def get_meeting(self, meeting_id: int) -> Optional[Meeting]:
        return next((m for m in self.meetings if m.id == meeting_id), None)

    # ── Minutes ───────────────────────────────────────────────────────────

    def list_minutes(self) -> List[Minutes]:
        return list(self.minutes)

    def add_minutes(self, minutes: Minutes) -> Minutes:
        self.minutes.append(minutes)
        return minutes

    # ── Announcements ─────────────────────────────────────────────────────

    def list_announcements(self) -> List[Announcement]:
        return list(self.announcements)

    def add_announcement(self, announcement: Announcement) -> Announcement:
        self.announcements.append(announcement)
        return announcement

    # ── Lifecycle ─────────────────────────────────────────────────────────

    def clear(self) -> None:
        """Drop every collection. Called once at application shutdown."""
        logger.info(
            "Clearing store: %d meetings, %d minutes, %d announcements",
            len(self.meetings),
            len(self.minutes),
            len(self.announcements),
        )
        self.users.clear()
        self.meetings.clear()
        self.minutes.clear()
        self.announcements.clear()


def get_store(request: Request) -> InMemoryStore:
    """
    FastAPI dependency that provides the application's store.

    Usage in routes:
        @router.get("/meetings")
        async def list_meetings(store: InMemoryStore = Depends(get_store)):
            ...
    """
    return request.app.state.store
