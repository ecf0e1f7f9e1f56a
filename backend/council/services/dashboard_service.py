"""
Student Council API — Dashboard Service (Derived Views)
=========================================================

What:  Builds the dashboard statistics and the member leaderboard by scanning
       the store on every request. Nothing here is stored.
Who:   Called by routes/dashboard.py.

Placeholders:
    No task or attendance-tracking entity exists yet, so completedTasks and
    averageAttendance are the named constants below rather than computed
    values. The leaderboard numbers are random on every call and only their
    ordering is meaningful.
"""

import logging
import random
from datetime import datetime, timezone
from typing import List, Optional

from council.schemas.dashboard import DashboardStats, LeaderboardEntry
from council.store import InMemoryStore

logger = logging.getLogger(__name__)

PLACEHOLDER_COMPLETED_TASKS = 0
PLACEHOLDER_AVERAGE_ATTENDANCE = 85


def parse_meeting_date(value: str) -> Optional[datetime]:
    """
    Parse a meeting date as stored at creation time.

    Accepts YYYY-MM-DD and ISO 8601 datetimes (a trailing "Z" included).
    Values without a timezone are read as UTC. Returns None when the value
    cannot be parsed.
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class DashboardService:
    """
    Derived views over the store.

    Args:
        rng: Random source for leaderboard figures. Tests pass a seeded
             random.Random; production uses a fresh unseeded one.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def stats(self, store: InMemoryStore) -> DashboardStats:
        now = store.now()
        meetings = store.list_meetings()
        upcoming = 0
        for meeting in meetings:
            when = parse_meeting_date(meeting.date)
            if when is not None and when > now:
                upcoming += 1

        return DashboardStats(
            total_meetings=len(meetings),
            upcoming_meetings=upcoming,
            completed_tasks=PLACEHOLDER_COMPLETED_TASKS,
            member_count=len(store.users),
            average_attendance=PLACEHOLDER_AVERAGE_ATTENDANCE,
        )

    def leaderboard(self, store: InMemoryStore) -> List[LeaderboardEntry]:
        """One entry per user with random figures, best performance first."""
        entries = [
            LeaderboardEntry(
                id=user.id,
                name=user.full_name,
                role=user.role,
                avatar=user.avatar,
                performance=self._rng.randrange(100),
                tasks_completed=self._rng.randrange(50),
                meetings_attended=self._rng.randrange(30),
            )
            for user in store.users
        ]
        entries.sort(key=lambda entry: entry.performance, reverse=True)
        return entries


dashboard_service = DashboardService()
