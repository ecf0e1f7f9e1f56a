"""
Student Council API — Dashboard Service Unit Tests
====================================================

What:  Stats derived from the store and leaderboard shape/order.
       Leaderboard values are random; only length and ordering are checked.
"""

import random
from datetime import datetime, timezone

from council.schemas.meeting import MeetingCreate
from council.services.dashboard_service import (
    PLACEHOLDER_AVERAGE_ATTENDANCE,
    PLACEHOLDER_COMPLETED_TASKS,
    DashboardService,
    parse_meeting_date,
)
from council.services.meeting_service import MeetingService


class TestParseMeetingDate:

    def test_date_only_is_utc_midnight(self):
        assert parse_meeting_date("2030-01-01") == datetime(2030, 1, 1, tzinfo=timezone.utc)

    def test_zulu_datetime(self):
        assert parse_meeting_date("2030-01-01T09:30:00Z") == datetime(
            2030, 1, 1, 9, 30, tzinfo=timezone.utc
        )

    def test_garbage_is_none(self):
        assert parse_meeting_date("next tuesday") is None


class TestStats:

    def test_counts_upcoming_strictly_after_now(self, store):
        meetings = MeetingService()
        for date in ("2030-01-01", "2020-06-01", "not a date", "2026-01-02T00:00:00Z"):
            meetings.create_meeting(store, MeetingCreate(title="M", date=date))

        stats = DashboardService().stats(store)

        assert stats.total_meetings == 4
        assert stats.upcoming_meetings == 2
        assert stats.member_count == len(store.users)
        assert stats.completed_tasks == PLACEHOLDER_COMPLETED_TASKS
        assert stats.average_attendance == PLACEHOLDER_AVERAGE_ATTENDANCE

    def test_empty_store(self, store):
        stats = DashboardService().stats(store)
        assert stats.total_meetings == 0
        assert stats.upcoming_meetings == 0


class TestLeaderboard:

    def test_one_entry_per_user_sorted_descending(self, store):
        board = DashboardService(rng=random.Random(1)).leaderboard(store)

        assert len(board) == len(store.users)
        assert {entry.id for entry in board} == {user.id for user in store.users}
        scores = [entry.performance for entry in board]
        assert scores == sorted(scores, reverse=True)

    def test_figures_within_ranges(self, store):
        for entry in DashboardService().leaderboard(store):
            assert 0 <= entry.performance < 100
            assert 0 <= entry.tasks_completed < 50
            assert 0 <= entry.meetings_attended < 30
