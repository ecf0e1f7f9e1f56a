"""
Student Council API — Dashboard Schemas
=========================================

What:  Derived views computed from the store on every request.
"""

from pydantic import Field

from council.models.user import Role
from council.schemas.common import CamelModel


class DashboardStats(CamelModel):
    total_meetings: int
    upcoming_meetings: int = Field(description="Meetings dated strictly after now")
    completed_tasks: int = Field(description="Placeholder: no task entity exists")
    member_count: int
    average_attendance: int = Field(description="Placeholder percentage")


class LeaderboardEntry(CamelModel):
    id: int
    name: str
    role: Role
    avatar: str
    performance: int
    tasks_completed: int
    meetings_attended: int
