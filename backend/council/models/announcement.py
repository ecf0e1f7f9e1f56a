"""
Student Council API — Announcement Model
==========================================

What:  In-memory record for a council announcement.

`author` is the creator's display name captured at creation time. It is
never re-resolved, so a later profile change does not rewrite old
announcements.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Announcement:
    id: int
    title: str
    content: str
    author: str
    created_at: datetime
    priority: str = "normal"
