"""
Student Council API — User Model
==================================

What:  In-memory record for a council member plus the closed role/capability
       vocabulary the role gate checks against.
Who:   Seeded by InMemoryStore; read by the auth gate, auth service and the
       leaderboard.

Role Design:
    Roles are a closed enumeration. Routes never compare role strings; they
    ask for a Capability, and ROLE_CAPABILITIES decides which roles hold it.
    Today only the Secretary holds any capability, which reproduces the
    single "Secretary only" gate on minutes and archiving.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional


class Role(str, Enum):
    """Council positions. Values are the display strings sent to clients."""

    PRESIDENT = "President"
    VICE_PRESIDENT = "Vice President"
    SECRETARY = "Secretary"
    TREASURER = "Treasurer"
    MEMBER = "Member"

    @property
    def capabilities(self) -> FrozenSet["Capability"]:
        return ROLE_CAPABILITIES.get(self, frozenset())

    def can(self, capability: "Capability") -> bool:
        return capability in self.capabilities


class Capability(str, Enum):
    """Privileged actions guarded by the role gate."""

    RECORD_MINUTES = "record_minutes"
    ARCHIVE_MEETINGS = "archive_meetings"


ROLE_CAPABILITIES: Dict[Role, FrozenSet[Capability]] = {
    Role.SECRETARY: frozenset({Capability.RECORD_MINUTES, Capability.ARCHIVE_MEETINGS}),
}


@dataclass
class User:
    """
    A council member account.

    `password` is a plain-text demo secret compared verbatim at login; it is
    never serialized into a response (UserResponse has no such field).
    """

    id: int
    first_name: str
    last_name: str
    email: str
    role: Role
    avatar: str
    password: str = ""
    student_id: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
