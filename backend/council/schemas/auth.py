"""
Student Council API — Authentication Schemas
==============================================

What:  Request and response contracts for /api/auth/*.

UserResponse deliberately has no password field: building it from a User
record drops the stored secret, so no login response can leak it.
"""

from typing import Optional

from pydantic import Field

from council.models.user import Role
from council.schemas.common import CamelModel


class LoginRequest(CamelModel):
    email: str = Field(description="Account email, matched exactly")
    password: str = Field(description="Account password, matched exactly")


class ProviderLoginRequest(CamelModel):
    """Body of POST /api/auth/google. The token is accepted but not verified."""

    token: Optional[str] = Field(default=None, description="Opaque identity-provider token")


class UserResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
    role: Role
    avatar: str
    student_id: Optional[str] = None


class AuthResponse(CamelModel):
    success: bool = True
    user: UserResponse
    token: str
