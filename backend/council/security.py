"""
Student Council API — Auth Gate and Role Gate
===============================================

What:  FastAPI dependencies that authenticate the caller and enforce role
       capabilities.
How:   require_auth reads the bearer credential, decodes it with the
       application's CredentialIssuer and resolves the caller against the
       store. require_capability(cap) wraps require_auth and refuses callers
       whose role does not grant `cap`.
Who:   Declared on every protected route.

Usage:
    @router.post("/minutes")
    async def create_minutes(
        identity: Identity = Depends(require_capability(Capability.RECORD_MINUTES)),
    ): ...

Identity Resolution:
    1. Claims id matches a stored user → that user's name and role
    2. Claims id is the provider demo identity → the fixed provider user
    3. Otherwise → a Member identity built from the claims alone
    No signature or expiry is checked at any step.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from council.exceptions import ForbiddenError, UnauthenticatedError
from council.models.user import Capability, Role, User
from council.services.credentials import PROVIDER_DEMO_USER, CredentialIssuer, TokenClaims
from council.store import InMemoryStore, get_store

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Identity:
    """The authenticated caller, as seen by route handlers."""

    id: int
    email: str
    first_name: str
    last_name: str
    role: Role

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_user(cls, user: User) -> "Identity":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
        )


def get_credential_issuer(request: Request) -> CredentialIssuer:
    return request.app.state.credential_issuer


def resolve_identity(claims: TokenClaims, store: InMemoryStore) -> Identity:
    user = store.get_user(claims.user_id)
    if user is not None:
        return Identity.from_user(user)
    if claims.user_id == PROVIDER_DEMO_USER.id:
        return Identity.from_user(PROVIDER_DEMO_USER)
    return Identity(
        id=claims.user_id,
        email=claims.email,
        first_name=claims.email.split("@", 1)[0] or f"user-{claims.user_id}",
        last_name="",
        role=Role.MEMBER,
    )


async def require_auth(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    issuer: CredentialIssuer = Depends(get_credential_issuer),
    store: InMemoryStore = Depends(get_store),
) -> Identity:
    """
    Authenticate the caller from `Authorization: Bearer <token>`.

    Raises:
        UnauthenticatedError: No bearer credential, or one the issuer cannot decode.
    """
    if credentials is None or not credentials.credentials.strip():
        raise UnauthenticatedError()

    claims = issuer.decode(credentials.credentials.strip())
    identity = resolve_identity(claims, store)
    request.state.identity = identity
    return identity


def require_capability(capability: Capability) -> Callable[..., Identity]:
    """Build a dependency that admits only roles granting `capability`."""

    async def require_capability_inner(identity: Identity = Depends(require_auth)) -> Identity:
        if not identity.role.can(capability):
            logger.info(
                "Denied %s to user %s with role %s",
                capability.value,
                identity.id,
                identity.role.value,
            )
            raise ForbiddenError(
                context={"capability": capability.value, "role": identity.role.value},
            )
        return identity

    return require_capability_inner
