"""
Student Council API — Credential Issuer Interface
==================================================

What:  Abstract contract for turning a user into a bearer token and a bearer
       token back into claims, plus the demo implementation the API ships with.
How:   Concrete issuers inherit from CredentialIssuer. create_app() installs
       one on `app.state.credential_issuer`; the auth gate and the auth
       service only ever talk to the interface.
Who:   AuthService issues tokens; council.security decodes them.

Security Boundary:
    DemoCredentialIssuer is NOT a credential system. Its tokens are base64
    JSON with no signature and no expiry; anyone can mint one for any user
    id. A real deployment replaces it with an issuer backed by an external
    identity service without touching routes or services.

Token Formats (DemoCredentialIssuer):
    Password login:   base64(JSON {"id": <int>, "email": <str>})
    Provider login:   "google-token-<epoch milliseconds>"
"""

import base64
import binascii
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from council.exceptions import UnauthenticatedError
from council.models.user import Role, User

logger = logging.getLogger(__name__)

PROVIDER_TOKEN_PREFIX = "google-token-"

# Fixed identity returned by every provider login. It is not part of the
# seeded store; the auth gate resolves it from these claims.
PROVIDER_DEMO_USER = User(
    id=1000,
    first_name="Google",
    last_name="User",
    email="google@example.com",
    role=Role.MEMBER,
    avatar="GU",
)


@dataclass(frozen=True)
class TokenClaims:
    """What a bearer token says about its holder, before any store lookup."""

    user_id: int
    email: str


class CredentialIssuer(ABC):
    """
    Contract for bearer-token issuance and decoding.

    Implementations:
        - DemoCredentialIssuer: reversible encoding, accepts any well-formed token
        - (Future) an issuer that delegates to a real identity provider and
          verifies signatures and expiry
    """

    @abstractmethod
    def issue(self, user: User) -> str:
        """Return a bearer token identifying `user`."""
        ...

    @abstractmethod
    def issue_provider_token(self, issued_at: datetime) -> str:
        """Return a bearer token for the third-party-login identity."""
        ...

    @abstractmethod
    def decode(self, token: str) -> TokenClaims:
        """
        Decode a bearer token into claims.

        Raises:
            UnauthenticatedError: The token is not in a format this issuer
                understands.
        """
        ...


class DemoCredentialIssuer(CredentialIssuer):
    """Unsigned, reversible tokens for development and tests."""

    def issue(self, user: User) -> str:
        payload = json.dumps({"id": user.id, "email": user.email}, separators=(",", ":"))
        return base64.b64encode(payload.encode("utf-8")).decode("ascii")

    def issue_provider_token(self, issued_at: datetime) -> str:
        return f"{PROVIDER_TOKEN_PREFIX}{int(issued_at.timestamp() * 1000)}"

    def decode(self, token: str) -> TokenClaims:
        if token.startswith(PROVIDER_TOKEN_PREFIX):
            return TokenClaims(user_id=PROVIDER_DEMO_USER.id, email=PROVIDER_DEMO_USER.email)

        try:
            raw = base64.b64decode(token.encode("ascii"), validate=True)
            payload = json.loads(raw.decode("utf-8"))
            return TokenClaims(user_id=int(payload["id"]), email=str(payload.get("email", "")))
        except (UnicodeError, binascii.Error, ValueError, KeyError, TypeError, OverflowError) as e:
            logger.debug("Rejected malformed bearer token: %s", type(e).__name__)
            raise UnauthenticatedError(
                message="Invalid authentication token",
                context={"reason": type(e).__name__},
            )
