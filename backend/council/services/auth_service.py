"""
Student Council API — Authentication Service
==============================================

What:  Password login against the seeded users and the provider-login stub.
Who:   Called by routes/auth.py.

Provider Login:
    login_with_provider() never contacts the identity provider. It accepts
    any input and returns the fixed demo identity with a timestamped token.
    It is an integration seam, not a security boundary.
"""

import logging
from typing import Optional

from council.exceptions import InvalidCredentialsError
from council.schemas.auth import AuthResponse, UserResponse
from council.services.credentials import PROVIDER_DEMO_USER, CredentialIssuer
from council.store import InMemoryStore

logger = logging.getLogger(__name__)


class AuthService:
    """Issues bearer tokens for users who prove who they are (or claim to)."""

    def login(
        self,
        store: InMemoryStore,
        issuer: CredentialIssuer,
        email: str,
        password: str,
    ) -> AuthResponse:
        """
        Authenticate with email and password.

        Both values are compared verbatim against the stored account.

        Raises:
            InvalidCredentialsError: No account matches (→ 401, no token).
        """
        user = store.find_user_by_credentials(email, password)
        if user is None:
            logger.info("Login failed for %s", email)
            raise InvalidCredentialsError()

        logger.info("User %s logged in", user.id)
        return AuthResponse(
            user=UserResponse.model_validate(user),
            token=issuer.issue(user),
        )

    def login_with_provider(
        self,
        store: InMemoryStore,
        issuer: CredentialIssuer,
        provider_token: Optional[str] = None,
    ) -> AuthResponse:
        """Return the fixed provider demo identity, whatever token was sent."""
        logger.info("Provider login stub used (token supplied: %s)", bool(provider_token))
        return AuthResponse(
            user=UserResponse.model_validate(PROVIDER_DEMO_USER),
            token=issuer.issue_provider_token(store.now()),
        )


auth_service = AuthService()
