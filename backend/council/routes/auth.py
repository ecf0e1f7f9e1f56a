"""
Student Council API — Authentication Routes
=============================================

What:  POST /api/auth/login (email + password) and POST /api/auth/google
       (provider-login stub). Neither requires a bearer credential.
"""

from fastapi import APIRouter, Depends

from council.schemas.auth import AuthResponse, LoginRequest, ProviderLoginRequest
from council.schemas.common import ErrorResponse
from council.security import get_credential_issuer
from council.services.auth_service import auth_service
from council.services.credentials import CredentialIssuer
from council.store import InMemoryStore, get_store

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={401: {"description": "Invalid credentials", "model": ErrorResponse}},
    summary="Log in with email and password",
)
async def login(
    body: LoginRequest,
    store: InMemoryStore = Depends(get_store),
    issuer: CredentialIssuer = Depends(get_credential_issuer),
) -> AuthResponse:
    """Returns the user (without password) and a bearer token."""
    return auth_service.login(store, issuer, email=body.email, password=body.password)


@router.post(
    "/google",
    response_model=AuthResponse,
    summary="Log in with a third-party identity token (demo stub)",
    description=(
        "Accepts any token and returns a fixed demo identity. "
        "The token is not verified with the provider."
    ),
)
async def login_with_provider(
    body: ProviderLoginRequest,
    store: InMemoryStore = Depends(get_store),
    issuer: CredentialIssuer = Depends(get_credential_issuer),
) -> AuthResponse:
    return auth_service.login_with_provider(store, issuer, provider_token=body.token)
