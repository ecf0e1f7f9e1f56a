"""
Student Council API — Test Configuration (conftest.py)
========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Environment overrides are set before any `council` import so the
       module-level settings and app never touch the real ./uploads folder.

Fixtures:
    clock:            Stepping clock (+1ms per call) starting 2026-01-01 UTC
    store:            Fresh seeded InMemoryStore driven by `clock`
    upload_service:   UploadService writing into a per-test tmp directory
    app:              create_app() wired to the fixtures above
    test_client:      HTTPX AsyncClient talking to `app` over ASGI
    *_token / *_headers: bearer credentials for seeded users
"""

import os
import tempfile
from datetime import datetime, timedelta, timezone

os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="council_test_")
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from council.main import create_app
from council.services.credentials import DemoCredentialIssuer
from council.services.upload_service import UploadService
from council.store import InMemoryStore

START = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class SteppingClock:
    """Returns START, START+1ms, START+2ms, ... on successive calls."""

    def __init__(self, start: datetime = START, step: timedelta = timedelta(milliseconds=1)):
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current += self.step
        return value


@pytest.fixture
def clock():
    return SteppingClock()


@pytest.fixture
def store(clock):
    return InMemoryStore.seeded(clock=clock)


@pytest.fixture
def issuer():
    return DemoCredentialIssuer()


@pytest.fixture
def upload_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def upload_service(upload_dir):
    return UploadService(upload_dir=str(upload_dir))


@pytest.fixture
def app(store, issuer, upload_service):
    return create_app(store=store, credential_issuer=issuer, upload_service=upload_service)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Async HTTP client routed straight into the app (no server needed).

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/api/health")
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def secretary(store):
    return next(u for u in store.users if u.role.value == "Secretary")


@pytest.fixture
def member(store):
    return next(u for u in store.users if u.role.value == "Member")


@pytest.fixture
def secretary_headers(issuer, secretary):
    return bearer(issuer.issue(secretary))


@pytest.fixture
def member_headers(issuer, member):
    return bearer(issuer.issue(member))
