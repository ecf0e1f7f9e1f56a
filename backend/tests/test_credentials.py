"""
Student Council API — Credential Issuer and Auth Gate Tests
=============================================================

What:  DemoCredentialIssuer token formats and identity resolution.
"""

import base64
import json
from datetime import datetime, timezone

import pytest

from council.exceptions import UnauthenticatedError
from council.models.user import Capability, Role
from council.security import resolve_identity
from council.services.credentials import PROVIDER_DEMO_USER, TokenClaims


class TestDemoCredentialIssuer:

    def test_token_is_base64_json_of_id_and_email(self, issuer, secretary):
        token = issuer.issue(secretary)
        payload = json.loads(base64.b64decode(token))
        assert payload == {"id": secretary.id, "email": secretary.email}

    def test_decode_returns_claims(self, issuer, secretary):
        claims = issuer.decode(issuer.issue(secretary))
        assert claims == TokenClaims(user_id=secretary.id, email=secretary.email)

    def test_provider_token_is_timestamp_suffixed(self, issuer):
        issued_at = datetime(2026, 1, 1, tzinfo=timezone.utc)
        token = issuer.issue_provider_token(issued_at)
        assert token == f"google-token-{int(issued_at.timestamp() * 1000)}"

    def test_provider_token_decodes_to_demo_identity(self, issuer):
        claims = issuer.decode("google-token-123")
        assert claims.user_id == PROVIDER_DEMO_USER.id
        assert claims.email == "google@example.com"

    @pytest.mark.parametrize(
        "token",
        [
            "not base64!",
            base64.b64encode(b"not json").decode(),
            base64.b64encode(b'{"email": "x"}').decode(),
            base64.b64encode(b'{"id": 1e999, "email": "x"}').decode(),
            base64.b64encode(b'["id"]').decode(),
        ],
    )
    def test_malformed_token_rejected(self, issuer, token):
        with pytest.raises(UnauthenticatedError):
            issuer.decode(token)


class TestResolveIdentity:

    def test_known_user_takes_role_from_store(self, store, secretary):
        identity = resolve_identity(TokenClaims(secretary.id, secretary.email), store)
        assert identity.role is Role.SECRETARY
        assert identity.display_name == "Fatima Ali"

    def test_provider_identity(self, store):
        identity = resolve_identity(TokenClaims(1000, "google@example.com"), store)
        assert identity.display_name == "Google User"
        assert identity.role is Role.MEMBER

    def test_unknown_user_is_member(self, store):
        identity = resolve_identity(TokenClaims(4242, "visitor@sit.edu"), store)
        assert identity.role is Role.MEMBER
        assert identity.first_name == "visitor"


class TestRoleCapabilities:

    def test_only_secretary_records_minutes(self):
        holders = {role for role in Role if role.can(Capability.RECORD_MINUTES)}
        assert holders == {Role.SECRETARY}

    def test_only_secretary_archives_meetings(self):
        holders = {role for role in Role if role.can(Capability.ARCHIVE_MEETINGS)}
        assert holders == {Role.SECRETARY}
