"""
Student Council API — Endpoint Tests
======================================

What:  HTTP-level behavior of every route through the ASGI test client:
       auth gate, role gate, JSON shapes (camelCase, no password leak),
       error bodies, uploads and the end-to-end meeting scenario.
"""

import base64

import pytest


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_needs_no_auth(self, test_client):
        response = await test_client.get("/api/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "OK"
        assert body["message"] == "SIT Council API is running"
        assert "uptimeSeconds" in body

    @pytest.mark.asyncio
    async def test_unknown_route_uses_error_shape(self, test_client):
        response = await test_client.get("/api/nope")
        assert response.status_code == 404
        assert response.json()["success"] is False
        assert response.json()["error"] == "not_found"


class TestLogin:

    @pytest.mark.asyncio
    async def test_valid_login_returns_user_without_password(self, test_client):
        response = await test_client.post(
            "/api/auth/login",
            json={"email": "president@sit.edu", "password": "password123"},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["token"]
        assert body["user"]["firstName"] == "Ibrahim"
        assert body["user"]["role"] == "President"
        assert "password" not in body["user"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email,password",
        [
            ("president@sit.edu", "wrong"),
            ("nobody@sit.edu", "password123"),
            ("PRESIDENT@sit.edu", "password123"),
        ],
    )
    async def test_invalid_login_fails_without_token(self, test_client, email, password):
        response = await test_client.post(
            "/api/auth/login", json={"email": email, "password": password}
        )
        assert response.status_code == 401
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "invalid_credentials"
        assert "token" not in body

    @pytest.mark.asyncio
    async def test_login_token_authenticates(self, test_client):
        login = await test_client.post(
            "/api/auth/login",
            json={"email": "member@sit.edu", "password": "password123"},
        )
        token = login.json()["token"]
        response = await test_client.get(
            "/api/meetings", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_provider_login_returns_demo_identity(self, test_client):
        response = await test_client.post("/api/auth/google", json={"token": "anything"})
        assert response.status_code == 200
        body = response.json()
        assert body["user"]["email"] == "google@example.com"
        assert body["user"]["role"] == "Member"
        assert body["token"].startswith("google-token-")

        posted = await test_client.post(
            "/api/announcements",
            json={"title": "Hello", "content": "From the provider account"},
            headers={"Authorization": f"Bearer {body['token']}"},
        )
        assert posted.json()["announcement"]["author"] == "Google User"


class TestAuthGate:

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,path",
        [
            ("GET", "/api/meetings"),
            ("POST", "/api/meetings"),
            ("GET", "/api/announcements"),
            ("GET", "/api/minutes"),
            ("GET", "/api/dashboard/stats"),
            ("GET", "/api/leaderboard"),
            ("POST", "/api/generate-pdf"),
        ],
    )
    async def test_missing_credential_is_unauthenticated(self, test_client, method, path):
        response = await test_client.request(method, path, json={})
        assert response.status_code == 401
        assert response.json()["error"] == "unauthenticated"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "token",
        [
            "%%%",
            base64.b64encode(b'{"id": 1e999, "email": "x"}').decode(),
            base64.b64encode(b'{"id": "seven", "email": "x"}').decode(),
        ],
    )
    async def test_undecodable_token_is_unauthenticated(self, test_client, token):
        response = await test_client.get(
            "/api/meetings", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 401
        assert response.json()["error"] == "unauthenticated"


class TestRoleGate:

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [{"title": "Minutes", "content": "Body"}, {}, {"title": 42}],
    )
    async def test_non_secretary_cannot_record_minutes(self, test_client, member_headers, payload):
        response = await test_client.post("/api/minutes", json=payload, headers=member_headers)
        assert response.status_code == 403
        assert response.json()["error"] == "forbidden"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw", [b"{not json", b""])
    async def test_non_secretary_refused_before_body_is_parsed(self, test_client, member_headers, raw):
        response = await test_client.post(
            "/api/minutes",
            content=raw,
            headers={**member_headers, "Content-Type": "application/json"},
        )
        assert response.status_code == 403
        assert response.json()["error"] == "forbidden"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw", [b"{not json", b"{}", b'{"title": "AGM"}'])
    async def test_secretary_invalid_minutes_body_is_rejected(self, test_client, secretary_headers, raw):
        response = await test_client.post(
            "/api/minutes",
            content=raw,
            headers={**secretary_headers, "Content-Type": "application/json"},
        )
        assert response.status_code == 422
        assert response.json()["error"] == "request_validation_error"

    @pytest.mark.asyncio
    async def test_non_secretary_cannot_archive(self, test_client, member_headers):
        response = await test_client.put("/api/meetings/1/archive", headers=member_headers)
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_secretary_records_and_lists_minutes(self, test_client, secretary_headers, secretary):
        created = await test_client.post(
            "/api/minutes",
            json={"title": "AGM", "content": "Quorum reached.", "meetingId": 7, "actionItems": ["Book hall"]},
            headers=secretary_headers,
        )
        assert created.status_code == 200
        minutes = created.json()["minutes"]
        assert minutes["createdBy"] == secretary.id
        assert minutes["meetingId"] == 7
        assert minutes["actionItems"] == ["Book hall"]

        listed = await test_client.get("/api/minutes", headers=secretary_headers)
        assert [m["id"] for m in listed.json()] == [minutes["id"]]


class TestMeetingsScenario:

    @pytest.mark.asyncio
    async def test_create_list_archive(self, test_client, member_headers, secretary_headers):
        created = await test_client.post(
            "/api/meetings",
            json={"title": "Budget Review", "date": "2030-01-01"},
            headers=member_headers,
        )
        assert created.status_code == 200
        body = created.json()
        assert body["success"] is True
        meeting = body["meeting"]
        assert meeting["title"] == "Budget Review"
        assert "archived" not in meeting
        assert "archivedAt" not in meeting
        assert "createdAt" in meeting and "updatedAt" in meeting

        listed = await test_client.get("/api/meetings", headers=member_headers)
        assert [m["id"] for m in listed.json()] == [meeting["id"]]

        archived = await test_client.put(
            f"/api/meetings/{meeting['id']}/archive", headers=secretary_headers
        )
        assert archived.status_code == 200
        assert archived.json()["meeting"]["archived"] is True
        assert "archivedAt" in archived.json()["meeting"]

        again = await test_client.put(
            f"/api/meetings/{meeting['id']}/archive", headers=secretary_headers
        )
        assert again.json()["meeting"]["archived"] is True

    @pytest.mark.asyncio
    async def test_archive_unknown_meeting_is_not_found(self, test_client, secretary_headers):
        response = await test_client.put("/api/meetings/999/archive", headers=secretary_headers)
        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("meeting_id", ["abc", "-1", "0x1"])
    async def test_archive_non_numeric_or_unknown_id_is_not_found(
        self, test_client, secretary_headers, meeting_id
    ):
        response = await test_client.put(
            f"/api/meetings/{meeting_id}/archive", headers=secretary_headers
        )
        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_meeting_requires_title_and_date(self, test_client, member_headers):
        response = await test_client.post(
            "/api/meetings", json={"title": "No date"}, headers=member_headers
        )
        assert response.status_code == 422
        assert response.json()["error"] == "request_validation_error"


class TestAnnouncements:

    @pytest.mark.asyncio
    async def test_author_resolved_from_caller(self, test_client, secretary_headers):
        created = await test_client.post(
            "/api/announcements",
            json={"title": "Elections", "content": "Nominations open Monday."},
            headers=secretary_headers,
        )
        announcement = created.json()["announcement"]
        assert announcement["author"] == "Fatima Ali"
        assert announcement["priority"] == "normal"

        listed = await test_client.get("/api/announcements", headers=secretary_headers)
        assert listed.json() == [announcement]


class TestUploads:

    @pytest.mark.asyncio
    async def test_upload_then_download(self, test_client, member_headers):
        response = await test_client.post(
            "/api/upload",
            files=[("files", ("agenda.pdf", b"%PDF-1.4 agenda", "application/pdf"))],
            headers=member_headers,
        )
        assert response.status_code == 200
        descriptor = response.json()["files"][0]
        assert descriptor["name"] == "agenda.pdf"
        assert descriptor["size"] == len(b"%PDF-1.4 agenda")
        assert descriptor["type"] == "application/pdf"

        download = await test_client.get(descriptor["url"])
        assert download.status_code == 200
        assert download.content == b"%PDF-1.4 agenda"

    @pytest.mark.asyncio
    async def test_upload_rejects_unsupported_file(self, test_client, member_headers):
        response = await test_client.post(
            "/api/upload",
            files=[
                ("files", ("notes.txt", b"ok", "text/plain")),
                ("files", ("tool.exe", b"MZ", "application/x-msdownload")),
            ],
            headers=member_headers,
        )
        assert response.status_code == 415
        assert response.json()["error"] == "unsupported_media_type"

    @pytest.mark.asyncio
    async def test_upload_requires_auth(self, test_client):
        response = await test_client.post(
            "/api/upload", files=[("files", ("a.txt", b"x", "text/plain"))]
        )
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_download_unknown_file(self, test_client):
        response = await test_client.get("/uploads/missing.pdf")
        assert response.status_code == 404


class TestDerivedViews:

    @pytest.mark.asyncio
    async def test_generate_pdf_placeholder(self, test_client, member_headers):
        response = await test_client.post(
            "/api/generate-pdf",
            json={"meetingId": 1, "template": "standard"},
            headers=member_headers,
        )
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "PDF generated successfully"
        assert body["downloadUrl"].startswith("/api/pdf/")
        assert body["downloadUrl"].endswith(".pdf")

    @pytest.mark.asyncio
    async def test_dashboard_stats(self, test_client, member_headers, store):
        await test_client.post(
            "/api/meetings",
            json={"title": "Future", "date": "2030-01-01"},
            headers=member_headers,
        )
        response = await test_client.get("/api/dashboard/stats", headers=member_headers)
        assert response.json() == {
            "totalMeetings": 1,
            "upcomingMeetings": 1,
            "completedTasks": 0,
            "memberCount": len(store.users),
            "averageAttendance": 85,
        }

    @pytest.mark.asyncio
    async def test_leaderboard_sorted(self, test_client, member_headers, store):
        response = await test_client.get("/api/leaderboard", headers=member_headers)
        board = response.json()
        assert len(board) == len(store.users)
        scores = [entry["performance"] for entry in board]
        assert scores == sorted(scores, reverse=True)
        assert {"tasksCompleted", "meetingsAttended", "avatar"} <= set(board[0])
