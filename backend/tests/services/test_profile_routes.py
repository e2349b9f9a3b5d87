"""Profile & Occupation Routes — end-to-end through FastAPI with a test database.

Invariants:
    - Valid submission → 200 {id, message: "save data success"} and one stored row
    - Validation failures → 400 plain text, and the store is never called
    - Undecodable or mistyped bodies → 400 "invalid JSON"
    - Storage failures → 500 "failed to save", no internal detail
    - Every OPTIONS answers 204; error responses still carry CORS headers
    - Occupations → 200 {items: [...]} in catalogue order
"""

import re

from sqlalchemy import select, func

import profile_service.services.profile_store as store_module
from profile_service.api.routes.profiles import get_profile_store
from profile_service.core.domain_types import ProfileId, SYSTEM_PRINCIPAL_ID
from profile_service.main import app
from profile_service.models.profile import Profile


async def _count_profiles(session) -> int:
    result = await session.execute(select(func.count()).select_from(Profile))
    return result.scalar_one()


class _SpyStore:
    """ProfileRepository stand-in that records calls."""

    def __init__(self):
        self.calls = []

    async def create(self, submission, created_by):
        self.calls.append((submission, created_by))
        return ProfileId("b" * 32)

    async def get(self, profile_id):
        return None


# ─── POST /api/profiles ──────────────────────────────────────────

async def test_create_profile_returns_id_and_message(client, valid_payload, test_db):
    res = await client.post("/api/profiles", json=valid_payload)

    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "save data success"
    assert re.fullmatch(r"[0-9a-f]{32}", body["id"])

    record = await test_db.get(Profile, body["id"])
    assert record.first_name == "A"
    assert record.occupation == "Tester"
    assert record.created_by == SYSTEM_PRINCIPAL_ID


async def test_create_profile_accepts_legacy_field_names(client, valid_payload, test_db):
    valid_payload["profileBase64"] = valid_payload.pop("profileImage")
    valid_payload["birthDay"] = valid_payload.pop("birthDate")

    res = await client.post("/api/profiles", json=valid_payload)

    assert res.status_code == 200
    record = await test_db.get(Profile, res.json()["id"])
    assert record.profile_image == "base64..."
    assert record.birth_date == "01/01/1990"


async def test_two_submissions_get_distinct_ids(client, valid_payload):
    first = await client.post("/api/profiles", json=valid_payload)
    second = await client.post("/api/profiles", json=valid_payload)
    assert first.json()["id"] != second.json()["id"]


async def test_dashed_phone_rejected_without_store_call(client, valid_payload):
    spy = _SpyStore()
    app.dependency_overrides[get_profile_store] = lambda: spy
    valid_payload["phone"] = "08-123"

    res = await client.post("/api/profiles", json=valid_payload)

    assert res.status_code == 400
    assert res.text == "phone must contain digits only"
    assert res.headers["content-type"].startswith("text/plain")
    assert spy.calls == []


async def test_valid_submission_passes_placeholder_principal_to_store(client, valid_payload):
    spy = _SpyStore()
    app.dependency_overrides[get_profile_store] = lambda: spy

    res = await client.post("/api/profiles", json=valid_payload)

    assert res.status_code == 200
    assert res.json()["id"] == "b" * 32
    assert len(spy.calls) == 1
    assert spy.calls[0][1] == SYSTEM_PRINCIPAL_ID


async def test_missing_field_rejected(client, valid_payload, test_db):
    del valid_payload["lastName"]

    res = await client.post("/api/profiles", json=valid_payload)

    assert res.status_code == 400
    assert res.text == "all fields are required"
    assert await _count_profiles(test_db) == 0


async def test_empty_field_rejected(client, valid_payload):
    valid_payload["email"] = ""
    res = await client.post("/api/profiles", json=valid_payload)
    assert res.status_code == 400
    assert res.text == "all fields are required"


async def test_invalid_calendar_date_rejected(client, valid_payload):
    valid_payload["birthDate"] = "31/02/2000"
    res = await client.post("/api/profiles", json=valid_payload)
    assert res.status_code == 400
    assert res.text == "birthDay must be in format DD/MM/YYYY"


async def test_leap_day_accepted(client, valid_payload):
    valid_payload["birthDate"] = "29/02/2024"
    res = await client.post("/api/profiles", json=valid_payload)
    assert res.status_code == 200


async def test_malformed_json_rejected(client):
    res = await client.post(
        "/api/profiles",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.text == "invalid JSON"


async def test_non_string_field_rejected_as_invalid_json(client, valid_payload):
    valid_payload["phone"] = 812345678
    res = await client.post("/api/profiles", json=valid_payload)
    assert res.status_code == 400
    assert res.text == "invalid JSON"


async def test_storage_failure_returns_generic_500(client, valid_payload, test_db, monkeypatch):
    fixed = ProfileId("c" * 32)
    monkeypatch.setattr(store_module, "new_profile_id", lambda: fixed)
    first = await client.post("/api/profiles", json=valid_payload)
    assert first.status_code == 200

    res = await client.post("/api/profiles", json=valid_payload)

    assert res.status_code == 500
    assert res.text == "failed to save"
    assert await _count_profiles(test_db) == 1


async def test_profiles_options_returns_204(client):
    res = await client.options("/api/profiles")
    assert res.status_code == 204
    assert res.content == b""


async def test_cors_preflight_allows_post(client):
    res = await client.options(
        "/api/profiles",
        headers={
            "Origin": "http://localhost:4200",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert res.status_code == 204
    assert res.content == b""
    assert res.headers["access-control-allow-origin"] == "*"
    assert "POST" in res.headers["access-control-allow-methods"]


async def test_cors_preflight_from_disallowed_header_is_rejected(client):
    res = await client.options(
        "/api/profiles",
        headers={
            "Origin": "http://localhost:4200",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "X-Custom",
        },
    )
    assert res.status_code == 400


async def test_unexpected_error_returns_500_with_cors_headers(client, valid_payload):
    class _BrokenStore(_SpyStore):
        async def create(self, submission, created_by):
            raise RuntimeError("connection pool exploded")

    app.dependency_overrides[get_profile_store] = lambda: _BrokenStore()

    res = await client.post(
        "/api/profiles", json=valid_payload,
        headers={"Origin": "http://localhost:4200"},
    )

    assert res.status_code == 500
    assert res.text == "internal server error"
    assert res.headers["access-control-allow-origin"] == "*"


async def test_storage_failure_response_carries_cors_headers(client, valid_payload, monkeypatch):
    monkeypatch.setattr(store_module, "new_profile_id", lambda: ProfileId("9" * 32))
    await client.post("/api/profiles", json=valid_payload)

    res = await client.post(
        "/api/profiles", json=valid_payload,
        headers={"Origin": "http://localhost:4200"},
    )

    assert res.status_code == 500
    assert res.text == "failed to save"
    assert res.headers["access-control-allow-origin"] == "*"


# ─── GET /api/occupations ────────────────────────────────────────

async def test_occupations_returns_catalogue_in_order(client):
    res = await client.get("/api/occupations")
    assert res.status_code == 200
    assert res.json() == {
        "items": ["Developer", "Tester", "System Analyst", "Project Manager", "Support"],
    }


async def test_occupations_options_returns_204(client):
    res = await client.options("/api/occupations")
    assert res.status_code == 204


# ─── Health ──────────────────────────────────────────────────────

async def test_liveness_reports_healthy(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_sees_database(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"
