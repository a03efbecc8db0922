"""
API tests for the feedback endpoints.

Each test drives the FastAPI app in-process through TestClient, so the
startup seeding and the full request/response mapping are exercised.

Run with: pytest tests/test_api.py -v
"""
import pytest
from fastapi.testclient import TestClient

from feedback_tracker.container import Container
from feedback_tracker.infrastructure import Settings
from feedback_tracker.main import create_app


BASE = "/api/feedback"
ALLOWED_ORIGIN = "http://localhost:5173"

VALID_BODY = {
    "title": "Bulk edit",
    "description": "Edit several feedback items at once.",
    "category": "UX",
    "priority": "MEDIUM",
}


# =============================================================================
# FIXTURES
# =============================================================================

def make_settings(**overrides) -> Settings:
    values = {
        "storage_backend": "memory",
        "cors_allowed_origin": ALLOWED_ORIGIN,
        "seed_on_startup": True,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def client():
    """Client for an app seeded with the three sample items."""
    app = create_app(Container(make_settings()))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def empty_client():
    """Client for an app with seeding disabled."""
    app = create_app(Container(make_settings(seed_on_startup=False)))
    with TestClient(app) as test_client:
        yield test_client


def list_items(client):
    response = client.get(BASE)
    assert response.status_code == 200
    return response.json()


# =============================================================================
# HEALTH + SEEDING
# =============================================================================

class TestStartup:
    """Tests for health check and startup seeding."""

    def test_health_check(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json() == {"message": "Feedback Tracker Running"}

    def test_seeded_items_listed_newest_first(self, client):
        """
        SCENARIO: App starts against an empty store
        EXPECTED: Three sample items, the last seeded one first
        """
        items = list_items(client)

        assert [item["title"] for item in items] == [
            "Keyboard shortcuts",
            "Export to CSV",
            "Add dark mode",
        ]
        assert [item["priority"] for item in items] == ["LOW", "MEDIUM", "HIGH"]
        assert all(item["status"] == "OPEN" for item in items)

    def test_seeding_can_be_disabled(self, empty_client):
        assert list_items(empty_client) == []

    def test_seeding_is_idempotent_across_restarts(self, tmp_path):
        """
        SCENARIO: Two app starts share one SQLite database file
        EXPECTED: Second start finds rows and seeds nothing
        """
        settings = make_settings(
            storage_backend="sql",
            database_url=f"sqlite:///{tmp_path / 'feedback.db'}",
        )

        with TestClient(create_app(Container(settings))) as first:
            assert len(list_items(first)) == 3

        with TestClient(create_app(Container(settings))) as second:
            assert len(list_items(second)) == 3


# =============================================================================
# JSON SHAPE
# =============================================================================

class TestFeedbackRepresentation:
    """Tests for the wire format."""

    def test_feedback_json_fields(self, client):
        item = list_items(client)[0]

        assert set(item) == {"id", "title", "description", "category", "status", "priority", "createdAt"}
        assert isinstance(item["id"], str)
        assert isinstance(item["createdAt"], int)


# =============================================================================
# CREATE
# =============================================================================

class TestCreateFeedback:
    """Tests for POST /api/feedback."""

    def test_create_returns_open_feedback_with_id(self, empty_client):
        response = empty_client.post(BASE, json=VALID_BODY)

        assert response.status_code == 200
        body = response.json()
        assert body["id"]
        assert body["status"] == "OPEN"
        assert body["title"] == VALID_BODY["title"]
        assert body["priority"] == "MEDIUM"

    def test_created_item_listed_first(self, client):
        created = client.post(BASE, json=VALID_BODY).json()

        assert list_items(client)[0]["id"] == created["id"]

    def test_title_of_141_characters_rejected(self, client):
        """
        SCENARIO: Create with an oversized title
        EXPECTED: 400 naming the title, no record persisted
        """
        before = len(list_items(client))

        response = client.post(BASE, json={**VALID_BODY, "title": "x" * 141})

        assert response.status_code == 400
        assert "title" in response.json()["detail"]
        assert len(list_items(client)) == before

    def test_missing_fields_reported_together(self, empty_client):
        response = empty_client.post(BASE, json={})

        assert response.status_code == 400
        assert set(response.json()["detail"]) == {"title", "description", "category", "priority"}
        assert list_items(empty_client) == []

    def test_unknown_priority_rejected(self, empty_client):
        response = empty_client.post(BASE, json={**VALID_BODY, "priority": "URGENT"})

        assert response.status_code == 400
        assert "priority" in response.json()["detail"]

    def test_wrong_json_type_answered_with_400(self, empty_client):
        response = empty_client.post(BASE, json={**VALID_BODY, "title": 123})

        assert response.status_code == 400

    def test_malformed_json_answered_with_400(self, empty_client):
        response = empty_client.post(
            BASE, content=b"{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400


# =============================================================================
# UPDATE
# =============================================================================

class TestUpdateFeedback:
    """Tests for PUT /api/feedback/{id}."""

    def test_update_keeps_id_status_and_created_at(self, client):
        original = list_items(client)[-1]
        client.patch(f"{BASE}/{original['id']}/status", json={"status": "IN_PROGRESS"})

        response = client.put(f"{BASE}/{original['id']}", json=VALID_BODY)

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == original["id"]
        assert body["createdAt"] == original["createdAt"]
        assert body["status"] == "IN_PROGRESS"
        assert body["title"] == VALID_BODY["title"]
        assert body["description"] == VALID_BODY["description"]
        assert body["category"] == VALID_BODY["category"]
        assert body["priority"] == VALID_BODY["priority"]

    def test_update_unknown_id_returns_404(self, client):
        response = client.put(f"{BASE}/does-not-exist", json=VALID_BODY)

        assert response.status_code == 404

    def test_invalid_update_returns_400_and_keeps_record(self, client):
        original = list_items(client)[0]

        response = client.put(f"{BASE}/{original['id']}", json={**VALID_BODY, "category": ""})

        assert response.status_code == 400
        assert response.json()["detail"] == {"category": "must not be blank"}
        assert list_items(client)[0] == original


# =============================================================================
# STATUS
# =============================================================================

class TestUpdateStatus:
    """Tests for PATCH /api/feedback/{id}/status."""

    def test_invalid_status_returns_400(self, client):
        original = list_items(client)[0]

        response = client.patch(f"{BASE}/{original['id']}/status", json={"status": "ARCHIVED"})

        assert response.status_code == 400
        assert list_items(client)[0]["status"] == "OPEN"

    def test_missing_status_returns_400(self, client):
        original = list_items(client)[0]

        response = client.patch(f"{BASE}/{original['id']}/status", json={})

        assert response.status_code == 400

    def test_unknown_id_returns_404(self, client):
        response = client.patch(f"{BASE}/does-not-exist/status", json={"status": "CLOSED"})

        assert response.status_code == 404


# =============================================================================
# DELETE
# =============================================================================

class TestDeleteFeedback:
    """Tests for DELETE /api/feedback/{id}."""

    def test_delete_returns_204_with_empty_body(self, client):
        target = list_items(client)[0]

        response = client.delete(f"{BASE}/{target['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert target["id"] not in [item["id"] for item in list_items(client)]

    def test_delete_unknown_id_returns_404_without_side_effects(self, client):
        before = list_items(client)

        response = client.delete(f"{BASE}/does-not-exist")

        assert response.status_code == 404
        assert list_items(client) == before


# =============================================================================
# CORS
# =============================================================================

class TestCors:
    """Tests for the single allowed origin."""

    def test_configured_origin_allowed(self, client):
        response = client.get(BASE, headers={"Origin": ALLOWED_ORIGIN})

        assert response.headers.get("access-control-allow-origin") == ALLOWED_ORIGIN

    def test_other_origin_not_allowed(self, client):
        response = client.get(BASE, headers={"Origin": "http://evil.example.com"})

        assert "access-control-allow-origin" not in response.headers

    def test_origin_read_from_settings(self):
        app = create_app(Container(make_settings(cors_allowed_origin="https://feedback.example.com")))
        with TestClient(app) as test_client:
            response = test_client.get(BASE, headers={"Origin": "https://feedback.example.com"})

        assert response.headers.get("access-control-allow-origin") == "https://feedback.example.com"


# =============================================================================
# END-TO-END SCENARIO
# =============================================================================

@pytest.mark.parametrize("storage_backend,database_url", [
    ("memory", "sqlite://"),
    ("sql", "sqlite://"),
])
def test_feedback_lifecycle(storage_backend, database_url):
    """
    SCENARIO: Create, list, resolve, delete, delete again
    EXPECTED: New item is listed first, status patch leaves other fields alone,
              deleted item disappears and a second delete is not found
    """
    settings = make_settings(storage_backend=storage_backend, database_url=database_url)
    with TestClient(create_app(Container(settings))) as client:
        created = client.post(BASE, json={
            "title": "Add dark mode",
            "description": "Support system-wide dark theme.",
            "category": "UI",
            "priority": "HIGH",
        })
        assert created.status_code == 200
        item = created.json()
        assert item["id"]
        assert item["status"] == "OPEN"

        assert list_items(client)[0]["id"] == item["id"]

        patched = client.patch(f"{BASE}/{item['id']}/status", json={"status": "RESOLVED"})
        assert patched.status_code == 200
        listed = next(entry for entry in list_items(client) if entry["id"] == item["id"])
        assert listed == {**item, "status": "RESOLVED"}

        assert client.delete(f"{BASE}/{item['id']}").status_code == 204
        assert item["id"] not in [entry["id"] for entry in list_items(client)]

        assert client.delete(f"{BASE}/{item['id']}").status_code == 404
