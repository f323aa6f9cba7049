"""
Tests for the /api/messages REST adapter.

Run with: pytest tests/test_messages_api.py -v
"""

from message_service.domain.entities.message import MAX_CONTENT_LENGTH

BASE_URL = "/api/messages"


def create_message(client, content="Hello", author="Alice"):
    response = client.post(BASE_URL, json={"content": content, "author": author})
    assert response.status_code == 201, response.text
    return response.json()


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_correlation_id_is_echoed(self, client):
        response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})
        assert response.headers["X-Correlation-ID"] == "abc-123"


class TestCreateAndRead:
    def test_create_returns_draft_without_absent_timestamps(self, client):
        body = create_message(client, "  Hello ", " Alice ")

        assert body["content"] == "Hello"
        assert body["author"] == "Alice"
        assert body["status"] == "DRAFT"
        assert body["created_at"]
        assert body["updated_at"]
        assert "published_at" not in body
        assert "deleted_at" not in body

    def test_create_with_empty_content_is_bad_request(self, client, repository):
        response = client.post(BASE_URL, json={"content": "", "author": "Alice"})

        assert response.status_code == 400
        assert "content" in response.json()["error"]
        assert len(repository) == 0

    def test_create_with_too_long_content_is_bad_request(self, client):
        response = client.post(
            BASE_URL,
            json={"content": "x" * (MAX_CONTENT_LENGTH + 1), "author": "Alice"},
        )
        assert response.status_code == 400

    def test_create_with_missing_field_is_bad_request(self, client):
        response = client.post(BASE_URL, json={"content": "Hello"})
        assert response.status_code == 400
        assert response.json()["error"] == "Validation error"

    def test_get_by_id(self, client):
        created = create_message(client)

        response = client.get(f"{BASE_URL}/{created['id']}")

        assert response.status_code == 200
        assert response.json()["id"] == created["id"]

    def test_get_unknown_id_is_not_found(self, client):
        response = client.get(f"{BASE_URL}/does-not-exist")
        assert response.status_code == 404
        assert "does-not-exist" in response.json()["error"]


class TestLifecycleEndpoints:
    def test_update_publish_archive(self, client):
        created = create_message(client)
        message_url = f"{BASE_URL}/{created['id']}"

        response = client.put(message_url, json={"content": "Hello again"})
        assert response.status_code == 200
        assert response.json()["content"] == "Hello again"

        response = client.post(f"{message_url}/publish")
        assert response.status_code == 200
        assert response.json()["status"] == "PUBLISHED"
        assert response.json()["published_at"]

        response = client.post(f"{message_url}/archive")
        assert response.status_code == 200
        assert response.json()["status"] == "ARCHIVED"

    def test_publish_twice_is_conflict(self, client):
        created = create_message(client)
        client.post(f"{BASE_URL}/{created['id']}/publish")

        response = client.post(f"{BASE_URL}/{created['id']}/publish")

        assert response.status_code == 409

    def test_soft_delete_then_delete_again_is_conflict(self, client):
        created = create_message(client)
        message_url = f"{BASE_URL}/{created['id']}"

        assert client.delete(message_url).status_code == 204

        response = client.delete(message_url)
        assert response.status_code == 409
        assert "already deleted" in response.json()["error"]

        # Still readable by id after a soft delete
        body = client.get(message_url).json()
        assert body["status"] == "DELETED"
        assert body["deleted_at"]

    def test_update_after_delete_is_conflict(self, client):
        created = create_message(client)
        client.delete(f"{BASE_URL}/{created['id']}")

        response = client.put(f"{BASE_URL}/{created['id']}", json={"content": "x"})

        assert response.status_code == 409

    def test_hard_delete(self, client):
        created = create_message(client)
        message_url = f"{BASE_URL}/{created['id']}"

        assert client.delete(f"{message_url}/hard").status_code == 204
        assert client.get(message_url).status_code == 404
        assert client.delete(f"{message_url}/hard").status_code == 404

    def test_unknown_id_on_commands_is_not_found(self, client):
        assert client.post(f"{BASE_URL}/nope/publish").status_code == 404
        assert client.put(f"{BASE_URL}/nope", json={"content": "x"}).status_code == 404
        assert client.delete(f"{BASE_URL}/nope").status_code == 404


class TestListEndpoints:
    def test_list_active_status_author_and_stats(self, client):
        draft = create_message(client, "draft", "Alice")
        live = create_message(client, "live", "Bob")
        gone = create_message(client, "gone", "Alice")
        client.post(f"{BASE_URL}/{live['id']}/publish")
        client.delete(f"{BASE_URL}/{gone['id']}")

        active_ids = {m["id"] for m in client.get(BASE_URL).json()}
        assert active_ids == {draft["id"], live["id"]}

        published = client.get(f"{BASE_URL}/status/published").json()
        assert [m["id"] for m in published] == [live["id"]]

        by_alice = {m["id"] for m in client.get(f"{BASE_URL}/author/Alice").json()}
        assert by_alice == {draft["id"], gone["id"]}
        assert client.get(f"{BASE_URL}/author/alice").json() == []

        stats = client.get(f"{BASE_URL}/stats").json()
        assert stats == {"DRAFT": 1, "PUBLISHED": 1, "ARCHIVED": 0, "DELETED": 1}

    def test_unknown_status_token_is_bad_request(self, client):
        response = client.get(f"{BASE_URL}/status/PENDING")
        assert response.status_code == 400
