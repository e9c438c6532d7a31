"""
tests/test_announcement_api.py -- Announcement CRUD, ownership and soft delete.
"""

from __future__ import annotations

import uuid

import pytest
from fastapi.testclient import TestClient

from helpers import auth, register_and_sign_in

BASE = "/api/v1/announcement"
SAMPLE = {"title": "Midterm", "content": "Bring a calculator", "course": "Physics"}


@pytest.fixture
def owner_token(client: TestClient) -> str:
    return register_and_sign_in(client, "owner@x.com")


@pytest.fixture
def other_token(client: TestClient) -> str:
    return register_and_sign_in(client, "other@x.com")


def _create(client: TestClient, token: str, **overrides) -> dict:
    body = dict(SAMPLE, **overrides)
    resp = client.post(f"{BASE}/create-announcement", json=body, headers=auth(token))
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


class TestCreate:

    def test_create_records_owner(self, client: TestClient, owner_token: str) -> None:
        resp = client.post(f"{BASE}/create-announcement", json=SAMPLE, headers=auth(owner_token))
        assert resp.status_code == 201
        body = resp.json()
        assert body["message"] == "Announcement created successfully"
        data = body["data"]
        assert data["title"] == "Midterm"
        assert data["isDeleted"] is False
        assert data["creator"]["username"] == "owner"
        assert data["createdBy"] == data["creator"]["id"]

    def test_requires_token(self, client: TestClient) -> None:
        resp = client.post(f"{BASE}/create-announcement", json=SAMPLE)
        assert resp.status_code == 401

    def test_missing_fields(self, client: TestClient, owner_token: str) -> None:
        resp = client.post(f"{BASE}/create-announcement", json={"title": "x"}, headers=auth(owner_token))
        assert resp.status_code == 400
        fields = {e["field"] for e in resp.json()["errors"]}
        assert fields == {"content", "course"}


class TestRead:

    def test_reads_are_public(self, client: TestClient, owner_token: str) -> None:
        created = _create(client, owner_token)

        resp = client.get(f"{BASE}/get-announcement/{created['id']}")
        assert resp.status_code == 200
        assert resp.json()["data"]["id"] == created["id"]

        resp = client.get(f"{BASE}/get-all-announcements")
        assert resp.status_code == 200
        assert resp.json()["message"] == "Announcements retrieved successfully"
        assert [a["id"] for a in resp.json()["data"]] == [created["id"]]

    def test_list_is_newest_first(self, client: TestClient, owner_token: str) -> None:
        first = _create(client, owner_token, title="first")
        second = _create(client, owner_token, title="second")

        ids = [a["id"] for a in client.get(f"{BASE}/get-all-announcements").json()["data"]]
        assert ids == [second["id"], first["id"]]

    def test_pagination(self, client: TestClient, owner_token: str) -> None:
        for i in range(3):
            _create(client, owner_token, title=f"n{i}")
        resp = client.get(f"{BASE}/get-all-announcements", params={"skip": 1, "limit": 1})
        assert len(resp.json()["data"]) == 1

    def test_unknown_id(self, client: TestClient) -> None:
        resp = client.get(f"{BASE}/get-announcement/{uuid.uuid4()}")
        assert resp.status_code == 404
        assert resp.json()["code"] == "RESOURCE_NOT_FOUND"

    def test_malformed_id(self, client: TestClient) -> None:
        resp = client.get(f"{BASE}/get-announcement/not-a-uuid")
        assert resp.status_code == 400
        assert resp.json()["code"] == "VALIDATION_FAILED"


class TestUpdate:

    def test_only_owner_can_update(self, client: TestClient, owner_token: str, other_token: str) -> None:
        created = _create(client, owner_token)
        url = f"{BASE}/update-announcement/{created['id']}"

        resp = client.put(url, json={"title": "Hijacked"}, headers=auth(other_token))
        assert resp.status_code == 403
        assert resp.json()["code"] == "PERMISSION_DENIED"
        assert resp.json()["detail"] == "You are not authorized to update this announcement"

        resp = client.put(url, json={"title": "Final"}, headers=auth(owner_token))
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["title"] == "Final"
        assert data["content"] == SAMPLE["content"]
        assert resp.json()["message"] == "Announcement updated successfully"

    def test_rejected_update_leaves_resource_unchanged(
            self, client: TestClient, owner_token: str, other_token: str) -> None:
        created = _create(client, owner_token)
        client.put(f"{BASE}/update-announcement/{created['id']}", json={"title": "Hijacked"},
                   headers=auth(other_token))
        resp = client.get(f"{BASE}/get-announcement/{created['id']}")
        assert resp.json()["data"]["title"] == SAMPLE["title"]

    def test_empty_update(self, client: TestClient, owner_token: str) -> None:
        created = _create(client, owner_token)
        resp = client.put(f"{BASE}/update-announcement/{created['id']}", json={}, headers=auth(owner_token))
        assert resp.status_code == 400
        assert resp.json()["errors"][0]["message"] == "Please provide at least one field to update"

    def test_unknown_id(self, client: TestClient, owner_token: str) -> None:
        resp = client.put(f"{BASE}/update-announcement/{uuid.uuid4()}", json={"title": "x"},
                          headers=auth(owner_token))
        assert resp.status_code == 404


class TestSoftDelete:

    def test_deleted_announcement_disappears(self, client: TestClient, owner_token: str) -> None:
        created = _create(client, owner_token)

        resp = client.delete(f"{BASE}/delete-announcement/{created['id']}", headers=auth(owner_token))
        assert resp.status_code == 200
        assert resp.json()["message"] == "Announcement soft deleted successfully"
        assert resp.json()["data"]["isDeleted"] is True
        assert resp.json()["data"]["deletedAt"] is not None

        assert client.get(f"{BASE}/get-announcement/{created['id']}").status_code == 404
        assert client.get(f"{BASE}/get-all-announcements").json()["data"] == []

    def test_mutations_after_delete_are_not_found(
            self, client: TestClient, owner_token: str, other_token: str) -> None:
        created = _create(client, owner_token)
        client.delete(f"{BASE}/delete-announcement/{created['id']}", headers=auth(owner_token))

        for token in (owner_token, other_token):
            resp = client.put(f"{BASE}/update-announcement/{created['id']}", json={"title": "x"},
                              headers=auth(token))
            assert resp.status_code == 404
            resp = client.delete(f"{BASE}/delete-announcement/{created['id']}", headers=auth(token))
            assert resp.status_code == 404

    def test_only_owner_can_delete(self, client: TestClient, owner_token: str, other_token: str) -> None:
        created = _create(client, owner_token)
        resp = client.delete(f"{BASE}/delete-announcement/{created['id']}", headers=auth(other_token))
        assert resp.status_code == 403
        assert client.get(f"{BASE}/get-announcement/{created['id']}").status_code == 200


class TestTimestamps:

    def test_times_carry_utc_offset(self, client: TestClient, owner_token: str) -> None:
        created = _create(client, owner_token)
        for field in ("createdAt", "updatedAt"):
            assert created[field].endswith(("Z", "+00:00")), created[field]
