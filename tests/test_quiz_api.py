"""
tests/test_quiz_api.py -- Quiz CRUD. Every quiz route requires a token.
"""

from __future__ import annotations

import uuid

import pytest
from fastapi.testclient import TestClient

from helpers import auth, register_and_sign_in

BASE = "/api/v1/quiz"
QUESTION = {"questionText": "2 + 2?", "options": ["3", "4", "5"], "correctAnswer": 1}
SAMPLE = {"title": "Arithmetic", "course": "Math", "questions": [QUESTION]}


@pytest.fixture
def owner_token(client: TestClient) -> str:
    return register_and_sign_in(client, "instructor@x.com")


@pytest.fixture
def other_token(client: TestClient) -> str:
    return register_and_sign_in(client, "student@x.com")


def _create(client: TestClient, token: str, **overrides) -> dict:
    resp = client.post(f"{BASE}/create-quiz", json=dict(SAMPLE, **overrides), headers=auth(token))
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


class TestQuizAccess:

    @pytest.mark.parametrize("path", ["/get-all-quizzes", f"/get-quiz/{uuid.uuid4()}"])
    def test_reads_require_token(self, client: TestClient, path: str) -> None:
        resp = client.get(f"{BASE}{path}")
        assert resp.status_code == 401
        assert resp.json()["code"] == "UNAUTHENTICATED"

    def test_create_requires_token(self, client: TestClient) -> None:
        assert client.post(f"{BASE}/create-quiz", json=SAMPLE).status_code == 401


class TestQuizCrud:

    def test_create_and_read(self, client: TestClient, owner_token: str, other_token: str) -> None:
        created = _create(client, owner_token)
        assert created["questions"] == [QUESTION]
        assert created["creator"]["username"] == "instructor"

        resp = client.get(f"{BASE}/get-quiz/{created['id']}", headers=auth(other_token))
        assert resp.status_code == 200
        assert resp.json()["message"] == "Quiz retrieved successfully"

        resp = client.get(f"{BASE}/get-all-quizzes", headers=auth(other_token))
        assert resp.json()["message"] == "Quizzes retrieved successfully"
        assert [q["id"] for q in resp.json()["data"]] == [created["id"]]

    def test_owner_updates_questions(self, client: TestClient, owner_token: str) -> None:
        created = _create(client, owner_token)
        new_question = {"questionText": "3 * 3?", "options": ["9", "6"], "correctAnswer": 0}

        resp = client.put(f"{BASE}/update-quiz/{created['id']}", json={"questions": [new_question]},
                          headers=auth(owner_token))
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["questions"] == [new_question]
        assert data["title"] == SAMPLE["title"]

    def test_non_owner_is_forbidden(self, client: TestClient, owner_token: str, other_token: str) -> None:
        created = _create(client, owner_token)

        resp = client.put(f"{BASE}/update-quiz/{created['id']}", json={"title": "Mine now"},
                          headers=auth(other_token))
        assert resp.status_code == 403
        assert resp.json()["detail"] == "You are not authorized to update this quiz"

        resp = client.delete(f"{BASE}/delete-quiz/{created['id']}", headers=auth(other_token))
        assert resp.status_code == 403
        assert resp.json()["detail"] == "You are not authorized to delete this quiz"

    def test_soft_delete(self, client: TestClient, owner_token: str) -> None:
        created = _create(client, owner_token)

        resp = client.delete(f"{BASE}/delete-quiz/{created['id']}", headers=auth(owner_token))
        assert resp.status_code == 200
        assert resp.json()["message"] == "Quiz soft deleted successfully"

        assert client.get(f"{BASE}/get-quiz/{created['id']}", headers=auth(owner_token)).status_code == 404
        assert client.get(f"{BASE}/get-all-quizzes", headers=auth(owner_token)).json()["data"] == []
        resp = client.put(f"{BASE}/update-quiz/{created['id']}", json={"title": "x"}, headers=auth(owner_token))
        assert resp.status_code == 404


class TestQuizValidation:

    def test_requires_at_least_one_question(self, client: TestClient, owner_token: str) -> None:
        resp = client.post(f"{BASE}/create-quiz", json=dict(SAMPLE, questions=[]), headers=auth(owner_token))
        assert resp.status_code == 400
        assert resp.json()["code"] == "VALIDATION_FAILED"

    def test_answer_index_must_point_at_an_option(self, client: TestClient, owner_token: str) -> None:
        bad = dict(QUESTION, correctAnswer=3)
        resp = client.post(f"{BASE}/create-quiz", json=dict(SAMPLE, questions=[bad]), headers=auth(owner_token))
        assert resp.status_code == 400
        assert resp.json()["errors"][0]["message"] == "correctAnswer must be the index of one of the options"

    def test_empty_update(self, client: TestClient, owner_token: str) -> None:
        created = _create(client, owner_token)
        resp = client.put(f"{BASE}/update-quiz/{created['id']}", json={}, headers=auth(owner_token))
        assert resp.status_code == 400
