"""
tests/helpers.py -- API helpers shared by the integration tests.
"""

from __future__ import annotations

from fastapi.testclient import TestClient

TOKEN_HEADER = "accesstoken"
DEFAULT_PASSWORD = "Sup3r-secret"


def sign_up(client: TestClient, email: str, password: str = DEFAULT_PASSWORD, **extra):
    body = {"username": email.split("@")[0], "email": email, "password": password, "age": 30}
    body.update(extra)
    return client.post("/api/v1/auth/sign-up", json=body)


def sign_in(client: TestClient, email: str, password: str = DEFAULT_PASSWORD):
    return client.post("/api/v1/auth/sign-in", json={"email": email, "password": password})


def register_and_sign_in(client: TestClient, email: str, password: str = DEFAULT_PASSWORD) -> str:
    """Create a user and return a fresh access token for it."""
    resp = sign_up(client, email, password)
    assert resp.status_code == 201, resp.text
    resp = sign_in(client, email, password)
    assert resp.status_code == 200, resp.text
    return resp.json()["accessToken"]


def auth(token: str) -> dict[str, str]:
    return {TOKEN_HEADER: token}
