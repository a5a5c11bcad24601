"""
Tests for session token handling.
"""
from datetime import timedelta

import jwt

from founderflow.core.security import create_access_token, decode_token

SECRET = "unit-secret"


def test_round_trip_claims():
    token = create_access_token({"sub": "user_1", "email": "a@b.co", "email_verified": True}, SECRET)
    payload = decode_token(token, SECRET)
    assert payload["sub"] == "user_1"
    assert payload["email_verified"] is True
    assert "exp" in payload


def test_wrong_secret():
    token = create_access_token({"sub": "user_1"}, SECRET)
    assert decode_token(token, "other-secret") is None


def test_expired_token():
    token = create_access_token({"sub": "user_1"}, SECRET, expires_delta=timedelta(seconds=-10))
    assert decode_token(token, SECRET) is None


def test_garbage_token():
    assert decode_token("not-a-jwt", SECRET) is None


def test_user_id_claim_fallback(client, db):
    token = jwt.encode({"user_id": "legacy_user"}, "test-secret", algorithm="HS256")
    response = client.get("/api/user-profile", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.json()["userId"] == "legacy_user"


def test_token_without_subject(client):
    token = jwt.encode({"email": "a@b.co"}, "test-secret", algorithm="HS256")
    response = client.get("/api/user-profile", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
