"""
Tests for app wiring: banner, health and the error envelope.
"""
import pytest

from founderflow.models.profile import UserProfile


class TestHealth:

    def test_root(self, client):
        data = client.get("/").json()
        assert data["message"] == "Founder Flow API is running"
        assert data["docs"] == "/docs"

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"


class TestErrorEnvelope:

    def test_invalid_body(self, client, user_headers):
        response = client.post("/api/generate-outreach", headers=user_headers, json={"jobData": {}})
        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"] == "Invalid request"
        assert isinstance(data["details"], list)

    def test_no_stack_outside_dev_mode(self, client, db, user_headers, generator):
        db.add(UserProfile(user_id="user_1", resume_text="resume"))
        generator.error = RuntimeError("boom")
        data = client.post("/api/generate-outreach", headers=user_headers, json={
            "jobData": {"name": "Dana"}, "outreachType": "job", "messageType": "email",
        }).json()
        assert "stack" not in data


class TestDevMode:

    @pytest.fixture
    def settings(self, settings):
        settings.DEV_MODE = True
        return settings

    def test_stack_in_dev_mode(self, client, db, user_headers, generator):
        db.add(UserProfile(user_id="user_1", resume_text="resume"))
        generator.error = RuntimeError("boom")

        response = client.post("/api/generate-outreach", headers=user_headers, json={
            "jobData": {"name": "Dana"}, "outreachType": "job", "messageType": "email",
        })

        assert response.status_code == 500
        data = response.json()
        assert data["details"] == "boom"
        assert "RuntimeError" in data["stack"]
