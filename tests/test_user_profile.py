"""
Tests for the user profile endpoints.
"""
from founderflow.models.profile import UserProfile


class TestUserProfile:

    def test_default_profile(self, client, db, user_headers):
        response = client.get("/api/user-profile", headers=user_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["userId"] == "user_1"
        assert data["resumeText"] == ""
        assert data["resumePdfBase64"] == ""
        assert data["skills"] == []
        assert data["goals"] == ""

    def test_requires_session(self, client):
        assert client.get("/api/user-profile").status_code == 401

    def test_create_profile(self, client, db, user_headers):
        response = client.post("/api/user-profile", headers=user_headers, json={
            "name": "Sam Rivera",
            "resumeText": "Five years of backend work",
            "skills": ["python", "postgres"],
        })

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["profile"]["name"] == "Sam Rivera"
        assert data["profile"]["skills"] == ["python", "postgres"]

        stored = db.get(UserProfile, "user_1")
        assert stored.resume_text == "Five years of backend work"

    def test_update_merges_fields(self, client, db, user_headers):
        db.add(UserProfile(user_id="user_1", name="Sam", goals="Find a cofounder", resume_text="old"))

        client.post("/api/user-profile", headers=user_headers, json={"resumeText": "new", "title": None})

        data = client.get("/api/user-profile", headers=user_headers).json()
        assert data["resumeText"] == "new"
        assert data["name"] == "Sam"
        assert data["goals"] == "Find a cofounder"
        assert data["title"] == ""

    def test_profiles_are_per_user(self, client, db, user_headers, make_headers):
        client.post("/api/user-profile", headers=user_headers, json={"name": "Sam"})
        other = client.get("/api/user-profile", headers=make_headers(user_id="user_2")).json()
        assert other["name"] == ""
