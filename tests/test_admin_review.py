"""
Tests for the admin review tools: listing, stats, date display and
selective delete.
"""
from datetime import date, datetime, timezone

import pytest

from founderflow.core.dates import format_published
from founderflow.models.entry import Entry
from founderflow.services.admin_review_service import calculate_stats


class TestFormatPublished:

    def test_datetime(self):
        assert format_published(datetime(2025, 1, 5, 14, 30)) == "Jan 5, 2025"

    def test_date(self):
        assert format_published(date(2024, 11, 23)) == "Nov 23, 2024"

    def test_string_passes_through(self):
        assert format_published("2 days ago") == "2 days ago"

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing(self, value):
        assert format_published(value) == "Unknown"

    def test_other_values_are_stringified(self):
        assert format_published(1736035200) == "1736035200"


class TestCalculateStats:

    def test_counters_are_independent(self):
        entries = [
            {"email": "", "linkedinurl": "https://linkedin.com/in/a", "company_url": "N/A",
             "name": "Dana", "company": "Acme", "role": "Founder"},
            {"email": "x@y.com", "linkedinurl": "   ", "company_url": "https://acme.io",
             "name": "N/A", "company": "unknown", "role": ""},
            {"email": "N/A", "linkedinurl": "", "company_url": "",
             "name": " na ", "company": "Beta", "role": "CTO"},
        ]

        stats = calculate_stats(entries)

        assert stats == {
            "total": 3,
            "without_email": 2,
            "without_linked_in": 2,
            "without_company_url": 2,
            "invalid_names": 2,
            "invalid_companies": 1,
            "invalid_roles": 1,
        }

    def test_na_is_only_missing_when_exact(self):
        stats = calculate_stats([{"email": "n/a", "linkedinurl": "x", "company_url": "x",
                                  "name": "A", "company": "B", "role": "C"}])
        assert stats["without_email"] == 0

    def test_empty_list(self):
        assert calculate_stats([])["total"] == 0


class TestDataManagement:

    def test_lists_entries_with_stats(self, client, db, admin_headers):
        db.add(
            Entry(id="old", name="Dana", company="Acme", role="Founder",
                  email="dana@acme.io", published=datetime(2024, 3, 1, tzinfo=timezone.utc)),
            Entry(id="new", name="N/A", company="Beta", published=datetime(2025, 1, 5, tzinfo=timezone.utc)),
            Entry(id="undated", name="Lee", company="Gamma", published_label="last week"),
        )

        response = client.get("/api/admin/data-management", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert [e["id"] for e in data["entries"]] == ["new", "old", "undated"]

        newest = data["entries"][0]
        assert newest["published"] == "Jan 5, 2025"
        assert newest["email"] == ""
        assert newest["company_url"] == ""
        assert data["entries"][2]["published"] == "last week"

        assert data["stats"] == {
            "total": 3,
            "withoutEmail": 2,
            "withoutLinkedIn": 3,
            "withoutCompanyUrl": 3,
            "invalidNames": 1,
            "invalidCompanies": 0,
            "invalidRoles": 2,
        }

    def test_linkedin_posts(self, client, db, admin_headers):
        db.add(Entry(id="a", name="Dana", published=datetime(2025, 2, 1, tzinfo=timezone.utc)))
        data = client.get("/api/admin/linkedin-posts", headers=admin_headers).json()
        assert data["success"] is True
        assert data["entries"][0]["id"] == "a"
        assert data["entries"][0]["published"] == "Feb 1, 2025"
        assert "stats" not in data

    def test_requires_admin(self, client, user_headers):
        assert client.get("/api/admin/data-management", headers=user_headers).status_code == 403
        assert client.get("/api/admin/linkedin-posts").status_code == 401


class TestDeleteSelected:

    def _delete(self, client, headers, body):
        return client.request("DELETE", "/api/admin/data-management", headers=headers, json=body)

    def test_partial_failure(self, client, db, admin_headers):
        db.add(Entry(id="a"), Entry(id="b"), Entry(id="c"))

        response = self._delete(client, admin_headers, {"entryIds": ["a", "b", "missing"]})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["deletedCount"] == 2
        assert data["requestedCount"] == 3
        assert len(data["errors"]) == 1
        assert "missing" in data["errors"][0]
        assert [e.id for e in db.all(Entry)] == ["c"]

    def test_errors_omitted_when_all_succeed(self, client, db, admin_headers):
        db.add(Entry(id="a"))
        data = self._delete(client, admin_headers, {"entryIds": ["a"]}).json()
        assert data["deletedCount"] == 1
        assert "errors" not in data

    @pytest.mark.parametrize("body", [{"entryIds": []}, {}, None])
    def test_empty_list_rejected(self, client, db, admin_headers, body):
        db.add(Entry(id="a"))
        response = self._delete(client, admin_headers, body)
        assert response.status_code == 400
        assert response.json()["error"] == "No entry IDs provided"
        assert db.count(Entry) == 1

    def test_too_many_ids_rejected(self, client, db, admin_headers):
        db.add(Entry(id="id-0"))
        ids = [f"id-{i}" for i in range(101)]
        response = self._delete(client, admin_headers, {"entryIds": ids})
        assert response.status_code == 400
        assert response.json()["error"] == "Cannot delete more than 100 entries at once"
        assert db.count(Entry) == 1

    def test_malformed_body(self, client, admin_headers):
        response = self._delete(client, admin_headers, {"entryIds": "a"})
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request"
