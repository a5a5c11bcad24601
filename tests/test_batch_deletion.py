"""
Tests for batched entry deletion: clamping, estimates, the admin endpoints
and the clear_all driver.
"""
import asyncio

import pytest

from founderflow.models.entry import Entry
from founderflow.services.batch_deletion_service import clamp_batch_size, clear_all


def _entries(count):
    return [Entry(name=f"Founder {i}", company=f"Company {i}") for i in range(count)]


class TestClampBatchSize:

    @pytest.mark.parametrize("requested,expected", [
        (None, 100),
        (0, 1),
        (-5, 1),
        (1, 1),
        (50, 50),
        (200, 200),
        (201, 200),
        (10_000, 200),
    ])
    def test_clamps_into_range(self, requested, expected):
        assert clamp_batch_size(requested) == expected


class TestClearEntriesAuth:

    def test_requires_session(self, client):
        response = client.get("/api/admin/clear-entries")
        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Unauthorized"}

    def test_rejects_non_admin(self, client, user_headers):
        response = client.get("/api/admin/clear-entries", headers=user_headers)
        assert response.status_code == 403
        assert response.json()["error"] == "Forbidden - Admin access only"

    def test_rejects_unverified_admin_email(self, client, make_headers):
        headers = make_headers(email="admin@founderflow.test", verified=False)
        response = client.request("DELETE", "/api/admin/clear-entries", headers=headers, json={})
        assert response.status_code == 403

    def test_rejects_bad_token(self, client):
        response = client.get("/api/admin/clear-entries", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401

    def test_accepts_session_cookie(self, client, db, admin_headers):
        token = admin_headers["Authorization"].split(" ", 1)[1]
        response = client.get("/api/admin/clear-entries", headers={"Cookie": f"__session={token}"})
        assert response.status_code == 200


class TestEstimate:

    def test_empty_collection(self, client, db, admin_headers):
        response = client.get("/api/admin/clear-entries", headers=admin_headers)
        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "estimatedCount": 0,
            "hasEntries": False,
            "sampleSize": 0,
        }

    def test_exact_count_below_ceiling(self, client, db, admin_headers):
        db.add(*_entries(7))
        data = client.get("/api/admin/clear-entries", headers=admin_headers).json()
        assert data["estimatedCount"] == 7
        assert data["hasEntries"] is True
        assert data["sampleSize"] == 7

    def test_label_at_ceiling(self, client, db, admin_headers):
        db.add(*_entries(1001))
        data = client.get("/api/admin/clear-entries", headers=admin_headers).json()
        assert data["estimatedCount"] == "1000+"
        assert data["sampleSize"] == 1000


class TestDeleteBatch:

    def test_deletes_one_batch_and_reports_more(self, client, db, admin_headers):
        db.add(*_entries(5))
        response = client.request(
            "DELETE", "/api/admin/clear-entries", headers=admin_headers, json={"batchSize": 3}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["deletedCount"] == 3
        assert data["hasMoreEntries"] is True
        assert data["batchSize"] == 3
        assert db.count(Entry) == 2

    def test_last_batch_reports_done(self, client, db, admin_headers):
        db.add(*_entries(2))
        data = client.request(
            "DELETE", "/api/admin/clear-entries", headers=admin_headers, json={"batchSize": 3}
        ).json()
        assert data["deletedCount"] == 2
        assert data["hasMoreEntries"] is False
        assert db.count(Entry) == 0

    def test_oversized_batch_is_clamped(self, client, db, admin_headers):
        db.add(*_entries(3))
        data = client.request(
            "DELETE", "/api/admin/clear-entries", headers=admin_headers, json={"batchSize": 5000}
        ).json()
        assert data["batchSize"] == 200
        assert data["deletedCount"] == 3

    def test_missing_body_uses_default(self, client, db, admin_headers):
        data = client.request("DELETE", "/api/admin/clear-entries", headers=admin_headers).json()
        assert data["batchSize"] == 100
        assert data["deletedCount"] == 0
        assert data["hasMoreEntries"] is False
        assert data["message"] == "No more entries to delete"


class TestClearAll:

    def test_runs_until_empty(self):
        remaining = {"count": 250}
        sleeps = []

        async def delete_batch(size):
            deleted = min(size, remaining["count"])
            remaining["count"] -= deleted
            return deleted, remaining["count"] > 0

        async def sleep(seconds):
            sleeps.append(seconds)

        result = asyncio.run(clear_all(delete_batch, batch_size=100, sleep=sleep))

        assert result == {"batches": 3, "total_deleted": 250, "completed": True, "warning": None}
        assert sleeps == [1.0, 1.0]

    def test_stops_at_ceiling_with_warning(self):
        calls = []

        async def delete_batch(size):
            calls.append(size)
            return size, True

        async def sleep(seconds):
            pass

        result = asyncio.run(clear_all(delete_batch, batch_size=10, sleep=sleep))

        assert len(calls) == 50
        assert result["batches"] == 50
        assert result["total_deleted"] == 500
        assert result["completed"] is False
        assert result["warning"] == "Stopped after 50 batches. Some entries may remain."

    def test_reports_progress(self):
        seen = []

        async def delete_batch(size):
            return 0, False

        result = asyncio.run(clear_all(delete_batch, on_batch=lambda *args: seen.append(args)))

        assert seen == [(1, 0, False)]
        assert result["completed"] is True
