"""
Tests for the admin CLI against a mocked API.
"""
import json

import httpx
import pytest
from click.testing import CliRunner

from founderflow.cli import cli


@pytest.fixture
def api(monkeypatch):
    """Route the CLI's httpx client to an in-memory handler."""
    state = {"remaining": 250, "requests": [], "status": 200}

    def handler(request):
        state["requests"].append(request)
        if state["status"] != 200:
            return httpx.Response(state["status"], json={"success": False, "error": "Forbidden - Admin access only"})
        if request.method == "GET":
            return httpx.Response(200, json={"success": True, "estimatedCount": state["remaining"],
                                             "hasEntries": state["remaining"] > 0, "sampleSize": state["remaining"]})
        size = json.loads(request.content)["batchSize"]
        deleted = min(size, state["remaining"])
        state["remaining"] -= deleted
        return httpx.Response(200, json={
            "success": True,
            "message": f"Successfully deleted {deleted} entries",
            "deletedCount": deleted,
            "hasMoreEntries": state["remaining"] > 0,
            "batchSize": size,
        })

    real_client = httpx.AsyncClient

    def client_factory(**kwargs):
        return real_client(transport=httpx.MockTransport(handler), **kwargs)

    monkeypatch.setattr(httpx, "AsyncClient", client_factory)
    return state


def test_clear_entries(api):
    result = CliRunner().invoke(cli, [
        "--token", "t0k", "clear-entries", "--batch-size", "100", "--delay", "0", "--yes",
    ])

    assert result.exit_code == 0, result.output
    assert "Deleted 250 entries in 3 batches" in result.output
    assert api["remaining"] == 0
    assert api["requests"][0].headers["Authorization"] == "Bearer t0k"


def test_clear_entries_stops_at_max_batches(api):
    result = CliRunner().invoke(cli, [
        "--token", "t0k", "clear-entries", "--batch-size", "10", "--max-batches", "2", "--delay", "0", "--yes",
    ])

    assert result.exit_code == 0, result.output
    assert "Deleted 20 entries in 2 batches" in result.output
    assert "Stopped after 2 batches. Some entries may remain." in result.output


def test_estimate(api):
    result = CliRunner().invoke(cli, ["--token", "t0k", "estimate-entries"])
    assert result.exit_code == 0, result.output
    assert "Entries: 250" in result.output


def test_forbidden(api):
    api["status"] = 403
    result = CliRunner().invoke(cli, ["--token", "t0k", "clear-entries", "--delay", "0", "--yes"])
    assert result.exit_code == 1
    assert "403: Forbidden - Admin access only" in result.output
