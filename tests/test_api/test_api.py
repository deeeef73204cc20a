"""Tests for the budget HTTP API."""

from __future__ import annotations

import pytest
from aiohttp import test_utils

from chantier.api import create_app
from chantier.budget import get_ordered_category_names


def _client() -> test_utils.TestClient:
    return test_utils.TestClient(test_utils.TestServer(create_app()))


@pytest.mark.asyncio
async def test_categories_endpoint() -> None:
    """GET /api/categories lists canonical categories with their tasks."""
    async with _client() as client:
        resp = await client.get("/api/categories")
        assert resp.status == 200
        data = await resp.json()

    names = [c["name"] for c in data["categories"]]
    assert names == get_ordered_category_names()
    assert all(c["budget"] == 0 for c in data["categories"])
    assert "Drainage" in data["tasks"]["Plomberie"]
    assert resp.headers["Access-Control-Allow-Origin"] == "*"


@pytest.mark.asyncio
async def test_reconcile_category_list() -> None:
    """POST /api/reconcile with a category list spreads taxes."""
    payload = {
        "categories": [
            {"name": "Excavation", "budget": 5000},
            {"name": "Plomberie", "budget": 8000},
            {"name": "Taxes", "budget": 650},
            {"name": "Piscine", "budget": 40000},
        ],
        "budgetPrevu": 20000,
    }
    async with _client() as client:
        resp = await client.post("/api/reconcile", json=payload)
        assert resp.status == 200
        data = await resp.json()

    budgets = {c["name"]: c["budget"] for c in data["categories"]}
    assert data["ok"] is True
    assert budgets["Excavation"] == pytest.approx(5250)
    assert budgets["Plomberie"] == pytest.approx(8400)
    assert data["total"] == pytest.approx(13650)
    assert data["unallocated"] == pytest.approx(40000)
    assert data["unmatched"] == ["Piscine"]
    assert data["comparison"]["over_budget"] is False


@pytest.mark.asyncio
async def test_reconcile_raw_analysis_text() -> None:
    """POST /api/reconcile accepts the raw analysis response."""
    text = 'Analyse:\n```json\n[{"name": "Toiture", "budget": "9000"}]\n```'
    async with _client() as client:
        resp = await client.post("/api/reconcile", json={"analysis": text})
        data = await resp.json()

    budgets = {c["name"]: c["budget"] for c in data["categories"]}
    assert budgets["Toiture"] == 9000
    assert data["comparison"] is None


@pytest.mark.asyncio
async def test_reconcile_invalid_json() -> None:
    async with _client() as client:
        resp = await client.post(
            "/api/reconcile", data="{not json", headers={"Content-Type": "application/json"}
        )
        assert resp.status == 400
        data = await resp.json()
    assert data == {"ok": False, "error": "Invalid JSON"}


@pytest.mark.asyncio
async def test_reconcile_undecodable_body() -> None:
    """A body that is not UTF-8 is rejected like invalid JSON."""
    async with _client() as client:
        resp = await client.post(
            "/api/reconcile",
            data=b'{"categories": "\xff"}',
            headers={"Content-Type": "application/json"},
        )
        assert resp.status == 400
        data = await resp.json()
    assert data == {"ok": False, "error": "Invalid JSON"}


@pytest.mark.asyncio
async def test_reconcile_missing_payload() -> None:
    async with _client() as client:
        resp = await client.post("/api/reconcile", json={"budgetPrevu": 1000})
        assert resp.status == 400
        non_object = await client.post("/api/reconcile", json=[1, 2])
        assert non_object.status == 400


@pytest.mark.asyncio
async def test_cors_preflight() -> None:
    async with _client() as client:
        resp = await client.options("/api/reconcile")
    assert resp.status == 204
    assert "POST" in resp.headers["Access-Control-Allow-Methods"]
