"""Lightweight aiohttp server exposing the budget engine.

Endpoints:

- ``GET /api/categories``: canonical categories and their tasks.
- ``POST /api/reconcile``: reconcile an analysis (a category list under
  ``categories`` or the raw response text under ``analysis``) and return the
  reconciled categories with totals and unallocated amounts.
"""

from __future__ import annotations

import logging

from aiohttp import web

from chantier.analysis import parse_analysis_categories
from chantier.budget import (
    build_canonical_categories,
    coerce_amount,
    get_step_tasks_by_category,
    reconcile_detailed,
)
from chantier.config import settings

logger = logging.getLogger(__name__)


def _cors_headers() -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }


async def handle_options(request: web.Request) -> web.Response:
    """OPTIONS /api/*: CORS preflight."""
    return web.Response(status=204, headers=_cors_headers())


async def handle_categories(request: web.Request) -> web.Response:
    """GET /api/categories: canonical categories in display order."""
    categories = [category.model_dump() for category in build_canonical_categories()]
    return web.json_response(
        {"categories": categories, "tasks": get_step_tasks_by_category()},
        headers=_cors_headers(),
    )


async def handle_reconcile(request: web.Request) -> web.Response:
    """POST /api/reconcile: map an analysis onto the canonical categories."""
    cors = _cors_headers()

    try:
        body = await request.json()
    except ValueError:
        logger.warning("Reconcile request with invalid JSON body")
        return web.json_response({"ok": False, "error": "Invalid JSON"}, status=400, headers=cors)

    if not isinstance(body, dict):
        return web.json_response({"ok": False, "error": "Expected a JSON object"}, status=400, headers=cors)

    if "categories" in body:
        incoming = parse_analysis_categories(body["categories"])
    elif "analysis" in body:
        incoming = parse_analysis_categories(body["analysis"])
    else:
        return web.json_response(
            {"ok": False, "error": "Missing 'categories' or 'analysis'"}, status=400, headers=cors
        )

    budget_prevu = body.get("budgetPrevu")
    expected = coerce_amount(budget_prevu) if budget_prevu is not None else None

    result = reconcile_detailed(incoming, budget_prevu=expected)
    logger.info("Reconciled %d analysis categories", len(incoming))

    return web.json_response(
        {
            "ok": True,
            "categories": [category.model_dump() for category in result.categories],
            "total": result.total_budget,
            "extra": result.extra_amount,
            "unallocated": result.unallocated_amount,
            "unmatched": result.unmatched,
            "comparison": result.comparison.model_dump() if result.comparison else None,
        },
        headers=cors,
    )


def create_app() -> web.Application:
    """Build the aiohttp application for the budget API."""
    app = web.Application()

    app.router.add_get("/api/categories", handle_categories)
    app.router.add_options("/api/categories", handle_options)
    app.router.add_post("/api/reconcile", handle_reconcile)
    app.router.add_options("/api/reconcile", handle_options)

    return app


def run_server() -> None:
    """Configure logging and serve the API until interrupted.

    Invoked from ``__main__.py``.
    """
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.info(
        "Budget API with %d categories on http://%s:%d",
        len(build_canonical_categories()),
        settings.api_host,
        settings.api_port,
    )
    web.run_app(create_app(), host=settings.api_host, port=settings.api_port, print=None)
