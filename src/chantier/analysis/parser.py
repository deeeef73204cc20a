"""Extract budget categories from an AI analysis response.

The analysis model answers in prose with JSON embedded somewhere: inside a
fenced block (```json, ```budget_json...) or bare.  The payload is either a
list of categories or an object holding one under ``categories``.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from chantier.budget.mapper import as_incoming
from chantier.budget.models import IncomingAnalysisCategory

logger = logging.getLogger(__name__)

_FENCED_BLOCK_RE = re.compile(r"```[\w-]*\s*\n(.*?)```", re.DOTALL)

# Keys under which the analysis may nest its category list.
CATEGORY_LIST_KEYS: tuple[str, ...] = ("categories", "categories_budget", "budget_categories")


def parse_analysis_categories(payload: Any) -> list[IncomingAnalysisCategory]:
    """Return the analysis categories found in *payload*.

    Args:
        payload: A list of category dicts, a dict nesting such a list, or
            the raw response text.

    Returns:
        The validated categories, in payload order.  Entries that are not
        objects are skipped; an unusable payload yields ``[]``.
    """
    if isinstance(payload, str):
        payload = _decode_text(payload)

    if isinstance(payload, dict):
        payload = _category_list(payload)

    if not isinstance(payload, list):
        logger.warning("Analysis payload holds no category list (%s)", type(payload).__name__)
        return []

    categories: list[IncomingAnalysisCategory] = []
    for entry in payload:
        category = as_incoming(entry)
        if category is not None:
            categories.append(category)
    return categories


def _category_list(data: dict[str, Any]) -> Any:
    for key in CATEGORY_LIST_KEYS:
        if key in data:
            return data[key]
    return None


def _decode_text(text: str) -> Any:
    """Decode the first JSON document found in *text*, or ``None``."""
    candidates = [block.strip() for block in _FENCED_BLOCK_RE.findall(text)]
    candidates.append(text.strip())
    candidates.extend(_bracketed(text))

    for candidate in candidates:
        if not candidate:
            continue
        try:
            return json.loads(candidate)
        except json.JSONDecodeError:
            continue

    logger.warning("No JSON found in analysis response: %s", text[:200])
    return None


def _bracketed(text: str) -> list[str]:
    """Widest ``[...]`` and ``{...}`` spans of *text*."""
    spans: list[str] = []
    for opening, closing in (("[", "]"), ("{", "}")):
        start = text.find(opening)
        end = text.rfind(closing)
        if start != -1 and end > start:
            spans.append(text[start : end + 1])
    return spans
