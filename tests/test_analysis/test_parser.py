"""Tests for extracting categories from AI analysis responses."""

from __future__ import annotations

import json

from chantier.analysis.parser import parse_analysis_categories

CATEGORIES = [
    {"name": "Fondation", "budget": 25000, "description": "Semelles et murs"},
    {
        "name": "Toiture",
        "budget": "12000",
        "description": "Bardeaux",
        "items": [{"name": "Bardeaux", "cost": 8000, "quantity": "30", "unit": "paquets"}],
    },
    {"name": "Taxes", "budget": 5552.25, "description": "TPS + TVQ"},
]


class TestParseAnalysisCategories:
    """Tests for the parse_analysis_categories function."""

    def test_plain_list(self) -> None:
        categories = parse_analysis_categories(CATEGORIES)
        assert [c.name for c in categories] == ["Fondation", "Toiture", "Taxes"]
        assert categories[1].budget == 12000
        assert categories[1].items is not None
        assert categories[1].items[0].cost == 8000

    def test_nested_under_categories_key(self) -> None:
        categories = parse_analysis_categories({"categories": CATEGORIES, "total": 42552.25})
        assert len(categories) == 3

    def test_fenced_json_in_prose(self) -> None:
        text = (
            "Voici l'analyse du budget.\n\n"
            "```json\n"
            f"{json.dumps({'categories_budget': CATEGORIES}, ensure_ascii=False)}\n"
            "```\n\n"
            "Les taxes sont incluses."
        )
        categories = parse_analysis_categories(text)
        assert [c.name for c in categories] == ["Fondation", "Toiture", "Taxes"]

    def test_bare_json_in_prose(self) -> None:
        text = f"Résultat : {json.dumps(CATEGORIES)} fin."
        assert len(parse_analysis_categories(text)) == 3

    def test_first_decodable_block_wins(self) -> None:
        text = (
            "```contacts\nDOC|ENTREPRISE|TEL\n```\n"
            "```budget_json\n" + json.dumps(CATEGORIES[:1]) + "\n```"
        )
        categories = parse_analysis_categories(text)
        assert [c.name for c in categories] == ["Fondation"]

    def test_non_object_entries_skipped(self) -> None:
        categories = parse_analysis_categories([CATEGORIES[0], "Toiture", 12, None])
        assert [c.name for c in categories] == ["Fondation"]

    def test_unusable_payloads(self) -> None:
        assert parse_analysis_categories("Aucune donnée structurée.") == []
        assert parse_analysis_categories({"resume": "rien"}) == []
        assert parse_analysis_categories(None) == []
        assert parse_analysis_categories(42) == []
