"""Static lookup tables for the budget engine.

All tables are read-only.  Alias keys are already in normalized form
(see :func:`chantier.budget.normalize.normalize_key`); accented duplicates of
the same key are therefore unnecessary.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from chantier.catalog.models import Phase

# Vivid, distinct colors assigned round-robin to new categories.
CATEGORY_COLORS: tuple[str, ...] = (
    "#3B82F6",  # blue
    "#F97316",  # orange
    "#22C55E",  # green
    "#EAB308",  # gold
    "#EC4899",  # pink
    "#06B6D4",  # cyan
    "#8B5CF6",  # violet
    "#EF4444",  # red
    "#14B8A6",  # teal
    "#A855F7",  # purple
    "#F59E0B",  # amber
    "#10B981",  # emerald
    "#0EA5E9",  # sky
    "#DB2777",  # dark pink
    "#64748B",  # slate
    "#78716C",  # stone
    "#0891B2",  # dark cyan
)

# Phases whose steps are physical work on the building.
PHYSICAL_WORK_PHASES: frozenset[Phase] = frozenset({
    Phase.GROS_OEUVRE,
    Phase.SECOND_OEUVRE,
    Phase.FINITIONS,
})

# Steps inside the physical phases that carry no construction budget.
EXCLUDED_STEP_IDS: frozenset[str] = frozenset({"inspections-finales"})

# Rough-in and finishing steps collapsed into one category (step id → name).
MERGE_MAP: Mapping[str, str] = MappingProxyType({
    "plomberie-roughin": "Plomberie",
    "plomberie-finition": "Plomberie",
    "electricite-roughin": "Électricité",
    "electricite-finition": "Électricité",
})

_FINISHES = ("Gypse et peinture", "Revêtements de sol", "Finitions intérieures")
_HVAC = ("Chauffage et ventilation (HVAC)",)
_CABINETRY = ("Travaux ébénisterie (Cuisine/SDB)",)

# Legacy AI analysis categories (normalized key → canonical category names).
ANALYSIS_ALIASES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "excavation": ("Excavation",),
    "fondation": ("Fondation",),
    "fondations": ("Fondation",),
    "structure": ("Structure et charpente",),
    "charpente": ("Structure et charpente",),
    "toiture": ("Toiture",),
    "revetement exterieur": ("Revêtement extérieur",),
    "fenetres et portes": ("Fenêtres et portes extérieures",),
    "isolation et pare-air": ("Isolation et pare-vapeur",),
    "isolation et pare air": ("Isolation et pare-vapeur",),
    "isolation": ("Isolation et pare-vapeur",),
    "electricite": ("Électricité",),
    "plomberie": ("Plomberie",),
    "chauffage/cvac": _HVAC,
    "chauffage et cvac": _HVAC,
    "chauffage": _HVAC,
    # Finishes are split across the main finishing steps (approximation).
    "finition interieure": _FINISHES,
    "finitions interieures": _FINISHES,
    "cuisine": _CABINETRY,
    "salle de bain": _CABINETRY,
    "salles de bain": _CABINETRY,
    # English names occasionally returned by the analysis model.
    "foundation": ("Fondation",),
    "framing": ("Structure et charpente",),
    "roofing": ("Toiture",),
    "siding": ("Revêtement extérieur",),
    "windows and doors": ("Fenêtres et portes extérieures",),
    "insulation": ("Isolation et pare-vapeur",),
    "electrical": ("Électricité",),
    "plumbing": ("Plomberie",),
    "hvac": _HVAC,
    "interior finishing": _FINISHES,
    "kitchen": _CABINETRY,
    "bathroom": _CABINETRY,
})

# Substrings of a normalized name marking a non-category line item whose
# amount is spread over the other categories.
EXTRA_KEYWORDS: tuple[str, ...] = ("tax", "contingence")
