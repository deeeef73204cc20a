"""Step catalog loading.

Provides :func:`load_step_catalog`, which returns either the built-in guide
or a catalog read from a JSON file (a top-level array of step objects).
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from chantier.catalog.models import Step
from chantier.catalog.steps import CONSTRUCTION_STEPS
from chantier.config import settings

logger = logging.getLogger(__name__)

_STEPS_ADAPTER = TypeAdapter(tuple[Step, ...])


class StepCatalogError(Exception):
    """Raised when a step catalog file cannot be read or validated."""


def load_step_catalog(path: str | Path | None = None) -> tuple[Step, ...]:
    """Return the construction-step catalog.

    Args:
        path: Optional JSON catalog file.  Falls back to
            ``settings.step_catalog_path``, then to the built-in catalog.

    Raises:
        StepCatalogError: If the file is missing, unreadable or does not
            match the step schema.
    """
    source = path if path is not None else settings.step_catalog_path
    if not source:
        return CONSTRUCTION_STEPS

    catalog_file = Path(source)
    try:
        raw = catalog_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise StepCatalogError(f"Cannot read step catalog {catalog_file}: {exc}") from exc

    try:
        steps = _STEPS_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        raise StepCatalogError(f"Invalid step catalog {catalog_file}: {exc}") from exc

    logger.info("Loaded %d steps from %s", len(steps), catalog_file)
    return steps
