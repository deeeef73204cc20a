"""Construction-step catalog: models, built-in guide and loader."""

from chantier.catalog.loader import StepCatalogError, load_step_catalog
from chantier.catalog.models import Phase, Step, Task
from chantier.catalog.steps import CONSTRUCTION_STEPS

__all__ = [
    "CONSTRUCTION_STEPS",
    "Phase",
    "Step",
    "StepCatalogError",
    "Task",
    "load_step_catalog",
]
