"""Construction-step catalog models.

The catalog is an ordered sequence of :class:`Step` objects, each tagged with
a :class:`Phase` and holding an ordered tuple of :class:`Task` objects.  It is
read-only input for the budget engine: every model here is frozen.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Phase(StrEnum):
    """Project phases a construction step belongs to."""

    PREPARATION = "preparation"
    GROS_OEUVRE = "gros-oeuvre"
    SECOND_OEUVRE = "second-oeuvre"
    FINITIONS = "finitions"
    FINALISATION = "finalisation"


class Task(BaseModel):
    """A single task within a construction step."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Stable task identifier.")
    title: str = Field(description="Display title of the task.")


class Step(BaseModel):
    """A construction step of the guide (e.g. "Fondation")."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Stable step identifier, used as merge key.")
    title: str = Field(description="Display title, used as category name.")
    phase: Phase
    tasks: tuple[Task, ...] = Field(default_factory=tuple)

    @property
    def task_titles(self) -> list[str]:
        """Titles of this step's tasks, in catalog order."""
        return [task.title for task in self.tasks]
