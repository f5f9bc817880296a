"""Task model — a unit of work waiting to be handed to a Worker."""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class TaskType(str, Enum):
    """Kinds of work a task can describe. Informational only."""
    DEVELOPMENT = "development"
    TESTING = "testing"
    ANALYSIS = "analysis"
    MANAGEMENT = "management"
    DOCUMENTATION = "documentation"
    OTHER = "other"


class Task(BaseModel):
    """A prioritized, time-bounded piece of work. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Unique task identifier")
    name: str = Field(default="", description="Short human-readable title")
    description: str = Field(default="", description="Free-form details, used only for reporting")
    task_type: TaskType = Field(default=TaskType.OTHER, description="Kind of work")
    priority: int = Field(description="Scheduling priority (lower value = more urgent)")
    lead_time: int = Field(gt=0, description="Required working time in minutes")

    @property
    def label(self) -> str:
        """Identifier plus name, for log lines and reports."""
        if self.name:
            return f"{self.id} ({self.name})"
        return self.id

    def __repr__(self) -> str:
        return (
            f"Task(id={self.id!r}, name={self.name!r}, "
            f"priority={self.priority}, lead_time={self.lead_time})"
        )
