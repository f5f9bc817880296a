"""Worker model — an employee who picks up tasks during a working day."""

from pydantic import BaseModel, Field

from taskdist.models.task import Task


class Worker(BaseModel):
    """An interchangeable worker. `tasks` grows in place as work is assigned."""

    id: str = Field(description="Unique worker identifier")
    name: str = Field(default="", description="Full name")
    job: str = Field(default="", description="Job title, informational only")
    tasks: list[Task] = Field(default_factory=list, description="Assigned tasks in pick-up order")

    @property
    def total_lead_time(self) -> int:
        """Minutes committed by the tasks assigned so far."""
        return sum(t.lead_time for t in self.tasks)

    @property
    def has_tasks(self) -> bool:
        return bool(self.tasks)

    def assign_task(self, task: Task) -> None:
        """Append a task to this worker's list."""
        self.tasks.append(task)

    def __repr__(self) -> str:
        return (
            f"Worker(id={self.id!r}, name={self.name!r}, "
            f"tasks={len(self.tasks)}, committed={self.total_lead_time})"
        )
