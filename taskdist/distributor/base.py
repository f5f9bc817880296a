"""Base Distributor — abstract interface and result types for task distribution."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from taskdist.models.task import Task
from taskdist.models.worker import Worker


@dataclass(frozen=True)
class Assignment:
    """Immutable distribution decision: a worker takes a task over [start_time, end_time).

    `worker_index` is the worker's position in the input list; ids need not be unique.
    """
    task_id: str
    worker_id: str
    start_time: int
    end_time: int
    worker_index: int


@dataclass(frozen=True)
class Rejection:
    """A task that no worker could finish within the budget.

    `earliest_start` is None when there were no workers at all.
    """
    task: Task
    earliest_start: Optional[int]
    budget: int

    @property
    def reason(self) -> str:
        if self.earliest_start is None:
            return "no workers available"
        end = self.earliest_start + self.task.lead_time
        return f"would end at minute {end}, budget is {self.budget}"


RejectionHandler = Callable[[Rejection], None]


@dataclass
class DistributionResult:
    """Outcome of one run. Workers' task lists carry the same assignments."""
    budget: int
    assignments: list[Assignment] = field(default_factory=list)
    rejected: list[Rejection] = field(default_factory=list)

    @property
    def assigned_count(self) -> int:
        return len(self.assignments)

    @property
    def rejected_count(self) -> int:
        return len(self.rejected)

    @property
    def rejected_tasks(self) -> list[Task]:
        return [r.task for r in self.rejected]


class BaseDistributor(ABC):
    """Abstract base class for distributors. Subclasses implement distribute()."""

    @abstractmethod
    def distribute(
        self,
        workers: Sequence[Worker],
        tasks: Sequence[Task],
        on_reject: Optional[RejectionHandler] = None,
    ) -> DistributionResult:
        """Append tasks to workers' task lists in place and report what could not be placed."""
        ...

    @property
    def name(self) -> str:
        """Human-readable distributor name for reports."""
        return self.__class__.__name__
