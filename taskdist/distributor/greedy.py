"""Greedy Distributor — hands each task to the worker that frees up earliest.

Tasks are taken in priority order (lower value first, longer tasks first on a
tie). Each one goes to whichever worker is free soonest; if even that worker
would finish past the working-time budget, nobody can, and the task is
rejected without touching any worker.
"""

import logging
from typing import Optional, Sequence

from taskdist import config
from taskdist.config import DistributionConfig
from taskdist.distributor.availability import AvailabilityIndex
from taskdist.distributor.base import (
    Assignment,
    BaseDistributor,
    DistributionResult,
    Rejection,
    RejectionHandler,
)
from taskdist.distributor.ordering import order_tasks
from taskdist.exceptions import InvalidBudgetError, InvalidTaskError, InvalidWorkerError
from taskdist.models.task import Task
from taskdist.models.worker import Worker

logger = logging.getLogger(__name__)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class GreedyDistributor(BaseDistributor):
    """Single-pass earliest-available assignment under a per-worker time budget."""

    def __init__(
        self,
        budget: Optional[int] = None,
        on_reject: Optional[RejectionHandler] = None,
    ):
        # None means the current value of config.WORKING_TIME_BUDGET.
        if budget is None:
            budget = config.WORKING_TIME_BUDGET
        self._check_budget(budget)
        self.budget = budget
        self.on_reject = on_reject

    @classmethod
    def from_config(
        cls,
        settings: DistributionConfig,
        on_reject: Optional[RejectionHandler] = None,
    ) -> "GreedyDistributor":
        return cls(budget=settings.budget, on_reject=on_reject)

    def distribute(
        self,
        workers: Sequence[Worker],
        tasks: Sequence[Task],
        on_reject: Optional[RejectionHandler] = None,
    ) -> DistributionResult:
        workers = list(workers)
        tasks = list(tasks)
        # Everything is checked before the first assignment so a bad batch
        # leaves every worker untouched.
        self._check_workers(workers)
        self._check_tasks(tasks)

        handler = on_reject or self.on_reject
        result = DistributionResult(budget=self.budget)
        index: AvailabilityIndex[tuple[int, Worker]] = AvailabilityIndex(enumerate(workers))

        for task in order_tasks(tasks):
            if not index:
                self._reject(Rejection(task, None, self.budget), result, handler)
                continue

            start_time = index.earliest()
            end_time = start_time + task.lead_time
            if end_time > self.budget:
                self._reject(Rejection(task, start_time, self.budget), result, handler)
                continue

            _, (position, worker) = index.pop_earliest()
            worker.assign_task(task)
            index.add(end_time, (position, worker))
            result.assignments.append(Assignment(
                task_id=task.id,
                worker_id=worker.id,
                start_time=start_time,
                end_time=end_time,
                worker_index=position,
            ))
            logger.debug(
                "task %s -> worker %s [%d, %d)", task.id, worker.id, start_time, end_time
            )

        logger.info(
            "%s: %d tasks assigned, %d rejected across %d workers (budget %d min)",
            self.name, result.assigned_count, result.rejected_count, len(workers), self.budget,
        )
        return result

    def _reject(
        self,
        rejection: Rejection,
        result: DistributionResult,
        handler: Optional[RejectionHandler],
    ) -> None:
        logger.warning(
            "Task %s will not be taken into work: %s (priority=%d, lead_time=%d, type=%s)",
            rejection.task.label,
            rejection.reason,
            rejection.task.priority,
            rejection.task.lead_time,
            rejection.task.task_type.value,
        )
        result.rejected.append(rejection)
        if handler is not None:
            handler(rejection)

    @staticmethod
    def _check_budget(budget: object) -> None:
        if not _is_int(budget) or budget < 0:
            raise InvalidBudgetError(f"budget must be a non-negative integer, got {budget!r}")

    @staticmethod
    def _check_workers(workers: list[Worker]) -> None:
        seen: set[int] = set()
        for position, worker in enumerate(workers):
            if not isinstance(worker, Worker):
                raise InvalidWorkerError(
                    f"workers[{position}] is {type(worker).__name__}, expected Worker"
                )
            # Distinct records may share an id; the same record twice would sit in two buckets.
            if id(worker) in seen:
                raise InvalidWorkerError(
                    f"workers[{position}] ({worker.id!r}) is already in the pool"
                )
            seen.add(id(worker))

    @staticmethod
    def _check_tasks(tasks: list[Task]) -> None:
        for position, task in enumerate(tasks):
            if not isinstance(task, Task):
                raise InvalidTaskError(
                    f"tasks[{position}] is {type(task).__name__}, expected Task"
                )
            if not _is_int(task.priority):
                raise InvalidTaskError(
                    f"task {task.id!r} has no integer priority: {task.priority!r}"
                )
            if not _is_int(task.lead_time) or task.lead_time <= 0:
                raise InvalidTaskError(
                    f"task {task.id!r} lead time must be a positive integer, got {task.lead_time!r}"
                )


def distribute(
    workers: Sequence[Worker],
    tasks: Sequence[Task],
    budget: Optional[int] = None,
    on_reject: Optional[RejectionHandler] = None,
) -> DistributionResult:
    """Distribute `tasks` over `workers` in place with a one-off GreedyDistributor."""
    distributor = GreedyDistributor(budget=budget)
    return distributor.distribute(workers, tasks, on_reject=on_reject)
