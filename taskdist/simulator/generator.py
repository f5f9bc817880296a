"""Scenario generator — creates reproducible task/worker batches for distribution runs."""

import random

from taskdist.models.task import Task, TaskType
from taskdist.models.worker import Worker

_TASK_VERBS = ["Implement", "Review", "Fix", "Document", "Estimate", "Deploy", "Refactor", "Test"]
_TASK_OBJECTS = ["login form", "billing report", "search index", "user import", "audit log",
                 "notification service", "export job", "admin dashboard"]
_FIRST_NAMES = ["Anna", "Boris", "Clara", "Dmitri", "Elena", "Felix", "Galina", "Hugo", "Irina", "Jonas"]
_LAST_NAMES = ["Ivanova", "Smirnov", "Keller", "Petrov", "Novak", "Berg", "Orlova", "Lind"]
_JOBS = ["Developer", "QA Engineer", "Analyst", "Team Lead", "Technical Writer"]


class ScenarioGenerator:
    """Generates deterministic task/worker batches using a seeded RNG."""

    def __init__(self, seed: int = 42):
        self.rng = random.Random(seed)
        self._task_counter = 0
        self._worker_counter = 0

    def generate_tasks(
        self,
        num_tasks: int = 30,
        max_priority: int = 10,
        min_lead_time: int = 15,
        max_lead_time: int = 240,
    ) -> list[Task]:
        """Generate tasks with random priority (1..max_priority) and lead time in minutes."""
        if max_priority < 1:
            raise ValueError(f"max_priority must be >= 1, got {max_priority}")
        if not 0 < min_lead_time <= max_lead_time:
            raise ValueError(
                f"lead time range must satisfy 0 < min <= max, got [{min_lead_time}, {max_lead_time}]"
            )

        tasks: list[Task] = []
        task_types = list(TaskType)

        for _ in range(num_tasks):
            task_id = f"task-{self._task_counter:04d}"
            self._task_counter += 1

            # Lead times come in 5-minute steps, like real estimates.
            lead_time = self.rng.randint(min_lead_time, max_lead_time)
            lead_time = max(min_lead_time, lead_time - lead_time % 5)

            tasks.append(Task(
                id=task_id,
                name=f"{self.rng.choice(_TASK_VERBS)} {self.rng.choice(_TASK_OBJECTS)}",
                task_type=self.rng.choice(task_types),
                priority=self.rng.randint(1, max_priority),
                lead_time=lead_time,
            ))

        return tasks

    def generate_workers(self, num_workers: int = 5) -> list[Worker]:
        """Generate workers with empty task lists."""
        workers: list[Worker] = []

        for _ in range(num_workers):
            worker_id = f"worker-{self._worker_counter:03d}"
            self._worker_counter += 1

            workers.append(Worker(
                id=worker_id,
                name=f"{self.rng.choice(_FIRST_NAMES)} {self.rng.choice(_LAST_NAMES)}",
                job=self.rng.choice(_JOBS),
            ))

        return workers
