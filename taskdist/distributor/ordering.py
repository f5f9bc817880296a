"""Task ordering — priority ascending, then longer tasks first."""

from typing import Iterable

from taskdist.models.task import Task


def task_sort_key(task: Task) -> tuple[int, int]:
    """Sort key: lower priority value first; on equal priority, longer lead time first."""
    return (task.priority, -task.lead_time)


def order_tasks(tasks: Iterable[Task]) -> list[Task]:
    """Return tasks in distribution order. Exact ties keep their input order."""
    return sorted(tasks, key=task_sort_key)
