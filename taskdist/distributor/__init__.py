from taskdist.distributor.availability import AvailabilityIndex
from taskdist.distributor.base import Assignment, BaseDistributor, DistributionResult, Rejection
from taskdist.distributor.greedy import GreedyDistributor, distribute
from taskdist.distributor.ordering import order_tasks, task_sort_key

__all__ = [
    "AvailabilityIndex",
    "Assignment",
    "BaseDistributor",
    "DistributionResult",
    "Rejection",
    "GreedyDistributor",
    "distribute",
    "order_tasks",
    "task_sort_key",
]
