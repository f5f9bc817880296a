"""Errors raised when distribution input breaks a precondition.

Running out of working time is not an error: unplaceable tasks are reported
through the distribution result and the log, never raised.
"""


class DistributionError(Exception):
    """Base class for all taskdist errors."""


class InvalidTaskError(DistributionError, ValueError):
    """A task is malformed: wrong type, missing priority or bad lead time."""


class InvalidWorkerError(DistributionError, ValueError):
    """A worker is malformed or appears twice in the pool."""


class InvalidBudgetError(DistributionError, ValueError):
    """The working-time budget is negative or not an integer."""


class EmptyIndexError(DistributionError, LookupError):
    """The availability index holds no workers."""
