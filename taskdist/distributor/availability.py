"""Availability index — ordered multimap from free-at minute to waiting workers."""

import heapq
from collections import deque
from typing import Generic, Iterable, TypeVar

from taskdist.exceptions import EmptyIndexError

W = TypeVar("W")


class AvailabilityIndex(Generic[W]):
    """Keeps every worker in exactly one bucket keyed by the minute it becomes free.

    Buckets are FIFO: the worker that entered a bucket first leaves it first.
    A bucket is dropped as soon as it empties, so `earliest()` always names a
    time with at least one worker behind it. Workers are held by reference.
    """

    def __init__(self, workers: Iterable[W] = (), start: int = 0):
        self._buckets: dict[int, deque[W]] = {}
        self._times: list[int] = []  # heap of bucket keys
        self._size = 0
        for worker in workers:
            self.add(start, worker)

    def add(self, time: int, worker: W) -> None:
        """Put a worker into the bucket at `time`, creating the bucket if absent."""
        if time < 0:
            raise ValueError(f"availability time must be non-negative, got {time}")
        bucket = self._buckets.get(time)
        if bucket is None:
            bucket = self._buckets[time] = deque()
            heapq.heappush(self._times, time)
        bucket.append(worker)
        self._size += 1

    def earliest(self) -> int:
        """Smallest time that has a worker waiting."""
        if not self._times:
            raise EmptyIndexError("availability index is empty")
        return self._times[0]

    def pop_earliest(self) -> tuple[int, W]:
        """Remove and return the first-in worker of the earliest bucket."""
        time = self.earliest()
        bucket = self._buckets[time]
        worker = bucket.popleft()
        if not bucket:
            # Only the minimum bucket is ever drained, so it is the heap root.
            del self._buckets[time]
            heapq.heappop(self._times)
        self._size -= 1
        return time, worker

    def times(self) -> list[int]:
        return sorted(self._times)

    def bucket(self, time: int) -> tuple[W, ...]:
        return tuple(self._buckets.get(time, ()))

    def __contains__(self, time: object) -> bool:
        return time in self._buckets

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        summary = ", ".join(f"{t}: {len(self._buckets[t])}" for t in self.times())
        return f"AvailabilityIndex({{{summary}}})"
