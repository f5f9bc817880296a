"""
Tests for the availability index.

These tests verify:
    1. Workers seeded at the start time share one bucket
    2. The earliest time is always a non-empty bucket
    3. Buckets are first-in, first-out
    4. Empty buckets disappear immediately
    5. Workers are held by reference, never copied
"""

import pytest

from taskdist.distributor.availability import AvailabilityIndex
from taskdist.exceptions import EmptyIndexError
from taskdist.models.task import Task
from taskdist.models.worker import Worker


class TestAvailabilityIndex:
    """Tests for AvailabilityIndex."""

    def test_seeded_at_zero(self):
        index = AvailabilityIndex(["a", "b", "c"])
        assert len(index) == 3
        assert index.times() == [0]
        assert index.bucket(0) == ("a", "b", "c")
        assert index.earliest() == 0

    def test_custom_start(self):
        index = AvailabilityIndex(["a"], start=30)
        assert index.earliest() == 30
        assert 0 not in index

    def test_empty_index(self):
        index = AvailabilityIndex()
        assert len(index) == 0
        assert not index
        with pytest.raises(EmptyIndexError):
            index.earliest()
        with pytest.raises(EmptyIndexError):
            index.pop_earliest()

    def test_empty_index_error_is_lookup_error(self):
        with pytest.raises(LookupError):
            AvailabilityIndex().earliest()

    def test_pop_is_first_in_first_out(self):
        index = AvailabilityIndex(["a", "b", "c"])
        assert index.pop_earliest() == (0, "a")
        assert index.pop_earliest() == (0, "b")
        assert index.bucket(0) == ("c",)

    def test_drained_bucket_removed(self):
        """Once the last worker leaves, the next bucket becomes earliest."""
        index = AvailabilityIndex(["a"])
        index.add(50, "b")

        assert index.pop_earliest() == (0, "a")
        assert 0 not in index
        assert index.earliest() == 50
        assert index.times() == [50]

    def test_add_out_of_order(self):
        index = AvailabilityIndex()
        index.add(300, "x")
        index.add(120, "y")
        index.add(200, "z")
        index.add(120, "w")

        assert index.times() == [120, 200, 300]
        assert index.pop_earliest() == (120, "y")
        assert index.pop_earliest() == (120, "w")
        assert index.pop_earliest() == (200, "z")
        assert index.pop_earliest() == (300, "x")
        assert not index

    def test_bucket_recreated_after_removal(self):
        index = AvailabilityIndex(["a"])
        index.pop_earliest()
        index.add(0, "b")
        assert index.earliest() == 0
        assert index.bucket(0) == ("b",)

    def test_move_keeps_every_worker_once(self):
        """Popping and re-adding never duplicates or loses a worker."""
        index = AvailabilityIndex(["a", "b"])
        for lead_time in (100, 60, 30, 90):
            start, worker = index.pop_earliest()
            index.add(start + lead_time, worker)
            assert len(index) == 2

        members = [w for t in index.times() for w in index.bucket(t)]
        assert sorted(members) == ["a", "b"]

    def test_negative_time_rejected(self):
        with pytest.raises(ValueError):
            AvailabilityIndex().add(-1, "a")

    def test_holds_references(self):
        worker = Worker(id="w1")
        index = AvailabilityIndex([worker])
        _, popped = index.pop_earliest()
        popped.assign_task(Task(id="t1", priority=1, lead_time=10))

        assert popped is worker
        assert worker.total_lead_time == 10

    def test_bucket_is_a_copy(self):
        index = AvailabilityIndex(["a"])
        snapshot = index.bucket(0)
        index.add(0, "b")
        assert snapshot == ("a",)
        assert index.bucket(99) == ()
