"""Tests for the scenario generator."""

import pytest

from taskdist.models.task import TaskType
from taskdist.simulator.generator import ScenarioGenerator


class TestScenarioGenerator:

    def test_same_seed_same_scenario(self):
        first = ScenarioGenerator(seed=5).generate_tasks(num_tasks=20)
        second = ScenarioGenerator(seed=5).generate_tasks(num_tasks=20)
        assert first == second

    def test_different_seeds_differ(self):
        first = ScenarioGenerator(seed=1).generate_tasks(num_tasks=20)
        second = ScenarioGenerator(seed=2).generate_tasks(num_tasks=20)
        assert first != second

    def test_task_ranges(self):
        tasks = ScenarioGenerator(seed=3).generate_tasks(
            num_tasks=100, max_priority=4, min_lead_time=10, max_lead_time=60,
        )
        assert len(tasks) == 100
        assert all(1 <= t.priority <= 4 for t in tasks)
        assert all(10 <= t.lead_time <= 60 for t in tasks)
        assert all(isinstance(t.task_type, TaskType) for t in tasks)

    def test_ids_are_sequential(self):
        generator = ScenarioGenerator()
        tasks = generator.generate_tasks(num_tasks=3)
        more = generator.generate_tasks(num_tasks=2)
        assert [t.id for t in tasks + more] == [
            "task-0000", "task-0001", "task-0002", "task-0003", "task-0004",
        ]

    def test_workers_start_empty(self):
        workers = ScenarioGenerator().generate_workers(num_workers=4)
        assert [w.id for w in workers] == ["worker-000", "worker-001", "worker-002", "worker-003"]
        assert all(w.tasks == [] for w in workers)
        assert all(w.name for w in workers)

    def test_invalid_lead_time_range(self):
        with pytest.raises(ValueError):
            ScenarioGenerator().generate_tasks(min_lead_time=50, max_lead_time=10)
        with pytest.raises(ValueError):
            ScenarioGenerator().generate_tasks(min_lead_time=0)

    def test_invalid_max_priority(self):
        with pytest.raises(ValueError):
            ScenarioGenerator().generate_tasks(max_priority=0)
