"""Entry point for running a task distribution.

Usage:
    python scripts/run_distribution.py --tasks 30 --workers 4 --budget 420
    python scripts/run_distribution.py --scenario day.json
"""

import argparse
import json
import logging
from pathlib import Path
from typing import get_args

from pydantic import BaseModel, Field
from rich.console import Console

from taskdist.config import DistributionConfig, LogLevel, configure_logging
from taskdist.distributor.greedy import GreedyDistributor
from taskdist.metrics.report import DistributionReport
from taskdist.models.task import Task
from taskdist.models.worker import Worker
from taskdist.simulator.generator import ScenarioGenerator

console = Console()
logger = logging.getLogger("taskdist.scripts.run_distribution")


class Scenario(BaseModel):
    """JSON scenario file: {"workers": [...], "tasks": [...]}."""
    workers: list[Worker] = Field(default_factory=list)
    tasks: list[Task] = Field(default_factory=list)


def load_scenario(path: Path) -> Scenario:
    """Read and validate a scenario file."""
    with open(path, encoding="utf-8") as f:
        return Scenario.model_validate(json.load(f))


def print_scenario_summary(tasks: list[Task], workers: list[Worker]) -> None:
    """Print a summary of the scenario about to be distributed."""
    console.print("\n[bold cyan]Scenario[/bold cyan]")
    console.print(f"  Tasks:   {len(tasks)}")
    console.print(f"  Workers: {len(workers)}")

    priority_counts: dict[int, int] = {}
    for t in tasks:
        priority_counts[t.priority] = priority_counts.get(t.priority, 0) + 1
    console.print(f"  Tasks per priority: {dict(sorted(priority_counts.items()))}")

    total_minutes = sum(t.lead_time for t in tasks)
    console.print(f"  Requested minutes: {total_minutes}")

    for w in workers:
        console.print(f"  {w.id}: {w.name or '-'} ({w.job or '-'})")
    console.print()


def main():
    defaults = DistributionConfig.from_env()

    parser = argparse.ArgumentParser(
        description="taskdist — greedy task distribution within a working day"
    )
    parser.add_argument("--tasks", type=int, default=30, help="Number of generated tasks (default: 30)")
    parser.add_argument("--workers", type=int, default=4, help="Number of generated workers (default: 4)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--budget", type=int, default=defaults.budget,
                        help=f"Working-time budget in minutes (default: {defaults.budget})")
    parser.add_argument("--scenario", type=Path, default=None,
                        help="JSON file with workers and tasks; overrides --tasks/--workers")
    parser.add_argument("--log-level", type=str.upper, default=defaults.log_level,
                        choices=get_args(LogLevel),
                        help=f"Logging level (default: {defaults.log_level})")

    args = parser.parse_args()
    settings = DistributionConfig(budget=args.budget, log_level=args.log_level)
    configure_logging(settings.log_level)

    if args.scenario is not None:
        scenario = load_scenario(args.scenario)
        workers, tasks = scenario.workers, scenario.tasks
        logger.info("Loaded scenario from %s", args.scenario)
    else:
        generator = ScenarioGenerator(seed=args.seed)
        tasks = generator.generate_tasks(num_tasks=args.tasks)
        workers = generator.generate_workers(num_workers=args.workers)

    print_scenario_summary(tasks, workers)

    distributor = GreedyDistributor.from_config(settings)
    result = distributor.distribute(workers, tasks)

    report = DistributionReport.from_result(workers, result, distributor_name=distributor.name)
    report.print_report(console)

    for w in workers:
        if w.has_tasks:
            console.print(f"[dim]{w.id}: {', '.join(t.id for t in w.tasks)}[/dim]")
        else:
            console.print(f"[dim]{w.id}: no tasks[/dim]")


if __name__ == "__main__":
    main()
