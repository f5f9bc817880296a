"""Distribution Report — summarizes how a run filled the working day."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from taskdist.distributor.base import DistributionResult
from taskdist.models.worker import Worker


def worker_labels(workers: Sequence[Worker]) -> list[str]:
    """Report keys, one per worker: the id, suffixed with the position when ids repeat."""
    counts = Counter(w.id for w in workers)
    return [
        w.id if counts[w.id] == 1 else f"{w.id}#{position}"
        for position, w in enumerate(workers)
    ]


@dataclass
class DistributionReport:
    """Container for all computed statistics."""
    distributor_name: str = ""
    budget: int = 0
    total_tasks: int = 0
    tasks_assigned: int = 0
    tasks_rejected: int = 0
    assigned_minutes: int = 0
    rejected_minutes: int = 0
    avg_worker_utilization: float = 0.0
    per_worker_minutes: dict[str, int] = field(default_factory=dict)
    per_worker_utilization: dict[str, float] = field(default_factory=dict)
    idle_workers: list[str] = field(default_factory=list)
    rejected_labels: list[str] = field(default_factory=list)

    @classmethod
    def from_result(
        cls,
        workers: Sequence[Worker],
        result: DistributionResult,
        distributor_name: str = "",
    ) -> "DistributionReport":
        """Compute statistics from the workers' final task lists and the run result."""
        report = cls(
            distributor_name=distributor_name,
            budget=result.budget,
            tasks_assigned=result.assigned_count,
            tasks_rejected=result.rejected_count,
        )
        report.total_tasks = report.tasks_assigned + report.tasks_rejected
        report.rejected_minutes = sum(t.lead_time for t in result.rejected_tasks)
        report.rejected_labels = [t.label for t in result.rejected_tasks]

        # Only this run's assignments count; a worker may arrive with older tasks.
        labels = worker_labels(workers)
        minutes_by_position = [0] * len(workers)
        for assignment in result.assignments:
            minutes_by_position[assignment.worker_index] += (
                assignment.end_time - assignment.start_time
            )
        report.per_worker_minutes = dict(zip(labels, minutes_by_position))
        report.assigned_minutes = sum(report.per_worker_minutes.values())
        report.idle_workers = [
            worker_id for worker_id, minutes in report.per_worker_minutes.items()
            if minutes == 0
        ]

        if report.budget > 0 and report.per_worker_minutes:
            for worker_id, minutes in report.per_worker_minutes.items():
                report.per_worker_utilization[worker_id] = minutes / report.budget
            report.avg_worker_utilization = (
                sum(report.per_worker_utilization.values())
                / len(report.per_worker_utilization)
            )

        return report

    def print_report(self, console: Optional[Console] = None) -> None:
        """Render the report as rich tables."""
        console = console or Console()

        console.print(Panel(
            f"[bold cyan]Task Distribution Report[/bold cyan]\n"
            f"Distributor: [bold yellow]{self.distributor_name or '-'}[/bold yellow]  "
            f"Budget: [bold]{self.budget} min[/bold]",
            border_style="cyan",
        ))

        task_table = Table(title="Task Summary", border_style="blue")
        task_table.add_column("Metric", style="bold")
        task_table.add_column("Value", justify="right")
        task_table.add_row("Total Tasks", str(self.total_tasks))
        task_table.add_row("Assigned", f"[green]{self.tasks_assigned}[/green]")
        task_table.add_row(
            "Rejected",
            f"[{'red' if self.tasks_rejected else 'green'}]{self.tasks_rejected}[/]",
        )
        task_table.add_row("Assigned Minutes", str(self.assigned_minutes))
        task_table.add_row("Rejected Minutes", str(self.rejected_minutes))
        console.print(task_table)

        if self.per_worker_minutes:
            worker_table = Table(title="Worker Utilization", border_style="magenta")
            worker_table.add_column("Worker", style="bold")
            worker_table.add_column("Minutes", justify="right")
            worker_table.add_column("Utilization", justify="right")
            for worker_id, minutes in self.per_worker_minutes.items():
                util = self.per_worker_utilization.get(worker_id, 0.0)
                bar_len = int(min(util, 1.0) * 20)
                bar = "█" * bar_len + "░" * (20 - bar_len)
                worker_table.add_row(worker_id, str(minutes), f"{bar} {util:.1%}")
            worker_table.add_row(
                "[bold]Average[/bold]",
                "",
                f"[bold]{self.avg_worker_utilization:.1%}[/bold]",
            )
            console.print(worker_table)

        if self.rejected_labels:
            console.print("[bold red]Not taken into work:[/bold red]")
            for label in self.rejected_labels:
                console.print(f"  • {label}")
