"""Terminal rendering of ranked replica set pods."""

from rich.console import Console
from rich.table import Table
from rich import box
from typing import List

from replicaset_agent.models.replicaset_pods import (
    PodContainer,
    ReplicaSetPodWithContainers,
)


console = Console()


def print_error(message: str):
    console.print(f"[bold red]Error:[/bold red] {message}")


def restart_style(total: int) -> str:
    if total == 0:
        return "green"
    if total < 5:
        return "yellow"
    return "red"


def describe_containers(containers: List[PodContainer]) -> str:
    """Render per-container restarts as 'name=count' pairs."""
    if not containers:
        return "-"
    return ", ".join(f"{c.name}={c.restart_count}" for c in containers)


def print_pod_table(namespace: str, name: str, pods: List[ReplicaSetPodWithContainers]):
    """Print ranked pods; rank 1 is the most restarted pod."""
    if not pods:
        console.print(f"No pods found for replica set {namespace}/{name}.")
        return

    table = Table(title=f"Pods of {namespace}/{name}", box=box.ROUNDED)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Pod", style="cyan", no_wrap=True)
    table.add_column("Started", style="green")
    table.add_column("Restarts", justify="right")
    table.add_column("Containers")

    for rank, pod in enumerate(pods, start=1):
        started = pod.start_time.strftime("%Y-%m-%d %H:%M:%S") if pod.start_time else "-"
        style = restart_style(pod.total_restart_count)
        table.add_row(
            str(rank),
            pod.name,
            started,
            f"[{style}]{pod.total_restart_count}[/{style}]",
            describe_containers(pod.pod_containers),
        )

    console.print(table)
