"""Turns raw pod status records into pods annotated with restart counts."""

from typing import List, Sequence

from replicaset_agent.models.raw_pods import RawPod
from replicaset_agent.models.replicaset_pods import (
    PodContainer,
    ReplicaSetPodWithContainers,
)


def aggregate_pods(raw_pods: Sequence[RawPod]) -> List[ReplicaSetPodWithContainers]:
    """
    Build one enriched record per raw pod.

    Container order follows the raw container statuses. Restart counts are
    copied as reported by the cluster, without validation.

    Args:
        raw_pods: Raw pod records as returned by the fetcher

    Returns:
        List of pods with their containers, in input order
    """
    pods = []
    for raw_pod in raw_pods:
        pod_containers = [
            PodContainer(name=status.name, restart_count=status.restart_count)
            for status in raw_pod.container_statuses
        ]
        pods.append(
            ReplicaSetPodWithContainers(
                name=raw_pod.name,
                start_time=raw_pod.start_time,
                pod_containers=pod_containers,
            )
        )
    return pods
