"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timezone
from typing import Callable, List, Optional

from replicaset_agent.models.raw_pods import RawContainerStatus, RawPod
from replicaset_agent.models.replicaset_pods import (
    PodContainer,
    ReplicaSetPodWithContainers,
)


@pytest.fixture
def start_time() -> datetime:
    return datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_raw_pod() -> Callable[..., RawPod]:
    """
    Provides a factory for raw pod records.

    Containers are given as (name, restart_count) pairs.
    """

    def _make(
        name: str,
        containers: Optional[List[tuple]] = None,
        start_time: Optional[datetime] = None,
    ) -> RawPod:
        return RawPod(
            name=name,
            start_time=start_time,
            container_statuses=[
                RawContainerStatus(name=c_name, restart_count=count)
                for c_name, count in (containers or [])
            ],
        )

    return _make


@pytest.fixture
def make_pod() -> Callable[..., ReplicaSetPodWithContainers]:
    """Provides a factory for pods whose single container has `total` restarts."""

    def _make(name: str, total: int) -> ReplicaSetPodWithContainers:
        return ReplicaSetPodWithContainers(
            name=name,
            pod_containers=[PodContainer(name="app", restart_count=total)],
        )

    return _make


class FakeFetcher:
    def __init__(self, raw_pods=None, error: Optional[Exception] = None):
        self.raw_pods = raw_pods or []
        self.error = error
        self.calls = []

    def fetch_replica_set_pods(self, namespace: str, name: str) -> List[RawPod]:
        self.calls.append((namespace, name))
        if self.error is not None:
            raise self.error
        return self.raw_pods


@pytest.fixture
def fake_fetcher_factory():
    return FakeFetcher
