import logging
from typing import List, Protocol, runtime_checkable

from replicaset_agent.core.ranking import rank_and_limit
from replicaset_agent.core.restart_aggregator import aggregate_pods
from replicaset_agent.models.raw_pods import RawPod
from replicaset_agent.models.replicaset_pods import ReplicaSetPods

logger = logging.getLogger(__name__)


@runtime_checkable
class ReplicaSetPodFetcher(Protocol):
    def fetch_replica_set_pods(self, namespace: str, name: str) -> List[RawPod]: ...


def get_replica_set_pods(
    fetcher: ReplicaSetPodFetcher, namespace: str, name: str, limit: int
) -> ReplicaSetPods:
    """
    Return the pods of a replica set ranked by total restart count.

    Errors raised by the fetcher are propagated unchanged.

    Args:
        fetcher: Source of raw pod records
        namespace: Namespace of the replica set
        name: Name of the replica set
        limit: Maximum number of pods to return, no limit when zero or negative

    Returns:
        ReplicaSetPods: The ranked, possibly truncated pod list
    """
    raw_pods = fetcher.fetch_replica_set_pods(namespace, name)
    pods = rank_and_limit(aggregate_pods(raw_pods), limit)

    logger.info(
        "Ranked replica set pods",
        extra={
            "namespace": namespace,
            "replica_set": name,
            "limit": limit,
            "pod_count": len(raw_pods),
            "returned_count": len(pods),
        },
    )
    return ReplicaSetPods(pods=pods)
