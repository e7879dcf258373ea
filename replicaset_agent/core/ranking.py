from typing import List, Sequence

from replicaset_agent.models.replicaset_pods import ReplicaSetPodWithContainers


def rank_and_limit(
    pods: Sequence[ReplicaSetPodWithContainers], limit: int
) -> List[ReplicaSetPodWithContainers]:
    """
    Sort pods by total restart count, highest first, and keep at most `limit`.

    Pods with equal totals keep their relative input order. A limit of zero
    or less means no limit. The input sequence is left untouched.
    """
    ranked = sorted(pods, key=lambda pod: pod.total_restart_count, reverse=True)
    if limit > 0:
        return ranked[:limit]
    return ranked
