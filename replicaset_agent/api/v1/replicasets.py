import logging
from fastapi import APIRouter, Depends, HTTPException, status
from kubernetes.client import ApiException
from typing import Optional

from replicaset_agent.config import get_default_pod_limit
from replicaset_agent.core.replicaset_pods import (
    ReplicaSetPodFetcher,
    get_replica_set_pods,
)
from replicaset_agent.models.replicaset_pods import ReplicaSetPods
from replicaset_agent.services.k8s_client import get_replica_set_pod_fetcher

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/replicasets/{namespace}/{name}/pods", response_model=ReplicaSetPods)
def read_replica_set_pods(
    namespace: str,
    name: str,
    limit: Optional[int] = None,
    fetcher: ReplicaSetPodFetcher = Depends(get_replica_set_pod_fetcher),
):
    if limit is None:
        limit = get_default_pod_limit()

    try:
        return get_replica_set_pods(fetcher, namespace, name, limit)
    except ApiException as e:
        if e.status == 404:
            logger.info(f"Replica set {name} not found in namespace {namespace}.")
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Replica set not found"
            )
        if e.status in (401, 403):
            logger.warning(f"Kubernetes API denied access to replica set {name}: {e.reason}")
            raise HTTPException(
                status_code=e.status, detail="Not authorized to read replica set"
            )
        logger.error(f"Kubernetes API error when getting replica set pods: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Kubernetes API error: {e.reason}",
        )
