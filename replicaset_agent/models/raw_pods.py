from pydantic import BaseModel, Field
from datetime import datetime
from typing import List, Optional


class RawContainerStatus(BaseModel):
    """Restart count of one container as reported in the pod status."""

    name: str
    restart_count: int


class RawPod(BaseModel):
    """A pod of a replica set as read from the cluster, before aggregation."""

    name: str
    # None until the kubelet has started the pod.
    start_time: Optional[datetime] = None
    # Same order as status.containerStatuses.
    container_statuses: List[RawContainerStatus] = Field(default_factory=list)
