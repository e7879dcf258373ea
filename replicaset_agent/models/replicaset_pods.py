from pydantic import BaseModel, ConfigDict, Field, computed_field
from datetime import datetime
from typing import List, Optional


class PodContainer(BaseModel):
    """Information about a container that belongs to a pod."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    restart_count: int = Field(alias="restartCount")


class ReplicaSetPodWithContainers(BaseModel):
    """A pod of a replica set together with its per-container restarts."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    # Empty if the pod has not started yet.
    start_time: Optional[datetime] = Field(default=None, alias="startTime")
    pod_containers: List[PodContainer] = Field(
        default_factory=list, alias="podContainers"
    )

    @computed_field(alias="totalRestartCount")
    @property
    def total_restart_count(self) -> int:
        return sum(container.restart_count for container in self.pod_containers)


class ReplicaSetPods(BaseModel):
    """Pods of a replica set, most restarted first."""

    pods: List[ReplicaSetPodWithContainers] = Field(default_factory=list)
