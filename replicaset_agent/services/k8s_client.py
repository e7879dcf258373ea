from kubernetes import config, client
import logging
from typing import Dict, List, Optional

from replicaset_agent.config import get_kubernetes_config
from replicaset_agent.models.raw_pods import RawContainerStatus, RawPod

logger = logging.getLogger(__name__)

core_v1_api: Optional[client.CoreV1Api] = None
apps_v1_api: Optional[client.AppsV1Api] = None


class K8sClientNotInitializedError(Exception):
    """Raised when the Kubernetes API handles have not been created."""

    pass


def initialize_kubernetes_client() -> bool:
    """Create the CoreV1Api and AppsV1Api handles, returning True on success."""
    global core_v1_api, apps_v1_api
    k8s_config = get_kubernetes_config()
    try:
        if k8s_config["in_cluster"]:
            config.load_incluster_config()
        else:
            config.load_kube_config(
                config_file=k8s_config["kubeconfig"], context=k8s_config["context"]
            )
        core_v1_api = client.CoreV1Api()
        apps_v1_api = client.AppsV1Api()
        logger.info("Kubernetes client initialized successfully.")
        return True
    except config.ConfigException as e:
        logger.error(f"Could not load Kubernetes config: {e}")
        return False
    except Exception as e:
        logger.error(f"An unexpected error occurred during Kubernetes client initialization: {e}")
        return False


def build_label_selector(selector) -> str:
    """
    Render a V1LabelSelector as a label selector query string.

    Args:
        selector: V1LabelSelector of the replica set, may be None

    Returns:
        Selector string such as "app=web,tier in (frontend)"
    """
    if selector is None:
        return ""

    requirements = []
    match_labels: Dict[str, str] = selector.match_labels or {}
    for key in sorted(match_labels):
        requirements.append(f"{key}={match_labels[key]}")

    for expression in selector.match_expressions or []:
        operator = expression.operator
        values = ",".join(expression.values or [])
        if operator == "In":
            requirements.append(f"{expression.key} in ({values})")
        elif operator == "NotIn":
            requirements.append(f"{expression.key} notin ({values})")
        elif operator == "Exists":
            requirements.append(expression.key)
        elif operator == "DoesNotExist":
            requirements.append(f"!{expression.key}")
        else:
            logger.warning(f"Ignoring unsupported selector operator {operator!r} for key {expression.key}.")

    return ",".join(requirements)


def _is_controlled_by(pod, uid: Optional[str]) -> bool:
    if not uid:
        return True
    for owner in pod.metadata.owner_references or []:
        if owner.controller and owner.uid == uid:
            return True
    return False


def to_raw_pod(pod) -> RawPod:
    container_statuses = []
    if pod.status and pod.status.container_statuses:
        for cs in pod.status.container_statuses:
            container_statuses.append(
                RawContainerStatus(name=cs.name, restart_count=cs.restart_count)
            )

    return RawPod(
        name=pod.metadata.name,
        start_time=pod.status.start_time if pod.status else None,
        container_statuses=container_statuses,
    )


class K8sReplicaSetPodFetcher:
    """Reads the pods of a replica set through the Kubernetes API."""

    def __init__(self, core_v1: client.CoreV1Api, apps_v1: client.AppsV1Api):
        self.core_v1 = core_v1
        self.apps_v1 = apps_v1

    def fetch_replica_set_pods(self, namespace: str, name: str) -> List[RawPod]:
        # ApiException (404 for a missing replica set included) goes to the caller.
        replica_set = self.apps_v1.read_namespaced_replica_set(name=name, namespace=namespace)
        label_selector = build_label_selector(replica_set.spec.selector)

        pods = self.core_v1.list_namespaced_pod(
            namespace=namespace, label_selector=label_selector
        )
        uid = replica_set.metadata.uid
        owned = [pod for pod in pods.items if _is_controlled_by(pod, uid)]
        logger.debug(
            f"Fetched {len(owned)} of {len(pods.items)} pods matching {label_selector!r} "
            f"for replica set {name} in namespace {namespace}."
        )
        return [to_raw_pod(pod) for pod in owned]


def get_replica_set_pod_fetcher() -> K8sReplicaSetPodFetcher:
    if core_v1_api is None or apps_v1_api is None:
        logger.error("Kubernetes client not initialized.")
        raise K8sClientNotInitializedError("Kubernetes client not initialized")
    return K8sReplicaSetPodFetcher(core_v1_api, apps_v1_api)
