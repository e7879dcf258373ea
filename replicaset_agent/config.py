"""Application configuration management."""
import logging
import os

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_kubernetes_config() -> dict:
    """
    Get Kubernetes client configuration from environment variables.

    Returns:
        dict: in_cluster flag, kubeconfig path and context name
    """
    return {
        "in_cluster": _env_flag("K8S_IN_CLUSTER", True),
        "kubeconfig": os.getenv("KUBECONFIG"),
        "context": os.getenv("K8S_CONTEXT"),
    }


def get_default_pod_limit() -> int:
    """
    Get the pod limit applied when a request does not pass one.

    Zero or a negative value means no limit.
    """
    raw = os.getenv("DEFAULT_POD_LIMIT", "0")
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid DEFAULT_POD_LIMIT value {raw!r}, using no limit.")
        return 0


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
