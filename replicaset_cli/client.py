"""HTTP client for the replica set pods agent."""

import httpx
from typing import Optional

from replicaset_agent.models.replicaset_pods import ReplicaSetPods


class AgentError(Exception):
    """The agent answered with an error status."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(f"Agent returned {status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class ReplicaSetNotFound(AgentError):
    def __init__(self, namespace: str, name: str):
        super().__init__(404, f"replica set {namespace}/{name} not found")
        self.namespace = namespace
        self.name = name


class AgentUnreachable(Exception):
    """The agent could not be reached or did not answer in time."""

    pass


class ReplicaSetAgentClient:
    """
    Reads ranked replica set pods from the agent.

    Use as an async context manager; the underlying connection pool lives
    for the duration of the block.
    """

    def __init__(self, base_url: str, api_key: Optional[str] = None, timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._http: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        headers = {"Authorization": f"Bearer {self.api_key}"} if self.api_key else {}
        self._http = httpx.AsyncClient(base_url=self.base_url, headers=headers, timeout=self.timeout)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self._http.aclose()
        self._http = None

    async def fetch_ranked_pods(
        self, namespace: str, name: str, limit: Optional[int] = None
    ) -> ReplicaSetPods:
        """
        Fetch the pods of a replica set, most restarted first.

        Args:
            namespace: Namespace of the replica set
            name: Name of the replica set
            limit: Maximum number of pods; None leaves the choice to the agent

        Raises:
            ReplicaSetNotFound: The replica set does not exist
            AgentError: Any other error status from the agent
            AgentUnreachable: Connection failure or timeout
        """
        params = {} if limit is None else {"limit": limit}
        try:
            response = await self._http.get(
                f"/api/v1/replicasets/{namespace}/{name}/pods", params=params
            )
        except httpx.TimeoutException as e:
            raise AgentUnreachable(f"{self.base_url} did not answer within {self.timeout}s") from e
        except httpx.TransportError as e:
            raise AgentUnreachable(f"cannot reach {self.base_url}: {e}") from e

        if response.status_code == 404:
            raise ReplicaSetNotFound(namespace, name)
        if response.is_error:
            try:
                detail = response.json().get("detail", response.reason_phrase)
            except ValueError:
                detail = response.reason_phrase
            raise AgentError(response.status_code, str(detail))

        return ReplicaSetPods.model_validate(response.json())
