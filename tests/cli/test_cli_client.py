"""Tests for the replica set agent HTTP client."""

import pytest
from unittest.mock import AsyncMock, patch
import httpx

from replicaset_cli.client import (
    AgentError,
    AgentUnreachable,
    ReplicaSetAgentClient,
    ReplicaSetNotFound,
)

BASE_URL = "http://localhost:8001"

RANKED_PAYLOAD = {
    "pods": [
        {
            "name": "web-b",
            "startTime": "2024-05-01T10:00:00Z",
            "podContainers": [
                {"name": "web", "restartCount": 4},
                {"name": "sidecar", "restartCount": 1},
            ],
            "totalRestartCount": 5,
        },
        {"name": "web-a", "startTime": None, "podContainers": [], "totalRestartCount": 0},
    ]
}


@pytest.fixture
def http_client():
    """Patches httpx.AsyncClient and yields the mock the agent client will use."""
    with patch("httpx.AsyncClient") as client_class:
        mock_http = AsyncMock()
        client_class.return_value = mock_http
        mock_http.client_class = client_class
        yield mock_http


async def fetch(limit=None, name="web", **client_kwargs):
    async with ReplicaSetAgentClient(BASE_URL, **client_kwargs) as client:
        return await client.fetch_ranked_pods("default", name, limit=limit)


def test_base_url_trailing_slash_is_stripped():
    assert ReplicaSetAgentClient("http://localhost:8001/").base_url == BASE_URL


@pytest.mark.asyncio
async def test_fetch_ranked_pods_parses_models(http_client):
    http_client.get.return_value = httpx.Response(200, json=RANKED_PAYLOAD)

    ranked = await fetch(limit=2)

    assert [p.name for p in ranked.pods] == ["web-b", "web-a"]
    assert ranked.pods[0].total_restart_count == 5
    assert [c.restart_count for c in ranked.pods[0].pod_containers] == [4, 1]
    assert ranked.pods[1].start_time is None
    http_client.get.assert_called_once_with(
        "/api/v1/replicasets/default/web/pods", params={"limit": 2}
    )


@pytest.mark.asyncio
async def test_limit_is_omitted_when_not_given(http_client):
    http_client.get.return_value = httpx.Response(200, json={"pods": []})

    ranked = await fetch()

    assert ranked.pods == []
    http_client.get.assert_called_once_with("/api/v1/replicasets/default/web/pods", params={})


@pytest.mark.asyncio
async def test_zero_limit_is_sent(http_client):
    http_client.get.return_value = httpx.Response(200, json={"pods": []})

    await fetch(limit=0)

    http_client.get.assert_called_once_with(
        "/api/v1/replicasets/default/web/pods", params={"limit": 0}
    )


@pytest.mark.asyncio
async def test_api_key_is_sent_as_bearer_token(http_client):
    http_client.get.return_value = httpx.Response(200, json={"pods": []})

    await fetch(api_key="secret")

    _, kwargs = http_client.client_class.call_args
    assert kwargs["headers"] == {"Authorization": "Bearer secret"}
    http_client.aclose.assert_awaited_once()


@pytest.mark.asyncio
async def test_missing_replica_set(http_client):
    http_client.get.return_value = httpx.Response(404, json={"detail": "Replica set not found"})

    with pytest.raises(ReplicaSetNotFound) as exc_info:
        await fetch(name="missing")

    assert exc_info.value.status_code == 404
    assert "default/missing" in str(exc_info.value)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status_code,detail",
    [
        (403, "Not authorized to read replica set"),
        (502, "Kubernetes API error: Internal Server Error"),
        (503, "Kubernetes client not initialized"),
    ],
)
async def test_error_status_carries_agent_detail(http_client, status_code, detail):
    http_client.get.return_value = httpx.Response(status_code, json={"detail": detail})

    with pytest.raises(AgentError) as exc_info:
        await fetch()

    assert exc_info.value.status_code == status_code
    assert exc_info.value.detail == detail


@pytest.mark.asyncio
async def test_error_status_without_json_body(http_client):
    http_client.get.return_value = httpx.Response(500, text="upstream exploded")

    with pytest.raises(AgentError) as exc_info:
        await fetch()

    assert exc_info.value.detail == "Internal Server Error"


@pytest.mark.asyncio
async def test_connection_refused(http_client):
    http_client.get.side_effect = httpx.ConnectError("Connection refused")

    with pytest.raises(AgentUnreachable, match="cannot reach"):
        await fetch()


@pytest.mark.asyncio
async def test_timeout(http_client):
    http_client.get.side_effect = httpx.ReadTimeout("timed out")

    with pytest.raises(AgentUnreachable, match="did not answer"):
        await fetch(timeout=5.0)
