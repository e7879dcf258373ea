"""replicaset-pods command line entry point."""

import asyncio
import click
from typing import Optional

from .client import AgentError, AgentUnreachable, ReplicaSetAgentClient
from .ui import print_error, print_pod_table


@click.group()
@click.version_option(package_name="replicaset-pods")
def cli():
    """Find the most restarted pods of a replica set."""
    pass


@cli.command()
@click.argument("namespace")
@click.argument("name")
@click.option(
    "--limit",
    type=int,
    default=None,
    help="Maximum number of pods to show (0 for all, defaults to the agent setting)",
)
@click.option("--url", envvar="REPLICASET_AGENT_URL", required=True, help="Agent base URL")
@click.option("--api-key", envvar="REPLICASET_AGENT_API_KEY", default=None, help="Bearer token for the agent")
def pods(namespace: str, name: str, limit: Optional[int], url: str, api_key: Optional[str]):
    """Show the pods of a replica set, most restarted first."""
    try:
        ranked = asyncio.run(fetch_ranked_pods(url, api_key, namespace, name, limit))
    except (AgentError, AgentUnreachable) as e:
        print_error(str(e))
        raise click.exceptions.Exit(1)
    print_pod_table(namespace, name, ranked.pods)


async def fetch_ranked_pods(
    url: str, api_key: Optional[str], namespace: str, name: str, limit: Optional[int]
):
    async with ReplicaSetAgentClient(base_url=url, api_key=api_key) as client:
        return await client.fetch_ranked_pods(namespace, name, limit=limit)


if __name__ == "__main__":
    cli()
