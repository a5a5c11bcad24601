"""Admin command-line tools for a running Founder Flow API."""

import asyncio
import logging
from typing import Tuple

import click
import httpx

from founderflow.core.logging_config import setup_logging
from founderflow.services.batch_deletion_service import (
    BATCH_DELAY_SECONDS, DEFAULT_BATCH_SIZE, MAX_BATCHES, clear_all
)

logger = logging.getLogger(__name__)

CLEAR_ENTRIES_PATH = "/api/admin/clear-entries"


def _raise_for_error(response: httpx.Response) -> None:
    if response.is_success:
        return
    try:
        error = response.json().get("error")
    except ValueError:
        error = response.text
    raise click.ClickException(f"{response.status_code}: {error}")


async def _estimate(base_url: str, token: str) -> dict:
    async with httpx.AsyncClient(base_url=base_url, headers={"Authorization": f"Bearer {token}"}) as client:
        response = await client.get(CLEAR_ENTRIES_PATH)
        _raise_for_error(response)
        return response.json()


async def _clear(base_url: str, token: str, batch_size: int, max_batches: int, delay: float) -> dict:
    async with httpx.AsyncClient(
        base_url=base_url,
        headers={"Authorization": f"Bearer {token}"},
        timeout=30.0
    ) as client:

        async def delete_batch(size: int) -> Tuple[int, bool]:
            response = await client.request("DELETE", CLEAR_ENTRIES_PATH, json={"batchSize": size})
            _raise_for_error(response)
            data = response.json()
            return data["deletedCount"], data["hasMoreEntries"]

        def report(batch: int, deleted: int, has_more: bool) -> None:
            click.echo(f"Batch {batch}: deleted {deleted} entries{' (more remaining)' if has_more else ''}")

        return await clear_all(
            delete_batch,
            batch_size=batch_size,
            max_batches=max_batches,
            delay_seconds=delay,
            on_batch=report,
        )


@click.group()
@click.option('--base-url', envvar='FOUNDERFLOW_API_URL', default='http://localhost:8000',
              show_default=True, help='API base URL')
@click.option('--token', envvar='FOUNDERFLOW_ADMIN_TOKEN', required=True,
              help='Admin session token')
@click.option('--debug/--no-debug', default=False, help='Enable debug logging')
@click.pass_context
def cli(ctx, base_url, token, debug):
    """Founder Flow admin tools."""
    setup_logging("DEBUG" if debug else "WARNING")
    ctx.obj = {"base_url": base_url.rstrip("/"), "token": token}


@cli.command('estimate-entries')
@click.pass_obj
def estimate_entries(obj):
    """Show the approximate number of stored entries."""
    result = asyncio.run(_estimate(obj["base_url"], obj["token"]))
    click.echo(f"Entries: {result['estimatedCount']}")


@cli.command('clear-entries')
@click.option('--batch-size', type=click.IntRange(1, 200), default=DEFAULT_BATCH_SIZE, show_default=True)
@click.option('--max-batches', type=click.IntRange(1), default=MAX_BATCHES, show_default=True)
@click.option('--delay', type=float, default=BATCH_DELAY_SECONDS, show_default=True,
              help='Seconds to wait between batches')
@click.confirmation_option(prompt='This will delete all entries. Are you sure?')
@click.pass_obj
def clear_entries(obj, batch_size, max_batches, delay):
    """Delete every entry, one batch at a time."""
    result = asyncio.run(_clear(obj["base_url"], obj["token"], batch_size, max_batches, delay))

    click.echo(f"Deleted {result['total_deleted']} entries in {result['batches']} batches")
    if result["warning"]:
        click.secho(result["warning"], fg="yellow")


if __name__ == '__main__':
    cli()
