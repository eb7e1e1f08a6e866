# scripts/seed_shipments.py

"""
Seeds demo shipments for local development.

    python scripts/seed_shipments.py --count 40
"""

import asyncio
import random
from typing import Optional

import typer
from fastapi import HTTPException

from portkey.core.database import get_async_session_context, create_db_and_tables
from portkey.domains.dash.services import DashboardService

cli = typer.Typer()


async def run_seed(count: Optional[int], seed: Optional[int], create_tables: bool) -> int:
    if create_tables:
        await create_db_and_tables()
    async with get_async_session_context() as db:
        service = DashboardService(db, rng=random.Random(seed))
        shipments = await service.seed_shipments(count)
    return len(shipments)


@cli.command()
def main(
    count: Optional[int] = typer.Option(
        None, '--count', '-c',
        help="Number of shipments to create (defaults to SEED_SHIPMENT_COUNT)."
    ),
    seed: Optional[int] = typer.Option(
        None, '--seed', '-s',
        help="Random seed for reproducible data."
    ),
    create_tables: bool = typer.Option(
        False, '--create-tables',
        help="Create missing tables before seeding."
    ),
):
    """
    Creates random shipments spread over the existing user profiles.
    """
    try:
        created = asyncio.run(run_seed(count, seed, create_tables))
    except HTTPException as e:
        typer.echo(f"Error: {e.detail}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Successfully seeded {created} shipments.")


if __name__ == "__main__":
    cli()
