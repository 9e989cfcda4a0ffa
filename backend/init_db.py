#!/usr/bin/env python3
"""
Schema setup for the Catalog database.

Creates the users and products tables through the same connection pool
the API uses, so the session settings apply here too.

Usage:
    python init_db.py              # Create missing tables
    python init_db.py --status     # Show which tables exist
    python init_db.py --dry-run    # Print the DDL without running it

Configuration:
    DB_HOST, DB_PORT, DB_USER, DB_PASSWORD, DB_NAME in your .env file,
    or a full DATABASE_URL.
"""

import argparse
import asyncio
import sys

from rich.console import Console
from rich.table import Table
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.schema import CreateTable

from shared.config import get_settings
from shared.database import ConnectionPool, create_pool
from shared.exceptions import CatalogError
from shared.schema import metadata

console = Console()


def _existing_tables(sync_conn) -> set[str]:
    return set(inspect(sync_conn).get_table_names())


async def show_status(pool: ConnectionPool) -> None:
    """Show which schema tables exist."""
    async with pool.session() as db:
        existing = await db.run_sync(_existing_tables)

    table = Table(title="Schema Status")
    table.add_column("Table", style="cyan")
    table.add_column("Status")
    for name in metadata.tables:
        status = "[green]Present[/green]" if name in existing else "[yellow]Missing[/yellow]"
        table.add_row(name, status)
    console.print(table)


async def create_tables(pool: ConnectionPool, dry_run: bool = False) -> None:
    """Create every table that does not exist yet."""
    if dry_run:
        dialect = pool.engine.dialect
        for table in metadata.sorted_tables:
            console.print("[cyan]Would run:[/cyan]")
            console.print(str(CreateTable(table).compile(dialect=dialect)).strip() + ";")
        return

    async with pool.session() as db:
        existing = await db.run_sync(_existing_tables)
        await db.run_sync(metadata.create_all)
        await db.commit()

    for name in metadata.tables:
        if name in existing:
            console.print(f"[dim]-[/dim] {name} already exists")
        else:
            console.print(f"[green]✓[/green] {name} created")


async def run(args: argparse.Namespace) -> int:
    pool = create_pool(get_settings())
    try:
        if args.status:
            await show_status(pool)
        else:
            await create_tables(pool, dry_run=args.dry_run)
    except (CatalogError, SQLAlchemyError) as e:
        console.print(f"[red]Database error:[/red] {e}")
        return 1
    finally:
        await pool.dispose()
    return 0


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Create the Catalog database tables")
    parser.add_argument(
        "--status",
        action="store_true",
        help="Show which tables exist without changing anything",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the DDL without executing it",
    )
    args = parser.parse_args()

    console.print("[bold]Catalog Database Setup[/bold]")
    console.print()
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
