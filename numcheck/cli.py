"""Command-line interface: reads ids from stdin and reports whether each stored number is valid.

Invariants:
    - This module is the CLI composition root: it builds the engine, the SQL
      store, and the service, then injects them downward
    - One output line per non-blank input line; a failed lookup of any kind
      is reported and the loop moves on to the next id
    - The engine is disposed on exit, including on errors

Design Decisions:
    - run_check_loop takes any get_number callable, so the loop runs unchanged
      against the SQL store or a test double
    - Non-integer input is reported and skipped rather than coerced to 0
"""

import asyncio
import logging
from collections import Counter
from typing import Callable, Iterable, Optional

import typer

from numcheck.config import Settings, get_settings
from numcheck.core.domain_types import CheckOutcome, RecordId
from numcheck.core.errors import NumCheckError
from numcheck.core.validate_number import classify_outcome
from numcheck.infrastructure.database import DatabaseSessionManager
from numcheck.infrastructure.observability import setup_logging
from numcheck.infrastructure.sql_number_store import SqlNumberStore
from numcheck.services.number_service import GetNumber, NumberService

logger = logging.getLogger(__name__)

app = typer.Typer(help="Validate numbers stored in the numbers table")


async def run_check_loop(
    get_number: GetNumber,
    lines: Iterable[str],
    echo: Callable[[str], None] = typer.echo,
) -> Counter:
    """Check each id in lines, echo the verdict, and return outcome counts."""
    outcomes: Counter = Counter()
    for line in lines:
        raw = line.strip()
        if not raw:
            continue
        try:
            record_id = RecordId(int(raw))
        except ValueError:
            echo(f"invalid id: {raw}")
            continue
        try:
            await get_number(record_id)
        except Exception as e:
            if not isinstance(e, NumCheckError):
                logger.error(
                    "Store raised %s for %s", type(e).__name__, record_id,
                    exc_info=e, extra={"record_id": record_id},
                )
            echo(f"result invalid: {e}")
            outcomes[classify_outcome(e)] += 1
            continue
        echo("result valid")
        outcomes[CheckOutcome.VALID] += 1
    return outcomes


def _build_db_manager(
    settings: Settings, database_url: Optional[str],
) -> DatabaseSessionManager:
    return DatabaseSessionManager(
        database_url or settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )


async def _check(db_manager: DatabaseSessionManager) -> Counter:
    service = NumberService(SqlNumberStore(db_manager))
    try:
        return await run_check_loop(
            service.get_number, typer.get_text_stream("stdin"),
        )
    finally:
        await db_manager.dispose()


async def _set(db_manager: DatabaseSessionManager, record_id: int, value: int) -> None:
    try:
        await SqlNumberStore(db_manager).put(RecordId(record_id), value)
    finally:
        await db_manager.dispose()


async def _init_db(db_manager: DatabaseSessionManager) -> None:
    try:
        await db_manager.create_tables()
    finally:
        await db_manager.dispose()


@app.command()
def check(
    database_url: Optional[str] = typer.Option(
        None, "--database-url", help="Override DATABASE_URL for this run",
    ),
):
    """Read ids from stdin, one per line, and validate each stored number."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    outcomes = asyncio.run(_check(_build_db_manager(settings, database_url)))
    logger.info(
        "Checked %d ids: %s", sum(outcomes.values()),
        ", ".join(f"{k.value}={v}" for k, v in sorted(outcomes.items())),
    )


@app.command("set")
def set_number(
    record_id: int = typer.Argument(..., help="Id to store the value under"),
    value: int = typer.Argument(..., help="Value to store"),
    database_url: Optional[str] = typer.Option(
        None, "--database-url", help="Override DATABASE_URL for this run",
    ),
):
    """Store a value under an id, replacing any existing value."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    try:
        asyncio.run(_set(_build_db_manager(settings, database_url), record_id, value))
    except NumCheckError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    typer.echo(f"stored {record_id} = {value}")


@app.command("init-db")
def init_db(
    database_url: Optional[str] = typer.Option(
        None, "--database-url", help="Override DATABASE_URL for this run",
    ),
):
    """Create the numbers table if it does not exist."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    try:
        asyncio.run(_init_db(_build_db_manager(settings, database_url)))
    except NumCheckError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    typer.echo("numbers table ready")


if __name__ == "__main__":
    app()
