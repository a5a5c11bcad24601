"""
Batch deletion service - empties the entry collection in bounded steps.

Each call deletes one batch atomically; callers drive the repetition
(see clear_all) so no single request holds the database for long.
"""
import asyncio
import logging
from typing import Awaitable, Callable, Optional, Tuple

from sqlmodel.ext.asyncio.session import AsyncSession

from founderflow.repositories.entry_repo import EntryRepository

logger = logging.getLogger(__name__)

SAMPLE_CEILING = 1000
MIN_BATCH_SIZE = 1
MAX_BATCH_SIZE = 200
DEFAULT_BATCH_SIZE = 100

# Client-side pacing for clear_all
MAX_BATCHES = 50
BATCH_DELAY_SECONDS = 1.0


def clamp_batch_size(batch_size: Optional[int]) -> int:
    """Effective batch size: clamp(batch_size, 1, 200), 100 when not given."""
    if batch_size is None:
        batch_size = DEFAULT_BATCH_SIZE
    return min(max(batch_size, MIN_BATCH_SIZE), MAX_BATCH_SIZE)


class BatchDeletionService:
    """Size estimate and atomic batch delete over the entry collection."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.entry_repo = EntryRepository(session)

    async def estimate_collection_size(self) -> dict:
        """
        Count at most SAMPLE_CEILING rows.

        Returns:
            {"estimated_count": int | "1000+", "has_entries": bool, "sample_size": int}
        """
        sample = await self.entry_repo.sample_ids(SAMPLE_CEILING)
        sample_size = len(sample)
        return {
            "estimated_count": f"{SAMPLE_CEILING}+" if sample_size == SAMPLE_CEILING else sample_size,
            "has_entries": sample_size > 0,
            "sample_size": sample_size,
        }

    async def delete_batch(self, batch_size: Optional[int] = None) -> dict:
        """
        Delete one batch in a single transaction, then check for leftovers.

        has_more_entries comes from a one-row check after the commit. Rows
        inserted after the check are missed (false "done"); rows another admin
        deletes meanwhile can leave a stale "more" that the next call resolves
        with deleted_count=0.
        """
        safe_batch_size = clamp_batch_size(batch_size)
        logger.info(f"Deleting entry batch (batch size: {safe_batch_size})")

        entries = await self.entry_repo.fetch_batch(safe_batch_size)
        if not entries:
            return {
                "message": "No more entries to delete",
                "deleted_count": 0,
                "has_more_entries": False,
                "batch_size": safe_batch_size,
            }

        deleted_count = await self.entry_repo.delete_many(entries)
        has_more = await self.entry_repo.has_any()

        logger.info(f"Deleted {deleted_count} entries. More remaining: {has_more}")
        return {
            "message": f"Successfully deleted {deleted_count} entries",
            "deleted_count": deleted_count,
            "has_more_entries": has_more,
            "batch_size": safe_batch_size,
        }


async def clear_all(
    delete_batch: Callable[[int], Awaitable[Tuple[int, bool]]],
    batch_size: int = DEFAULT_BATCH_SIZE,
    max_batches: int = MAX_BATCHES,
    delay_seconds: float = BATCH_DELAY_SECONDS,
    on_batch: Optional[Callable[[int, int, bool], None]] = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> dict:
    """
    Repeat delete_batch until the collection reports empty or max_batches is hit.

    Args:
        delete_batch: Coroutine taking a batch size, returning (deleted_count, has_more)
        batch_size: Passed to every delete_batch call
        max_batches: Hard ceiling on iterations
        delay_seconds: Pause between batches while more remain
        on_batch: Progress callback (batch_number, deleted_count, has_more)
        sleep: Injected for tests

    Returns:
        {"batches", "total_deleted", "completed", "warning"}. Hitting the
        ceiling is reported through completed/warning, not raised.
    """
    batches = 0
    total_deleted = 0
    has_more = True

    while has_more and batches < max_batches:
        deleted_count, has_more = await delete_batch(batch_size)
        batches += 1
        total_deleted += deleted_count
        if on_batch:
            on_batch(batches, deleted_count, has_more)

        if has_more and batches < max_batches:
            await sleep(delay_seconds)

    warning = None
    if has_more:
        warning = f"Stopped after {max_batches} batches. Some entries may remain."
        logger.warning(warning)

    return {
        "batches": batches,
        "total_deleted": total_deleted,
        "completed": not has_more,
        "warning": warning,
    }
