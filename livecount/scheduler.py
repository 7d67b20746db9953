"""
Background Scheduler
====================
Runs one recurring job:

  refresh_shows — every REVALIDATE_MINUTES (default 50)
      • fetches the full show list from the configured source
      • drops cancelled shows
      • overwrites /data/shows.json  (read by the page and /shows)

A failed run is logged and leaves the previous shows.json in place.
"""

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
import logging
import os
from datetime import datetime, timezone

from livecount.sources import get_source
from livecount.services.loader import load_shows, write_snapshot

logger = logging.getLogger(__name__)

scheduler = AsyncIOScheduler(timezone="UTC")

REVALIDATE_MINUTES = int(os.getenv("REVALIDATE_MINUTES", "50"))


def start_scheduler():
    scheduler.add_job(
        refresh_shows,
        trigger=IntervalTrigger(minutes=REVALIDATE_MINUTES),
        id="refresh_shows",
        name=f"Refresh show history (every {REVALIDATE_MINUTES} min)",
        replace_existing=True,
        next_run_time=datetime.now(timezone.utc),  # run immediately on startup
    )
    scheduler.start()
    logger.info(f"Scheduler started — shows: every {REVALIDATE_MINUTES} min")


def stop_scheduler():
    scheduler.shutdown(wait=False)
    logger.info("Scheduler stopped.")


# ──────────────────────────────────────────────
# Job: show history
# ──────────────────────────────────────────────

async def refresh_shows(source=None) -> bool:
    source = source or get_source()
    logger.info("─── refresh_shows started ───")
    try:
        snapshot = await load_shows(source)
        path = write_snapshot(snapshot)
    except Exception as e:
        logger.error(f"[{source.source_id}] Refresh failed, keeping previous snapshot: {e}", exc_info=True)
        return False
    logger.info(f"[{source.source_id}] {path.name} written ({len(snapshot.shows)} shows).")
    logger.info("─── refresh_shows done ───")
    return True
