"""
Data Loader
===========
Fetches the show list, drops cancelled shows and keeps the result on disk.

  /data/shows.json — written every REVALIDATE_MINUTES by the scheduler,
                     replaced wholesale, never edited in place
"""

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path

from fastapi import HTTPException
from pydantic import ValidationError

from livecount.models.schemas import ShowSnapshot
from livecount.sources import BaseShowSource

logger = logging.getLogger(__name__)

DATA_DIR      = Path(os.getenv("DATA_DIR", "/data"))
SNAPSHOT_FILE = "shows.json"


async def load_shows(source: BaseShowSource) -> ShowSnapshot:
    """
    One fetch from `source`, cancelled shows removed.
    Errors are not caught here; a failed fetch must not produce a snapshot.
    """
    shows = await source.fetch_shows()
    # isCanceled is null on many records, so only an explicit true drops a show
    kept = [s for s in shows if not s.canceled]
    logger.info(f"[{source.source_id}] {len(kept)} shows kept, {len(shows) - len(kept)} cancelled.")
    return ShowSnapshot(
        subject_id=source.subject_id,
        last_updated=datetime.now(timezone.utc),
        shows=kept,
    )


def snapshot_path(data_dir: Path | None = None) -> Path:
    return (data_dir or DATA_DIR) / SNAPSHOT_FILE


def write_snapshot(snapshot: ShowSnapshot, data_dir: Path | None = None) -> Path:
    """Write JSON atomically using a temp file + rename."""
    final = snapshot_path(data_dir)
    final.parent.mkdir(parents=True, exist_ok=True)
    tmp = final.with_name(f"{SNAPSHOT_FILE}.tmp")
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(snapshot.model_dump(mode="json", by_alias=True), f, ensure_ascii=False, indent=2)
    tmp.replace(final)
    return final


def read_snapshot(data_dir: Path | None = None) -> ShowSnapshot:
    path = snapshot_path(data_dir)
    if not path.exists():
        raise HTTPException(
            status_code=503,
            detail="Show data not yet available — scheduler may still be starting up.",
        )
    try:
        with open(path, "r", encoding="utf-8") as f:
            return ShowSnapshot.model_validate(json.load(f))
    except (ValueError, ValidationError) as e:
        logger.error(f"Snapshot at {path} is unreadable: {e}")
        raise HTTPException(status_code=500, detail="Show data is corrupt.")
