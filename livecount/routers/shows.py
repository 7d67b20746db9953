from datetime import datetime, timezone

from fastapi import APIRouter

from livecount.services.loader import read_snapshot
from livecount.services.view import completed_count

router = APIRouter()


@router.get("/shows", summary="Performance history as JSON")
async def get_shows():
    """Cancelled shows are already removed. `completed_count` is computed per request."""
    snapshot = read_snapshot()
    return {
        "subject_id":      snapshot.subject_id,
        "last_updated":    snapshot.last_updated,
        "completed_count": completed_count(snapshot.shows, datetime.now(timezone.utc)),
        "shows":           [s.model_dump(mode="json", by_alias=True) for s in snapshot.shows],
    }
