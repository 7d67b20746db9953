from datetime import datetime, timezone

from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse

from livecount.services.loader import read_snapshot
from livecount.services.view import render_page

router = APIRouter()


@router.get("/", response_class=HTMLResponse, summary="Performance history page")
async def get_page(
    table: bool = Query(default=False, description="Show the full list of performances"),
):
    """The page itself. Rendered from the last snapshot; refreshed every 50 minutes."""
    snapshot = read_snapshot()
    return render_page(snapshot.shows, visible=table, now=datetime.now(timezone.utc))
