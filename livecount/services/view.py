"""
Presentation View
=================
Pure rendering of a show list into the page. No I/O apart from reading the
packaged template; `now` is passed in so the same list always renders the same way.

Derived per render (never stored):
  start_date   — parsed show start
  is_completed — start_date <= now
  ordinal      — len(shows) - index, relies on the source's newest-first order
"""

import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence
from zoneinfo import ZoneInfo

from jinja2 import Environment, FileSystemLoader, select_autoescape

from livecount.models.schemas import PageMeta, ShowRecord, ShowRow

EXTERNAL_BASE_URL = os.getenv("EXTERNAL_BASE_URL", "https://indistreet.com")
DISPLAY_TIMEZONE  = ZoneInfo(os.getenv("DISPLAY_TIMEZONE", "Asia/Seoul"))

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

_env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def detail_url(show_id: str, base_url: str = EXTERNAL_BASE_URL) -> str:
    return f"{base_url.rstrip('/')}/live/{show_id}"


def format_date(dt: datetime, tz: ZoneInfo = DISPLAY_TIMEZONE) -> str:
    """Korean short date, as browsers print it for ko-KR: '2022. 3. 5.'"""
    local = dt.astimezone(tz)
    return f"{local.year}. {local.month}. {local.day}."


def is_completed(show: ShowRecord, now: datetime) -> bool:
    return show.start_date <= now


def completed_count(shows: Sequence[ShowRecord], now: datetime) -> int:
    return sum(1 for s in shows if is_completed(s, now))


def build_rows(shows: Sequence[ShowRecord], now: datetime) -> List[ShowRow]:
    total = len(shows)
    return [
        ShowRow(
            ordinal=total - i,
            id=show.id,
            title=show.title,
            start_date=show.start_date,
            date_label=format_date(show.start_date),
            detail_url=detail_url(show.id),
            is_completed=is_completed(show, now),
        )
        for i, show in enumerate(shows)
    ]


def toggle_href(visible: bool) -> str:
    # the table flag is the page's only state; the toggle links to its inverse
    return "?table=0" if visible else "?table=1"


def render_page(
    shows: Sequence[ShowRecord],
    visible: bool,
    now: datetime,
    meta: Optional[PageMeta] = None,
) -> str:
    meta = meta or PageMeta()
    return _env.get_template("index.html").render(
        meta=meta,
        count=completed_count(shows, now),
        rows=build_rows(shows, now) if visible else [],
        visible=visible,
        toggle_href=toggle_href(visible),
        toggle_label="숨기기" if visible else "공연내역 보기",
    )
