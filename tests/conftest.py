from datetime import datetime, timedelta, timezone
from typing import List

import pytest

from livecount.models.schemas import ShowRecord, ShowSnapshot
from livecount.services import loader
from livecount.sources import BaseShowSource


NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class StaticSource(BaseShowSource):
    source_id = "static"

    def __init__(self, shows: List[ShowRecord], subject_id: str = "1"):
        self.shows = shows
        self.subject_id = subject_id

    async def fetch_shows(self) -> List[ShowRecord]:
        return list(self.shows)


class FailingSource(StaticSource):
    async def fetch_shows(self) -> List[ShowRecord]:
        raise RuntimeError("upstream down")


def make_show(show_id: str, start: datetime, is_canceled=None, title=None) -> ShowRecord:
    return ShowRecord(
        id=show_id,
        title=title or f"Live #{show_id}",
        startDate=start,
        isCanceled=is_canceled,
    )


@pytest.fixture
def two_shows() -> list[ShowRecord]:
    """One played show followed by one upcoming show with isCanceled null."""
    return [
        make_show("1", NOW - timedelta(days=2), is_canceled=False),
        make_show("2", NOW + timedelta(days=2), is_canceled=None),
    ]


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point the snapshot file at a temp dir for the duration of a test."""
    monkeypatch.setattr(loader, "DATA_DIR", tmp_path)
    return tmp_path


@pytest.fixture
def snapshot(two_shows) -> ShowSnapshot:
    return ShowSnapshot(subject_id="1", last_updated=NOW, shows=two_shows)
