"""
Tests for the refresh job: a failed refresh must leave the last snapshot alone.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta, timezone

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from conftest import NOW, FailingSource, StaticSource, make_show
from livecount import scheduler
from livecount.services.loader import read_snapshot, snapshot_path, write_snapshot


def test_refresh_writes_filtered_snapshot(data_dir) -> None:
    source = StaticSource([make_show("2", NOW, is_canceled=True), make_show("1", NOW)])
    assert asyncio.run(scheduler.refresh_shows(source)) is True
    assert [s.id for s in read_snapshot().shows] == ["1"]


def test_failed_refresh_keeps_previous_snapshot(data_dir, snapshot, caplog) -> None:
    write_snapshot(snapshot)
    before = snapshot_path().read_bytes()
    with caplog.at_level(logging.ERROR, logger="livecount.scheduler"):
        assert asyncio.run(scheduler.refresh_shows(FailingSource([]))) is False
    assert snapshot_path().read_bytes() == before
    assert "keeping previous snapshot" in caplog.text


def test_failed_first_refresh_writes_nothing(data_dir) -> None:
    assert asyncio.run(scheduler.refresh_shows(FailingSource([]))) is False
    assert not snapshot_path().exists()


def test_default_interval_is_fifty_minutes() -> None:
    assert scheduler.REVALIDATE_MINUTES == 50


def test_start_registers_interval_job_due_now(data_dir, monkeypatch) -> None:
    monkeypatch.setattr(scheduler, "scheduler", AsyncIOScheduler(timezone="UTC"))
    monkeypatch.setattr(scheduler, "get_source", lambda: StaticSource([make_show("1", NOW)]))

    async def start_and_inspect():
        scheduler.start_scheduler()
        try:
            job = scheduler.scheduler.get_job("refresh_shows")
            return job.trigger, job.next_run_time
        finally:
            scheduler.stop_scheduler()

    started = datetime.now(timezone.utc)
    trigger, next_run = asyncio.run(start_and_inspect())
    assert isinstance(trigger, IntervalTrigger)
    assert trigger.interval == timedelta(minutes=50)
    assert abs(next_run - started) < timedelta(seconds=5)
