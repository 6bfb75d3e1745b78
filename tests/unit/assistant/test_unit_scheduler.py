# tests/unit/assistant/test_scheduler.py — v1
"""Tests for assistant/scheduler.py — cancelable delayed replies."""

from __future__ import annotations

import asyncio

import pytest

from fixerhub.assistant.scheduler import ReplyScheduler


class TestReplySchedulerInit:
    def test_negative_delay_rejected(self):
        with pytest.raises(ValueError, match="delay_s"):
            ReplyScheduler(delay_s=-1)

    def test_delay_exposed(self):
        assert ReplyScheduler(delay_s=0.25).delay_s == 0.25


class TestSchedule:
    @pytest.mark.asyncio
    async def test_produces_and_delivers(self):
        delivered: list[str] = []
        scheduler = ReplyScheduler(delay_s=0)
        pending = scheduler.schedule(lambda: "hello", delivered.append)
        assert await pending == "hello"
        assert delivered == ["hello"]
        assert pending.done
        assert not pending.cancelled

    @pytest.mark.asyncio
    async def test_waits_for_delay(self):
        slept: list[float] = []

        async def fake_sleep(seconds: float) -> None:
            slept.append(seconds)

        scheduler = ReplyScheduler(delay_s=1.5, sleep=fake_sleep)
        assert await scheduler.schedule(lambda: 42) == 42
        assert slept == [1.5]

    @pytest.mark.asyncio
    async def test_zero_delay_skips_sleep(self):
        async def boom(seconds: float) -> None:
            raise AssertionError("sleep should not be called")

        scheduler = ReplyScheduler(delay_s=0, sleep=boom)
        assert await scheduler.schedule(lambda: "now") == "now"

    @pytest.mark.asyncio
    async def test_pending_count_drops_after_delivery(self):
        scheduler = ReplyScheduler(delay_s=0)
        pending = scheduler.schedule(lambda: 1)
        assert scheduler.pending_count == 1
        await pending
        await asyncio.sleep(0)
        assert scheduler.pending_count == 0


class TestCancel:
    @pytest.mark.asyncio
    async def test_cancel_prevents_delivery(self):
        delivered: list[str] = []
        scheduler = ReplyScheduler(delay_s=10)
        pending = scheduler.schedule(lambda: "late", delivered.append)
        assert pending.cancel()
        assert await pending is None
        assert pending.cancelled
        assert delivered == []

    @pytest.mark.asyncio
    async def test_cancel_all(self):
        produced: list[int] = []
        scheduler = ReplyScheduler(delay_s=10)
        handles = [scheduler.schedule(lambda i=i: produced.append(i)) for i in range(3)]
        assert scheduler.cancel_all() == 3
        for handle in handles:
            assert await handle.wait() is None
        assert produced == []

    @pytest.mark.asyncio
    async def test_cancel_after_delivery_is_noop(self):
        scheduler = ReplyScheduler(delay_s=0)
        pending = scheduler.schedule(lambda: "done")
        await pending
        assert pending.cancel() is False
        assert scheduler.cancel_all() == 0
