"""
Tests for effect scheduling: ordering, fan-out, cancellation and faults.
"""

from __future__ import annotations

import asyncio
import threading

import pytest
from structlog.testing import capture_logs

from functional import UNIT, CancellationToken, ProcessingOrder, run_effects, run_parallel, run_sequential


class TestSequential:
    @pytest.mark.asyncio
    async def test_runs_in_declaration_order(self, event_log):
        """
        GIVEN a slow first action and a fast second action
        WHEN they run sequentially
        THEN the log reads A then B
        """

        async def slow():
            await asyncio.sleep(0.02)
            event_log.append("A")

        outcome = await run_sequential([slow, lambda: event_log.append("B")])

        assert outcome is UNIT
        assert event_log == ["A", "B"]

    @pytest.mark.asyncio
    async def test_passes_arguments_to_actions_that_take_them(self, event_log):
        await run_sequential([event_log.append, lambda: event_log.append("no-arg")], "payload")
        assert event_log == ["payload", "no-arg"]

    @pytest.mark.asyncio
    async def test_cancellation_mid_sequence_skips_the_rest(self, event_log):
        token = CancellationToken()

        def first():
            event_log.append("A")
            token.cancel()

        outcome = await run_sequential([first, lambda: event_log.append("B")], cancellation=token)

        assert outcome is UNIT
        assert event_log == ["A"]

    @pytest.mark.asyncio
    async def test_fault_stops_the_sequence(self, event_log):
        def explode():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            await run_sequential([explode, lambda: event_log.append("B")])
        assert event_log == []


class TestParallel:
    @pytest.mark.asyncio
    async def test_runs_every_action(self, event_log):
        await run_parallel([lambda: event_log.append("A"), lambda: event_log.append("B")])
        assert sorted(event_log) == ["A", "B"]

    @pytest.mark.asyncio
    async def test_async_actions_overlap(self):
        """
        GIVEN two coroutines that each wait for the other to start
        WHEN they run in parallel
        THEN both finish, which is only possible if they overlap
        """
        first_started = asyncio.Event()
        second_started = asyncio.Event()

        async def first():
            first_started.set()
            await asyncio.wait_for(second_started.wait(), timeout=1)

        async def second():
            second_started.set()
            await asyncio.wait_for(first_started.wait(), timeout=1)

        assert await run_parallel([first, second], max_parallelism=2) is UNIT

    @pytest.mark.asyncio
    async def test_sync_actions_run_off_the_event_loop(self):
        loop_thread = threading.get_ident()
        seen: list[int] = []

        await run_parallel([lambda: seen.append(threading.get_ident())])

        assert seen and seen[0] != loop_thread

    @pytest.mark.asyncio
    async def test_max_parallelism_of_one_still_completes(self, event_log):
        await run_parallel([lambda: event_log.append(1), lambda: event_log.append(2)], max_parallelism=1)
        assert sorted(event_log) == [1, 2]

    @pytest.mark.asyncio
    async def test_joins_every_action_before_raising(self, event_log):
        """
        GIVEN one action that fails and one that succeeds slowly
        WHEN they run in parallel
        THEN the fault surfaces only after the slow action has finished
        """

        async def fail():
            raise ValueError("first")

        async def slow():
            await asyncio.sleep(0.02)
            event_log.append("slow done")

        with pytest.raises(ValueError, match="first"):
            await run_parallel([fail, slow])

        assert event_log == ["slow done"]

    @pytest.mark.asyncio
    async def test_first_fault_in_declaration_order_wins(self):
        async def late_fault():
            await asyncio.sleep(0.02)
            raise KeyError("declared first")

        async def early_fault():
            raise ValueError("declared second")

        with pytest.raises(KeyError):
            await run_parallel([late_fault, early_fault])

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [0, -2])
    async def test_explicit_non_positive_parallelism_is_rejected(self, limit, event_log):
        """
        GIVEN an explicit max_parallelism below 1
        WHEN run_parallel is called
        THEN it raises instead of falling back to the configured default, and nothing runs
        """
        with pytest.raises(ValueError, match=f"at least 1, got {limit}"):
            await run_parallel([lambda: event_log.append("A")], max_parallelism=limit)

        assert event_log == []

    @pytest.mark.asyncio
    async def test_parallelism_defaults_to_settings(self, monkeypatch, event_log):
        monkeypatch.setenv("FUNCTIONAL_MAX_PARALLELISM", "1")

        await run_parallel([lambda: event_log.append("A"), lambda: event_log.append("B")])

        assert sorted(event_log) == ["A", "B"]

    @pytest.mark.asyncio
    async def test_empty_action_list(self):
        assert await run_parallel([]) is UNIT


class TestCancellation:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("order", list(ProcessingOrder))
    async def test_pre_cancelled_token_runs_nothing(self, order):
        counter = {"calls": 0}

        def bump():
            counter["calls"] += 1

        outcome = await run_effects([bump, bump], order=order, cancellation=CancellationToken.cancelled())

        assert outcome is UNIT
        assert counter["calls"] == 0

    def test_token_starts_clear_and_stays_cancelled(self):
        token = CancellationToken()
        assert not token.is_cancelled()
        token.cancel()
        token.cancel()
        assert token.is_cancelled()
        assert repr(token) == "CancellationToken(cancelled=True)"

    @pytest.mark.asyncio
    async def test_cancellation_is_logged(self):
        with capture_logs() as logs:
            await run_sequential([print], cancellation=CancellationToken.cancelled())

        assert logs == [
            {"event": "effects.cancelled", "log_level": "debug", "order": "sequential", "skipped": 1}
        ]


class TestDefaultOrder:
    @pytest.mark.asyncio
    async def test_order_defaults_to_settings(self, monkeypatch):
        """
        GIVEN FUNCTIONAL_PROCESSING_ORDER=parallel
        WHEN run_effects is called without an order
        THEN the parallel runner handles the call
        """
        monkeypatch.setenv("FUNCTIONAL_PROCESSING_ORDER", "parallel")

        with capture_logs() as logs:
            await run_effects([print], cancellation=CancellationToken.cancelled())

        assert logs[0]["order"] == "parallel"

    @pytest.mark.asyncio
    async def test_explicit_order_overrides_settings(self, monkeypatch):
        monkeypatch.setenv("FUNCTIONAL_PROCESSING_ORDER", "parallel")

        with capture_logs() as logs:
            await run_effects([print], order=ProcessingOrder.SEQUENTIAL, cancellation=CancellationToken.cancelled())

        assert logs[0]["order"] == "sequential"
