"""Tests for the polling waiter."""

from __future__ import annotations

import asyncio
import time
from unittest.mock import AsyncMock, patch

import pytest

from inyerface.waiter import (
    DEFAULT_ASSERT_TIMEOUT_MS,
    DEFAULT_CONDITION_TIMEOUT_MS,
    DEFAULT_INTERVAL_MS,
    retry_until_success,
    wait_for_condition,
)


class TestWaitForCondition:
    """Tests for wait_for_condition function."""

    @pytest.mark.asyncio
    async def test_true_on_first_check_returns_without_pause(self) -> None:
        """Should return True immediately when the predicate already holds."""
        predicate = AsyncMock(return_value=True)
        sleep_mock = AsyncMock()

        with patch("inyerface.waiter.asyncio.sleep", sleep_mock):
            result = await wait_for_condition(predicate, timeout_ms=1000)

        assert result is True
        assert predicate.call_count == 1
        sleep_mock.assert_not_called()

    @pytest.mark.asyncio
    async def test_becomes_true_after_retries(self) -> None:
        """Scenario: [False, False, True] with 10ms interval."""
        predicate = AsyncMock(side_effect=[False, False, True])

        started = time.monotonic()
        result = await wait_for_condition(predicate, timeout_ms=1000, interval_ms=10)
        elapsed = time.monotonic() - started

        assert result is True
        assert predicate.call_count == 3
        assert elapsed >= 0.019

    @pytest.mark.asyncio
    async def test_never_true_returns_false_within_bounds(self) -> None:
        """Scenario: always False, timeout 100ms, interval 50ms."""
        predicate = AsyncMock(return_value=False)

        started = time.monotonic()
        result = await wait_for_condition(predicate, timeout_ms=100, interval_ms=50)
        elapsed = time.monotonic() - started

        assert result is False
        assert predicate.call_count >= 1
        assert 0.1 <= elapsed <= 0.16

    @pytest.mark.asyncio
    async def test_zero_timeout_checks_exactly_once(self) -> None:
        """Zero timeout should evaluate once, pause once, then give up."""
        predicate = AsyncMock(return_value=False)
        sleep_mock = AsyncMock()

        with patch("inyerface.waiter.asyncio.sleep", sleep_mock):
            result = await wait_for_condition(predicate, timeout_ms=0, interval_ms=50)

        assert result is False
        assert predicate.call_count == 1
        sleep_mock.assert_called_once_with(0.05)

    @pytest.mark.asyncio
    async def test_interval_is_passed_to_sleep_in_seconds(self) -> None:
        """Should pause for interval_ms between unsuccessful checks."""
        predicate = AsyncMock(side_effect=[False, True])
        sleep_mock = AsyncMock()

        with patch("inyerface.waiter.asyncio.sleep", sleep_mock):
            result = await wait_for_condition(predicate, timeout_ms=1000, interval_ms=250)

        assert result is True
        sleep_mock.assert_called_once_with(0.25)

    @pytest.mark.asyncio
    async def test_raising_predicate_propagates_immediately(self) -> None:
        """A raising predicate is a contract violation and must not be retried."""
        predicate = AsyncMock(side_effect=[False, RuntimeError("broken check"), True])

        with pytest.raises(RuntimeError, match="broken check"):
            await wait_for_condition(predicate, timeout_ms=1000, interval_ms=1)

        assert predicate.call_count == 2

    @pytest.mark.asyncio
    async def test_raising_predicate_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Should log the contract violation at ERROR level."""
        predicate = AsyncMock(side_effect=RuntimeError("broken check"))

        with pytest.raises(RuntimeError):
            await wait_for_condition(predicate)

        assert "must not raise" in caplog.text

    @pytest.mark.asyncio
    async def test_truthy_value_counts_as_satisfied(self) -> None:
        """Truthy non-bool values satisfy the condition; the result is True."""
        predicate = AsyncMock(return_value=["element"])

        result = await wait_for_condition(predicate)

        assert result is True

    @pytest.mark.asyncio
    async def test_negative_timeout_rejected(self) -> None:
        predicate = AsyncMock(return_value=True)

        with pytest.raises(ValueError, match="timeout_ms"):
            await wait_for_condition(predicate, timeout_ms=-1)

        predicate.assert_not_called()

    @pytest.mark.asyncio
    async def test_negative_interval_rejected(self) -> None:
        predicate = AsyncMock(return_value=True)

        with pytest.raises(ValueError, match="interval_ms"):
            await wait_for_condition(predicate, interval_ms=-5)

        predicate.assert_not_called()

    @pytest.mark.asyncio
    async def test_in_flight_check_finishes_then_stops(self) -> None:
        """A check outlasting the timeout completes, and no second check starts."""
        calls = 0

        async def slow_predicate() -> bool:
            nonlocal calls
            calls += 1
            await asyncio.sleep(0.08)
            return False

        started = time.monotonic()
        result = await wait_for_condition(slow_predicate, timeout_ms=50, interval_ms=10)
        elapsed = time.monotonic() - started

        assert result is False
        assert calls == 1
        assert elapsed >= 0.08


class TestRetryUntilSuccess:
    """Tests for retry_until_success function."""

    @pytest.mark.asyncio
    async def test_success_first_attempt(self) -> None:
        """Should return after a single successful attempt."""
        action = AsyncMock(return_value=None)
        sleep_mock = AsyncMock()

        with patch("inyerface.waiter.asyncio.sleep", sleep_mock):
            await retry_until_success(action)

        assert action.call_count == 1
        sleep_mock.assert_not_called()

    @pytest.mark.asyncio
    async def test_stops_after_first_success(self) -> None:
        """Success on attempt N means no attempt N+1."""
        action = AsyncMock(side_effect=[AssertionError("no"), AssertionError("no"), None, None])

        await retry_until_success(action, timeout_ms=1000, interval_ms=1)

        assert action.call_count == 3

    @pytest.mark.asyncio
    async def test_timeout_raises_last_failure_message(self) -> None:
        """Scenario: always raises "X not ready", timeout 30ms, interval 10ms."""
        action = AsyncMock(side_effect=Exception("X not ready"))

        with pytest.raises(Exception, match="X not ready") as exc_info:
            await retry_until_success(action, timeout_ms=30, interval_ms=10)

        assert str(exc_info.value) == "X not ready"

    @pytest.mark.asyncio
    async def test_timeout_raises_failure_from_final_attempt(self) -> None:
        """The raised exception must come from the final attempt, not an earlier one."""
        attempts: list[AssertionError] = []

        async def action() -> None:
            error = AssertionError(f"attempt {len(attempts) + 1}")
            attempts.append(error)
            raise error

        with pytest.raises(AssertionError) as exc_info:
            await retry_until_success(action, timeout_ms=40, interval_ms=10)

        assert len(attempts) >= 2
        assert exc_info.value is attempts[-1]

    @pytest.mark.asyncio
    async def test_zero_timeout_attempts_once(self) -> None:
        action = AsyncMock(side_effect=ValueError("not yet"))
        sleep_mock = AsyncMock()

        with (
            patch("inyerface.waiter.asyncio.sleep", sleep_mock),
            pytest.raises(ValueError, match="not yet"),
        ):
            await retry_until_success(action, timeout_ms=0)

        assert action.call_count == 1

    @pytest.mark.asyncio
    async def test_negative_timeout_rejected(self) -> None:
        action = AsyncMock()

        with pytest.raises(ValueError, match="timeout_ms"):
            await retry_until_success(action, timeout_ms=-10)

        action.assert_not_called()

    @pytest.mark.asyncio
    async def test_negative_interval_rejected(self) -> None:
        action = AsyncMock()

        with pytest.raises(ValueError, match="interval_ms"):
            await retry_until_success(action, interval_ms=-5)

        action.assert_not_called()

    @pytest.mark.asyncio
    async def test_in_flight_attempt_finishes_then_stops(self) -> None:
        """An attempt outlasting the timeout completes, and its failure is raised."""
        calls = 0

        async def slow_action() -> None:
            nonlocal calls
            calls += 1
            await asyncio.sleep(0.08)
            raise AssertionError("still loading")

        started = time.monotonic()
        with pytest.raises(AssertionError, match="still loading"):
            await retry_until_success(slow_action, timeout_ms=50, interval_ms=10)
        elapsed = time.monotonic() - started

        assert calls == 1
        assert elapsed >= 0.08

    @pytest.mark.asyncio
    async def test_logging_on_exhaustion(self, caplog: pytest.LogCaptureFixture) -> None:
        """Should log a warning naming the last failure."""
        action = AsyncMock(side_effect=AssertionError("color mismatch"))

        with pytest.raises(AssertionError):
            await retry_until_success(action, timeout_ms=10, interval_ms=5)

        assert "Check still failing" in caplog.text
        assert "color mismatch" in caplog.text


class TestConstants:
    """Tests for module constants."""

    def test_default_condition_timeout(self) -> None:
        assert DEFAULT_CONDITION_TIMEOUT_MS == 3000

    def test_default_assert_timeout(self) -> None:
        assert DEFAULT_ASSERT_TIMEOUT_MS == 10000

    def test_default_interval(self) -> None:
        assert DEFAULT_INTERVAL_MS == 50
