"""Polling waiter for asynchronous UI conditions.

This module provides the bounded-time retry loops used by every component
check in the suite. Two outcome policies are offered:

- `wait_for_condition`: polls a boolean predicate and returns False on
  timeout. The predicate must encode "not yet" as False, never as an
  exception.
- `retry_until_success`: repeats a check that raises while the condition
  does not hold, and re-raises the last failure on timeout.

The deadline is computed once per call. A check that is already running when
the deadline passes is allowed to finish; the deadline is consulted only
after the pause that follows an unsuccessful attempt.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

DEFAULT_CONDITION_TIMEOUT_MS: int = 3000
DEFAULT_ASSERT_TIMEOUT_MS: int = 10000
DEFAULT_INTERVAL_MS: int = 50


def _validate_durations(timeout_ms: float, interval_ms: float) -> None:
    if timeout_ms < 0:
        raise ValueError(f"timeout_ms must be non-negative, got {timeout_ms}")
    if interval_ms < 0:
        raise ValueError(f"interval_ms must be non-negative, got {interval_ms}")


async def wait_for_condition(
    predicate: Callable[[], Awaitable[bool]],
    timeout_ms: float = DEFAULT_CONDITION_TIMEOUT_MS,
    interval_ms: float = DEFAULT_INTERVAL_MS,
) -> bool:
    """Wait until predicate returns a truthy value.

    The predicate is always evaluated at least once. A timeout of zero
    degenerates to one evaluation and one pause.

    Args:
        predicate: Async function returning a boolean. Must not raise.
        timeout_ms: Total time to keep polling in milliseconds (default: 3000).
        interval_ms: Pause between unsuccessful checks in milliseconds
            (default: 50).

    Returns:
        True if the predicate was satisfied before the deadline, False otherwise.

    Raises:
        ValueError: If timeout_ms or interval_ms is negative.
        Exception: Whatever the predicate raised, unchanged. A raising
            predicate is a contract violation and is never retried.

    Example:
        >>> visible = await wait_for_condition(lambda: locator.is_visible(), 10000)
    """
    _validate_durations(timeout_ms, interval_ms)

    deadline = time.monotonic() + timeout_ms / 1000
    attempts = 0

    while True:
        attempts += 1
        try:
            satisfied = await predicate()
        except Exception:
            logger.error("FATAL: wait_for_condition predicate must not raise (attempt %d)", attempts)
            raise

        if satisfied:
            return True

        await asyncio.sleep(interval_ms / 1000)
        if time.monotonic() >= deadline:
            logger.debug(
                "Condition not met after %d attempt(s) within %sms",
                attempts,
                timeout_ms,
            )
            return False


async def retry_until_success(
    action: Callable[[], Awaitable[object]],
    timeout_ms: float = DEFAULT_ASSERT_TIMEOUT_MS,
    interval_ms: float = DEFAULT_INTERVAL_MS,
) -> None:
    """Repeat a failing check until it passes or the deadline elapses.

    Intended for assertions such as "style property equals X" that describe
    their own failure. When retries are exhausted the caller sees the
    exception raised by the final attempt, not an earlier one.

    Args:
        action: Async function that raises while the condition does not hold.
        timeout_ms: Total time to keep retrying in milliseconds (default: 10000).
        interval_ms: Pause between failed attempts in milliseconds (default: 50).

    Raises:
        ValueError: If timeout_ms or interval_ms is negative.
        Exception: The last exception raised by action, if it never succeeded.
    """
    _validate_durations(timeout_ms, interval_ms)

    deadline = time.monotonic() + timeout_ms / 1000
    attempt = 0

    while True:
        attempt += 1
        try:
            await action()
            return
        except Exception as e:
            logger.debug("Attempt %d failed: %s: %s", attempt, type(e).__name__, e)
            await asyncio.sleep(interval_ms / 1000)
            if time.monotonic() >= deadline:
                logger.warning(
                    "Check still failing after %d attempt(s) within %sms: %s: %s",
                    attempt,
                    timeout_ms,
                    type(e).__name__,
                    e,
                )
                raise
