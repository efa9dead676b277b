"""
Bounded waiting for the clock to move forward.

A clock-driven generator cannot emit while the clock reads earlier than its
last timestamp, nor after both counters ran out inside one millisecond. In
both cases it retries with exponential backoff until the clock advances or
the policy bound is hit.
"""

from collections.abc import Callable
from typing import TypeVar, cast

from tenacity import (
    RetryCallState,
    RetryError,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    stop_any,
    stop_never,
    wait_exponential,
)
from tenacity.stop import stop_base

from uuidv7_kit.kernel.errors import ClockWaitTimeout
from uuidv7_kit.kernel.logging import get_logger
from uuidv7_kit.kernel.metrics import clock_waits_total
from uuidv7_kit.kernel.policy import GeneratorPolicy
from uuidv7_kit.kernel.time import Clock

logger = get_logger(__name__)

T = TypeVar("T")

CLOCK_REGRESSION = "clock_regression"
COUNTERS_EXHAUSTED = "counters_exhausted"
NOT_INCREASING = "not_increasing"


class MustWait(Exception):
    """
    Internal signal: this attempt cannot emit, try again later

    Never escapes the library - wait_for_clock either retries past it or
    converts it into ClockWaitTimeout.
    """

    def __init__(self, reason: str, last_timestamp: int, current_timestamp: int) -> None:
        self.reason = reason
        self.last_timestamp = last_timestamp
        self.current_timestamp = current_timestamp
        super().__init__(f"{reason}: last={last_timestamp} current={current_timestamp}")


def _log_wait(retry_state: RetryCallState) -> None:
    waited = retry_state.outcome.exception() if retry_state.outcome else None
    if not isinstance(waited, MustWait):
        return
    log = logger.warning if waited.reason == CLOCK_REGRESSION else logger.debug
    log(
        "Waiting for clock to advance",
        reason=waited.reason,
        attempt=retry_state.attempt_number,
        last_timestamp=waited.last_timestamp,
        current_timestamp=waited.current_timestamp,
    )


class stop_after_idle(stop_base):
    """
    Stop once the backoff sleeps handed to the clock add up to max_idle seconds

    Counts the sleeps tenacity schedules rather than wall time, so the bound
    holds for any injected clock: a TestClock that never sleeps reaches it
    after the same number of attempts as the system clock would.
    """

    def __init__(self, max_idle: float) -> None:
        self.max_idle = max_idle

    def __call__(self, retry_state: RetryCallState) -> bool:
        return retry_state.idle_for >= self.max_idle


def build_stop(policy: GeneratorPolicy):
    """Translate the policy bounds into a tenacity stop condition"""
    stops = []
    if policy.max_clock_wait_attempts is not None:
        stops.append(stop_after_attempt(policy.max_clock_wait_attempts))
    if policy.max_clock_wait_seconds is not None:
        stops.append(stop_after_idle(policy.max_clock_wait_seconds))
    if not stops:
        return stop_never
    if len(stops) == 1:
        return stops[0]
    return stop_any(*stops)


def wait_for_clock(
    attempt: Callable[[], T],
    clock: Clock,
    policy: GeneratorPolicy,
    reason: str,
) -> T:
    """
    Re-run attempt until it stops raising MustWait.

    Sleeps through the injected clock between attempts, so a test clock
    advances deterministically while a generator waits on it.

    Args:
        attempt: Callable that returns a result or raises MustWait
        clock: Clock used for sleeping
        policy: Wait bounds and backoff range
        reason: Why the first attempt failed (for metrics)

    Returns:
        The first result attempt produced

    Raises:
        ClockWaitTimeout: If the policy bound was reached first
    """
    clock_waits_total.labels(reason=reason).inc()

    retrying = Retrying(
        retry=retry_if_exception_type(MustWait),
        stop=build_stop(policy),
        wait=wait_exponential(
            multiplier=policy.backoff_min_seconds,
            min=policy.backoff_min_seconds,
            max=policy.backoff_max_seconds,
        ),
        sleep=clock.sleep,
        before_sleep=_log_wait,
        reraise=False,
    )

    try:
        return retrying(attempt)
    except RetryError as exc:
        # only MustWait is retried, so only MustWait can exhaust the stop condition
        waited = cast(MustWait, exc.last_attempt.exception())
        logger.error(
            "Gave up waiting for clock",
            reason=waited.reason,
            attempts=exc.last_attempt.attempt_number,
            last_timestamp=waited.last_timestamp,
        )
        raise ClockWaitTimeout(
            waited.last_timestamp,
            waited.current_timestamp,
            exc.last_attempt.attempt_number,
        ) from waited
