"""
Clock-driven monotonic UUIDv7 generator

Every identifier from one MonotonicGenerator is strictly greater than the
previous one, even when many are produced in the same millisecond or when
the system clock steps backwards.
"""

import threading
from typing import NamedTuple

from uuidv7_kit.codec.fields import pack, to_canonical
from uuidv7_kit.generation.state import GeneratorState, step_counters
from uuidv7_kit.kernel.errors import InvalidArgument
from uuidv7_kit.kernel.logging import LogOperation, get_logger
from uuidv7_kit.kernel.metrics import batch_size, counter_overflows_total, monotonic_generated
from uuidv7_kit.kernel.policy import GeneratorPolicy, default_policy
from uuidv7_kit.kernel.random import RandomSource, default_random_source
from uuidv7_kit.kernel.retry import (
    CLOCK_REGRESSION,
    COUNTERS_EXHAUSTED,
    NOT_INCREASING,
    MustWait,
    wait_for_clock,
)
from uuidv7_kit.kernel.time import Clock, default_clock

logger = get_logger(__name__)


class _Candidate(NamedTuple):
    timestamp: int
    rand_a: int
    rand_b: int
    value: int


class MonotonicGenerator:
    """
    UUIDv7 generator driven by a clock

    Thread-safe: the whole read-generate-commit sequence runs under one lock.

    Example:
        >>> gen = MonotonicGenerator()
        >>> first, second = gen.generate_many(2)
        >>> first < second
        True
    """

    def __init__(
        self,
        clock: Clock | None = None,
        random_source: RandomSource | None = None,
        policy: GeneratorPolicy | None = None,
    ) -> None:
        self.clock = clock or default_clock
        self.random_source = random_source or default_random_source
        self.policy = policy or default_policy
        self._state = GeneratorState()
        self._lock = threading.Lock()

    @property
    def state(self) -> GeneratorState:
        return self._state

    def generate(self) -> str:
        """
        Generate the next identifier

        Waits (with backoff) while the clock is behind the last timestamp or
        both counters are exhausted for the current millisecond.

        Raises:
            ClockWaitTimeout: If the clock does not advance within the policy bound
        """
        with self._lock:
            try:
                candidate = self._attempt()
            except MustWait as exc:
                candidate = wait_for_clock(self._attempt, self.clock, self.policy, exc.reason)

            self._state = GeneratorState(
                last_timestamp=candidate.timestamp,
                last_rand_a=candidate.rand_a,
                last_rand_b=candidate.rand_b,
                last_value=candidate.value,
            )

        monotonic_generated.inc()
        return to_canonical(candidate.value)

    def generate_many(self, count: int) -> list[str]:
        """
        Generate count identifiers in strictly increasing order

        Raises:
            InvalidArgument: If count is not positive
        """
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise InvalidArgument(
                "count", count, f"Generation amount must be greater than 0, got {count!r}"
            )

        batch_size.observe(count)
        with LogOperation(logger, "generate_many", count=count):
            return [self.generate() for _ in range(count)]

    def _attempt(self) -> _Candidate:
        """One generation attempt against the current state; never mutates it"""
        state = self._state
        timestamp = self.clock.now_ms()
        last_timestamp = state.last_timestamp

        if last_timestamp is None or timestamp > last_timestamp:
            rand_a, rand_b = self.random_source.rand_parts()
        elif timestamp < last_timestamp:
            raise MustWait(CLOCK_REGRESSION, last_timestamp, timestamp)
        else:
            step = step_counters(state.last_rand_a, state.last_rand_b, self.random_source)
            if step.rand_b_overflowed:
                counter_overflows_total.labels(generator="monotonic", counter="rand_b").inc()
            if step.exhausted:
                counter_overflows_total.labels(generator="monotonic", counter="rand_a").inc()
                raise MustWait(COUNTERS_EXHAUSTED, last_timestamp, timestamp)
            rand_a, rand_b = step.rand_a, step.rand_b

        value = pack(timestamp, rand_a, rand_b)
        if state.last_value is not None and value <= state.last_value:
            raise MustWait(NOT_INCREASING, last_timestamp, timestamp)
        return _Candidate(timestamp, rand_a, rand_b, value)
