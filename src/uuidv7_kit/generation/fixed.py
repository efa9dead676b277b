"""
UUIDv7 generator with caller-supplied timestamps

Useful for backfilling historical records or deriving identifiers from an
event's own time. Identifiers generated for the same timestamp are strictly
increasing; identifiers for different timestamps carry no ordering promise
beyond what their timestamps imply.
"""

import threading
from dataclasses import replace

from uuidv7_kit.codec.fields import MAX_TIMESTAMP, pack, to_canonical
from uuidv7_kit.generation.state import GeneratorState, step_counters
from uuidv7_kit.kernel.errors import CounterExhausted, InvalidTimestamp
from uuidv7_kit.kernel.logging import get_logger
from uuidv7_kit.kernel.metrics import counter_overflows_total, fixed_generated
from uuidv7_kit.kernel.random import RandomSource, default_random_source

logger = get_logger(__name__)


class FixedTimestampGenerator:
    """
    UUIDv7 generator for explicit millisecond timestamps

    There is no clock to wait for, so there is no retry loop. Once both
    counters overflow for a timestamp, that timestamp is marked exhausted and
    every further call with it raises CounterExhausted without drawing more
    randomness, so no later identifier can sort below an earlier one. Any
    other timestamp starts fresh and clears the mark.
    """

    def __init__(self, random_source: RandomSource | None = None) -> None:
        self.random_source = random_source or default_random_source
        self._state = GeneratorState()
        self._lock = threading.Lock()

    @property
    def state(self) -> GeneratorState:
        return self._state

    def generate(self, timestamp: int) -> str:
        """
        Generate an identifier embedding the given timestamp

        Args:
            timestamp: Milliseconds since the Unix epoch, 0 to 2 ** 48 - 1

        Raises:
            InvalidTimestamp: If timestamp does not fit in 48 bits
            CounterExhausted: If both counters overflowed for this timestamp,
                now or on an earlier call
        """
        if isinstance(timestamp, bool) or not isinstance(timestamp, int):
            raise InvalidTimestamp(timestamp)
        if timestamp < 0 or timestamp > MAX_TIMESTAMP:
            raise InvalidTimestamp(timestamp)

        with self._lock:
            state = self._state
            if timestamp != state.last_timestamp:
                rand_a, rand_b = self.random_source.rand_parts()
            elif state.exhausted:
                raise CounterExhausted(timestamp)
            else:
                step = step_counters(state.last_rand_a, state.last_rand_b, self.random_source)
                if step.rand_b_overflowed:
                    counter_overflows_total.labels(
                        generator="fixed_timestamp", counter="rand_b"
                    ).inc()
                if step.exhausted:
                    counter_overflows_total.labels(
                        generator="fixed_timestamp", counter="rand_a"
                    ).inc()
                    logger.error("Counters exhausted for fixed timestamp", timestamp=timestamp)
                    self._state = replace(state, exhausted=True)
                    raise CounterExhausted(timestamp)
                rand_a, rand_b = step.rand_a, step.rand_b

            self._state = GeneratorState(
                last_timestamp=timestamp,
                last_rand_a=rand_a,
                last_rand_b=rand_b,
            )

        fixed_generated.inc()
        return to_canonical(pack(timestamp, rand_a, rand_b))
