"""
Generator state and the same-millisecond counter step

Each generator owns one immutable GeneratorState snapshot and replaces it
wholesale after a successful generation, so a failed or retried attempt can
never leave half-updated counters behind.

Monotonic Random (RFC 9562, section 6.2, method 2): within one millisecond
rand_b is a counter advanced by a random step in [1, 2 ** 32]; when it
overflows 62 bits it is re-seeded and rand_a becomes a 12-bit carry counter.
"""

from dataclasses import dataclass
from typing import NamedTuple

from uuidv7_kit.codec.fields import MAX_RAND_A, MAX_RAND_B
from uuidv7_kit.kernel.random import RandomSource


@dataclass(frozen=True)
class GeneratorState:
    """
    Snapshot of what a generator emitted last

    last_timestamp is None until the first identifier is generated.
    last_value is only tracked by the clock-driven generator. exhausted marks
    last_timestamp as having no counter values left; only the fixed-timestamp
    generator sets it, and any other timestamp clears it.
    """

    last_timestamp: int | None = None
    last_rand_a: int = 0
    last_rand_b: int = 0
    last_value: int | None = None
    exhausted: bool = False


class CounterStep(NamedTuple):
    """Outcome of advancing the counters within one timestamp"""

    rand_a: int
    rand_b: int
    rand_b_overflowed: bool
    exhausted: bool


def step_counters(rand_a: int, rand_b: int, random_source: RandomSource) -> CounterStep:
    """
    Advance (rand_a, rand_b) for another identifier in the same millisecond

    rand_b grows by a random step. On rand_b overflow it is redrawn and
    rand_a is incremented. If rand_a overflows too the step is exhausted and
    the returned counters must not be used.
    """
    next_b = rand_b + random_source.counter_step()
    if next_b <= MAX_RAND_B:
        return CounterStep(rand_a, next_b, rand_b_overflowed=False, exhausted=False)

    next_a = rand_a + 1
    if next_a > MAX_RAND_A:
        return CounterStep(next_a, next_b, rand_b_overflowed=True, exhausted=True)

    return CounterStep(
        next_a,
        random_source.rand_parts().rand_b,
        rand_b_overflowed=True,
        exhausted=False,
    )
