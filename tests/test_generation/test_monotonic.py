"""
Tests for the clock-driven monotonic generator

Verifies the generation state machine with a fake clock:
- Fresh random fields on a new millisecond
- Counter increments within a millisecond (RFC 9562 method 2)
- Waiting out clock regressions and counter exhaustion
- No state change when waiting times out
"""

import threading

import pytest

from uuidv7_kit.codec.fields import (
    MAX_RAND_A,
    MAX_RAND_B,
    from_canonical,
    pack,
    to_canonical,
    unpack,
)
from uuidv7_kit.codec.validator import is_valid, timestamp_of
from uuidv7_kit.generation.monotonic import MonotonicGenerator
from uuidv7_kit.kernel.errors import ClockWaitTimeout, InvalidArgument
from uuidv7_kit.kernel.policy import GeneratorPolicy
from uuidv7_kit.kernel.random import ScriptedRandomSource
from uuidv7_kit.kernel.time import TestClock
from tests.helpers import REFERENCE_MS, assert_strictly_increasing


@pytest.fixture
def generator(
    test_clock: TestClock, scripted_random: ScriptedRandomSource, policy: GeneratorPolicy
) -> MonotonicGenerator:
    return MonotonicGenerator(test_clock, scripted_random, policy)


def test_first_identifier_uses_fresh_random_parts(
    generator: MonotonicGenerator, scripted_random: ScriptedRandomSource
) -> None:
    scripted_random.push_parts(5, 100)

    identifier = generator.generate()

    assert identifier == to_canonical(pack(REFERENCE_MS, 5, 100))
    assert generator.state.last_timestamp == REFERENCE_MS
    assert generator.state.last_value == pack(REFERENCE_MS, 5, 100)


def test_same_millisecond_increments_rand_b(
    generator: MonotonicGenerator, scripted_random: ScriptedRandomSource
) -> None:
    scripted_random.push_parts(5, 100)
    scripted_random.push_steps(7)

    first = generator.generate()
    second = generator.generate()

    assert second == to_canonical(pack(REFERENCE_MS, 5, 107))
    assert first < second


def test_new_millisecond_redraws_random_parts(
    generator: MonotonicGenerator, test_clock: TestClock, scripted_random: ScriptedRandomSource
) -> None:
    """Counters restart from fresh randomness, even if smaller than before"""
    scripted_random.push_parts(4000, MAX_RAND_B)
    scripted_random.push_parts(1, 1)

    first = generator.generate()
    test_clock.advance_ms()
    second = generator.generate()

    assert unpack(from_canonical(second)).rand_a == 1
    assert timestamp_of(second) == REFERENCE_MS + 1
    assert first < second


def test_rand_b_overflow_increments_rand_a(
    generator: MonotonicGenerator, scripted_random: ScriptedRandomSource
) -> None:
    scripted_random.push_parts(5, MAX_RAND_B - 3)
    scripted_random.push_parts(0, 42)
    scripted_random.push_steps(10)

    first = generator.generate()
    second = generator.generate()

    assert second == to_canonical(pack(REFERENCE_MS, 6, 42))
    assert first < second


def test_exhausted_counters_wait_for_next_millisecond(
    generator: MonotonicGenerator, test_clock: TestClock, scripted_random: ScriptedRandomSource
) -> None:
    """With both counters spent, the only way forward is a new millisecond"""
    scripted_random.push_parts(MAX_RAND_A, MAX_RAND_B)
    scripted_random.push_parts(3, 3)

    first = generator.generate()
    second = generator.generate()

    assert timestamp_of(second) > REFERENCE_MS
    assert test_clock.sleeps, "generator should have slept on the clock"
    assert first < second


def test_clock_regression_waits_until_clock_catches_up(
    generator: MonotonicGenerator, test_clock: TestClock
) -> None:
    first = generator.generate()
    test_clock.rewind_ms(10)

    second = generator.generate()

    assert timestamp_of(second) >= REFERENCE_MS
    assert test_clock.now_ms() >= REFERENCE_MS
    assert len(test_clock.sleeps) >= 2
    assert first < second


def test_stuck_clock_times_out_without_mutating_state(scripted_random: ScriptedRandomSource) -> None:
    clock = TestClock(REFERENCE_MS, sleep_advances=False)
    policy = GeneratorPolicy(max_clock_wait_seconds=None, max_clock_wait_attempts=3)
    generator = MonotonicGenerator(clock, scripted_random, policy)
    generator.generate()
    state_before = generator.state
    clock.rewind_ms(1)

    with pytest.raises(ClockWaitTimeout) as exc_info:
        generator.generate()

    assert exc_info.value.attempts == 3
    assert exc_info.value.last_timestamp == REFERENCE_MS
    assert exc_info.value.current_timestamp == REFERENCE_MS - 1
    assert generator.state is state_before

    # Clock recovers: generation resumes and stays ordered
    clock.set_ms(REFERENCE_MS + 1)
    assert timestamp_of(generator.generate()) == REFERENCE_MS + 1


def test_non_increasing_candidate_is_retried(
    generator: MonotonicGenerator, scripted_random: ScriptedRandomSource
) -> None:
    """A zero step would repeat the last value; the generator must not emit it"""
    scripted_random.push_parts(5, 100)
    scripted_random.push_steps(0)

    first = generator.generate()
    second = generator.generate()

    assert second != first
    assert first < second


def test_timestamp_matches_clock(generator: MonotonicGenerator, test_clock: TestClock) -> None:
    for _ in range(5):
        test_clock.advance_ms(17)
        assert timestamp_of(generator.generate()) == test_clock.now_ms()


@pytest.mark.parametrize("count", [0, -1])
def test_generate_many_rejects_non_positive_count(
    generator: MonotonicGenerator, count: int
) -> None:
    with pytest.raises(InvalidArgument) as exc_info:
        generator.generate_many(count)
    assert exc_info.value.argument == "count"
    assert generator.state.last_timestamp is None


def test_generate_many_with_system_clock_is_strictly_increasing() -> None:
    ids = MonotonicGenerator().generate_many(5000)

    assert len(ids) == 5000
    assert len(set(ids)) == 5000
    assert all(is_valid(identifier) for identifier in ids)
    assert_strictly_increasing(ids)


def test_generate_many_within_one_millisecond(generator: MonotonicGenerator) -> None:
    """Frozen clock: every identifier shares the timestamp and still increases"""
    ids = generator.generate_many(1000)

    assert {timestamp_of(identifier) for identifier in ids} == {REFERENCE_MS}
    assert_strictly_increasing(ids)


def test_concurrent_callers_never_collide() -> None:
    generator = MonotonicGenerator()
    results: list[list[str]] = [[] for _ in range(4)]

    def worker(slot: int) -> None:
        for _ in range(500):
            results[slot].append(generator.generate())

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    combined = [identifier for ids in results for identifier in ids]
    assert len(set(combined)) == len(combined)
    for ids in results:
        assert_strictly_increasing(ids)
