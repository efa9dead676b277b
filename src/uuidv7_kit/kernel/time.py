"""
Clock abstraction for deterministic testing

Generators read milliseconds since the Unix epoch through a Clock and wait
on it through the same object, so tests can drive regressions and
same-millisecond bursts without touching the system clock.

Fun fact: The 48-bit UUIDv7 timestamp runs out in the year 10889 - long
after anyone will care about millisecond ordering of today's events.
"""

import time
from typing import Protocol


class Clock(Protocol):
    """Protocol for millisecond clocks - allows deterministic testing"""

    def now_ms(self) -> int:
        """Return milliseconds since the Unix epoch"""
        ...

    def sleep(self, seconds: float) -> None:
        """Block for roughly the given number of seconds"""
        ...


class SystemClock:
    """Production clock backed by the system wall clock"""

    def now_ms(self) -> int:
        return time.time_ns() // 1_000_000

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)


class TestClock:
    """
    Controllable clock for deterministic tests

    Time only moves when a test moves it, or when a generator sleeps on it:
    sleeping advances the fake clock by the slept duration (at least 1 ms),
    which is exactly what a waiting generator needs to make progress.
    """

    __test__ = False  # not a pytest test class

    def __init__(self, initial_ms: int = 0, *, sleep_advances: bool = True) -> None:
        """
        Initialize with optional fixed time

        Args:
            initial_ms: Starting time in milliseconds (defaults to Unix epoch)
            sleep_advances: If False, sleep() leaves time frozen (simulates a stuck clock)
        """
        self._now_ms = initial_ms
        self.sleep_advances = sleep_advances
        self.sleeps: list[float] = []

    def now_ms(self) -> int:
        return self._now_ms

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        if self.sleep_advances:
            self._now_ms += max(1, int(seconds * 1000))

    def set_ms(self, value: int) -> None:
        """Set current time to a specific millisecond"""
        self._now_ms = value

    def advance_ms(self, ms: int = 1) -> None:
        """Advance time by the given milliseconds"""
        self._now_ms += ms

    def rewind_ms(self, ms: int) -> None:
        """Move time backwards, as an NTP correction would"""
        self._now_ms -= ms


# Global default clock
default_clock: Clock = SystemClock()
