"""
Random source abstraction

Generators never call the operating system's randomness directly; they ask a
RandomSource for the two random fields of a fresh identifier and for the
counter step used within a millisecond.
"""

import secrets
import uuid
from collections.abc import Iterable
from typing import NamedTuple, Protocol

RAND_A_MASK = (1 << 12) - 1
RAND_B_MASK = (1 << 62) - 1
MAX_COUNTER_STEP = 1 << 32


class RandomParts(NamedTuple):
    """Freshly drawn rand_a (12 bits) and rand_b (62 bits)"""

    rand_a: int
    rand_b: int


class RandomSource(Protocol):
    """Protocol for random bit providers"""

    def rand_parts(self) -> RandomParts:
        """Return fresh 12-bit rand_a and 62-bit rand_b values"""
        ...

    def counter_step(self) -> int:
        """Return a uniform step in [1, 2 ** 32]"""
        ...


class SecureRandomSource:
    """
    Cryptographically secure random source

    The random fields are sliced out of a version-4 UUID: rand_a takes the 12
    bits right after the v4 version nibble, rand_b takes the 62 bits after
    the v4 variant bits. Both ranges are fully random in a v4 UUID.
    """

    def rand_parts(self) -> RandomParts:
        v4 = uuid.uuid4().int
        return RandomParts(rand_a=(v4 >> 64) & RAND_A_MASK, rand_b=v4 & RAND_B_MASK)

    def counter_step(self) -> int:
        return secrets.randbits(32) + 1


class ScriptedRandomSource:
    """
    Deterministic random source for tests

    Replays the given parts and steps in order. When a script runs out the
    source falls back to fixed values (parts) or a step of 1, so tests only
    need to script the draws they care about.
    """

    def __init__(
        self,
        parts: Iterable[tuple[int, int]] = (),
        steps: Iterable[int] = (),
        *,
        default_parts: tuple[int, int] = (0, 0),
        default_step: int = 1,
    ) -> None:
        self._parts = [RandomParts(*p) for p in parts]
        self._steps = list(steps)
        self.default_parts = RandomParts(*default_parts)
        self.default_step = default_step
        self.parts_drawn = 0
        self.steps_drawn = 0

    def push_parts(self, rand_a: int, rand_b: int) -> None:
        self._parts.append(RandomParts(rand_a, rand_b))

    def push_steps(self, *steps: int) -> None:
        self._steps.extend(steps)

    def rand_parts(self) -> RandomParts:
        self.parts_drawn += 1
        if self._parts:
            return self._parts.pop(0)
        return self.default_parts

    def counter_step(self) -> int:
        self.steps_drawn += 1
        if self._steps:
            return self._steps.pop(0)
        return self.default_step


# Global default random source
default_random_source: RandomSource = SecureRandomSource()
