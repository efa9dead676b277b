"""
Kernel - injectable collaborators and shared infrastructure

Clock, random source, wait policy, errors, logging and metrics. Everything
with side effects lives here so the codec and generation code stays pure
and testable.
"""

from uuidv7_kit.kernel.errors import (
    ClockWaitTimeout,
    CounterExhausted,
    DecodeError,
    InvalidAlphabet,
    InvalidArgument,
    InvalidIdentifier,
    InvalidTimestamp,
    UUIDv7Error,
)
from uuidv7_kit.kernel.policy import GeneratorPolicy
from uuidv7_kit.kernel.random import (
    RandomParts,
    RandomSource,
    ScriptedRandomSource,
    SecureRandomSource,
)
from uuidv7_kit.kernel.time import Clock, SystemClock, TestClock

__all__ = [
    # Time
    "Clock",
    "SystemClock",
    "TestClock",
    # Randomness
    "RandomParts",
    "RandomSource",
    "SecureRandomSource",
    "ScriptedRandomSource",
    # Policy
    "GeneratorPolicy",
    # Errors
    "UUIDv7Error",
    "InvalidArgument",
    "InvalidTimestamp",
    "InvalidAlphabet",
    "InvalidIdentifier",
    "DecodeError",
    "ClockWaitTimeout",
    "CounterExhausted",
]
