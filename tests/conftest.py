"""
Pytest configuration and shared fixtures

Fun fact: The name "conftest" comes from pytest's configuration testing
framework. Files named conftest.py are automatically discovered and their
fixtures are available to all tests in the same directory and subdirectories!
"""

import pytest

from uuidv7_kit.kernel.policy import GeneratorPolicy
from uuidv7_kit.kernel.random import ScriptedRandomSource
from uuidv7_kit.kernel.time import TestClock
from tests.helpers import REFERENCE_MS


@pytest.fixture
def test_clock() -> TestClock:
    """Provide a controllable clock frozen at the reference millisecond"""
    return TestClock(REFERENCE_MS)


@pytest.fixture
def scripted_random() -> ScriptedRandomSource:
    """
    Provide a deterministic random source

    Unscripted draws return parts (0, 0) and a counter step of 1.
    """
    return ScriptedRandomSource()


@pytest.fixture
def policy() -> GeneratorPolicy:
    """Provide a wait policy bounded by attempts, independent of wall time"""
    return GeneratorPolicy(max_clock_wait_seconds=None, max_clock_wait_attempts=50)
