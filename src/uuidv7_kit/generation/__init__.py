"""
Generation - clock-driven and fixed-timestamp UUIDv7 generators
"""

from uuidv7_kit.generation.fixed import FixedTimestampGenerator
from uuidv7_kit.generation.monotonic import MonotonicGenerator
from uuidv7_kit.generation.state import GeneratorState

__all__ = ["MonotonicGenerator", "FixedTimestampGenerator", "GeneratorState"]
