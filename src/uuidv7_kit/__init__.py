"""
uuidv7-kit - Monotonic UUIDv7 generation and custom-alphabet encoding

Generates RFC 9562 version-7 identifiers that sort by creation time and
stay strictly increasing within one generator, and transcodes them to and
from compact strings over any alphabet of 16 to 64 symbols.

Fun fact: A UUIDv7 leaves 74 bits to randomness and counters, so one
generator can hand out trillions of identifiers inside a single millisecond
before it has to wait for the clock.
"""

from uuidv7_kit.codec.alphabet import BASE58_ALPHABET, Alphabet
from uuidv7_kit.codec.transcoder import Transcoder
from uuidv7_kit.codec.validator import date_of, is_valid, timestamp_of
from uuidv7_kit.generation.fixed import FixedTimestampGenerator
from uuidv7_kit.generation.monotonic import MonotonicGenerator
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
from uuidv7_kit.uuidv7 import (
    UUIDv7,
    decode_or_raise_uuidv7,
    decode_uuidv7,
    encode_uuidv7,
    uuidv7,
)

__version__ = "0.1.0"
__all__ = [
    "UUIDv7",
    "uuidv7",
    "encode_uuidv7",
    "decode_uuidv7",
    "decode_or_raise_uuidv7",
    "MonotonicGenerator",
    "FixedTimestampGenerator",
    "Transcoder",
    "Alphabet",
    "BASE58_ALPHABET",
    "is_valid",
    "timestamp_of",
    "date_of",
    "UUIDv7Error",
    "InvalidArgument",
    "InvalidTimestamp",
    "InvalidAlphabet",
    "InvalidIdentifier",
    "DecodeError",
    "ClockWaitTimeout",
    "CounterExhausted",
    "__version__",
]
