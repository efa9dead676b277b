"""
UUIDv7 field layout

Pure bit-layout transforms between the five UUIDv7 fields, the 128-bit
integer and the canonical hyphenated hex string. Nothing here validates;
callers are expected to hand in values that already fit their fields.

Layout (most significant first):
| unix_ts_ms (48) | ver (4) | rand_a (12) | var (2) | rand_b (62) |
"""

from typing import NamedTuple

VERSION = 0b0111
VARIANT = 0b10

TIMESTAMP_BITS = 48
RAND_A_BITS = 12
RAND_B_BITS = 62

MAX_TIMESTAMP = (1 << TIMESTAMP_BITS) - 1
MAX_RAND_A = (1 << RAND_A_BITS) - 1
MAX_RAND_B = (1 << RAND_B_BITS) - 1

HEX_DIGITS = 32


class UUIDv7Fields(NamedTuple):
    """The five bit fields of a UUIDv7 value"""

    unix_ts_ms: int
    ver: int
    rand_a: int
    var: int
    rand_b: int


def pack(timestamp: int, rand_a: int, rand_b: int) -> int:
    """Assemble a 128-bit UUIDv7 integer from its variable fields"""
    # [unix_ts_ms] 48 bits
    value = timestamp << 80
    # [ver] "7" - 4 bits
    value |= VERSION << 76
    # [rand_a] secondary counter - 12 bits
    value |= rand_a << 64
    # [var] 0b10 - 2 bits
    value |= VARIANT << 62
    # [rand_b] primary counter - 62 bits
    value |= rand_b
    return value


def unpack(value: int) -> UUIDv7Fields:
    """Split a 128-bit integer into the five UUIDv7 fields"""
    return UUIDv7Fields(
        unix_ts_ms=value >> 80,
        ver=(value >> 76) & 0xF,
        rand_a=(value >> 64) & MAX_RAND_A,
        var=(value >> 62) & 0b11,
        rand_b=value & MAX_RAND_B,
    )


def to_canonical(value: int) -> str:
    """Render a 128-bit integer as 8-4-4-4-12 lowercase hex, zero-padded"""
    h = f"{value:032x}"
    return f"{h[:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:]}"


def from_canonical(identifier: str) -> int:
    """Parse the hex digits of a hyphenated identifier into an integer"""
    return int(identifier.replace("-", ""), 16)
