"""
Structural validation and timestamp extraction for UUIDv7 strings
"""

import re
from datetime import datetime, timedelta, timezone

from uuidv7_kit.codec.fields import UUIDv7Fields, from_canonical, unpack

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

UUIDV7_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-7[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def is_valid(identifier: str) -> bool:
    """
    Check whether a string has the UUIDv7 shape

    Accepts upper- and lowercase hex. The version nibble must be 7 and the
    variant nibble one of 8, 9, a, b.
    """
    # fullmatch so a trailing newline is not accepted by "$"
    return isinstance(identifier, str) and UUIDV7_PATTERN.fullmatch(identifier) is not None


def fields_of(identifier: str) -> UUIDv7Fields | None:
    """Return the five bit fields, or None when the identifier is invalid"""
    if not is_valid(identifier):
        return None
    return unpack(from_canonical(identifier))


def timestamp_of(identifier: str) -> int | None:
    """
    Extract the embedded Unix timestamp in milliseconds

    Returns:
        The top 48 bits as an unsigned integer, or None if the identifier is invalid

    Example:
        >>> timestamp_of("018f0760-4a87-737d-9889-b832d3dcce74")
        1713815702151
    """
    if not is_valid(identifier):
        return None
    return int(identifier[:13].replace("-", ""), 16)


def date_of(identifier: str) -> datetime | None:
    """
    Extract the embedded timestamp as a UTC datetime

    Returns None if the identifier is invalid, and also when the timestamp
    lies past datetime.max: 48 bits of milliseconds reach year 10889, while
    datetime stops at year 9999. Use timestamp_of for the full range.
    """
    timestamp = timestamp_of(identifier)
    if timestamp is None:
        return None
    try:
        return EPOCH + timedelta(milliseconds=timestamp)
    except OverflowError:
        return None
