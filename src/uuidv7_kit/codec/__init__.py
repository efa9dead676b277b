"""
Codec - bit layout, validation and base-N transcoding of UUIDv7 strings
"""

from uuidv7_kit.codec.alphabet import BASE58, BASE58_ALPHABET, Alphabet
from uuidv7_kit.codec.fields import UUIDv7Fields, from_canonical, pack, to_canonical, unpack
from uuidv7_kit.codec.transcoder import DecodeFailure, DecodeSuccess, Transcoder
from uuidv7_kit.codec.validator import date_of, fields_of, is_valid, timestamp_of

__all__ = [
    "Alphabet",
    "BASE58",
    "BASE58_ALPHABET",
    "UUIDv7Fields",
    "pack",
    "unpack",
    "to_canonical",
    "from_canonical",
    "Transcoder",
    "DecodeSuccess",
    "DecodeFailure",
    "is_valid",
    "fields_of",
    "timestamp_of",
    "date_of",
]
