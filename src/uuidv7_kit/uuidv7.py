"""
UUIDv7 - Main façade class

Bundles a monotonic generator with a transcoder so most callers need a
single object. Module-level shortcuts share one lazily-created default
instance using the Base58 alphabet.

Example:
    >>> from uuidv7_kit import UUIDv7
    >>> ids = UUIDv7()
    >>> id_ = ids.gen()
    >>> ids.decode(ids.encode(id_)) == id_
    True
    >>> UUIDv7.timestamp("018f0760-4a87-737d-9889-b832d3dcce74")
    1713815702151
"""

import threading
from datetime import datetime

from uuidv7_kit.codec.alphabet import BASE58, Alphabet
from uuidv7_kit.codec.transcoder import Transcoder
from uuidv7_kit.codec.validator import date_of, is_valid, timestamp_of
from uuidv7_kit.generation.monotonic import MonotonicGenerator
from uuidv7_kit.kernel.policy import GeneratorPolicy
from uuidv7_kit.kernel.random import RandomSource
from uuidv7_kit.kernel.time import Clock


class UUIDv7:
    """
    UUIDv7 main façade

    Provides generation, encoding/decoding and inspection:
    - gen / gen_many: strictly increasing identifiers
    - encode / decode / decode_or_raise: compact custom-alphabet form
    - is_valid / timestamp / date: structural checks and time extraction
    """

    def __init__(
        self,
        encode_alphabet: Alphabet | str | None = None,
        *,
        clock: Clock | None = None,
        random_source: RandomSource | None = None,
        policy: GeneratorPolicy | None = None,
    ) -> None:
        """
        Args:
            encode_alphabet: 16-64 distinct characters (defaults to Base58)
            clock: Millisecond clock (defaults to the system clock)
            random_source: Random bit provider (defaults to a secure source)
            policy: Clock wait bounds

        Raises:
            InvalidAlphabet: If encode_alphabet is invalid
        """
        self.transcoder = Transcoder(BASE58 if encode_alphabet is None else encode_alphabet)
        self.generator = MonotonicGenerator(clock, random_source, policy)

    def gen(self) -> str:
        return self.generator.generate()

    def gen_many(self, amount: int) -> list[str]:
        return self.generator.generate_many(amount)

    def encode(self, identifier: str) -> str:
        return self.transcoder.encode(identifier)

    def decode(self, encoded: str) -> str | None:
        return self.transcoder.decode(encoded)

    def decode_or_raise(self, encoded: str) -> str:
        return self.transcoder.decode_or_raise(encoded)

    @staticmethod
    def is_valid(identifier: str) -> bool:
        return is_valid(identifier)

    @staticmethod
    def timestamp(identifier: str) -> int | None:
        return timestamp_of(identifier)

    @staticmethod
    def date(identifier: str) -> datetime | None:
        return date_of(identifier)


_default: UUIDv7 | None = None
_default_lock = threading.Lock()


def default_instance() -> UUIDv7:
    """Shared instance behind the module-level shortcuts"""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = UUIDv7()
    return _default


def uuidv7() -> str:
    """Generate a UUIDv7 with the default instance"""
    return default_instance().gen()


def encode_uuidv7(identifier: str) -> str:
    """Encode a UUIDv7 with the default Base58 alphabet"""
    return default_instance().encode(identifier)


def decode_uuidv7(encoded: str) -> str | None:
    """Decode a Base58-encoded UUIDv7, or None if it is not valid"""
    return default_instance().decode(encoded)


def decode_or_raise_uuidv7(encoded: str) -> str:
    """Decode a Base58-encoded UUIDv7, raising if it is not valid"""
    return default_instance().decode_or_raise(encoded)
