"""
Custom exceptions for uuidv7-kit

Every error raised by the library is local, synchronous and final: the
library never retries on the caller's behalf once one of these escapes.

Fun fact: RFC 4122 was published in 2005 and stayed the UUID reference for
almost twenty years before RFC 9562 replaced it and introduced version 7.
"""


class UUIDv7Error(Exception):
    """Base exception for all uuidv7-kit errors"""

    pass


class InvalidArgument(UUIDv7Error):
    """Raised when an argument is outside its accepted domain (e.g. batch size)"""

    def __init__(self, argument: str, value: object, message: str = "") -> None:
        self.argument = argument
        self.value = value
        super().__init__(message or f"Invalid value for {argument}: {value!r}")


class InvalidTimestamp(UUIDv7Error):
    """Raised when a caller-supplied timestamp does not fit in 48 bits"""

    def __init__(self, timestamp: int) -> None:
        self.timestamp = timestamp
        super().__init__(
            f"Timestamp {timestamp} is out of range - "
            "custom timestamp must be between 0 and 2 ** 48 - 1"
        )


class InvalidAlphabet(UUIDv7Error):
    """Raised when an encoding alphabet has the wrong size or repeats a symbol"""

    def __init__(self, alphabet: str, reason: str) -> None:
        self.alphabet = alphabet
        self.reason = reason
        super().__init__(f"Invalid encode alphabet {alphabet!r}: {reason}")


class InvalidIdentifier(UUIDv7Error):
    """Raised when a string is not a structurally valid UUIDv7"""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Not a valid UUIDv7: {identifier!r}")


class DecodeError(UUIDv7Error):
    """
    Raised when an encoded identifier contains a symbol outside the alphabet

    Carries the offending character and its zero-based position so callers
    can point at the exact typo.
    """

    def __init__(self, encoded: str, character: str, index: int) -> None:
        self.encoded = encoded
        self.character = character
        self.index = index
        super().__init__(
            f"Cannot decode {encoded!r}: character {character!r} at index {index} "
            "is not part of the alphabet"
        )


class ClockWaitTimeout(UUIDv7Error):
    """
    Raised when the clock does not advance within the configured wait bound

    No identifier is emitted and the generator state is left untouched, so
    the next call starts from the same last timestamp.
    """

    def __init__(self, last_timestamp: int, current_timestamp: int, attempts: int) -> None:
        self.last_timestamp = last_timestamp
        self.current_timestamp = current_timestamp
        self.attempts = attempts
        super().__init__(
            f"Clock did not advance past {last_timestamp} ms after {attempts} attempts "
            f"(last reading: {current_timestamp} ms)"
        )


class CounterExhausted(UUIDv7Error):
    """Raised when both rand_a and rand_b counters overflow at a fixed timestamp"""

    def __init__(self, timestamp: int) -> None:
        self.timestamp = timestamp
        super().__init__(
            f"Counters exhausted at timestamp {timestamp} - "
            "no further monotonic identifiers exist for this millisecond"
        )
