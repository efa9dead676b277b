"""
Base-N transcoding of UUIDv7 identifiers

Turns the canonical 36-character form into a compact string over a custom
alphabet and back. Encoding is plain positional notation: no fixed width,
no leading zero digits. Decoding always restores the fixed 32-digit hex
width, since the positional form drops leading zero nibbles.

Fun fact: Base58 was designed for Bitcoin addresses - it drops 0, O, I and l
so a human copying an identifier by hand cannot confuse them.
"""

from dataclasses import dataclass

from uuidv7_kit.codec.alphabet import BASE58, Alphabet
from uuidv7_kit.codec.fields import from_canonical, to_canonical
from uuidv7_kit.codec.validator import is_valid
from uuidv7_kit.kernel.errors import DecodeError, InvalidIdentifier, UUIDv7Error
from uuidv7_kit.kernel.metrics import decode_failures_total


@dataclass(frozen=True)
class DecodeSuccess:
    identifier: str


@dataclass(frozen=True)
class DecodeFailure:
    error: UUIDv7Error

    @property
    def reason(self) -> str:
        if isinstance(self.error, DecodeError):
            return "unknown_character"
        return "invalid_identifier"


DecodeResult = DecodeSuccess | DecodeFailure


class Transcoder:
    """
    Encoder/decoder between canonical UUIDv7 strings and an alphabet

    Example:
        >>> t = Transcoder()
        >>> encoded = t.encode("018f0760-4a87-737d-9889-b832d3dcce74")
        >>> t.decode(encoded)
        '018f0760-4a87-737d-9889-b832d3dcce74'
    """

    def __init__(self, alphabet: Alphabet | str = BASE58) -> None:
        """
        Args:
            alphabet: Alphabet instance or raw symbol string (validated here)

        Raises:
            InvalidAlphabet: If a raw string is not a valid alphabet
        """
        self.alphabet = alphabet if isinstance(alphabet, Alphabet) else Alphabet(alphabet)

    def encode(self, identifier: str) -> str:
        """
        Encode a canonical UUIDv7 string (any hex case)

        Raises:
            InvalidIdentifier: If identifier is not a valid UUIDv7
        """
        if not is_valid(identifier):
            raise InvalidIdentifier(identifier)

        value = from_canonical(identifier)
        base = self.alphabet.base
        digits: list[str] = []
        while value > 0:
            value, remainder = divmod(value, base)
            digits.append(self.alphabet.symbol(remainder))
        return "".join(reversed(digits))

    def try_decode(self, encoded: str) -> DecodeResult:
        """Decode without raising; the failure carries the reason"""
        base = self.alphabet.base
        value = 0
        for index, char in enumerate(encoded):
            digit = self.alphabet.digit(char)
            if digit is None:
                return self._fail(DecodeError(encoded, char, index))
            value = value * base + digit

        identifier = to_canonical(value)
        if not is_valid(identifier):
            return self._fail(InvalidIdentifier(identifier))
        return DecodeSuccess(identifier)

    def decode(self, encoded: str) -> str | None:
        """Decode an encoded identifier, or return None if it is not decodable"""
        result = self.try_decode(encoded)
        if isinstance(result, DecodeFailure):
            return None
        return result.identifier

    def decode_or_raise(self, encoded: str) -> str:
        """
        Decode an encoded identifier

        Raises:
            DecodeError: If a character is not part of the alphabet
            InvalidIdentifier: If the decoded value is not a valid UUIDv7
        """
        result = self.try_decode(encoded)
        if isinstance(result, DecodeFailure):
            raise result.error
        return result.identifier

    @staticmethod
    def _fail(error: UUIDv7Error) -> DecodeFailure:
        failure = DecodeFailure(error)
        decode_failures_total.labels(reason=failure.reason).inc()
        return failure
