"""
Encoding alphabets

An alphabet is the ordered digit set of a positional numeral system: the
symbol at index i stands for digit value i.
"""

from dataclasses import dataclass, field

from uuidv7_kit.kernel.errors import InvalidAlphabet

MIN_SYMBOLS = 16
MAX_SYMBOLS = 64

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"


@dataclass(frozen=True)
class Alphabet:
    """
    Validated, immutable symbol set of 16 to 64 distinct characters

    Raises:
        InvalidAlphabet: If the size is out of range or a symbol repeats
    """

    symbols: str
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.symbols, str):
            raise InvalidAlphabet(repr(self.symbols), "alphabet must be a string")
        if not MIN_SYMBOLS <= len(self.symbols) <= MAX_SYMBOLS:
            raise InvalidAlphabet(
                self.symbols,
                f"must be between {MIN_SYMBOLS} and {MAX_SYMBOLS} characters long, "
                f"got {len(self.symbols)}",
            )
        index = {symbol: i for i, symbol in enumerate(self.symbols)}
        if len(index) != len(self.symbols):
            duplicates = sorted({s for s in self.symbols if self.symbols.count(s) > 1})
            raise InvalidAlphabet(
                self.symbols, f"must not contain duplicate characters {duplicates}"
            )
        object.__setattr__(self, "_index", index)

    @property
    def base(self) -> int:
        return len(self.symbols)

    def symbol(self, digit: int) -> str:
        return self.symbols[digit]

    def digit(self, symbol: str) -> int | None:
        """Digit value of a symbol, or None if it is not in the alphabet"""
        return self._index.get(symbol)

    def __len__(self) -> int:
        return len(self.symbols)

    def __str__(self) -> str:
        return self.symbols


BASE58 = Alphabet(BASE58_ALPHABET)
