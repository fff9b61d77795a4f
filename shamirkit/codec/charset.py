"""Strings over an alphabet <-> non-negative integers.

A string is read as a number in base ``len(alphabet) + 1``, most
significant symbol first.  Digit 0 is held by a padding symbol that never
belongs to a caller's alphabet, so no encoded string has a leading zero
digit and ``decode(encode(s)) == s`` holds for every ``s``, including
strings that start with the alphabet's first symbol.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Union

from shamirkit.config import HEX_CHARSET
from shamirkit.errors import IndexOutOfRange, InvalidArgument, InvalidSymbol

PADDING = "\x00"


class Charset:
    """Positional numeral system over a declared alphabet."""

    def __init__(self, alphabet: Union[str, Iterable[str]]) -> None:
        symbols: List[str] = [PADDING]
        for symbol in alphabet:
            if symbol != PADDING and symbol not in symbols:
                symbols.append(symbol)
        if len(symbols) == 1:
            raise InvalidArgument("Alphabet must contain at least one symbol")
        self._symbols = tuple(symbols)
        self._index: Dict[str, int] = {s: i for i, s in enumerate(symbols)}

    @property
    def alphabet(self) -> str:
        """The caller's symbols, without the padding digit."""
        return "".join(self._symbols[1:])

    @property
    def base(self) -> int:
        return len(self._symbols)

    def __len__(self) -> int:
        return self.base

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.alphabet!r})"

    def char_to_codepoint(self, symbol: str) -> int:
        try:
            return self._index[symbol]
        except KeyError:
            raise InvalidSymbol(f"Symbol {symbol!r} is not in the alphabet") from None

    def codepoint_to_char(self, codepoint: int) -> str:
        if not 0 <= codepoint < self.base:
            raise IndexOutOfRange(f"No symbol for digit {codepoint} in base {self.base}")
        return self._symbols[codepoint]

    def encode(self, text: str) -> int:
        """Integer value of *text*, most significant symbol first."""
        value = 0
        for symbol in text:
            value = value * self.base + self.char_to_codepoint(symbol)
        return value

    def decode(self, value: int) -> str:
        """Inverse of :meth:`encode`."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgument(f"Expected a non-negative integer, got {value!r}")
        if value < 0:
            raise InvalidArgument(f"Expected a non-negative integer, got {value}")
        out: List[str] = []
        while value > 0:
            value, digit = divmod(value, self.base)
            if digit == 0:
                raise InvalidArgument("Value is not the encoding of any string")
            out.append(self.codepoint_to_char(digit))
        return "".join(reversed(out))

    s_to_i = encode
    i_to_s = decode


class HexCharset(Charset):
    """Charset over the 16 lowercase hexadecimal digits."""

    def __init__(self) -> None:
        super().__init__(HEX_CHARSET)
