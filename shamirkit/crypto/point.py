"""Share points and their textual form.

A share travels as ``"<x>-<y in lowercase hex>"``, e.g. ``"3-1f0a"``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from shamirkit.config import SHARE_SEPARATOR
from shamirkit.errors import InvalidArgument, InvalidShare


def _is_decimal(text: str) -> bool:
    return text.isascii() and text.isdecimal()


def _is_non_negative_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __post_init__(self) -> None:
        if not (_is_non_negative_int(self.x) and _is_non_negative_int(self.y)):
            raise InvalidArgument(
                f"Point coordinates must be non-negative integers, got ({self.x!r}, {self.y!r})"
            )

    def __iter__(self):
        yield self.x
        yield self.y

    def to_share_string(self) -> str:
        return f"{self.x}{SHARE_SEPARATOR}{self.y:x}"

    @classmethod
    def from_share_string(cls, text: str) -> "Point":
        """Parse ``"<x>-<hex y>"`` back into a point."""
        x_part, sep, y_part = text.strip().partition(SHARE_SEPARATOR)
        if not sep or not _is_decimal(x_part) or not y_part:
            raise InvalidShare(f"Malformed share: {text!r}")
        try:
            y = int(y_part, 16)
        except ValueError:
            raise InvalidShare(f"Malformed share value: {text!r}") from None
        if y < 0:
            raise InvalidShare(f"Malformed share value: {text!r}")
        x = int(x_part)
        if x < 1:
            raise InvalidShare(f"Share x-coordinate must be at least 1: {text!r}")
        return cls(x, y)

    @staticmethod
    def transpose(points: Iterable["Point"]) -> Tuple[List[int], List[int]]:
        """Split points into ``([x...], [y...])``."""
        xs: List[int] = []
        ys: List[int] = []
        for p in points:
            xs.append(p.x)
            ys.append(p.y)
        return xs, ys
