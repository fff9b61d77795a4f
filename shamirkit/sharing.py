"""Shamir (K-of-N) secret sharing for integers and strings.

API
---
split(secret, threshold, num_shares)   -> list of Point  with x = 1..n
reconstruct(points)                    -> secret  (needs >= threshold points)
try_split / try_reconstruct            -> Ok(value) | Err(error)

String secrets go through a :class:`Charset`; the same charset must be
used on both ends, nothing records which one produced a set of shares.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Union

from shamirkit.codec.charset import Charset
from shamirkit.config import DEFAULT_CHARSET
from shamirkit.crypto.point import Point
from shamirkit.crypto.polynomial import (
    RandBelow,
    modular_lagrange_interpolation,
    points_from_secret,
)
from shamirkit.errors import InvalidArgument
from shamirkit.result import Result, capture

logger = logging.getLogger(__name__)

Secret = Union[int, str]

_default_charset: Optional[Charset] = None


def default_charset() -> Charset:
    """Charset over printable ASCII, used for string secrets by default."""
    global _default_charset
    if _default_charset is None:
        _default_charset = Charset(DEFAULT_CHARSET)
    return _default_charset


def _secret_to_int(secret: Secret, charset: Optional[Charset]) -> int:
    if isinstance(secret, str):
        return (charset or default_charset()).encode(secret)
    if isinstance(secret, bool) or not isinstance(secret, int):
        raise InvalidArgument(f"Secret must be an int or str, got {type(secret).__name__}")
    if charset is not None:
        raise InvalidArgument("A charset only applies to string secrets")
    return secret


def split(
    secret: Secret,
    threshold: int,
    num_shares: int,
    charset: Optional[Charset] = None,
    randbelow: Optional[RandBelow] = None,
) -> List[Point]:
    """Split *secret* into *num_shares* points, any *threshold* of which
    reconstruct it.
    """
    secret_int = _secret_to_int(secret, charset)
    shares = points_from_secret(secret_int, threshold, num_shares, randbelow)
    logger.debug("Split secret into %d shares, threshold %d", num_shares, threshold)
    return shares


def reconstruct(
    points: Iterable[Point],
    charset: Optional[Charset] = None,
    as_string: bool = False,
    prime: Optional[int] = None,
) -> Secret:
    """Recover the secret from *points*.

    Returns an ``int`` unless *as_string* is set or a *charset* is given,
    in which case the value is decoded back to a string.
    """
    secret_int = modular_lagrange_interpolation(list(points), prime)
    if charset is None and not as_string:
        return secret_int
    return (charset or default_charset()).decode(secret_int)


def split_to_strings(
    secret: Secret,
    threshold: int,
    num_shares: int,
    charset: Optional[Charset] = None,
) -> List[str]:
    """Like :func:`split` but returns ``"<x>-<hex y>"`` share strings."""
    return [p.to_share_string() for p in split(secret, threshold, num_shares, charset)]


def reconstruct_from_strings(
    shares: Sequence[str],
    charset: Optional[Charset] = None,
    as_string: bool = False,
) -> Secret:
    points = [Point.from_share_string(s) for s in shares]
    return reconstruct(points, charset=charset, as_string=as_string)


def try_split(*args, **kwargs) -> Result:
    """:func:`split`, returning ``Ok(points)`` or ``Err(error)``."""
    return capture(split, *args, **kwargs)


def try_reconstruct(*args, **kwargs) -> Result:
    """:func:`reconstruct`, returning ``Ok(secret)`` or ``Err(error)``."""
    return capture(reconstruct, *args, **kwargs)
