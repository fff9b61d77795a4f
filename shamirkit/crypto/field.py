"""Prime-field arithmetic F_p.

The modulus is passed explicitly: shamirkit picks the field per secret,
so there is no global PRIME.
"""

from __future__ import annotations

from typing import Tuple

from shamirkit.errors import NotInvertible


def add(a: int, b: int, prime: int) -> int:
    """Field addition."""
    return (a + b) % prime


def sub(a: int, b: int, prime: int) -> int:
    """Field subtraction."""
    return (a - b) % prime


def mul(a: int, b: int, prime: int) -> int:
    """Field multiplication."""
    return (a * b) % prime


def neg(a: int, prime: int) -> int:
    """Additive inverse."""
    return (-a) % prime


def reduce(a: int, prime: int) -> int:
    """Reduce an integer into [0, prime)."""
    return a % prime


def egcd(a: int, b: int) -> Tuple[int, int, int]:
    """Extended Euclid: return ``(g, x, y)`` with ``a*x + b*y == g``.

    Iterative, but yields the same Bezout coefficients as the textbook
    recursion ``egcd(b % a, a)``.
    """
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while old_r != 0:
        q = r // old_r
        old_r, r = r - q * old_r, old_r
        old_s, s = s - q * old_s, old_s
        old_t, t = t - q * old_t, old_t
    return r, s, t


def inv(k: int, prime: int) -> int:
    """Multiplicative inverse of *k* mod *prime* via extended Euclid."""
    k = k % prime
    g, _, y = egcd(prime, abs(k))
    if g != 1:
        raise NotInvertible(f"{k} has no inverse modulo the field prime")
    return (prime + y) % prime


mod_inverse = inv
