"""Random polynomials over F_p and Shamir (K-of-N) sharing on top of them.

API
---
Polynomial.random(degree, intercept, upper_bound)  -> Polynomial
Polynomial.points(num_points, prime)               -> [Point(x, f(x))]  x = 1..N
points_from_secret(secret, threshold, num_points)  -> N points
modular_lagrange_interpolation(points)             -> f(0)
"""

from __future__ import annotations

import logging
import secrets
from typing import Callable, List, Optional, Sequence

from shamirkit.crypto import field
from shamirkit.crypto.point import Point
from shamirkit.crypto.primes import large_enough_prime
from shamirkit.errors import (
    InvalidArgument,
    InvalidDegree,
    InvalidThreshold,
    ThresholdExceedsPoints,
)

logger = logging.getLogger(__name__)

# randbelow(n) -> uniform int in [0, n); must be a CSPRNG outside of tests.
RandBelow = Callable[[int], int]


class Polynomial:
    """f(x) = a_0 + a_1 x + ... + a_{t-1} x^{t-1}, a_0 being the secret."""

    def __init__(self, coefficients: Sequence[int]) -> None:
        self._coefficients = tuple(coefficients)

    @property
    def coefficients(self) -> tuple:
        return self._coefficients

    @property
    def degree(self) -> int:
        return len(self._coefficients) - 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coefficients == other._coefficients

    def __hash__(self) -> int:
        return hash(self._coefficients)

    def __repr__(self) -> str:
        return f"Polynomial(degree={self.degree})"

    @classmethod
    def random(
        cls,
        degree: int,
        intercept: int,
        upper_bound: int,
        randbelow: Optional[RandBelow] = None,
    ) -> "Polynomial":
        """Polynomial with ``f(0) = intercept`` and random higher coefficients.

        Coefficients a_1 .. a_degree are drawn uniformly from
        ``[0, upper_bound)``.
        """
        if degree < 0:
            raise InvalidDegree("Degree must be a non-negative number")
        draw = randbelow or secrets.randbelow
        coeffs = [intercept] + [draw(upper_bound) for _ in range(degree)]
        return cls(coeffs)

    def evaluate(self, x: int, prime: int) -> int:
        """f(x) mod *prime*, reducing every power term and partial sum."""
        y = field.reduce(self._coefficients[0], prime)
        for i in range(1, len(self._coefficients)):
            power = pow(x, i, prime)
            term = field.mul(self._coefficients[i], power, prime)
            y = field.add(y, term, prime)
        return y

    def points(self, num_points: int, prime: int) -> List[Point]:
        """Shares ``(x, f(x))`` for x = 1 … num_points; x = 0 is never emitted."""
        return [Point(x, self.evaluate(x, prime)) for x in range(1, num_points + 1)]


def points_from_secret(
    secret_int: int,
    threshold: int,
    num_points: int,
    randbelow: Optional[RandBelow] = None,
) -> List[Point]:
    """Split *secret_int* into *num_points* shares, any *threshold* of which
    reconstruct it.
    """
    if isinstance(secret_int, bool) or not isinstance(secret_int, int) or secret_int < 0:
        raise InvalidArgument("Secret must be a non-negative integer")
    prime = large_enough_prime([secret_int, num_points])
    if threshold < 2:
        raise InvalidThreshold("Threshold must be at least 2")
    if threshold > num_points:
        raise ThresholdExceedsPoints(
            f"Threshold must not exceed the number of points: k={threshold}, n={num_points}"
        )

    polynomial = Polynomial.random(threshold - 1, secret_int, prime, randbelow)
    logger.debug(
        "Splitting into %d shares (threshold %d) over a %d-bit field",
        num_points,
        threshold,
        prime.bit_length(),
    )
    return polynomial.points(num_points, prime)


def _lagrange_fraction(points: Sequence[Point], current: int, prime: int):
    """Numerator and denominator of the Lagrange basis for *current* at x=0."""
    xi = points[current].x
    num = 1
    den = 1
    for m, point in enumerate(points):
        if m == current:
            continue
        num = field.mul(num, field.neg(point.x, prime), prime)   # (0 - x_m)
        den = field.mul(den, field.sub(xi, point.x, prime), prime)  # (x_i - x_m)
    return num, den


def modular_lagrange_interpolation(
    points: Sequence[Point], prime: Optional[int] = None
) -> int:
    """Recover f(0) from *points* using Lagrange interpolation over F_p.

    The field is re-derived from the y-values unless *prime* is given.
    Points sharing an x-coordinate raise ``NotInvertible``.
    """
    points = [p if isinstance(p, Point) else Point(*p) for p in points]
    if not points:
        raise InvalidArgument("Need at least one point")
    if prime is None:
        _, y_values = Point.transpose(points)
        prime = large_enough_prime(y_values)

    acc = 0
    for i, point in enumerate(points):
        num, den = _lagrange_fraction(points, i, prime)
        basis = field.mul(num, field.mod_inverse(den, prime), prime)
        acc = (acc + point.y * basis) % prime
    logger.debug(
        "Interpolated %d points over a %d-bit field", len(points), prime.bit_length()
    )
    return (prime + acc) % prime
