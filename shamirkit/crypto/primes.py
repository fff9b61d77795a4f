"""Field selection from the Mersenne prime catalog."""

from __future__ import annotations

import logging
from typing import Iterable

from shamirkit.config import PRIMES
from shamirkit.errors import FieldTooSmall

logger = logging.getLogger(__name__)


def large_enough_prime(values: Iterable[int]) -> int:
    """Return the smallest catalog prime strictly greater than every |value|.

    The result depends only on ``max(|v|)``, so the split side (secret, N)
    and the reconstruction side (share y-values) agree on the field.
    """
    magnitudes = [abs(v) for v in values]
    if not magnitudes:
        raise FieldTooSmall("No values given to size the field")
    largest = max(magnitudes)
    for prime in PRIMES:
        if prime > largest:
            logger.debug("Selected %d-bit field prime", prime.bit_length())
            return prime
    raise FieldTooSmall(
        f"Value of {largest.bit_length()} bits exceeds the largest supported field"
    )
