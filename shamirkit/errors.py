"""Exception taxonomy for secret sharing.

Every error is a caller-input error: nothing here is transient and
nothing should be retried.
"""

from __future__ import annotations


class SecretSharingError(ValueError):
    """Base class for all shamirkit errors."""


class InvalidDegree(SecretSharingError):
    """Requested polynomial degree is negative."""


class FieldTooSmall(SecretSharingError):
    """No catalog prime is large enough for the values to represent."""


class InvalidThreshold(SecretSharingError):
    """Threshold is below 2."""


class ThresholdExceedsPoints(InvalidThreshold):
    """Threshold is larger than the number of shares requested."""


class InvalidSymbol(SecretSharingError):
    """Symbol is not part of the declared alphabet."""


class IndexOutOfRange(InvalidSymbol):
    """Digit value has no symbol in the declared alphabet."""


class InvalidArgument(SecretSharingError):
    """A non-negative integer (or other well-formed input) was required."""


class InvalidShare(InvalidArgument):
    """A share string could not be parsed."""


class NotInvertible(SecretSharingError, ZeroDivisionError):
    """Modular inverse requested for a value not coprime with the modulus."""
