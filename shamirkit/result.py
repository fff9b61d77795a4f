"""Tagged success / failure values for callers that prefer not to catch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union

from shamirkit.errors import SecretSharingError


@dataclass(frozen=True)
class Ok:
    value: Any

    @property
    def ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def unwrap(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Err:
    error: SecretSharingError

    @property
    def ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        raise self.error


Result = Union[Ok, Err]


def capture(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Result:
    """Call *fn*; wrap its return in ``Ok`` or a ``SecretSharingError`` in ``Err``."""
    try:
        return Ok(fn(*args, **kwargs))
    except SecretSharingError as exc:
        return Err(exc)
