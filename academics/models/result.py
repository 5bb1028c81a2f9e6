"""
Decode result model.

Every ``try_decode_*`` function returns a DecodeResult instead of raising,
so callers have to look at ``ok`` (or call ``unwrap``) before using the
value.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from ..errors import DecodeError

T = TypeVar("T")


@dataclass(frozen=True)
class DecodeResult(Generic[T]):
    """
    Outcome of one decode call: either a value or the error that stopped it.

    Exactly one of ``value`` and ``error`` is set.
    """
    value: Optional[T] = None
    error: Optional[DecodeError] = None

    @classmethod
    def success(cls, value: T) -> "DecodeResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: DecodeError) -> "DecodeResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the error that prevented decoding."""
        if self.error is not None:
            raise self.error
        return self.value
