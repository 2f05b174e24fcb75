"""Ok/Err result envelope for fallible Dog operations."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from kennel.types import PreconditionError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying ``value`` (``None`` for unit results)."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_err(self) -> PreconditionError:
        raise ValueError(f"unwrap_err() called on {self!r}")


@dataclass(frozen=True, slots=True)
class Err:
    """Failed outcome carrying the precondition that did not hold."""

    error: PreconditionError

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise the carried error. Aborts the caller's sequence."""
        raise self.error.with_traceback(None)

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> PreconditionError:
        return self.error


Result = Union[Ok[T], Err]
