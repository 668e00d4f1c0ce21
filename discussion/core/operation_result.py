"""Operation Result — success/failure envelope returned by every store operation.

Invariants:
    - is_success iff errors is empty
    - Success carries a value (may be None/True) and no errors
    - Failure carries value None and a NON-EMPTY ordered tuple of messages
    - Immutable once built: errors copied into a tuple at construction

Design Decisions:
    - Return envelope over exceptions: callers cannot skip handling a failure,
      and a form can show every validation message at once
    - unwrap() is the only path that raises, for callers that want exceptions
"""

from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar

from discussion.core.errors import ErrorContext, OperationFailedError

T = TypeVar("T")


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Either success(value) or failure(errors) — never both."""

    value: T | None = None
    errors: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "errors", tuple(self.errors))
        if self.errors and self.value is not None:
            raise ValueError("a failed result cannot carry a value")

    @classmethod
    def success(cls, value: T | None = None) -> "OperationResult[T]":
        return cls(value=value, errors=())

    @classmethod
    def failure(cls, errors: Iterable[str]) -> "OperationResult[T]":
        """Build a failed result. An empty error list is a programming error."""
        errors = tuple(errors)
        if not errors:
            raise ValueError("failure() requires at least one error message")
        return cls(value=None, errors=errors)

    @property
    def is_success(self) -> bool:
        return not self.errors

    def unwrap(self, operation: str | None = None) -> T | None:
        """Return the value, or raise OperationFailedError on failure."""
        if self.is_success:
            return self.value
        raise OperationFailedError(
            list(self.errors), ErrorContext(operation=operation),
        )

    def to_dict(self) -> dict:
        return {
            "success": self.is_success,
            "value": self.value,
            "errors": list(self.errors),
        }
