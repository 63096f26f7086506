"""Result — explicit success/failure return type for service operations.

Invariants:
    - Exactly one of value / error is meaningful: is_ok ⇔ error is None
    - Result.ok(None) is a valid success (delete returns no value)

Design Decisions:
    - Returned, not raised: not-found and duplicate code are expected outcomes,
      the caller branches on is_ok (ADR: errors as values, same path as success)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from aeroportos.core.errors import DomainError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    value: T | None = None
    error: DomainError | None = None

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @classmethod
    def ok(cls, value: T | None = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, error: DomainError) -> "Result[T]":
        return cls(error=error)
