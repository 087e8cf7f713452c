"""Interface shared by the predicate factories."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class InvalidityCheck(Protocol):
    """Protocol for predicates used as ``Validator.is_invalid``.

    Any callable taking one value and returning a bool satisfies it
    (structural typing), so plain functions and lambdas work too.
    """

    def __call__(self, value: Any) -> bool:
        """Return True when the value is INVALID."""
        ...
