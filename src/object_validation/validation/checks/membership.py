"""Membership and size checks."""

from __future__ import annotations

from typing import Any, Iterable

from .base import InvalidityCheck


def not_one_of(choices: Iterable[Any]) -> InvalidityCheck:
    """Invalid unless the value is one of ``choices``.

    Examples:
        >>> not_one_of(["red", "blue", "green"])("orange")
        True
    """
    allowed = list(choices)

    def is_invalid(value: Any) -> bool:
        return value not in allowed

    return is_invalid


def key_count_not(count: int) -> InvalidityCheck:
    """Invalid unless the value has exactly ``count`` entries."""

    def is_invalid(value: Any) -> bool:
        return len(value) != count

    return is_invalid


def empty() -> InvalidityCheck:
    """Invalid when the value has no entries (or is falsy, like ``MISSING``)."""

    def is_invalid(value: Any) -> bool:
        return not value

    return is_invalid
