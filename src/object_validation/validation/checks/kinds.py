"""Type checks.

Typically used as a field's type check so that value validators only run on
values of the expected type.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .base import InvalidityCheck


def not_instance_of(*types: type) -> InvalidityCheck:
    """Invalid unless the value is an instance of one of ``types``."""

    def is_invalid(value: Any) -> bool:
        return not isinstance(value, types)

    return is_invalid


def not_string() -> InvalidityCheck:
    return not_instance_of(str)


def not_mapping() -> InvalidityCheck:
    return not_instance_of(Mapping)


def not_number() -> InvalidityCheck:
    """Invalid unless the value is an int or float. Booleans are invalid."""

    def is_invalid(value: Any) -> bool:
        return isinstance(value, bool) or not isinstance(value, (int, float))

    return is_invalid


def not_sequence() -> InvalidityCheck:
    """Invalid unless the value is a list-like sequence. Strings are invalid."""

    def is_invalid(value: Any) -> bool:
        return isinstance(value, (str, bytes)) or not isinstance(value, Sequence)

    return is_invalid
