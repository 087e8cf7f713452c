"""Numeric checks."""

from __future__ import annotations

from typing import Any

from .base import InvalidityCheck


def greater_than(limit: float) -> InvalidityCheck:
    """Invalid when ``value > limit``."""

    def is_invalid(value: Any) -> bool:
        return value > limit

    return is_invalid


def less_than(limit: float) -> InvalidityCheck:
    """Invalid when ``value < limit``."""

    def is_invalid(value: Any) -> bool:
        return value < limit

    return is_invalid
