"""String checks."""

from __future__ import annotations

import re
from typing import Any, Union

from .base import InvalidityCheck


def longer_than(length: int) -> InvalidityCheck:
    """Invalid when ``len(value) > length``."""

    def is_invalid(value: Any) -> bool:
        return len(value) > length

    return is_invalid


def shorter_than(length: int) -> InvalidityCheck:
    """Invalid when ``len(value) < length``."""

    def is_invalid(value: Any) -> bool:
        return len(value) < length

    return is_invalid


def not_matching(pattern: Union[str, re.Pattern], flags: int = 0) -> InvalidityCheck:
    """Invalid unless the whole value matches ``pattern``.

    Args:
        pattern: Regular expression (string or compiled).
        flags: ``re`` flags, only used when ``pattern`` is a string.

    Examples:
        >>> check = not_matching(r"[a-z_0-9]+", re.IGNORECASE)
        >>> check("Command_String")
        False
        >>> check("$Command")
        True
    """
    compiled = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern, flags)

    def is_invalid(value: Any) -> bool:
        return compiled.fullmatch(value) is None

    return is_invalid
