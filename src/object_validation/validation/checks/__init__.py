"""Reusable invalidity predicates.

This module re-exports the InvalidityCheck protocol and the
predicate factories. Every factory returns a plain callable that answers
"is this value INVALID?", ready to be used as a validator's ``is_invalid`` or
as a type check.

To add a new check:

1. Pick (or create) the module matching the kind of value it inspects
2. Write a factory that captures its parameters and returns a predicate
3. Export it here

Example:
    ```python
    # checks/strings.py
    from .base import InvalidityCheck

    def shorter_than(length: int) -> InvalidityCheck:
        def is_invalid(value: Any) -> bool:
            return len(value) < length

        return is_invalid
    ```

Predicates do not guard against values of the wrong kind: ``longer_than(5)``
applied to an int raises ``TypeError``. Pair them with a type check on the
field so they only run on values of the expected type.
"""

from __future__ import annotations

from .base import InvalidityCheck
from .membership import empty, key_count_not, not_one_of
from .numbers import greater_than, less_than
from .strings import longer_than, not_matching, shorter_than
from .kinds import not_instance_of, not_mapping, not_number, not_sequence, not_string

__all__ = [
    "InvalidityCheck",
    # Types
    "not_instance_of",
    "not_string",
    "not_mapping",
    "not_number",
    "not_sequence",
    # Strings
    "longer_than",
    "shorter_than",
    "not_matching",
    # Numbers
    "greater_than",
    "less_than",
    # Collections
    "not_one_of",
    "key_count_not",
    "empty",
]
