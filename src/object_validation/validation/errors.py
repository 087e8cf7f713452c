"""Configuration error definitions."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a validation configuration is malformed.

    These are programmer errors (a required field without a message, a
    validator without a predicate, ...). They abort the current ``validate``
    call and are never recorded in the error bag.
    """


__all__ = ["ConfigurationError"]
