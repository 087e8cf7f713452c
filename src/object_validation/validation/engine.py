"""Recursive validation engine.

Walks a ValidationConfig alongside a data mapping and records every failed
check in an ErrorBag. Configuration mistakes raise ConfigurationError instead
of being recorded.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .errors import ConfigurationError
from .models import MISSING, ErrorBag, ValidationConfig

logger = logging.getLogger(__name__)


def _entries(obj: Any) -> Mapping[str, Any]:
    # Values that are not mappings have no entries: every field is absent.
    return obj if isinstance(obj, Mapping) else {}


def validate(obj: Any, config: ValidationConfig) -> ErrorBag:
    """Validate an object against a configuration.

    Fields are checked in the configuration's declaration order. For each
    field: the required check runs first, then the type check, then the
    nested configuration, then the field's own validators. Nested errors are
    stored before the field's own messages so both can coexist on one field.

    Args:
        obj: Mapping to validate. It is never modified.
        config: Validation rules for the mapping.

    Returns:
        ErrorBag with the recorded messages and the ``has_errors`` flag.

    Raises:
        ConfigurationError: If the configuration is malformed (see
            ``ConfigurationError``).

    Examples:
        >>> bag = validate({"avatar": {"size": 45}}, config)
        >>> bag.has_errors
        False
    """
    entries = _entries(obj)
    bag = ErrorBag()

    for field_name, field_config in config.fields.items():
        if field_config.required and field_name not in entries:
            if not field_config.required_message:
                raise ConfigurationError(f"{field_name} is missing required error message!")

            bag.add_message(field_name, field_config.required_message)

            if config.stop_after_first_fail:
                logger.debug("Stopping after missing required field '%s'", field_name)
                return bag
            continue

        value = entries.get(field_name, MISSING)

        type_check = field_config.type_check
        if type_check is not None:
            if not type_check.message:
                raise ConfigurationError(f"{field_name} is missing type error message!")

            if type_check.is_invalid is None:
                raise ConfigurationError(f"You must supply a type check for {field_name}!")

            if type_check.is_invalid(value):
                bag.add_message(field_name, type_check.message)

                if field_config.stop_after_first_fail:
                    logger.debug("Stopping after failed type check on '%s'", field_name)
                    return bag
                continue

        if field_config.validators is None and field_config.nested is None:
            raise ConfigurationError(
                f"You must provide either validators or a nested validation config for {field_name}!"
            )

        if field_config.nested is not None:
            nested_bag = validate(value, field_config.nested)
            bag.set_nested(field_name, nested_bag)

            if nested_bag.has_errors and config.stop_after_first_fail:
                logger.debug("Stopping after nested errors in '%s'", field_name)
                return bag

        if field_config.validators is None:
            continue

        for validator in field_config.validators:
            if not validator.message:
                raise ConfigurationError(f"You must supply an error message for {field_name}!")

            if validator.is_invalid is None:
                raise ConfigurationError(f"You must supply a check for {field_name}!")

            if validator.is_invalid(value):
                bag.add_message(field_name, validator.message)

                if field_config.stop_after_first_fail:
                    break

    return bag


__all__ = ["validate"]
