"""Fluent builders for validation configurations.

Builders only accumulate values; nothing is checked until the resulting
configuration is passed to ``validate``.

Example:
    ```python
    config = (
        ValidationBuilder()
        .add_field("username", lambda f: f
            .make_required("You must have a username!")
            .add_type_check(not_string(), "Invalid username provided!")
            .add_validator(longer_than(50), "Your username cannot exceed 50 characters!")
        )
        .get_config()
    )
    ```
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Union

from .engine import validate
from .models import ErrorBag, FieldConfig, Predicate, ValidationConfig, Validator


class ValidationFieldBuilder:
    """Accumulates the configuration of a single field."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._type_check: Optional[Validator] = None
        self._required = False
        self._required_message: Optional[str] = None
        self._validators: Optional[List[Validator]] = None
        self._nested: Optional[ValidationConfig] = None
        self._stop_after_first_fail = False

    def add_type_check(self, is_invalid: Predicate, message: str) -> "ValidationFieldBuilder":
        self._type_check = Validator(is_invalid=is_invalid, message=message)
        return self

    def make_required(self, message: str) -> "ValidationFieldBuilder":
        self._required = True
        self._required_message = message
        return self

    def set_stop_after_first_fail(self, stop_after_first_fail: bool) -> "ValidationFieldBuilder":
        self._stop_after_first_fail = stop_after_first_fail
        return self

    def add_validator(self, is_invalid: Predicate, message: str) -> "ValidationFieldBuilder":
        if self._validators is None:
            self._validators = []
        self._validators.append(Validator(is_invalid=is_invalid, message=message))
        return self

    def add_nested_config(
        self, config: Union[ValidationConfig, "ValidationBuilder"]
    ) -> "ValidationFieldBuilder":
        """Validate the field value as a sub-object.

        Args:
            config: A ValidationConfig, or a ValidationBuilder whose current
                configuration is used.
        """
        if isinstance(config, ValidationBuilder):
            config = config.get_config()
        self._nested = config
        return self

    def get_field_config(self) -> FieldConfig:
        return FieldConfig(
            type_check=self._type_check,
            required=self._required,
            required_message=self._required_message,
            validators=tuple(self._validators) if self._validators is not None else None,
            nested=self._nested,
            stop_after_first_fail=self._stop_after_first_fail,
        )


class ValidationBuilder:
    """Accumulates a ValidationConfig field by field.

    Examples:
        >>> builder = ValidationBuilder().add_field(
        ...     "color", lambda f: f.add_validator(not_one_of(["red"]), "Must be red!")
        ... )
        >>> builder.validate({"color": "blue"}).errors
        {'color': ['Must be red!']}
    """

    def __init__(self) -> None:
        self._fields: Dict[str, FieldConfig] = {}
        self._stop_after_first_fail = False

    def set_stop_after_first_fail(self, stop_after_first_fail: bool) -> "ValidationBuilder":
        self._stop_after_first_fail = stop_after_first_fail
        return self

    def add_field(
        self,
        name: str,
        build: Callable[[ValidationFieldBuilder], ValidationFieldBuilder],
    ) -> "ValidationBuilder":
        """Configure a field through a fresh ValidationFieldBuilder.

        Args:
            name: Field name in the validated object.
            build: Receives the field builder and returns it after chaining
                its configuration calls.
        """
        self._fields[name] = build(ValidationFieldBuilder(name)).get_field_config()
        return self

    def get_config(self) -> ValidationConfig:
        return ValidationConfig(
            fields=dict(self._fields),
            stop_after_first_fail=self._stop_after_first_fail,
        )

    def validate(self, obj: Any) -> ErrorBag:
        """Validate an object against the accumulated configuration."""
        return validate(obj, self.get_config())


__all__ = ["ValidationBuilder", "ValidationFieldBuilder"]
