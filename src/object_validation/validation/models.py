"""Validation data models.

This module defines core data structures for configurations and results:
- Validator: A single invalidity predicate with its message
- FieldConfig: Validation rules for one named field
- ValidationConfig: Validation rules for a whole object (possibly nested)
- FieldMessages / NestedErrors: Errors recorded for one field
- ErrorBag: Aggregated result of one validation call
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from .checks.base import InvalidityCheck
from .config import RESERVED_ERRORS_KEY
from .errors import ConfigurationError

Predicate = InvalidityCheck


class _Missing:
    """Marker passed to checks in place of an absent field value."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def _reject_unknown_keys(kind: str, data: Mapping[str, Any], allowed: Tuple[str, ...]) -> None:
    unknown = [key for key in data if key not in allowed]
    if unknown:
        raise ConfigurationError(
            f"Unknown {kind} keys: {', '.join(unknown)}. Valid keys: {', '.join(allowed)}"
        )


@dataclass(frozen=True)
class Validator:
    """A named check on a single value.

    Attributes:
        is_invalid: Predicate returning True when the value is INVALID.
        message: Message recorded when the predicate returns True.

    Both attributes are optional at construction time; the engine rejects a
    validator without either one when it reaches it.

    Examples:
        >>> Validator(lambda v: len(v) > 50, "Your username cannot exceed 50 characters!")
    """

    is_invalid: Optional[Predicate] = None
    message: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Validator":
        """Build a validator from ``{"is_invalid": ..., "message": ...}``."""
        if isinstance(data, Validator):
            return data
        _reject_unknown_keys("validator", data, ("is_invalid", "message"))
        return cls(is_invalid=data.get("is_invalid"), message=data.get("message"))


@dataclass(frozen=True)
class FieldConfig:
    """Validation rules for one named field of an object.

    Attributes:
        type_check: Optional type validator run before the value validators.
        required: Whether the field must be present in the object.
        required_message: Message recorded when a required field is absent.
        validators: Ordered value validators, applied in declaration order.
        nested: Configuration applied to the field value as a sub-object.
        stop_after_first_fail: Stop this field's checks after the first failure.
    """

    type_check: Optional[Validator] = None
    required: bool = False
    required_message: Optional[str] = None
    validators: Optional[Tuple[Validator, ...]] = None
    nested: Optional["ValidationConfig"] = None
    stop_after_first_fail: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FieldConfig":
        """Build a field configuration from plain data.

        Recognized keys: ``type``, ``required``, ``required_message``,
        ``validators``, ``nested`` and ``stop_after_first_fail``. Validators
        and nested configurations may be given as dicts or as instances.
        """
        if isinstance(data, FieldConfig):
            return data
        _reject_unknown_keys(
            "field",
            data,
            ("type", "required", "required_message", "validators", "nested", "stop_after_first_fail"),
        )

        type_check = data.get("type")
        validators = data.get("validators")
        nested = data.get("nested")

        return cls(
            type_check=Validator.from_dict(type_check) if type_check is not None else None,
            required=bool(data.get("required", False)),
            required_message=data.get("required_message"),
            validators=(
                tuple(Validator.from_dict(v) for v in validators) if validators is not None else None
            ),
            nested=ValidationConfig.from_dict(nested) if nested is not None else None,
            stop_after_first_fail=bool(data.get("stop_after_first_fail", False)),
        )


@dataclass(frozen=True)
class ValidationConfig:
    """Validation rules for a whole object.

    Attributes:
        fields: Field configurations keyed by field name, in evaluation order.
        stop_after_first_fail: Stop validating further fields once one fails.

    Examples:
        >>> ValidationConfig(
        ...     fields={
        ...         "username": FieldConfig(
        ...             required=True,
        ...             required_message="You must have a username!",
        ...             validators=(Validator(lambda v: len(v) < 5, "Too short!"),),
        ...         )
        ...     }
        ... )
    """

    fields: Mapping[str, FieldConfig] = field(default_factory=dict)
    stop_after_first_fail: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ValidationConfig":
        """Build a configuration from ``{"fields": {...}, "stop_after_first_fail": ...}``."""
        if isinstance(data, ValidationConfig):
            return data
        _reject_unknown_keys("config", data, ("fields", "stop_after_first_fail"))
        return cls(
            fields={
                name: FieldConfig.from_dict(field_data)
                for name, field_data in (data.get("fields") or {}).items()
            },
            stop_after_first_fail=bool(data.get("stop_after_first_fail", False)),
        )


class FieldErrors(ABC):
    """Errors recorded for one field: either FieldMessages or NestedErrors."""

    messages: List[str]

    @abstractmethod
    def add_message(self, field_name: str, message: str) -> None:
        ...

    @abstractmethod
    def is_empty(self) -> bool:
        ...

    @abstractmethod
    def to_value(self) -> Any:
        """Serialize to the plain list/dict shape."""

    @abstractmethod
    def iter_messages(self, path: Tuple[str, ...]) -> Iterator[Tuple[Tuple[str, ...], str]]:
        ...


@dataclass
class FieldMessages(FieldErrors):
    """Direct messages about a field value, in recording order."""

    messages: List[str] = field(default_factory=list)

    def add_message(self, field_name: str, message: str) -> None:
        self.messages.append(message)

    def is_empty(self) -> bool:
        return not self.messages

    def to_value(self) -> List[str]:
        return list(self.messages)

    def iter_messages(self, path: Tuple[str, ...]) -> Iterator[Tuple[Tuple[str, ...], str]]:
        for message in self.messages:
            yield path, message


@dataclass
class NestedErrors(FieldErrors):
    """Child-field errors of a nested object plus the field's own messages.

    Attributes:
        children: Errors of the nested object's fields.
        messages: Direct messages about the nested object as a whole. These
            serialize under the reserved ``errors`` key. When a child field is
            itself named ``errors`` and holds plain messages, direct messages
            are appended to that child instead.
    """

    children: Dict[str, FieldErrors] = field(default_factory=dict)
    messages: List[str] = field(default_factory=list)

    def add_message(self, field_name: str, message: str) -> None:
        reserved = self.children.get(RESERVED_ERRORS_KEY)
        if reserved is None:
            self.messages.append(message)
        elif isinstance(reserved, FieldMessages):
            reserved.add_message(field_name, message)
        else:
            raise ConfigurationError(
                f"'{RESERVED_ERRORS_KEY}' field name is reserved when using nested validation "
                f"with top level validation (field '{field_name}')!"
            )

    def is_empty(self) -> bool:
        return not self.messages and all(child.is_empty() for child in self.children.values())

    def to_value(self) -> Dict[str, Any]:
        value: Dict[str, Any] = {
            name: child.to_value() for name, child in self.children.items() if not child.is_empty()
        }
        if self.messages:
            value[RESERVED_ERRORS_KEY] = list(self.messages)
        return value

    def iter_messages(self, path: Tuple[str, ...]) -> Iterator[Tuple[Tuple[str, ...], str]]:
        for name, child in self.children.items():
            yield from child.iter_messages(path + (name,))
        for message in self.messages:
            yield path, message


@dataclass
class ErrorBag:
    """Result of validating one object.

    Attributes:
        fields: Recorded errors keyed by field name (tagged variants).
        has_errors: True if any message was recorded at any depth.

    Examples:
        >>> bag = validate({"settings": {"color": "orange"}}, config)
        >>> bag.has_errors
        True
        >>> bag.errors
        {'settings': {'color': ['Color must be red, blue or green!']}}
    """

    fields: Dict[str, FieldErrors] = field(default_factory=dict)
    has_errors: bool = False

    @property
    def errors(self) -> Dict[str, Any]:
        """Errors in their serialized shape (lists, dicts and the ``errors`` key)."""
        return self.to_dict()

    def add_message(self, field_name: str, message: str) -> None:
        """Record a direct message for a field.

        Raises:
            ConfigurationError: If the field holds nested errors whose child
                named like the reserved ``errors`` key is itself nested.
        """
        entry = self.fields.get(field_name)
        if entry is None:
            self.fields[field_name] = FieldMessages([message])
        else:
            entry.add_message(field_name, message)
        self.has_errors = True

    def set_nested(self, field_name: str, nested_bag: "ErrorBag") -> None:
        """Store a nested bag's errors under a field, replacing earlier entries."""
        self.fields[field_name] = NestedErrors(children=nested_bag.fields)
        if nested_bag.has_errors:
            self.has_errors = True

    def iter_messages(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(dotted_path, message)`` pairs for every recorded message."""
        for name, entry in self.fields.items():
            for path, message in entry.iter_messages((name,)):
                yield ".".join(path), message

    @property
    def error_count(self) -> int:
        return sum(1 for _ in self.iter_messages())

    def to_dict(self) -> Dict[str, Any]:
        return {
            name: entry.to_value() for name, entry in self.fields.items() if not entry.is_empty()
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(
            {"has_errors": self.has_errors, "errors": self.to_dict()},
            indent=indent,
            ensure_ascii=False,
        )


__all__ = [
    "MISSING",
    "Predicate",
    "Validator",
    "FieldConfig",
    "ValidationConfig",
    "FieldErrors",
    "FieldMessages",
    "NestedErrors",
    "ErrorBag",
]
