"""Declarative object validation.

This module provides a recursive validation engine for plain mappings:

- **Models**: Validator, FieldConfig, ValidationConfig - configuration data structures
- **Engine**: validate() - walks a configuration alongside an object
- **Builder**: ValidationBuilder, ValidationFieldBuilder - fluent configuration construction
- **Checks**: Ready-made invalidity predicates (see validation/checks/)
- **Runner**: run_validation(), print_report() - batch validation of records files

Public API:
    validate: Validate one object and return an ErrorBag
    ErrorBag: Recorded messages plus the has_errors flag
    ConfigurationError: Raised for malformed configurations
    ValidationBuilder: Fluent construction of a ValidationConfig
    run_validation: Validate every record of a CSV, JSON or YAML file

Usage:
    >>> from object_validation.validation import ValidationBuilder
    >>> from object_validation.validation.checks import not_string, longer_than
    >>> builder = ValidationBuilder().add_field("username", lambda f: f
    ...     .make_required("You must have a username!")
    ...     .add_type_check(not_string(), "Invalid username provided!")
    ...     .add_validator(longer_than(50), "Your username cannot exceed 50 characters!")
    ... )
    >>> builder.validate({}).errors
    {'username': ['You must have a username!']}
"""

from __future__ import annotations

from .builder import ValidationBuilder, ValidationFieldBuilder
from .engine import validate
from .errors import ConfigurationError
from .models import (
    MISSING,
    ErrorBag,
    FieldConfig,
    FieldErrors,
    FieldMessages,
    NestedErrors,
    ValidationConfig,
    Validator,
)
from .report import RecordResult, ValidationReport
from .runner import load_config, load_records, print_report, run_validation

__all__ = [
    # Configuration models
    "Validator",
    "FieldConfig",
    "ValidationConfig",
    "MISSING",
    # Results
    "ErrorBag",
    "FieldErrors",
    "FieldMessages",
    "NestedErrors",
    "ConfigurationError",
    # Engine and builders
    "validate",
    "ValidationBuilder",
    "ValidationFieldBuilder",
    # Batch runner
    "RecordResult",
    "ValidationReport",
    "load_config",
    "load_records",
    "run_validation",
    "print_report",
]
