"""Batch validation runner.

This module validates whole records files:
- load_records(): Reads CSV, JSON or YAML records into plain dicts
- load_config(): Resolves a ``module:attribute`` configuration reference
- run_validation(): Validates every record and returns a ValidationReport
- print_report(): Displays validation results to console
"""

from __future__ import annotations

import importlib
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping

import pandas as pd
import yaml

from .builder import ValidationBuilder
from .config import CSV_ENCODING, TEXT_ENCODING, get_data_format
from .engine import validate
from .models import ValidationConfig
from .report import RecordResult, ValidationReport

logger = logging.getLogger(__name__)


def _as_records(data: Any, path: Path) -> List[Dict[str, Any]]:
    if data is None:
        return []
    if isinstance(data, Mapping):
        return [dict(data)]
    if isinstance(data, list) and all(isinstance(item, Mapping) for item in data):
        return [dict(item) for item in data]
    raise ValueError(
        f"Records file {path} must contain an object or a list of objects, "
        f"got {type(data).__name__}"
    )


def _read_csv_records(path: Path) -> List[Dict[str, Any]]:
    try:
        df = pd.read_csv(path, encoding=CSV_ENCODING, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        return []
    except (OSError, pd.errors.ParserError) as e:
        raise ValueError(f"Failed to read CSV file {path}: {e}") from e

    # Cells are kept as text; empty cells are dropped so they count as absent fields
    return [
        {column: value for column, value in row.items() if value != ""}
        for row in df.to_dict(orient="records")
    ]


def load_records(path: Path) -> List[Dict[str, Any]]:
    """Load records to validate from a CSV, JSON or YAML file.

    Args:
        path: Records file. CSV rows become one record each; JSON and YAML
            files hold a single object or a list of objects.

    Returns:
        List of records as plain dicts, in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the suffix is unsupported or the content is malformed.

    Examples:
        >>> load_records(Path("users.json"))
        [{'username': 'Command_String', 'avatar': {'size': 45}}]
    """
    if not path.exists():
        raise FileNotFoundError(f"Records file not found: {path}")

    data_format = get_data_format(path)

    if data_format == "csv":
        records = _read_csv_records(path)
    elif data_format == "json":
        try:
            with open(path, "r", encoding=TEXT_ENCODING) as f:
                records = _as_records(json.load(f), path)
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"Failed to read JSON file {path}: {e}") from e
    else:
        try:
            with open(path, "r", encoding=TEXT_ENCODING) as f:
                records = _as_records(yaml.safe_load(f), path)
        except (OSError, yaml.YAMLError) as e:
            raise ValueError(f"Failed to read YAML file {path}: {e}") from e

    logger.debug("Loaded %d records from %s", len(records), path)
    return records


def _resolve_config(value: Any, reference: str) -> ValidationConfig:
    if isinstance(value, ValidationConfig):
        return value
    if isinstance(value, ValidationBuilder):
        return value.get_config()
    if isinstance(value, Mapping):
        return ValidationConfig.from_dict(value)
    raise ValueError(
        f"'{reference}' is not a ValidationConfig, ValidationBuilder or config dict "
        f"(got {type(value).__name__})"
    )


def load_config(reference: str) -> ValidationConfig:
    """Resolve a configuration from a ``module:attribute`` reference.

    The attribute may be a ValidationConfig, a ValidationBuilder, a plain
    config dict, or a zero-argument callable returning one of those.

    Args:
        reference: Import reference, e.g. ``"myapp.forms:SIGNUP_CONFIG"``.

    Returns:
        The resolved ValidationConfig.

    Raises:
        ValueError: If the reference is malformed, cannot be imported, or
            does not point to a configuration.
    """
    module_name, sep, attribute = reference.partition(":")
    if not sep or not module_name or not attribute:
        raise ValueError(
            f"Invalid config reference '{reference}'. Expected format: package.module:attribute"
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Cannot import config module '{module_name}': {e}") from e

    value: Any = module
    for part in attribute.split("."):
        try:
            value = getattr(value, part)
        except AttributeError as e:
            raise ValueError(f"Config attribute '{attribute}' not found in '{module_name}'") from e

    if callable(value) and not isinstance(value, (ValidationConfig, ValidationBuilder)):
        value = value()

    return _resolve_config(value, reference)


def run_validation(
    data_path: Path, config: ValidationConfig, config_reference: str | None = None
) -> ValidationReport:
    """Validate every record of a records file.

    Args:
        data_path: CSV, JSON or YAML records file.
        config: Configuration applied to each record.
        config_reference: Optional reference shown in reports.

    Returns:
        ValidationReport with one RecordResult per record.

    Raises:
        FileNotFoundError: If the records file does not exist.
        ValueError: If the records file cannot be parsed.
        ConfigurationError: If the configuration is malformed.
    """
    records = load_records(data_path)

    results = [
        RecordResult(index=index, bag=validate(record, config))
        for index, record in enumerate(records)
    ]

    failed = sum(1 for r in results if not r.passed)
    logger.debug("Validated %d records from %s (%d failed)", len(results), data_path, failed)

    return ValidationReport(
        results=results,
        source_path=data_path,
        config_reference=config_reference,
    )


def print_report(report: ValidationReport) -> None:
    """Print validation report to console.

    Displays a summary followed by the messages of every failed record.

    Args:
        report: ValidationReport to display.
    """
    print(report.summary())
    print()

    failed = report.get_failed_records()

    if not failed:
        print("✅ All records passed validation!")
        return

    print("Failed Records:")
    for result in failed:
        print(f"❌ {result.label}: {result.bag.error_count} errors")
        for path, message in result.bag.iter_messages():
            print(f"   - {path}: {message}")
