"""Tests for validation configuration constants and helpers."""

from pathlib import Path

import pytest

from object_validation.validation.config import (
    DATA_FORMATS,
    RESERVED_ERRORS_KEY,
    get_data_format,
)


def test_reserved_errors_key():
    assert RESERVED_ERRORS_KEY == "errors"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("users.csv", "csv"),
        ("USERS.CSV", "csv"),
        ("users.json", "json"),
        ("users.yaml", "yaml"),
        ("users.yml", "yaml"),
    ],
)
def test_get_data_format(name, expected):
    assert get_data_format(Path(name)) == expected


def test_get_data_format_unknown_suffix():
    with pytest.raises(ValueError, match="Unsupported data file suffix '.xlsx' for users.xlsx"):
        get_data_format(Path("users.xlsx"))


def test_every_format_is_loadable():
    """All configured formats are handled by the records loader."""
    assert set(DATA_FORMATS.values()) == {"csv", "json", "yaml"}
