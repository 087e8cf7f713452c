"""Pytest tests for validation report generation."""

import json
from pathlib import Path

import pytest

from object_validation.validation import ErrorBag, RecordResult, ValidationReport


def _bag(**messages) -> ErrorBag:
    bag = ErrorBag()
    for field_name, field_messages in messages.items():
        for message in field_messages:
            bag.add_message(field_name, message)
    return bag


@pytest.fixture
def mock_validation_report():
    """Fixture for a report with one passing and two failing records."""
    nested = ErrorBag()
    nested.add_message("color", "Color must be red, blue or green!")
    settings_bag = ErrorBag()
    settings_bag.set_nested("settings", nested)

    return ValidationReport(
        results=[
            RecordResult(index=0, bag=ErrorBag()),
            RecordResult(
                index=1,
                bag=_bag(username=["Your username cannot exceed 50 characters!", "Bad charset!"]),
            ),
            RecordResult(index=2, bag=settings_bag),
        ],
        source_path=Path("data/users.csv"),
        config_reference="forms:SIGNUP",
    )


@pytest.fixture
def mock_validation_report_all_passed():
    return ValidationReport(
        results=[RecordResult(index=0, bag=ErrorBag()), RecordResult(index=1, bag=ErrorBag())],
        source_path=Path("data/users.json"),
    )


def test_counts(mock_validation_report):
    assert mock_validation_report.has_errors() is True
    assert mock_validation_report.get_error_count() == 3
    assert [r.index for r in mock_validation_report.get_failed_records()] == [1, 2]


def test_record_result_properties():
    result = RecordResult(index=4, bag=_bag(name=["Required!"]))

    assert result.passed is False
    assert result.label == "record 4"


def test_summary(mock_validation_report):
    summary = mock_validation_report.summary()

    assert "Source: users.csv" in summary
    assert "Records: 3 validated (1 passed, 2 failed)" in summary
    assert "Issues: 3 errors" in summary


def test_to_markdown_with_failures(mock_validation_report):
    """Test Markdown report generation with failed records."""
    markdown = mock_validation_report.to_markdown()

    assert "# Validation Report: users.csv" in markdown
    assert "**Config:** `forms:SIGNUP`" in markdown
    assert "- **Total Records:** 3" in markdown
    assert "- **Failed:** 2 ❌" in markdown
    assert "### ❌ record 1 (2 errors)" in markdown
    assert "- `username`: Your username cannot exceed 50 characters!" in markdown
    assert "- `settings.color`: Color must be red, blue or green!" in markdown
    assert "All Records Passed" not in markdown


def test_to_markdown_all_passed(mock_validation_report_all_passed):
    markdown = mock_validation_report_all_passed.to_markdown()

    assert "## ✅ All Records Passed" in markdown
    assert "No validation issues found." in markdown
    assert "**Config:**" not in markdown


def test_to_json(mock_validation_report):
    """Test JSON report structure, including nested error shapes."""
    report_data = json.loads(mock_validation_report.to_json())

    assert report_data["metadata"]["source_path"] == "users.csv"
    assert report_data["metadata"]["config"] == "forms:SIGNUP"
    assert "generated_at" in report_data["metadata"]
    assert report_data["summary"] == {
        "total_records": 3,
        "passed": 1,
        "failed": 2,
        "errors": 3,
    }
    assert report_data["failed_records"] == [
        {
            "index": 1,
            "errors": {"username": ["Your username cannot exceed 50 characters!", "Bad charset!"]},
        },
        {"index": 2, "errors": {"settings": {"color": ["Color must be red, blue or green!"]}}},
    ]


def test_to_console_summary_truncates_messages():
    report = ValidationReport(
        results=[RecordResult(index=0, bag=_bag(name=[f"problem {i}" for i in range(7)]))],
        source_path=Path("users.csv"),
    )

    console = report.to_console_summary()

    assert "❌ record 0: 7 errors" in console
    assert "   - name: problem 4" in console
    assert "problem 5" not in console
    assert "... 2 more" in console


def test_to_console_summary_all_passed(mock_validation_report_all_passed):
    assert "✅ All records passed validation!" in mock_validation_report_all_passed.to_console_summary()
