"""Batch validation report models.

This module defines data structures for validating many records at once:
- RecordResult: Error bag of a single record
- ValidationReport: Aggregated results for a records file
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .config import MAX_CONSOLE_MESSAGES
from .models import ErrorBag


@dataclass(frozen=True)
class RecordResult:
    """Validation result of one record.

    Attributes:
        index: Zero-based position of the record in its source file.
        bag: Error bag produced by ``validate`` for the record.
    """

    index: int
    bag: ErrorBag

    @property
    def passed(self) -> bool:
        return not self.bag.has_errors

    @property
    def label(self) -> str:
        return f"record {self.index}"


@dataclass
class ValidationReport:
    """Aggregated validation results for a records file.

    Attributes:
        results: One result per record, in file order.
        source_path: Path to the records file being validated.
        config_reference: ``module:attribute`` of the configuration, if known.

    Examples:
        >>> report = run_validation(Path("users.csv"), config)
        >>> report.has_errors()
        True
        >>> report.get_error_count()
        3
    """

    results: List[RecordResult]
    source_path: Path
    config_reference: Optional[str] = None

    def has_errors(self) -> bool:
        """Check if any record failed validation."""
        return any(not r.passed for r in self.results)

    def get_error_count(self) -> int:
        """Count messages recorded across all records."""
        return sum(r.bag.error_count for r in self.results)

    def get_failed_records(self) -> List[RecordResult]:
        return [r for r in self.results if not r.passed]

    def summary(self) -> str:
        """Generate a concise text summary of validation results.

        Returns:
            Multi-line summary string showing pass/fail counts.

        Examples:
            >>> print(report.summary())
            Validation Summary:
              Source: users.csv
              Records: 10 validated (8 passed, 2 failed)
              Issues: 3 errors
        """
        total = len(self.results)
        failed = len(self.get_failed_records())
        return (
            f"Validation Summary:\n"
            f"  Source: {self.source_path.name}\n"
            f"  Records: {total} validated ({total - failed} passed, {failed} failed)\n"
            f"  Issues: {self.get_error_count()} errors"
        )

    def to_markdown(self) -> str:
        """Generate detailed Markdown validation report.

        Returns:
            Formatted Markdown string with a header, a summary section and
            one section per failed record listing its messages by field path.
        """
        total = len(self.results)
        failed_records = self.get_failed_records()

        lines = [
            f"# Validation Report: {self.source_path.name}",
            "",
            f"**File:** {self.source_path.name}",
        ]
        if self.config_reference:
            lines.append(f"**Config:** `{self.config_reference}`")
        lines.extend(
            [
                f"**Generated:** {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
                "",
                "## Summary",
                "",
                f"- **Total Records:** {total}",
                f"- **Passed:** {total - len(failed_records)} ✅",
                f"- **Failed:** {len(failed_records)} ❌",
                f"- **Errors:** {self.get_error_count()}",
                "",
            ]
        )

        if not failed_records:
            lines.append("## ✅ All Records Passed")
            lines.append("")
            lines.append("No validation issues found.")
            lines.append("")
            return "\n".join(lines)

        lines.append("## ❌ Errors")
        lines.append("")
        for result in failed_records:
            lines.append(f"### ❌ {result.label} ({result.bag.error_count} errors)")
            lines.append("")
            for path, message in result.bag.iter_messages():
                lines.append(f"- `{path}`: {message}")
            lines.append("")

        return "\n".join(lines)

    def to_json(self) -> str:
        """Generate detailed JSON validation report.

        Failed records carry their errors in the serialized shape, with
        nested field messages under the reserved ``errors`` key.
        """
        total = len(self.results)
        failed_records = self.get_failed_records()

        report_data = {
            "metadata": {
                "source_path": self.source_path.name,
                "config": self.config_reference,
                "generated_at": datetime.now().isoformat(),
            },
            "summary": {
                "total_records": total,
                "passed": total - len(failed_records),
                "failed": len(failed_records),
                "errors": self.get_error_count(),
            },
            "failed_records": [
                {
                    "index": r.index,
                    "errors": r.bag.to_dict(),
                }
                for r in failed_records
            ],
        }
        return json.dumps(report_data, indent=2, ensure_ascii=False)

    def to_console_summary(self) -> str:
        """Generate a concise summary for console output.

        Returns:
            The overall summary and, per failed record, up to
            MAX_CONSOLE_MESSAGES messages.
        """
        lines = [self.summary(), ""]

        failed_records = self.get_failed_records()
        if not failed_records:
            lines.append("✅ All records passed validation!")
            return "\n".join(lines)

        lines.append("Record Details:")
        for result in failed_records:
            lines.append(f"❌ {result.label}: {result.bag.error_count} errors")
            messages = list(result.bag.iter_messages())
            for path, message in messages[:MAX_CONSOLE_MESSAGES]:
                lines.append(f"   - {path}: {message}")
            if len(messages) > MAX_CONSOLE_MESSAGES:
                lines.append(f"   ... {len(messages) - MAX_CONSOLE_MESSAGES} more")

        return "\n".join(lines)
