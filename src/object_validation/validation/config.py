"""Validation configuration constants.

This module centralizes the names and limits shared by the engine, the batch
runner and the report renderers.

Reserved Names:
    - "errors": key under which a nested field's own messages are serialized

Data Formats:
    - "csv": tabular records, one record per row
    - "json": a single object or a list of objects
    - "yaml": a single mapping or a list of mappings
"""

from __future__ import annotations

from pathlib import Path

# ============================================================================
# RESERVED NAMES
# ============================================================================

# Serialized key holding a parent field's direct messages next to its
# nested child errors, e.g. {"settings": {"color": [...], "errors": [...]}}
RESERVED_ERRORS_KEY = "errors"


# ============================================================================
# DATA FORMATS
# ============================================================================
# Format: {file suffix: data format}

DATA_FORMATS = {
    ".csv": "csv",
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}

# CSV files are read with a BOM-tolerant encoding (spreadsheet exports)
CSV_ENCODING = "utf-8-sig"
TEXT_ENCODING = "utf-8"


# ============================================================================
# REPORTING
# ============================================================================

# Number of messages shown per failed record in console output
MAX_CONSOLE_MESSAGES = 5


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def get_data_format(path: Path) -> str:
    """Get the data format for a records file based on its suffix.

    Args:
        path: Path to the records file.

    Returns:
        Data format name: "csv", "json" or "yaml".

    Raises:
        ValueError: If the suffix is not a supported data format.

    Examples:
        >>> get_data_format(Path("users.csv"))
        'csv'
        >>> get_data_format(Path("users.yml"))
        'yaml'
    """
    suffix = path.suffix.lower()
    if suffix not in DATA_FORMATS:
        raise ValueError(
            f"Unsupported data file suffix '{path.suffix}' for {path.name}. "
            f"Supported suffixes: {', '.join(sorted(DATA_FORMATS))}"
        )
    return DATA_FORMATS[suffix]
