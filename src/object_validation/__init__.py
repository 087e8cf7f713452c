"""Object Validation — declarative, recursive validation of plain mappings.

The engine and builders live in `object_validation.validation`; the
command-line interface in `object_validation.interfaces.cli.main`.
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
