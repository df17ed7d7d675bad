"""Exception hierarchy for the Emerald generators.

Every failure is terminal for a run: nothing here is retried, and files
written before the failure are left on disk.
"""

from typing import Optional


class EmeraldError(Exception):
    """Generic exception class for this generator."""


class ConfigurationError(EmeraldError):
    """Raised at startup for unknown templates, generators or bad options."""


class PathCollisionError(ConfigurationError):
    """Two documented entities would be written to the same output path."""

    def __init__(self, path: str, first: str, second: str) -> None:
        super().__init__(f"Output path collision on {path}: {first} and {second}")
        self.path = path
        self.first = first
        self.second = second


class OutputError(EmeraldError):
    """Creating a directory or writing a file below the output directory failed."""

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        message = f"Cannot write {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.path = path


class ModelError(EmeraldError, ValueError):
    """The host model handed over malformed entity data."""
