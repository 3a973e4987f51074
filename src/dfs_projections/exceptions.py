"""Custom exception types for the application."""

from __future__ import annotations


class DataSourceError(RuntimeError):
    """Raised when prop line input cannot be obtained or understood."""


class SourceUnavailable(DataSourceError):
    """Raised when no prop line source was provided or it could not be reached."""


class MalformedInput(DataSourceError, ValueError):
    """Raised when prop line records are missing columns or fail validation."""
