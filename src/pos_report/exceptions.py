"""Domain-specific exceptions for the POS sales report engine.

This module defines custom exceptions that are part of the public API.
All exceptions inherit from PosReportError for easy catching.
"""

from __future__ import annotations

from typing import Sequence


class PosReportError(Exception):
    """Base exception for all POS report errors.

    This is the base class for all domain-specific exceptions in the package.
    Users can catch this exception to handle any POS report error.
    """

    pass


class ConfigError(PosReportError):
    """Raised when there is a configuration error.

    This exception is raised when:
    - Invalid configuration values are provided (e.g. non-positive top_n)
    - The weekday vocabulary does not have 7 unique labels
    - A column role has no candidate substrings
    """

    pass


class IngestionError(PosReportError):
    """Raised when an ingestion run cannot produce a report.

    The message is the human-readable reason. No partial report exists
    when this is raised.
    """

    pass


class EmptyInputError(IngestionError):
    """Raised when the row set handed to the pipeline is empty."""

    pass


class MissingColumnError(IngestionError):
    """Raised when a mandatory column (product or revenue) cannot be resolved.

    Attributes:
        role: Semantic role that could not be resolved ("product" or "revenue").
        headers: Header strings that were scanned.
    """

    def __init__(self, role: str, headers: Sequence[str], hint: str = "") -> None:
        self.role = role
        self.headers = list(headers)
        message = f"{role.capitalize()} column not found"
        if hint:
            message += f" ({hint})"
        super().__init__(message)
