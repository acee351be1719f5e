"""
ga_extractor/errors.py

Exceptions raised by the extraction core and its transport.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence


class ExtractionError(Exception):
    """Base exception for extraction failures."""


@dataclass(frozen=True)
class ValidationErrorDetail:
    """
    Structured parameter validation error detail.
    """

    code: str
    message: str
    field: str | None = None
    context: dict[str, Any] | None = None


class ExtractionValidationError(ExtractionError, ValueError):
    """
    Raised when caller-supplied extraction parameters are invalid.
    """

    def __init__(self, *, message: str, errors: Sequence[ValidationErrorDetail]) -> None:
        super().__init__(message)
        self.message = message
        self.errors = tuple(errors)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "errors": [
                {
                    "code": error.code,
                    "message": error.message,
                    "field": error.field,
                    "context": error.context,
                }
                for error in self.errors
            ],
        }


class TransportError(ExtractionError):
    """
    Raised when a catalog listing or report call cannot be completed.
    """


class MalformedResponseError(ExtractionError):
    """
    Raised when a returned report does not match its own column headers.
    """
