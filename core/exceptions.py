"""Custom Exception Hierarchy for the legal practice site backend
This module defines a typed exception hierarchy that enables precise error
handling and structured error responses across the application.

Exception Handling Flow:
    1. Validator or service layer raises typed exception
    2. Route (or FastAPI exception handler, see main.py) catches it
    3. Handler converts it to a structured JSON envelope
    4. Client receives ``{success, message, errors?}``
"""

from __future__ import annotations

from typing import Any, Sequence


class ServiceError(Exception):
    """Base exception for all service layer errors."""


class FormValidationError(ServiceError):
    """Raised when a submitted form is rejected as a whole.

    ``issues`` keeps every failing constraint in field declaration order so the
    caller can render per-field messages.
    """

    def __init__(self, issues: Sequence[Any], message: str = "Validation error"):
        self.message = message
        self.issues = list(issues)
        super().__init__(self.message)

    @property
    def fields(self) -> list[str]:
        """Names of the fields that produced at least one issue."""

        seen: list[str] = []
        for issue in self.issues:
            name = getattr(issue, "field", None)
            if name and name not in seen:
                seen.append(name)
        return seen


class ConfigurationError(ServiceError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, key: str | None = None):
        self.message = message
        self.key = key
        super().__init__(self.message)


__all__ = [
    "ConfigurationError",
    "FormValidationError",
    "ServiceError",
]
