"""Utilities for formatting structured HTTP error responses."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from pydantic import ValidationError as PydanticValidationError

from core.exceptions import ConfigurationError
from core.pydantic_schemas import FieldIssue

# pydantic error types mapped to the wording shown to site visitors
_TYPE_MESSAGES: Dict[str, str] = {
    "missing": "Required",
    "string_type": "Expected string",
    "bool_type": "Expected boolean",
    "model_type": "Expected object",
    "model_attributes_type": "Expected object",
    "dict_type": "Expected object",
}


def _issue_message(error: Mapping[str, Any]) -> str:
    error_type = error.get("type", "")
    if error_type in _TYPE_MESSAGES:
        return _TYPE_MESSAGES[error_type]
    return str(error.get("msg", "Invalid value"))


def issues_from_pydantic(exc: PydanticValidationError) -> List[FieldIssue]:
    """Translate a pydantic ``ValidationError`` into ordered :class:`FieldIssue` items.

    Custom validator errors carry the visitor-facing text in ``msg``; generic
    type and presence failures are mapped through ``_TYPE_MESSAGES``.
    """

    return [
        FieldIssue(path=list(error.get("loc", ())), message=_issue_message(error))
        for error in exc.errors(include_url=False)
    ]


def format_configuration_error(exc: ConfigurationError) -> Dict[str, Any]:
    """Return a log-friendly payload for :class:`ConfigurationError`.

    Never sent to clients; the HTTP layer answers with the generic failure copy.
    """

    payload: Dict[str, Any] = {"error": "configuration_error", "message": str(exc)}
    if getattr(exc, "key", None):
        payload["context"] = {"key": exc.key}
    return payload


__all__ = [
    "format_configuration_error",
    "issues_from_pydantic",
]
