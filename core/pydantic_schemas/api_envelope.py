"""Standard API response envelope helpers."""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Mapping, Optional, Sequence, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

from .common import FieldIssue

T = TypeVar("T")


MessageType = Union[str, Mapping[str, Any]]


class ApiResponse(BaseModel, Generic[T]):
    """Canonical API response envelope shared across services.

    Optional members are dropped on serialisation so a bare acknowledgement is
    exactly ``{"success": ..., "message": ...}``.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    success: bool = Field(..., description="Indicates whether the operation completed successfully")
    message: MessageType = Field(
        ...,
        description="Human readable summary or structured payload for UI clients",
    )
    data: Optional[T] = Field(None, description="Optional domain payload")
    errors: Optional[List[FieldIssue]] = Field(
        default=None,
        description="Per-field problems for rejected submissions",
    )


def api_response(
    *,
    code: int = 200,
    message: MessageType,
    data: T | None = None,
    errors: Sequence[FieldIssue] | None = None,
) -> Dict[str, Any]:
    """Return a serialisable API envelope with a consistent schema."""

    envelope = ApiResponse[Any](
        success=code < 400,
        message=message,
        data=data,
        errors=list(errors) if errors is not None else None,
    )
    return envelope.model_dump(mode="json", exclude_none=True)


def ok(message: str, data: T | None = None) -> Dict[str, Any]:
    """Shortcut for successful responses."""

    return api_response(code=200, message=message, data=data)


def error(
    code: int,
    message: str,
    errors: Sequence[FieldIssue] | None = None,
) -> Dict[str, Any]:
    """Shortcut for error responses with caller-provided status codes."""

    if code < 400:
        raise ValueError("Error responses must use an error HTTP status code (>= 400)")
    return api_response(code=code, message=message, errors=errors)


__all__ = ["ApiResponse", "api_response", "ok", "error"]
