"""Public pydantic schema exports for FastAPI interfaces."""

from .api_envelope import ApiResponse, api_response, error, ok
from .common import FieldIssue

__all__ = [
    "ApiResponse",
    "FieldIssue",
    "api_response",
    "error",
    "ok",
]
