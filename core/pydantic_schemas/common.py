"""Common pydantic data models shared across the application."""

from __future__ import annotations

from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field


class FieldIssue(BaseModel):
    """A single failed constraint, addressed by its location in the payload."""

    model_config = ConfigDict(frozen=True)

    path: List[Union[str, int]] = Field(
        default_factory=list,
        description="Location of the offending value; empty for body-level problems",
    )
    message: str = Field(..., description="Human readable explanation shown next to the field")

    @property
    def field(self) -> str | None:
        """Top-level field name, when the issue targets a field."""

        return str(self.path[0]) if self.path else None


__all__ = ["FieldIssue"]
