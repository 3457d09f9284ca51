"""Pydantic schemas for the contact feature."""

from __future__ import annotations

from typing import List, Literal, Optional

import email_validator
from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator
from pydantic_core import PydanticCustomError

from config.contact import FIELD_MESSAGES, MESSAGE_MIN_LENGTH, NAME_MIN_LENGTH, PRACTICE_AREAS

# Only syntax is checked: reserved names such as .local, .test and .invalid are well-formed domains
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()


def _require_min_length(value: str, minimum: int, field: str) -> str:
    if len(value) < minimum:
        raise PydanticCustomError("too_short", FIELD_MESSAGES[field])
    return value


class ContactSubmission(BaseModel):
    """A single legal-inquiry submission from the site contact form.

    Values are kept exactly as submitted; unknown keys are dropped.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: StrictStr
    email: StrictStr
    phone: Optional[StrictStr] = None
    service: Optional[StrictStr] = None
    message: StrictStr
    privacy: StrictBool

    @field_validator("name")
    @classmethod
    def _name_long_enough(cls, value: str) -> str:
        return _require_min_length(value, NAME_MIN_LENGTH, "name")

    @field_validator("email")
    @classmethod
    def _email_syntax(cls, value: str) -> str:
        # Syntax only; the normalised form is discarded so input echoes unchanged
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            raise PydanticCustomError("email_syntax", FIELD_MESSAGES["email"]) from None
        return value

    @field_validator("service")
    @classmethod
    def _known_practice_area(cls, value: Optional[str]) -> Optional[str]:
        if value and value not in PRACTICE_AREAS:
            raise PydanticCustomError("unknown_service", FIELD_MESSAGES["service"])
        return value

    @field_validator("message")
    @classmethod
    def _message_long_enough(cls, value: str) -> str:
        return _require_min_length(value, MESSAGE_MIN_LENGTH, "message")

    @field_validator("privacy")
    @classmethod
    def _privacy_accepted(cls, value: bool) -> bool:
        if value is not True:
            raise PydanticCustomError("privacy_not_accepted", FIELD_MESSAGES["privacy"])
        return value


class ContactResponse(BaseModel):
    """Outcome of accepting a submission."""

    success: bool
    message: str


class FieldRule(BaseModel):
    """Client-facing description of the constraints on one form field."""

    name: str
    type: Literal["string", "email", "boolean"]
    required: bool
    min_length: Optional[int] = None
    choices: Optional[List[str]] = None
    must_be_true: Optional[bool] = None
    message: Optional[str] = None


class PracticeArea(BaseModel):
    """Selectable service option."""

    id: str
    label: str


class ContactFormSchema(BaseModel):
    """Published constraint definition mirrored by browser clients."""

    fields: List[FieldRule]
    practice_areas: List[PracticeArea]
    default_country_code: str


class Notification(BaseModel):
    """Toast shown to the visitor once a submission attempt finishes."""

    title: str
    description: str
    variant: Literal["default", "destructive"] = Field(default="default")


__all__ = [
    "ContactFormSchema",
    "ContactResponse",
    "ContactSubmission",
    "FieldRule",
    "Notification",
    "PracticeArea",
]
