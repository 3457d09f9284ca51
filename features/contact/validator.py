"""Form validation for contact submissions.

Both the HTTP handler and :class:`features.contact.client.ContactClient` call
into this module, and the published form schema is derived from the same
constants, so client feedback and server authority cannot drift apart.
"""

from __future__ import annotations

import logging
from typing import Any, List

from pydantic import ValidationError as PydanticValidationError

from config.contact import (
    FIELD_MESSAGES,
    FIELD_ORDER,
    MESSAGE_MIN_LENGTH,
    NAME_MIN_LENGTH,
    PRACTICE_AREAS,
    VALIDATION_FAILURE_MESSAGE,
)
from core.exceptions import FormValidationError
from core.http.errors import issues_from_pydantic
from core.pydantic_schemas import FieldIssue
from features.contact.schemas import ContactFormSchema, ContactSubmission, FieldRule, PracticeArea

logger = logging.getLogger(__name__)


def validate_submission(raw: Any) -> ContactSubmission:
    """Return a :class:`ContactSubmission` or raise :class:`FormValidationError`.

    ``raw`` is the decoded request body. Anything other than a mapping is
    rejected with a single body-level issue.
    """

    try:
        return ContactSubmission.model_validate(raw)
    except PydanticValidationError as exc:
        issues = issues_from_pydantic(exc)
        logger.debug("Contact submission rejected on fields %s", [issue.field for issue in issues])
        raise FormValidationError(issues, message=VALIDATION_FAILURE_MESSAGE) from None


def collect_issues(raw: Any) -> List[FieldIssue]:
    """Return every failing constraint for ``raw``; empty when it is valid."""

    try:
        validate_submission(raw)
    except FormValidationError as exc:
        return exc.issues
    return []


def build_form_schema(default_country_code: str) -> ContactFormSchema:
    fields = {
        "name": FieldRule(
            name="name",
            type="string",
            required=True,
            min_length=NAME_MIN_LENGTH,
            message=FIELD_MESSAGES["name"],
        ),
        "email": FieldRule(name="email", type="email", required=True, message=FIELD_MESSAGES["email"]),
        "phone": FieldRule(name="phone", type="string", required=False),
        "service": FieldRule(
            name="service",
            type="string",
            required=False,
            choices=list(PRACTICE_AREAS),
            message=FIELD_MESSAGES["service"],
        ),
        "message": FieldRule(
            name="message",
            type="string",
            required=True,
            min_length=MESSAGE_MIN_LENGTH,
            message=FIELD_MESSAGES["message"],
        ),
        "privacy": FieldRule(
            name="privacy",
            type="boolean",
            required=True,
            must_be_true=True,
            message=FIELD_MESSAGES["privacy"],
        ),
    }
    return ContactFormSchema(
        fields=[fields[name] for name in FIELD_ORDER],
        practice_areas=[PracticeArea(id=key, label=label) for key, label in PRACTICE_AREAS.items()],
        default_country_code=default_country_code,
    )


__all__ = ["build_form_schema", "collect_issues", "validate_submission"]
