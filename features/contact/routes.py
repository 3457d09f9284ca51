"""FastAPI routes for the contact feature."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from config.contact import EXPECTED_OBJECT_MESSAGE, SERVER_FAILURE_MESSAGE, VALIDATION_FAILURE_MESSAGE
from core.config import Settings
from core.exceptions import FormValidationError
from core.pydantic_schemas import FieldIssue
from core.pydantic_schemas import error as api_error
from core.pydantic_schemas import ok as api_ok
from features.contact.dependencies import get_contact_service, get_settings
from features.contact.service import ContactService
from features.contact.validator import build_form_schema, validate_submission

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["contact"])


async def _read_body(request: Request) -> object:
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError):
        raise FormValidationError(
            [FieldIssue(path=[], message=EXPECTED_OBJECT_MESSAGE)],
            message=VALIDATION_FAILURE_MESSAGE,
        ) from None


@router.post("/contact")
async def submit_contact(
    request: Request,
    service: ContactService = Depends(get_contact_service),
) -> JSONResponse:
    """
    Accept a contact form submission.

    The body is re-validated here regardless of any checks the browser ran.
    Valid submissions are acknowledged; nothing is stored.
    """
    try:
        raw = await _read_body(request)
        submission = validate_submission(raw)
        result = await service.accept(submission)
        return JSONResponse(status_code=status.HTTP_200_OK, content=api_ok(result.message))
    except FormValidationError as exc:
        logger.info("Contact submission rejected: %d issue(s) on %s", len(exc.issues), exc.fields or ["<body>"])
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=api_error(status.HTTP_400_BAD_REQUEST, exc.message, errors=exc.issues),
        )
    except Exception:
        logger.exception("Unexpected error while processing contact submission")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=api_error(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_FAILURE_MESSAGE),
        )


@router.get("/contact/schema")
async def contact_schema(settings: Settings = Depends(get_settings)) -> dict:
    """Publish the contact form constraints for client-side validation."""
    schema = build_form_schema(settings.default_country_code)
    return api_ok("Contact form constraints", data=schema.model_dump(mode="json", exclude_none=True))


__all__ = ["router"]
