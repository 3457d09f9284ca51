"""Async client for the contact endpoint.

Mirrors what the site front-end does on submit: check the form locally with
the shared constraints, prefix bare phone numbers with the practice's country
code, post the payload and translate the outcome into a visitor notification.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

import httpx

from config.contact import (
    DEFAULT_COUNTRY_CODE,
    NOTIFY_ERROR_DESCRIPTION,
    NOTIFY_ERROR_TITLE,
    NOTIFY_SENT_DESCRIPTION,
    NOTIFY_SENT_TITLE,
    validate_country_code,
)
from features.contact.schemas import Notification
from features.contact.validator import validate_submission

logger = logging.getLogger(__name__)

CONTACT_PATH = "/api/contact"
DEFAULT_TIMEOUT = 10.0


def with_country_code(phone: str | None, country_code: str = DEFAULT_COUNTRY_CODE) -> str | None:
    """Prefix ``phone`` with ``country_code`` unless it is empty or already international."""

    if not phone or phone.startswith("+"):
        return phone
    return f"{country_code}{phone}"


class ContactClient:
    """Submit contact forms to the backend the way the site does."""

    def __init__(
        self,
        base_url: str,
        *,
        country_code: str = DEFAULT_COUNTRY_CODE,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._country_code = validate_country_code(country_code)
        self._timeout = timeout
        self._transport = transport

    def prepare(self, form: Mapping[str, Any]) -> Dict[str, Any]:
        """Validate ``form`` and return the payload to transmit.

        Raises :class:`core.exceptions.FormValidationError` so callers can show
        inline messages before anything is sent.
        """

        submission = validate_submission(form)
        payload = submission.model_dump(exclude_none=True)
        if "phone" in payload:
            payload["phone"] = with_country_code(payload["phone"], self._country_code)
        return payload

    async def send(self, payload: Mapping[str, Any]) -> httpx.Response:
        async with httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            return await client.post(CONTACT_PATH, json=dict(payload))

    async def submit(self, form: Mapping[str, Any]) -> Notification:
        """Validate, send and report the outcome of a contact form.

        Local validation failures propagate; anything that goes wrong after
        the payload leaves becomes a generic error notification.
        """

        payload = self.prepare(form)
        try:
            response = await self.send(payload)
        except httpx.HTTPError as exc:
            logger.warning("Contact submission could not be delivered: %s", exc)
            return _failure()

        if response.is_success:
            return Notification(title=NOTIFY_SENT_TITLE, description=NOTIFY_SENT_DESCRIPTION)

        logger.warning("Contact submission refused with HTTP %s", response.status_code)
        return _failure()


def _failure() -> Notification:
    return Notification(title=NOTIFY_ERROR_TITLE, description=NOTIFY_ERROR_DESCRIPTION, variant="destructive")


__all__ = ["ContactClient", "with_country_code"]
