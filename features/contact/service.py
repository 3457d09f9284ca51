"""Service layer for the contact feature."""

from __future__ import annotations

import logging

from config.contact import SUCCESS_MESSAGE
from features.contact.schemas import ContactResponse, ContactSubmission

logger = logging.getLogger(__name__)


class ContactService:
    """Business logic for contact submissions.

    Submissions are acknowledged and discarded: nothing is stored or
    forwarded, and no state is shared between calls.
    """

    async def accept(self, submission: ContactSubmission) -> ContactResponse:
        """Acknowledge a validated submission."""

        # Visitor details stay out of the logs
        logger.info(
            "Contact submission accepted (service=%s, phone=%s)",
            submission.service or "unspecified",
            "yes" if submission.phone else "no",
        )
        return ContactResponse(success=True, message=SUCCESS_MESSAGE)


__all__ = ["ContactService"]
