"""Contact form constraints and copy.

The server validator, the published form schema and the Python client all read
from this module, so the rules exist in exactly one place.
"""

from __future__ import annotations

import os
import re
from typing import Dict, Tuple

from core.exceptions import ConfigurationError

# Practice areas offered on the services section, keyed by form identifier
PRACTICE_AREAS: Dict[str, str] = {
    "criminal": "Criminal Law",
    "business": "Business Law",
    "family": "Family & Marriage Laws",
    "protection": "Protection Laws",
    "cyber": "Cyber Law",
    "intellectual-property": "Intellectual Property",
    "other": "Other",
}

NAME_MIN_LENGTH = 2
MESSAGE_MIN_LENGTH = 10

# Declaration order drives the order of reported issues
FIELD_ORDER: Tuple[str, ...] = ("name", "email", "phone", "service", "message", "privacy")

FIELD_MESSAGES: Dict[str, str] = {
    "name": f"Name must be at least {NAME_MIN_LENGTH} characters",
    "email": "Please enter a valid email address",
    "service": "Please select a valid service",
    "message": f"Message must be at least {MESSAGE_MIN_LENGTH} characters",
    "privacy": "You must accept the privacy policy",
}

REQUIRED_MESSAGE = "Required"
EXPECTED_OBJECT_MESSAGE = "Expected object"

# Envelope copy
SUCCESS_MESSAGE = "Message received successfully"
VALIDATION_FAILURE_MESSAGE = "Validation error"
SERVER_FAILURE_MESSAGE = "An error occurred while processing your request"

# Client notifications
NOTIFY_SENT_TITLE = "Message Sent"
NOTIFY_SENT_DESCRIPTION = "Thank you for your message. We'll get back to you soon!"
NOTIFY_ERROR_TITLE = "Error"
NOTIFY_ERROR_DESCRIPTION = "There was an error sending your message. Please try again."

_COUNTRY_CODE_PATTERN = re.compile(r"^\+\d{1,4}$")


def validate_country_code(value: str) -> str:
    """Return ``value`` if it is a dialling prefix such as ``+91``."""

    if not _COUNTRY_CODE_PATTERN.match(value):
        raise ConfigurationError(
            f"Invalid default country code {value!r}; expected '+' followed by digits",
            key="CONTACT_DEFAULT_COUNTRY_CODE",
        )
    return value


DEFAULT_COUNTRY_CODE = validate_country_code(os.getenv("CONTACT_DEFAULT_COUNTRY_CODE", "+91"))

__all__ = [
    "DEFAULT_COUNTRY_CODE",
    "EXPECTED_OBJECT_MESSAGE",
    "FIELD_MESSAGES",
    "FIELD_ORDER",
    "MESSAGE_MIN_LENGTH",
    "NAME_MIN_LENGTH",
    "NOTIFY_ERROR_DESCRIPTION",
    "NOTIFY_ERROR_TITLE",
    "NOTIFY_SENT_DESCRIPTION",
    "NOTIFY_SENT_TITLE",
    "PRACTICE_AREAS",
    "REQUIRED_MESSAGE",
    "SERVER_FAILURE_MESSAGE",
    "SUCCESS_MESSAGE",
    "VALIDATION_FAILURE_MESSAGE",
    "validate_country_code",
]
