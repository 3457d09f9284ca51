"""FastAPI dependencies for the contact feature."""

from __future__ import annotations

from core.config import Settings, settings
from features.contact.service import ContactService

_service = ContactService()


def get_contact_service() -> ContactService:
    """Provide the stateless :class:`ContactService`."""
    return _service


def get_settings() -> Settings:
    """Provide application settings."""
    return settings


__all__ = ["get_contact_service", "get_settings"]
