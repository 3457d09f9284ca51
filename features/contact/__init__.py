"""Contact form feature: validation, submission endpoint and client."""

from .routes import router

__all__ = ["router"]
