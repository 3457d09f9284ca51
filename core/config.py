"""Minimal environment variable loading and settings dataclass.

Domain-specific configuration lives in config/ subdirectories:
- Environment detection: config.environment
- Contact form constraints and copy: config.contact

This module only holds the cross-cutting settings the application factory
needs and exposes them through a frozen dataclass for dependency injection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from config import contact as contact_config
from config.environment import ENVIRONMENT, IS_DEVELOPMENT, IS_PRODUCTION, IS_TEST, get_node_env
from core.utils.env import get_env, get_env_list

APP_VERSION = "1.0.0"

# Local front-end dev servers (Vite defaults)
_DEFAULT_DEV_ORIGINS = ("http://localhost:5173", "http://127.0.0.1:5173")


def _default_cors_origins(environment: str) -> Tuple[str, ...]:
    configured = tuple(get_env_list("CORS_ALLOWED_ORIGINS"))
    if configured or environment not in ("development", "test"):
        return configured
    return _DEFAULT_DEV_ORIGINS


@dataclass(frozen=True)
class Settings:
    """Dependency injection wrapper for cross-cutting settings."""

    environment: str = ENVIRONMENT
    app_version: str = APP_VERSION
    # None resolves from CORS_ALLOWED_ORIGINS; only development and test fall back to local origins
    cors_allowed_origins: Optional[Tuple[str, ...]] = None
    default_country_code: str = contact_config.DEFAULT_COUNTRY_CODE

    def __post_init__(self) -> None:
        contact_config.validate_country_code(self.default_country_code)
        if self.cors_allowed_origins is None:
            object.__setattr__(self, "cors_allowed_origins", _default_cors_origins(self.environment))


def load_settings() -> Settings:
    """Build settings from the current environment."""

    return Settings(
        environment=get_node_env(),
        default_country_code=get_env(
            "CONTACT_DEFAULT_COUNTRY_CODE", default=contact_config.DEFAULT_COUNTRY_CODE
        )
        or contact_config.DEFAULT_COUNTRY_CODE,
    )


settings = load_settings()

__all__ = [
    "APP_VERSION",
    "ENVIRONMENT",
    "IS_DEVELOPMENT",
    "IS_PRODUCTION",
    "IS_TEST",
    "Settings",
    "load_settings",
    "settings",
]
