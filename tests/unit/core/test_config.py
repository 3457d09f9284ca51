"""Tests for configuration helpers."""

import importlib

import pytest

from config import contact as contact_config
from config import environment as environment_config
from core.config import Settings, load_settings
from core.exceptions import ConfigurationError
from core.utils.env import get_env, get_env_list, get_node_env, is_production


def test_get_env_returns_default(monkeypatch):
    """get_env should return provided default when variable missing."""

    monkeypatch.delenv("NON_EXISTENT", raising=False)
    assert get_env("NON_EXISTENT", default="value") == "value"


def test_get_env_required(monkeypatch):
    """get_env should raise when required env missing."""

    monkeypatch.delenv("REQUIRED_KEY", raising=False)
    with pytest.raises(ConfigurationError) as exc_info:
        get_env("REQUIRED_KEY", required=True)
    assert exc_info.value.key == "REQUIRED_KEY"


def test_get_env_list_splits_and_trims(monkeypatch):
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "https://a.example, https://b.example ,,")
    assert get_env_list("CORS_ALLOWED_ORIGINS") == ["https://a.example", "https://b.example"]


def test_environment_helpers(monkeypatch):
    """Environment helpers should respect NODE_ENV."""

    monkeypatch.setenv("NODE_ENV", "Production")
    assert get_node_env() == "production"
    assert is_production() is True

    monkeypatch.setenv("NODE_ENV", "test")
    assert is_production() is False


def test_environment_module_falls_back_to_development(monkeypatch):
    monkeypatch.setenv("NODE_ENV", "staging")
    assert environment_config.get_node_env() == "development"


def test_settings_reject_malformed_country_code():
    with pytest.raises(ConfigurationError) as exc_info:
        Settings(default_country_code="91")
    assert exc_info.value.key == "CONTACT_DEFAULT_COUNTRY_CODE"


def test_load_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("NODE_ENV", "production")
    monkeypatch.setenv("CONTACT_DEFAULT_COUNTRY_CODE", "+44")
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "https://lawoffice.example")

    loaded = load_settings()

    assert loaded.environment == "production"
    assert loaded.default_country_code == "+44"
    assert loaded.cors_allowed_origins == ("https://lawoffice.example",)


def test_settings_default_to_local_dev_origins(monkeypatch):
    monkeypatch.delenv("CORS_ALLOWED_ORIGINS", raising=False)
    assert "http://localhost:5173" in Settings().cors_allowed_origins


def test_contact_country_code_reads_env(monkeypatch):
    """Reloading the module should pick up an overridden country code."""

    monkeypatch.setenv("CONTACT_DEFAULT_COUNTRY_CODE", "+1")
    reloaded = importlib.reload(contact_config)
    assert reloaded.DEFAULT_COUNTRY_CODE == "+1"

    monkeypatch.delenv("CONTACT_DEFAULT_COUNTRY_CODE", raising=False)
    assert importlib.reload(contact_config).DEFAULT_COUNTRY_CODE == "+91"


def test_contact_country_code_env_is_validated(monkeypatch):
    monkeypatch.setenv("CONTACT_DEFAULT_COUNTRY_CODE", "91")
    with pytest.raises(ConfigurationError):
        importlib.reload(contact_config)

    monkeypatch.delenv("CONTACT_DEFAULT_COUNTRY_CODE", raising=False)
    assert importlib.reload(contact_config).DEFAULT_COUNTRY_CODE == "+91"


def test_production_settings_have_no_fallback_origins(monkeypatch):
    monkeypatch.delenv("CORS_ALLOWED_ORIGINS", raising=False)
    assert Settings(environment="production").cors_allowed_origins == ()


def test_explicit_origins_are_kept(monkeypatch):
    monkeypatch.delenv("CORS_ALLOWED_ORIGINS", raising=False)
    origins = ("https://lawoffice.example",)
    assert Settings(environment="development", cors_allowed_origins=origins).cors_allowed_origins == origins
