"""Tests for the contact client."""

from __future__ import annotations

import json
from typing import Any, Dict

import httpx
import pytest
from fastapi import FastAPI
from httpx import ASGITransport

from core.exceptions import ConfigurationError, FormValidationError
from features.contact.client import ContactClient, with_country_code
from features.contact.routes import router


@pytest.mark.parametrize(
    ("phone", "expected"),
    [
        ("9876543210", "+919876543210"),
        ("+44 20 7946 0958", "+44 20 7946 0958"),
        ("", ""),
        (None, None),
    ],
)
def test_with_country_code(phone, expected):
    assert with_country_code(phone, "+91") == expected


def test_prepare_prefixes_bare_phone(valid_form: Dict[str, Any]):
    client = ContactClient("http://test")

    payload = client.prepare({**valid_form, "phone": "9876543210"})

    assert payload["phone"] == "+919876543210"
    assert payload["name"] == "Jane Doe"


def test_prepare_uses_configured_country_code(valid_form: Dict[str, Any]):
    client = ContactClient("http://test", country_code="+1")

    assert client.prepare({**valid_form, "phone": "2125551234"})["phone"] == "+12125551234"


def test_client_rejects_malformed_country_code():
    with pytest.raises(ConfigurationError) as exc_info:
        ContactClient("http://test", country_code="91")

    assert exc_info.value.key == "CONTACT_DEFAULT_COUNTRY_CODE"


def test_prepare_omits_absent_optionals(valid_form: Dict[str, Any]):
    payload = ContactClient("http://test").prepare(valid_form)

    assert "phone" not in payload
    assert "service" not in payload


def test_prepare_raises_before_sending(valid_form: Dict[str, Any]):
    client = ContactClient("http://test")

    with pytest.raises(FormValidationError) as exc_info:
        client.prepare({**valid_form, "name": "J"})

    assert exc_info.value.fields == ["name"]


@pytest.mark.asyncio
async def test_submit_against_endpoint(valid_form: Dict[str, Any]):
    app = FastAPI()
    app.include_router(router)
    client = ContactClient("http://test", transport=ASGITransport(app=app))

    notification = await client.submit({**valid_form, "phone": "9876543210", "service": "criminal"})

    assert notification.title == "Message Sent"
    assert notification.description == "Thank you for your message. We'll get back to you soon!"
    assert notification.variant == "default"


@pytest.mark.asyncio
async def test_submit_sends_prefixed_phone(valid_form: Dict[str, Any]):
    seen: Dict[str, Any] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"success": True, "message": "Message received successfully"})

    client = ContactClient("http://test/", transport=httpx.MockTransport(handler))

    await client.submit({**valid_form, "phone": "9876543210"})

    assert seen["path"] == "/api/contact"
    assert seen["body"]["phone"] == "+919876543210"


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [400, 500])
async def test_submit_reports_server_refusal(valid_form: Dict[str, Any], status_code: int):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            status_code,
            json={"success": False, "message": "Validation error", "errors": [{"path": ["name"], "message": "x"}]},
        )

    client = ContactClient("http://test", transport=httpx.MockTransport(handler))

    notification = await client.submit(valid_form)

    assert notification.title == "Error"
    assert notification.variant == "destructive"
    assert "Validation error" not in notification.description


@pytest.mark.asyncio
async def test_submit_reports_transport_failure(valid_form: Dict[str, Any]):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = ContactClient("http://test", transport=httpx.MockTransport(handler))

    notification = await client.submit(valid_form)

    assert notification.title == "Error"
    assert notification.description == "There was an error sending your message. Please try again."
