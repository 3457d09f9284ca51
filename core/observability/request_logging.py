"""Request logging helpers for HTTP traffic."""
from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from fastapi import FastAPI, Request

_PAYLOAD_PREVIEW_LIMIT = 4096
# Paths to skip HTTP request logging (load balancer probes)
_QUIET_PATH_PREFIXES = ("/health",)
_SENSITIVE_PAYLOAD_KEYS = {
    "access_token",
    "api_key",
    "authorization",
    "cookie",
    "password",
    "secret",
    "token",
}
# Visitor-supplied personal data from the contact form
_PII_PAYLOAD_KEYS = {"name", "email", "phone", "message"}
_TOKEN_PREVIEW_LENGTH = 12


def _redact_token(token_value: str) -> str:
    """Return a preview of sensitive tokens while hiding the rest."""

    if not isinstance(token_value, str):
        return "***"

    if len(token_value) <= _TOKEN_PREVIEW_LENGTH:
        return "***"

    preview = token_value[:_TOKEN_PREVIEW_LENGTH]
    return f"{preview}***"


def _mask_pii(value: Any) -> str:
    if not isinstance(value, str) or not value:
        return "***"
    return f"<redacted {len(value)} chars>"


def _format_client_address(client: tuple[str, int] | None) -> str:
    if not client:
        return "unknown"
    host, port = client
    return f"{host}:{port}" if port is not None else host


def _format_body_preview(body: bytes) -> str:
    if not body:
        return "<empty>"

    is_truncated = len(body) > _PAYLOAD_PREVIEW_LIMIT
    snippet = body[:_PAYLOAD_PREVIEW_LIMIT]

    try:
        text = snippet.decode("utf-8")
    except UnicodeDecodeError:
        return f"<binary {len(body)} bytes>"

    text = " ".join(text.split())
    if is_truncated:
        return f"{text}... ({len(body)} bytes)"
    return text


def _redact_payload(value: Any, *, depth: int = 8) -> Any:
    if depth <= 0:
        return "<max depth reached>"

    if isinstance(value, Mapping):
        redacted: dict[Any, Any] = {}
        for key, item in value.items():
            key_str = str(key).lower()
            if key_str in _SENSITIVE_PAYLOAD_KEYS:
                redacted[key] = _redact_token(str(item)) if item else "***"
            elif key_str in _PII_PAYLOAD_KEYS:
                redacted[key] = _mask_pii(item)
            else:
                redacted[key] = _redact_payload(item, depth=depth - 1)
        return redacted

    if isinstance(value, (list, tuple)):
        return [_redact_payload(item, depth=depth - 1) for item in value]

    return value


def _json_default(value: Any) -> str:
    return repr(value)


def render_payload_preview(payload: Any) -> str:
    """Return a redacted, length-limited preview for logging.

    Raw bodies are decoded as JSON first so that redaction applies to them too;
    bodies that are not JSON are reported by size only.
    """

    if payload is None:
        return "<none>"

    if isinstance(payload, (bytes, bytearray)):
        if not payload:
            return "<empty>"
        try:
            payload = json.loads(bytes(payload))
        except (UnicodeDecodeError, ValueError, RecursionError):
            return f"<unparsed {len(payload)} bytes>"

    try:
        redacted = _redact_payload(payload)
        serialized = json.dumps(
            redacted,
            default=_json_default,
            ensure_ascii=False,
            separators=(",", ":"),
        )
    except (TypeError, ValueError):
        serialized = repr(type(payload))

    return _format_body_preview(serialized.encode("utf-8", errors="ignore"))


def register_http_request_logging(app: FastAPI, *, logger_name: str = "core.http") -> None:
    """Attach middleware that logs every HTTP request."""

    if getattr(app.state, "_http_request_logging_installed", False):  # pragma: no cover - idempotence
        return

    logger = logging.getLogger(logger_name)

    @app.middleware("http")
    async def _log_request(request: Request, call_next):  # type: ignore[override]
        path = request.url.path
        is_quiet = any(path.startswith(prefix) for prefix in _QUIET_PATH_PREFIXES)

        if not is_quiet:
            body = await request.body()
            if body:
                request._body = body  # type: ignore[attr-defined]  # Allow downstream handlers to re-read
            client = request.client
            client_addr = _format_client_address((client.host, client.port) if client else None)
            logger.info("HTTP %s %s from %s", request.method, path, client_addr)
            if body:
                logger.info("HTTP %s %s payload %s", request.method, path, render_payload_preview(body))

        response = await call_next(request)

        if not is_quiet:
            logger.info("HTTP %s %s -> %s", request.method, path, response.status_code)
        return response

    app.state._http_request_logging_installed = True


__all__ = ["register_http_request_logging", "render_payload_preview"]
