"""Request logging middleware for the HTTP surface."""
from __future__ import annotations

import json
import logging
import time
from typing import Any, Mapping

from fastapi import FastAPI, Request

_PAYLOAD_PREVIEW_LIMIT = 1024
# Health probes are too frequent to log
_QUIET_PATHS = ("/health",)
_SENSITIVE_PAYLOAD_KEYS = {"api_key", "apikey", "authorization", "key", "token"}
# Prompts and data URIs can be long; keep only a prefix
_TRUNCATED_KEYS = {"prompt", "text", "imageUrl", "image_url"}
_TRUNCATE_AT = 80


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


def _redact_payload(value: Any, *, depth: int = 6) -> Any:
    if depth <= 0:
        return "<max depth reached>"

    if isinstance(value, Mapping):
        redacted: dict[Any, Any] = {}
        for key, item in value.items():
            key_str = str(key)
            if key_str.lower() in _SENSITIVE_PAYLOAD_KEYS:
                redacted[key] = "***"
            elif key_str in _TRUNCATED_KEYS and isinstance(item, str) and len(item) > _TRUNCATE_AT:
                redacted[key] = f"{item[:_TRUNCATE_AT]}... ({len(item)} chars)"
            else:
                redacted[key] = _redact_payload(item, depth=depth - 1)
        return redacted

    if isinstance(value, list):
        return [_redact_payload(item, depth=depth - 1) for item in value]

    return value


def render_payload_preview(payload: Any) -> str:
    """Return a redacted, length-limited preview for debug logging."""

    if payload is None:
        return "<none>"

    if isinstance(payload, (bytes, bytearray)):
        try:
            payload = json.loads(bytes(payload))
        except ValueError:
            return _format_body_preview(bytes(payload))

    if isinstance(payload, str):
        return _format_body_preview(payload.encode("utf-8", errors="ignore"))

    serialized = json.dumps(
        _redact_payload(payload),
        default=repr,
        ensure_ascii=False,
        separators=(",", ":"),
    )
    return _format_body_preview(serialized.encode("utf-8", errors="ignore"))


def register_http_request_logging(app: FastAPI, *, logger_name: str = "core.http") -> None:
    """Attach middleware that logs every HTTP request with status and latency."""

    if getattr(app.state, "_http_request_logging_installed", False):
        return

    logger = logging.getLogger(logger_name)

    @app.middleware("http")
    async def _log_request(request: Request, call_next):  # type: ignore[override]
        path = request.url.path
        if path in _QUIET_PATHS:
            return await call_next(request)

        if logger.isEnabledFor(logging.DEBUG):
            body = await request.body()
            if body:
                logger.debug("HTTP %s %s payload %s", request.method, path, render_payload_preview(body))

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("HTTP %s %s -> %d (%.0f ms)", request.method, path, response.status_code, elapsed_ms)
        return response

    app.state._http_request_logging_installed = True


__all__ = ["register_http_request_logging", "render_payload_preview"]
