"""Utilities for formatting structured HTTP error responses."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import HTTPException, status

from core.exceptions import (
    ConfigurationError,
    NotFoundError,
    ProviderError,
    RateLimitError,
    ServiceError,
    ValidationError,
)

_BODY_PREVIEW_LIMIT = 2000


def _build_error_payload(
    *,
    error: str,
    message: str,
    context: Dict[str, Any] | None = None,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"error": error, "message": message}
    if context:
        payload["context"] = context
    return payload


def format_validation_error(exc: ValidationError) -> Dict[str, Any]:
    """Return a standard payload for :class:`ValidationError`."""

    context = {"field": exc.field} if getattr(exc, "field", None) else None
    return _build_error_payload(
        error="validation_error",
        message=str(exc),
        context=context,
    )


def format_not_found_error(exc: NotFoundError) -> Dict[str, Any]:
    """Return a standard payload for :class:`NotFoundError`."""

    context = {"resource": exc.resource} if getattr(exc, "resource", None) else None
    return _build_error_payload(
        error="not_found",
        message=str(exc),
        context=context,
    )


def format_provider_error(exc: ProviderError) -> Dict[str, Any]:
    """Return a standard payload for :class:`ProviderError`."""

    body = getattr(exc, "body", None)
    context = {
        key: value
        for key, value in {
            "provider": getattr(exc, "provider", None),
            "status_code": getattr(exc, "status_code", None),
            "body": body[:_BODY_PREVIEW_LIMIT] if body else None,
            "retry_after": getattr(exc, "retry_after", None),
            "original_error": str(exc.original_error)
            if getattr(exc, "original_error", None)
            else None,
        }.items()
        if value
    }

    return _build_error_payload(
        error="provider_error",
        message=str(exc),
        context=context or None,
    )


def format_service_error(exc: ServiceError) -> Dict[str, Any]:
    """Return a standard payload for generic service errors."""

    return _build_error_payload(
        error="service_error",
        message=str(exc),
    )


def to_http_exception(exc: ServiceError) -> HTTPException:
    """Map a service-layer exception onto an HTTP status and payload."""

    if isinstance(exc, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=format_validation_error(exc))
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=format_not_found_error(exc))
    if isinstance(exc, RateLimitError):
        headers = {"Retry-After": str(exc.retry_after)} if exc.retry_after else None
        return HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=format_provider_error(exc),
            headers=headers,
        )
    if isinstance(exc, ProviderError):
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=format_provider_error(exc))
    if isinstance(exc, ConfigurationError):
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=format_service_error(exc),
        )
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=format_service_error(exc))


__all__ = [
    "format_not_found_error",
    "format_provider_error",
    "format_service_error",
    "format_validation_error",
    "to_http_exception",
]
