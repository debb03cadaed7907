"""Custom Exception Hierarchy for the PopKing AI backend
This module defines a typed exception hierarchy that enables precise error
handling and structured error responses across the application.

Exception Handling Flow:
    1. Provider or service layer raises typed exception
    2. Route handler catches it (see features/*/routes.py)
    3. Handler converts to structured JSON response
    4. Client receives error envelope with code, message, and context

Only hard failures travel through this hierarchy. Generators that receive a
well-formed but unusable payload return a fallback value instead of raising.
"""

from __future__ import annotations


class ServiceError(Exception):
    """Base exception for all service layer errors."""


class ValidationError(ServiceError):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(self.message)


class NotFoundError(ServiceError):
    """Raised when a requested resource cannot be located."""

    def __init__(self, message: str, resource: str | None = None):
        self.message = message
        self.resource = resource
        super().__init__(self.message)


class ProviderError(ServiceError):
    """Raised when an external provider (AI API) fails."""

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        original_error: Exception | None = None,
        *,
        status_code: int | None = None,
        body: str | None = None,
    ):
        self.message = message
        self.provider = provider
        self.original_error = original_error
        self.status_code = status_code
        self.body = body
        super().__init__(self.message)


class ProviderTransportError(ProviderError):
    """Raised when the request never produced an HTTP response."""


class RateLimitError(ProviderError):
    """Raised when a provider rate limit is exceeded."""

    def __init__(
        self,
        message: str,
        retry_after: int | None = None,
        *,
        provider: str | None = None,
        body: str | None = None,
    ):
        super().__init__(message, provider=provider, status_code=429, body=body)
        self.retry_after = retry_after


class ConfigurationError(ServiceError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, key: str | None = None):
        self.message = message
        self.key = key
        super().__init__(self.message)


class DatabaseError(ServiceError):
    """Raised when chat history persistence fails."""

    def __init__(self, message: str, operation: str | None = None):
        self.message = message
        self.operation = operation
        super().__init__(self.message)
