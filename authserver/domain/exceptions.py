# authserver/domain/exceptions.py

"""
Custom exceptions for the application.

Domain exceptions are pure Python exceptions carrying an ``internal_code``.
Mapping them to HTTP responses is the job of the inbound adapters.
"""

from typing import Any, Optional

from authserver.domain.models.authentication import AuthenticationRequestKind, ErrorKind


class DomainException(Exception):
    """Base exception for all domain errors."""

    def __init__(self, detail: Any = None, internal_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.internal_code = internal_code


class ConfigurationError(DomainException):
    """A required collaborator is missing. Raised at construction time only."""

    def __init__(self, detail: str = "Invalid configuration"):
        super().__init__(detail=detail, internal_code="CONFIGURATION_ERROR")


class InvalidClientException(DomainException):
    """
    Client authentication failed.

    The message is fixed and does not say which check failed.
    """

    def __init__(self, error_kind: ErrorKind = ErrorKind.INVALID_CLIENT):
        super().__init__(detail="Client authentication failed", internal_code="INVALID_CLIENT")
        self.error_kind = error_kind


class ClientDirectoryException(DomainException):
    """The client directory could not be read."""

    def __init__(self, detail: str = "Error reading the client directory",
                 original_error: Optional[Exception] = None):
        error_info = f": {str(original_error)}" if original_error else ""
        super().__init__(detail=f"{detail}{error_info}", internal_code="CLIENT_DIRECTORY_ERROR")
        self.original_error = original_error


class UnsupportedAuthenticationRequestException(DomainException):
    """No authenticator is registered for the request kind."""

    def __init__(self, kind: AuthenticationRequestKind):
        super().__init__(
            detail=f"No authenticator supports request kind '{kind.value}'",
            internal_code="UNSUPPORTED_AUTHENTICATION_REQUEST"
        )
        self.kind = kind
