# authserver/adapters/inbound/api/error_handlers.py

"""
Exception handlers for client authentication failures.

Maps domain outcomes to OAuth2 error responses. Rejections become
``invalid_client`` with HTTP 401, directory failures become
``server_error`` with HTTP 500.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from authserver.adapters.configuration.config import settings
from authserver.application.dtos.oauth2_error_dto import OAuth2ErrorResponse
from authserver.domain.exceptions import ClientDirectoryException, InvalidClientException
from authserver.domain.models.authentication import ErrorKind, Rejected

# Configure logger
logger = logging.getLogger(__name__)


def invalid_client_response(reason: ErrorKind = ErrorKind.INVALID_CLIENT,
                            realm: Optional[str] = None) -> JSONResponse:
    """
    Build the response for a rejected client authentication.

    The body is the same for every cause of rejection.
    """
    body = OAuth2ErrorResponse(
        error=reason.error_code,
        error_description="Client authentication failed",
    )
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=body.model_dump(exclude_none=True),
        headers={"WWW-Authenticate": f'Basic realm="{realm or settings.AUTH_REALM}"'},
    )


def rejected_response(result: Rejected) -> JSONResponse:
    return invalid_client_response(result.reason)


async def invalid_client_exception_handler(request: Request, exc: InvalidClientException) -> JSONResponse:
    logger.warning(
        f"Client authentication failed | Code: {exc.internal_code} | "
        f"Path: {request.url.path}"
    )
    return invalid_client_response(exc.error_kind)


async def client_directory_exception_handler(request: Request, exc: ClientDirectoryException) -> JSONResponse:
    if settings.ENVIRONMENT == "production":
        error_description = "Internal server error"
        logger.error(
            f"Client directory error: Type={type(exc.original_error).__name__} | "
            f"Path: {request.url.path}"
        )
    else:
        error_description = str(exc.detail)
        logger.error(
            f"Client directory error: {exc.detail} | "
            f"Path: {request.url.path}"
        )

    body = OAuth2ErrorResponse(error="server_error", error_description=error_description)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the client authentication exception handlers on an application."""
    app.add_exception_handler(InvalidClientException, invalid_client_exception_handler)
    app.add_exception_handler(ClientDirectoryException, client_directory_exception_handler)
