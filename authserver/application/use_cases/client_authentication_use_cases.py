# authserver/application/use_cases/client_authentication_use_cases.py

"""
Service for client authentication.

This module dispatches authentication requests to the authenticator
registered for their kind and reports the outcome to an event publisher.
"""

import logging
from typing import Dict, Iterable, Optional

from authserver.application.ports.inbound import IClientAuthenticationUseCase
from authserver.application.ports.outbound import IAuthenticationEventPublisher
from authserver.domain.exceptions import (
    ClientDirectoryException,
    ConfigurationError,
    InvalidClientException,
    UnsupportedAuthenticationRequestException,
)
from authserver.domain.models.authentication import (
    AuthenticationRequestKind,
    AuthenticationResult,
    Authenticated,
    ClientSecretAuthenticationRequest,
)
from authserver.domain.services.client_authenticator import ClientAuthenticator

logger = logging.getLogger(__name__)


class ClientAuthenticationService(IClientAuthenticationUseCase):
    """
    Service for client authentication.

    Each authenticator is registered under the request kind it supports.
    The kind carried by the request selects the authenticator; there is no
    fallback to other authenticators.
    """

    def __init__(
            self,
            authenticators: Iterable[ClientAuthenticator],
            event_publisher: Optional[IAuthenticationEventPublisher] = None,
    ):
        self._authenticators: Dict[AuthenticationRequestKind, ClientAuthenticator] = {}
        for authenticator in authenticators:
            kind = authenticator.supported_kind
            if kind in self._authenticators:
                raise ConfigurationError(detail=f"Duplicate authenticator for request kind '{kind.value}'")
            self._authenticators[kind] = authenticator

        if not self._authenticators:
            raise ConfigurationError(detail="authenticators cannot be empty")

        self._event_publisher = event_publisher

    def authenticate(self, request: ClientSecretAuthenticationRequest) -> AuthenticationResult:
        authenticator = self._authenticators.get(request.kind)
        if authenticator is None:
            logger.error(f"No authenticator registered for request kind: {request.kind.value}")
            raise UnsupportedAuthenticationRequestException(request.kind)

        try:
            result = authenticator.authenticate(request)
        except ClientDirectoryException as e:
            logger.error(f"Client directory unavailable during authentication: {e.detail}")
            raise

        if self._event_publisher is not None:
            if result.is_authenticated:
                self._event_publisher.publish_success(result)
            else:
                self._event_publisher.publish_failure(request, result)

        return result

    def authenticate_or_raise(self, request: ClientSecretAuthenticationRequest) -> Authenticated:
        result = self.authenticate(request)
        if not result.is_authenticated:
            raise InvalidClientException(error_kind=result.reason)
        return result
