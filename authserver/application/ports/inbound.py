# authserver/application/ports/inbound.py

from abc import ABC, abstractmethod

from authserver.domain.models.authentication import (
    Authenticated,
    AuthenticationResult,
    ClientSecretAuthenticationRequest,
)


class IClientAuthenticationUseCase(ABC):
    """Interface for client authentication use cases."""

    @abstractmethod
    def authenticate(self, request: ClientSecretAuthenticationRequest) -> AuthenticationResult:
        """Authenticate client credentials and return the tagged result."""
        pass

    @abstractmethod
    def authenticate_or_raise(self, request: ClientSecretAuthenticationRequest) -> Authenticated:
        """Authenticate client credentials, raising InvalidClientException on rejection."""
        pass
