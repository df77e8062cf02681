# authserver/application/ports/outbound.py

from abc import ABC, abstractmethod

from authserver.domain.interfaces import IClientDirectory, ISecretMatcher
from authserver.domain.models.authentication import (
    Authenticated,
    ClientSecretAuthenticationRequest,
    Rejected,
)

__all__ = [
    "IClientDirectory",
    "ISecretMatcher",
    "IAuthenticationEventPublisher",
]


class IAuthenticationEventPublisher(ABC):
    """Consumer of authentication outcomes."""

    @abstractmethod
    def publish_success(self, result: Authenticated) -> None:
        pass

    @abstractmethod
    def publish_failure(self, request: ClientSecretAuthenticationRequest, result: Rejected) -> None:
        pass
