# authserver/domain/interfaces.py

"""
Interfaces the domain services depend on.

Implementations live in the adapters layer.
"""

from abc import ABC, abstractmethod
from typing import Optional

from authserver.domain.models.registered_client import RegisteredClient


class IClientDirectory(ABC):
    """Read-only lookup of registered clients."""

    @abstractmethod
    def find_by_client_id(self, client_id: str) -> Optional[RegisteredClient]:
        """Get registered client by client_id, or None if unknown."""
        pass


class ISecretMatcher(ABC):
    """Compares a claimed secret with the stored one."""

    @abstractmethod
    def matches(self, claimed_secret: Optional[str], stored_secret: Optional[str]) -> bool:
        """Return True only if both secrets are present and match."""
        pass

    @abstractmethod
    def dummy_match(self, claimed_secret: Optional[str]) -> bool:
        """
        Run a comparison against a fixed stand-in secret when no client was found.

        Takes as long as a real comparison and always returns False.
        """
        pass
