# authserver/domain/services/client_authenticator.py

from typing import Optional

from authserver.domain.interfaces import IClientDirectory, ISecretMatcher
from authserver.domain.exceptions import ConfigurationError
from authserver.domain.models.authentication import (
    AuthenticationRequestKind,
    AuthenticationResult,
    Authenticated,
    ClientSecretAuthenticationRequest,
    ErrorKind,
    Rejected,
)
from authserver.domain.services.secret_comparison import ConstantTimeSecretMatcher


class ClientAuthenticator:
    """
    Domain service that verifies client credentials.

    Looks up the claimed client in the directory and compares the claimed
    secret with the registered one. Holds no mutable state, so a single
    instance can serve concurrent requests as long as the directory allows
    concurrent reads.
    """

    supported_kind = AuthenticationRequestKind.CLIENT_SECRET

    def __init__(self, client_directory: IClientDirectory, secret_matcher: Optional[ISecretMatcher] = None):
        """
        Args:
            client_directory: Source of registered clients
            secret_matcher: Secret comparison strategy, constant-time plain text by default

        Raises:
            ConfigurationError: If client_directory is None
        """
        if client_directory is None:
            raise ConfigurationError(detail="client_directory cannot be None")
        self._client_directory = client_directory
        self._secret_matcher = secret_matcher or ConstantTimeSecretMatcher()

    def supports(self, kind: AuthenticationRequestKind) -> bool:
        return kind is self.supported_kind

    def authenticate(self, request: ClientSecretAuthenticationRequest) -> AuthenticationResult:
        """
        Authenticate the claimed client credentials.

        Args:
            request: Claimed client id and secret

        Returns:
            Authenticated with the client id as principal, or Rejected(INVALID_CLIENT)
            for both an unknown client and a wrong secret

        Raises:
            ClientDirectoryException: Propagated from the directory on lookup failure
        """
        registered_client = self._client_directory.find_by_client_id(request.claimed_client_id)
        if registered_client is None:
            # Unknown clients still pay for one secret comparison
            self._secret_matcher.dummy_match(request.claimed_secret)
            return Rejected(reason=ErrorKind.INVALID_CLIENT)

        if not self._secret_matcher.matches(request.claimed_secret, registered_client.client_secret):
            return Rejected(reason=ErrorKind.INVALID_CLIENT)

        return Authenticated(principal=registered_client.client_id, registered_client=registered_client)
