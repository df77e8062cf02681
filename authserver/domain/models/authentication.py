# authserver/domain/models/authentication.py

"""
Request and result types for client authentication.

A request is a transient value built per attempt. The result is a tagged
union: either ``Authenticated`` or ``Rejected``, told apart by ``status``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from authserver.domain.models.registered_client import RegisteredClient


class AuthenticationRequestKind(str, Enum):
    """Credential-verification strategies a caller can select."""
    CLIENT_SECRET = "client_secret"


class AuthenticationStatus(str, Enum):
    AUTHENTICATED = "authenticated"
    REJECTED = "rejected"


class ErrorKind(str, Enum):
    """Externally observable failure kinds."""
    INVALID_CLIENT = "invalid_client"

    @property
    def error_code(self) -> str:
        """OAuth2 error code reported to the client."""
        return self.value


@dataclass(frozen=True)
class ClientSecretAuthenticationRequest:
    """Claimed client credentials for a single authentication attempt."""
    claimed_client_id: str
    claimed_secret: Optional[str] = field(default=None, repr=False)

    @property
    def kind(self) -> AuthenticationRequestKind:
        return AuthenticationRequestKind.CLIENT_SECRET


@dataclass(frozen=True)
class Authenticated:
    """Successful outcome. The claimed secret is not retained."""
    principal: str
    registered_client: RegisteredClient
    status: AuthenticationStatus = field(default=AuthenticationStatus.AUTHENTICATED, init=False)

    @property
    def is_authenticated(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    """
    Failed outcome.

    Holds only the error kind, so an unknown client and a wrong secret
    produce equal values.
    """
    reason: ErrorKind = ErrorKind.INVALID_CLIENT
    status: AuthenticationStatus = field(default=AuthenticationStatus.REJECTED, init=False)

    @property
    def is_authenticated(self) -> bool:
        return False


AuthenticationResult = Union[Authenticated, Rejected]
