# authserver/domain/__init__.py

"""
Main module for the domain components of the application.

Exports domain exceptions and models. Domain services are imported from
``authserver.domain.services`` directly.
"""

from authserver.domain.exceptions import (
    DomainException,               # Pure domain base exception
    ConfigurationError,
    InvalidClientException,
    ClientDirectoryException,
    UnsupportedAuthenticationRequestException,
)
from authserver.domain.models.authentication import (
    AuthenticationRequestKind,
    AuthenticationResult,
    AuthenticationStatus,
    Authenticated,
    ClientSecretAuthenticationRequest,
    ErrorKind,
    Rejected,
)
from authserver.domain.models.registered_client import RegisteredClient
