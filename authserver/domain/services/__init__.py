# authserver/domain/services/__init__.py

from authserver.domain.services.client_authenticator import ClientAuthenticator
from authserver.domain.services.secret_comparison import ConstantTimeSecretMatcher

__all__ = [
    "ClientAuthenticator",
    "ConstantTimeSecretMatcher",
]
