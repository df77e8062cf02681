# authserver/main.py

"""
Composition root.

Configures logging and wires the client authentication service from
settings and a client directory.
"""

import logging
from typing import Optional

from authserver.adapters.configuration.config import Settings, settings as default_settings
from authserver.adapters.outbound.events.logging_event_publisher import LoggingAuthenticationEventPublisher
from authserver.adapters.outbound.security.secret_matcher import HashedSecretMatcher
from authserver.application.ports.outbound import (
    IAuthenticationEventPublisher,
    IClientDirectory,
    ISecretMatcher,
)
from authserver.application.use_cases.client_authentication_use_cases import ClientAuthenticationService
from authserver.domain.services.client_authenticator import ClientAuthenticator
from authserver.domain.services.secret_comparison import ConstantTimeSecretMatcher

logger = logging.getLogger(__name__)


def configure_logging(settings: Optional[Settings] = None) -> None:
    # ─── UNIQUE LOGGING CONFIGURATION ─────────────────────────────────────────────
    settings = settings or default_settings
    level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def build_secret_matcher(settings: Optional[Settings] = None) -> ISecretMatcher:
    settings = settings or default_settings
    if settings.CLIENT_SECRET_ENCODING == "hashed":
        return HashedSecretMatcher(schemes=settings.SECRET_HASH_SCHEMES)
    return ConstantTimeSecretMatcher()


def build_client_authentication_service(
        client_directory: IClientDirectory,
        settings: Optional[Settings] = None,
        event_publisher: Optional[IAuthenticationEventPublisher] = None,
) -> ClientAuthenticationService:
    """
    Build the client authentication service.

    Args:
        client_directory: Source of registered clients
        settings: Settings to use, the module-level settings by default
        event_publisher: Outcome consumer, logging publisher by default

    Raises:
        ConfigurationError: If client_directory is None
    """
    settings = settings or default_settings
    authenticator = ClientAuthenticator(client_directory, build_secret_matcher(settings))
    logger.info(f"Client authentication configured with '{settings.CLIENT_SECRET_ENCODING}' secrets")
    return ClientAuthenticationService(
        [authenticator],
        event_publisher=event_publisher or LoggingAuthenticationEventPublisher(),
    )
