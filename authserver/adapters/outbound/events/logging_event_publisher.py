# authserver/adapters/outbound/events/logging_event_publisher.py

import logging

from authserver.application.ports.outbound import IAuthenticationEventPublisher
from authserver.domain.models.authentication import (
    Authenticated,
    ClientSecretAuthenticationRequest,
    Rejected,
)

logger = logging.getLogger(__name__)


class LoggingAuthenticationEventPublisher(IAuthenticationEventPublisher):
    """Writes authentication outcomes to the log. Secrets are never logged."""

    def publish_success(self, result: Authenticated) -> None:
        logger.info(f"Successful client authentication: {result.principal}")

    def publish_failure(self, request: ClientSecretAuthenticationRequest, result: Rejected) -> None:
        logger.warning(
            f"Client authentication rejected: {request.claimed_client_id} | "
            f"Reason: {result.reason.error_code}"
        )
