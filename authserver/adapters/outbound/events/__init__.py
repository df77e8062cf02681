# authserver/adapters/outbound/events/__init__.py

from authserver.adapters.outbound.events.logging_event_publisher import LoggingAuthenticationEventPublisher

__all__ = ["LoggingAuthenticationEventPublisher"]
