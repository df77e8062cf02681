"""
Shared pytest fixtures for authserver tests.

This module provides common fixtures including:
- A registered client and an in-memory directory holding it
- The client authenticator and the authentication service
- An in-memory SQLite client directory
"""

from typing import List

import pytest
from sqlalchemy.pool import StaticPool

from authserver.adapters.outbound.directory.in_memory_client_directory import InMemoryClientDirectory
from authserver.adapters.outbound.persistence.database import Base, build_engine, build_session_factory
from authserver.application.ports.outbound import IAuthenticationEventPublisher
from authserver.application.use_cases.client_authentication_use_cases import ClientAuthenticationService
from authserver.domain.models.registered_client import RegisteredClient
from authserver.domain.services.client_authenticator import ClientAuthenticator


class RecordingEventPublisher(IAuthenticationEventPublisher):
    """Keeps every published event for later assertions."""

    def __init__(self):
        self.successes: List = []
        self.failures: List = []

    def publish_success(self, result) -> None:
        self.successes.append(result)

    def publish_failure(self, request, result) -> None:
        self.failures.append((request, result))


@pytest.fixture
def registered_client():
    return RegisteredClient(id="registration-1", client_id="web-client", client_secret="secret")


@pytest.fixture
def client_directory(registered_client):
    return InMemoryClientDirectory(registered_client)


@pytest.fixture
def authenticator(client_directory):
    return ClientAuthenticator(client_directory)


@pytest.fixture
def event_publisher():
    return RecordingEventPublisher()


@pytest.fixture
def authentication_service(authenticator, event_publisher):
    return ClientAuthenticationService([authenticator], event_publisher=event_publisher)


@pytest.fixture
def sql_engine():
    """In-memory SQLite engine with the client directory schema."""
    engine = build_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(sql_engine):
    return build_session_factory(sql_engine)
