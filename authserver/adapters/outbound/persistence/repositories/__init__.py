# authserver/adapters/outbound/persistence/repositories/__init__.py

from authserver.adapters.outbound.persistence.repositories.client_directory_repository import (
    SqlAlchemyClientDirectory,
)

__all__ = ["SqlAlchemyClientDirectory"]
