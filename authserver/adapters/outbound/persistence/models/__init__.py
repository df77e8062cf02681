# authserver/adapters/outbound/persistence/models/__init__.py

"""
Data models module.

This module exports the SQLAlchemy models of the client directory.
"""

from authserver.adapters.outbound.persistence.database import Base
from authserver.adapters.outbound.persistence.models.registered_client_model import RegisteredClientModel

__all__ = [
    "Base",
    "RegisteredClientModel",
]
