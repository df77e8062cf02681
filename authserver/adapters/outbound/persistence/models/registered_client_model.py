# authserver/adapters/outbound/persistence/models/registered_client_model.py

"""
Registered client model for the client directory.

This module defines the RegisteredClientModel table read by the
SQLAlchemy-backed client directory.
"""

from sqlalchemy import Column, String, DateTime, func
from authserver.adapters.outbound.persistence.database import Base


class RegisteredClientModel(Base):
    """
    Model representing a client (application/partner) registered with the
    authorization server.

    Attributes:
        id: Registration identifier
        client_id: Public client ID (like a username)
        client_secret: Secret, plain text or passlib hash; NULL for clients without one
        client_name: Display name
        created_at: Creation date and time
    """
    __tablename__ = "registered_clients"

    id = Column(String(100), primary_key=True)
    client_id = Column(String(100), unique=True, nullable=False, index=True)
    client_secret = Column(String(255), nullable=True)
    client_name = Column(String(200), nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    def __repr__(self) -> str:
        """String representation of the RegisteredClientModel object."""
        return f"<RegisteredClientModel(client_id={self.client_id})>"
