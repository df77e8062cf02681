# authserver/adapters/outbound/persistence/repositories/client_directory_repository.py

"""
Repository for registered client lookups.

This module implements the read-only client directory backed by the
database, implementing the IClientDirectory interface.
"""

import logging
from typing import Optional
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from authserver.adapters.outbound.persistence.database import get_db_context
from authserver.adapters.outbound.persistence.models.registered_client_model import RegisteredClientModel
from authserver.application.ports.outbound import IClientDirectory
from authserver.domain.exceptions import ClientDirectoryException
from authserver.domain.models.registered_client import RegisteredClient


class SqlAlchemyClientDirectory(IClientDirectory):
    """
    Client directory reading the ``registered_clients`` table.

    Every lookup opens its own session from the factory, so one instance
    can be shared across threads.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory
        self.logger = logging.getLogger(f"{__name__}.{type(self).__name__}")

    def find_by_client_id(self, client_id: str) -> Optional[RegisteredClient]:
        """
        Find a registered client by client_id.

        Args:
            client_id: Client identifier

        Returns:
            Registered client found or None if it doesn't exist

        Raises:
            ClientDirectoryException: In case of database error or an invalid stored record
        """
        try:
            with get_db_context(self.session_factory) as db:
                query = select(RegisteredClientModel).where(RegisteredClientModel.client_id == client_id)
                db_model = db.execute(query).scalar_one_or_none()
                return self.to_domain(db_model) if db_model is not None else None
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching registered client by client_id: {str(e)}")
            raise ClientDirectoryException(
                detail="Error fetching registered client by client_id",
                original_error=e
            )
        except ValueError as e:
            self.logger.error(f"Invalid registered client row: {str(e)}")
            raise ClientDirectoryException(
                detail="Invalid registered client record",
                original_error=e
            )

    def to_domain(self, db_model: RegisteredClientModel) -> RegisteredClient:
        """
        Convert database model to domain model.

        Args:
            db_model: RegisteredClientModel ORM model

        Returns:
            Domain model of the registered client
        """
        return RegisteredClient(
            id=db_model.id,
            client_id=db_model.client_id,
            client_secret=db_model.client_secret,
            client_name=db_model.client_name,
            created_at=db_model.created_at,
        )
