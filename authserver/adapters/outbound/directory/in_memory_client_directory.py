# authserver/adapters/outbound/directory/in_memory_client_directory.py

from typing import Dict, Optional

from authserver.application.ports.outbound import IClientDirectory
from authserver.domain.models.registered_client import RegisteredClient


class InMemoryClientDirectory(IClientDirectory):
    """
    Client directory held in memory.

    The mappings are built once in the constructor and only read afterwards,
    so lookups are safe from concurrent threads.
    """

    def __init__(self, *registered_clients: RegisteredClient):
        if not registered_clients:
            raise ValueError("registered_clients cannot be empty")

        by_id: Dict[str, RegisteredClient] = {}
        by_client_id: Dict[str, RegisteredClient] = {}
        for client in registered_clients:
            if client.id in by_id:
                raise ValueError(f"Registration must be unique. Found duplicate id: {client.id}")
            if client.client_id in by_client_id:
                raise ValueError(f"Registration must be unique. Found duplicate client_id: {client.client_id}")
            by_id[client.id] = client
            by_client_id[client.client_id] = client

        self._by_id = by_id
        self._by_client_id = by_client_id

    def find_by_id(self, id: str) -> Optional[RegisteredClient]:
        return self._by_id.get(id)

    def find_by_client_id(self, client_id: str) -> Optional[RegisteredClient]:
        return self._by_client_id.get(client_id)
