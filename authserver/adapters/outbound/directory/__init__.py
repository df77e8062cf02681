# authserver/adapters/outbound/directory/__init__.py

from authserver.adapters.outbound.directory.in_memory_client_directory import InMemoryClientDirectory

__all__ = ["InMemoryClientDirectory"]
