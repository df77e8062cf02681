# authserver/domain/models/registered_client.py

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class RegisteredClient:
    """Domain model for a client registered with the authorization server."""
    id: str  # Registration identifier
    client_id: str  # Public identifier
    client_secret: Optional[str] = field(default=None, repr=False)  # Plain text or passlib hash
    client_name: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("id cannot be empty")
        if not self.client_id:
            raise ValueError("client_id cannot be empty")
