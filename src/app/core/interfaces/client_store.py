"""Contract for Client persistence."""
from abc import ABC, abstractmethod
from typing import Optional

from src.app.core.domain.models import Client


class ClientStore(ABC):
    """Record store holding Client rows."""

    @abstractmethod
    async def get_all(self) -> list[Client]:
        """Get all clients, ordered by ID."""

    @abstractmethod
    async def get_by_id(self, client_id: int) -> Optional[Client]:
        """Get a client by ID, or None."""

    @abstractmethod
    async def add(self, client: Client) -> Client:
        """
        Persist a new client and return it with its assigned ID.

        Raises:
            ConflictingEntityFound: If the storage rejects a duplicate CUIT or email
        """

    @abstractmethod
    async def update(self, client: Client) -> Client:
        """
        Overwrite every mutable field of the stored client with ``client.id``.

        Raises:
            EntityNotFound: If no such client exists
            ConflictingEntityFound: If the storage rejects a duplicate CUIT or email
        """

    @abstractmethod
    async def delete(self, client: Client) -> None:
        """
        Remove the stored client with ``client.id``.

        Raises:
            EntityNotFound: If no such client exists
        """

    @abstractmethod
    async def search_by_name(self, fragment: str) -> list[Client]:
        """Case- and accent-insensitive substring search over first, last and corporate names."""

    @abstractmethod
    async def get_conflict(
        self, cuit: str, email: str, exclude_id: Optional[int] = None
    ) -> Optional[Client]:
        """
        Get a client sharing the CUIT or the email, or None.

        Clients sharing the CUIT are returned ahead of clients sharing only the email.
        """

    @abstractmethod
    async def email_exists_for_other_client(self, email: str, exclude_id: int) -> bool:
        """Check whether a client other than ``exclude_id`` already uses ``email``."""
