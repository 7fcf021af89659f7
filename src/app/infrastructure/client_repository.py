import logging
from typing import NoReturn, Optional

from sqlalchemy import case, exists, or_, select
from sqlalchemy.exc import IntegrityError

from src.app.core.domain.conflicts import conflict_error
from src.app.core.domain.models import Client
from src.app.core.interfaces.client_store import ClientStore
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database
from src.shared.exceptions import EntityNotFound
from src.shared.text import fold_text

from src.app.infrastructure.entities.client_entity import ClientEntity
from src.app.infrastructure.mappers.client_mapper import ClientMapper

logger = logging.getLogger(__name__)


class ClientRepository(BaseRepository[ClientEntity, Client], ClientStore):
    """Repository for Client operations."""

    def __init__(self, db: Database, mapper: ClientMapper):
        super().__init__(db, mapper)

    async def get_all(self) -> list[Client]:
        """Get all clients, ordered by ID."""
        return await self.find_all(select(ClientEntity).order_by(ClientEntity.id))

    async def get_by_id(self, client_id: int) -> Optional[Client]:
        """Get a client by ID."""
        return await self.find_one(
            select(ClientEntity).where(ClientEntity.id == client_id)
        )

    async def search_by_name(self, fragment: str) -> list[Client]:
        """
        Search for clients whose first, last or corporate name contains the fragment.

        Matching is case- and accent-insensitive: both sides are folded (see
        ``fold_text``), the stored side at write time into ``search_name``.
        ``%`` and ``_`` in the fragment match literally.

        Args:
            fragment: Text to look for anywhere in the names

        Returns:
            Matching clients ordered by last name, then first name. Empty if none match.
        """
        stmt = (
            select(ClientEntity)
            .where(ClientEntity.search_name.contains(fold_text(fragment), autoescape=True))
            .order_by(ClientEntity.last_name, ClientEntity.first_name, ClientEntity.id)
        )
        return await self.find_all(stmt)

    async def get_conflict(
        self, cuit: str, email: str, exclude_id: Optional[int] = None
    ) -> Optional[Client]:
        """Get a client sharing the CUIT or the email. CUIT matches come first."""
        stmt = (
            select(ClientEntity)
            .where(or_(ClientEntity.cuit == cuit, ClientEntity.email == email))
            .order_by(case((ClientEntity.cuit == cuit, 0), else_=1), ClientEntity.id)
            .limit(1)
        )
        if exclude_id is not None:
            stmt = stmt.where(ClientEntity.id != exclude_id)
        return await self.find_first(stmt)

    async def email_exists_for_other_client(self, email: str, exclude_id: int) -> bool:
        """Check whether any client other than ``exclude_id`` uses the email."""
        stmt = select(
            exists().where(ClientEntity.email == email, ClientEntity.id != exclude_id)
        )
        return bool(await self.scalar(stmt))

    async def add(self, client: Client) -> Client:
        """Insert a new client. The database assigns the ID."""
        try:
            return await self._insert(client.model_copy(update={"id": None}))
        except IntegrityError as e:
            await self._raise_conflict(client, e)

    async def update(self, client: Client) -> Client:
        """Overwrite every mutable field of the client with ``client.id``."""
        try:
            stored = await self._replace(ClientEntity, client.id, client)
        except IntegrityError as e:
            await self._raise_conflict(client, e, exclude_id=client.id)
        if stored is None:
            raise EntityNotFound("Client", client.id)
        return stored

    async def delete(self, client: Client) -> None:
        """Delete the client with ``client.id``."""
        if not await self._remove(ClientEntity, client.id):
            raise EntityNotFound("Client", client.id)

    async def _raise_conflict(
        self, client: Client, error: IntegrityError, exclude_id: Optional[int] = None
    ) -> NoReturn:
        """
        Translate a unique-constraint violation into the conflict it stands for.

        The violation is attributed by re-running the conflict query, which keeps
        the CUIT-before-email priority and does not depend on driver error text.
        If no conflicting row is visible any more, the original error is re-raised.
        """
        existing = await self.get_conflict(client.cuit, str(client.email), exclude_id=exclude_id)
        if existing is None:
            raise error
        logger.warning("Storage rejected client %s as a duplicate", client.cuit)
        raise conflict_error(existing, client.cuit, str(client.email)) from error
