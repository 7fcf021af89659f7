import logging
from typing import Optional

from src.app.core.domain.conflicts import conflict_error, EMAIL_FIELD
from src.app.core.domain.models import Client
from src.app.core.interfaces.client_store import ClientStore
from src.app.core.validation import ClientValidator
from src.sdk.schemas import ClientFields, CreateClientRequest, UpdateClientRequest

from src.shared.exceptions import (
    ConflictingEntityFound,
    EntityNotFound,
    IdentifierMismatch,
    NoMatchingEntities,
)

logger = logging.getLogger(__name__)


class ClientService:
    """Service for handling Client business logic."""

    def __init__(
        self,
        store: ClientStore,
        validator: ClientValidator,
        check_email_on_update: bool = True,
    ):
        self.store = store
        self.validator = validator
        self.check_email_on_update = check_email_on_update

    async def list_clients(self) -> list[Client]:
        """Get all clients."""
        return await self.store.get_all()

    async def get_client(self, client_id: int) -> Client:
        """Get a client by ID."""
        client = await self.store.get_by_id(client_id)
        if not client:
            raise EntityNotFound("Client", client_id)
        return client

    async def search_clients(self, name: Optional[str]) -> list[Client]:
        """
        Search clients by a name fragment.

        A missing or blank fragment behaves exactly like listing every client.

        Raises:
            NoMatchingEntities: If a non-blank fragment matches no client
        """
        if name is None or not name.strip():
            return await self.store.get_all()

        clients = await self.store.search_by_name(name.strip())
        if not clients:
            raise NoMatchingEntities("clients", name.strip())
        return clients

    async def create_client(self, request: CreateClientRequest) -> Client:
        """
        Create a new client.

        Raises:
            EntityValidationFailed: If a field breaks a format rule
            ConflictingEntityFound: If the CUIT or email is already registered.
                The CUIT is reported when both collide.
        """
        self.validator.ensure_valid(request)

        existing = await self.store.get_conflict(request.cuit, request.email)
        if existing is not None:
            raise conflict_error(existing, request.cuit, request.email)

        # The store assigns the ID
        client = Client(id=None, **_mutable_fields(request))
        created = await self.store.add(client)
        logger.info("Created client %s", created.id)
        return created

    async def update_client(self, client_id: int, request: UpdateClientRequest) -> Client:
        """
        Replace every mutable field of an existing client.

        Raises:
            IdentifierMismatch: If ``client_id`` differs from ``request.id``. Nothing is read.
            EntityValidationFailed: If a field breaks a format rule
            EntityNotFound: If the client does not exist
            ConflictingEntityFound: If another client already uses the email
        """
        if client_id != request.id:
            raise IdentifierMismatch(client_id, request.id)

        self.validator.ensure_valid(request)

        existing = await self.get_client(client_id)

        if self.check_email_on_update and await self.store.email_exists_for_other_client(
            request.email, client_id
        ):
            raise ConflictingEntityFound("Client", EMAIL_FIELD, request.email)

        updated = existing.model_copy(update=_mutable_fields(request))
        stored = await self.store.update(updated)
        logger.info("Updated client %s", stored.id)
        return stored

    async def delete_client(self, client_id: int) -> None:
        """Delete a client by ID."""
        client = await self.get_client(client_id)
        await self.store.delete(client)
        logger.info("Deleted client %s", client_id)


def _mutable_fields(fields: ClientFields) -> dict:
    return {
        "first_name": fields.first_name,
        "last_name": fields.last_name,
        "corporate_name": fields.corporate_name,
        "cuit": fields.cuit,
        "birthdate": fields.birthdate,
        "cell_phone": fields.cell_phone,
        "email": fields.email,
    }
