from src.shared.database.base_mapper import BaseEntityMapper
from src.app.core.domain.models import Client
from src.app.infrastructure.entities.client_entity import ClientEntity


class ClientMapper(BaseEntityMapper[Client, ClientEntity]):
    """Mapper for converting between Client domain model and ClientEntity."""

    @staticmethod
    def to_entity(model_instance: Client) -> ClientEntity:
        """Convert a Client (domain model) to ClientEntity (database entity)."""
        return ClientEntity(
            id=model_instance.id,
            first_name=model_instance.first_name,
            last_name=model_instance.last_name,
            corporate_name=model_instance.corporate_name,
            cuit=model_instance.cuit,
            birthdate=model_instance.birthdate,
            cell_phone=model_instance.cell_phone,
            email=str(model_instance.email),
            search_name=model_instance.search_name,
        )

    @staticmethod
    def to_model(entity: ClientEntity) -> Client:
        """Convert a ClientEntity (database entity) to Client (domain model)."""
        return Client(
            id=entity.id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            corporate_name=entity.corporate_name,
            cuit=entity.cuit,
            birthdate=entity.birthdate,
            cell_phone=entity.cell_phone,
            email=entity.email,
        )

    @staticmethod
    def apply_to_entity(model_instance: Client, entity: ClientEntity) -> None:
        """Overwrite every column except the ID."""
        entity.first_name = model_instance.first_name
        entity.last_name = model_instance.last_name
        entity.corporate_name = model_instance.corporate_name
        entity.cuit = model_instance.cuit
        entity.birthdate = model_instance.birthdate
        entity.cell_phone = model_instance.cell_phone
        entity.email = str(model_instance.email)
        entity.search_name = model_instance.search_name
