"""Dependency injection container using dependency-injector library."""
from dependency_injector import containers, providers

from src.app.config import Settings
from src.shared.database.database import Database, DatabaseSettings

from src.app.infrastructure.mappers.client_mapper import ClientMapper
from src.app.infrastructure.client_repository import ClientRepository

from src.app.core.services.client_service import ClientService
from src.app.core.validation import ClientValidator


class Container(containers.DeclarativeContainer):
    """Main application dependency injection container."""

    wiring_config = containers.WiringConfiguration(
        modules=[
            "src.app.api.v1.clients",
        ]
    )

    # =========================================================================
    # CONFIGURATION - Singleton (loaded once, cached)
    # =========================================================================
    config = providers.Singleton(Settings)

    # =========================================================================
    # SINGLETONS - Stateless helpers (reusable across all requests)
    # =========================================================================
    client_mapper = providers.Singleton(ClientMapper)

    client_validator = providers.Singleton(
        ClientValidator,
        phone_policy=config.provided.validation.phone_policy,
    )

    # =========================================================================
    # SINGLETON - Database (shared connection pool)
    # =========================================================================
    database_settings = providers.Singleton(
        DatabaseSettings,
        db_url=config.provided.database_url,
        echo=config.provided.database_echo,
    )

    database = providers.Singleton(
        Database,
        db_settings=database_settings,
    )

    # =========================================================================
    # FACTORIES - Repositories (per-request, share database singleton)
    # =========================================================================
    client_repository = providers.Factory(
        ClientRepository,
        db=database,
        mapper=client_mapper,
    )

    # =========================================================================
    # FACTORIES - Services
    # =========================================================================
    client_service = providers.Factory(
        ClientService,
        store=client_repository,
        validator=client_validator,
        check_email_on_update=config.provided.validation.check_email_on_update,
    )
