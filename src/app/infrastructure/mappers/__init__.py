"""Infrastructure mappers for converting between domain models and database entities."""
from src.app.infrastructure.mappers.client_mapper import ClientMapper

__all__ = [
    "ClientMapper",
]
