"""Typed HTTP client and schemas for the Client API."""
from src.sdk.client_api_client import ClientApiClient
from src.sdk.schemas import (
    ClientFields,
    ClientResponse,
    CreateClientRequest,
    UpdateClientRequest,
)

__all__ = [
    "ClientApiClient",
    "ClientFields",
    "ClientResponse",
    "CreateClientRequest",
    "UpdateClientRequest",
]
