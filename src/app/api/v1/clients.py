from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from dependency_injector.wiring import Provide, inject

from src.app.containers import Container
from src.app.core.services.client_service import ClientService
from src.sdk.schemas import CreateClientRequest, UpdateClientRequest, ClientResponse
from src.app.api.mappers import to_client_response
from src.shared.exceptions import (
    ConflictingEntityFound,
    EntityNotFound,
    IdentifierMismatch,
    NoMatchingEntities,
)
from src.app.logging import get_logger

router = APIRouter(prefix="/clients", tags=["clients"])
logger = get_logger(__name__)


@router.get("", response_model=list[ClientResponse])
@inject
async def list_clients(
    service: ClientService = Depends(Provide[Container.client_service]),
) -> list[ClientResponse]:
    """List all clients."""
    clients = await service.list_clients()
    return [to_client_response(client) for client in clients]


# Declared before "/{client_id}" so that "search" is not taken for an ID.
@router.get("/search", response_model=list[ClientResponse])
@inject
async def search_clients(
    name: Optional[str] = Query(default=None, description="Fragment of a first, last or corporate name"),
    service: ClientService = Depends(Provide[Container.client_service]),
) -> list[ClientResponse]:
    """
    Search clients by name.

    Matching is case- and accent-insensitive and looks for the fragment anywhere
    in the names. A missing or blank name returns every client.

    Raises:
        HTTPException 404: If a non-blank name matches no client
    """
    try:
        clients = await service.search_clients(name)
    except NoMatchingEntities as e:
        logger.info(f"Search found nothing: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return [to_client_response(client) for client in clients]


@router.get("/{client_id}", response_model=ClientResponse)
@inject
async def get_client(
    client_id: int,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> ClientResponse:
    """Get a client by ID."""
    try:
        client = await service.get_client(client_id)
        return to_client_response(client)
    except EntityNotFound as e:
        logger.error(f"Client not found: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
@inject
async def create_client(
    request: CreateClientRequest,
    http_request: Request,
    response: Response,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> ClientResponse:
    """
    Create a new client.

    Raises:
        HTTPException 409: If the CUIT or email is already registered
    """
    try:
        client = await service.create_client(request)
    except ConflictingEntityFound as e:
        logger.error(f"Failed to create client: {e}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    response.headers["Location"] = str(http_request.url_for("get_client", client_id=client.id))
    return to_client_response(client)


@router.put("/{client_id}", response_model=ClientResponse)
@inject
async def update_client(
    client_id: int,
    request: UpdateClientRequest,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> ClientResponse:
    """
    Replace every field of an existing client.

    Raises:
        HTTPException 400: If the URL ID differs from the body ID
        HTTPException 404: If the client does not exist
        HTTPException 409: If the email or CUIT belongs to another client
    """
    try:
        client = await service.update_client(client_id, request)
        return to_client_response(client)
    except IdentifierMismatch as e:
        logger.error(f"Failed to update client: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFound as e:
        logger.error(f"Client not found: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConflictingEntityFound as e:
        logger.error(f"Failed to update client: {e}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
@inject
async def delete_client(
    client_id: int,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> None:
    """Delete a client by ID."""
    try:
        await service.delete_client(client_id)
    except EntityNotFound as e:
        logger.error(f"Client not found: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
