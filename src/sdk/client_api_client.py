"""HTTP client for consuming the Client API."""
from typing import Optional
from httpx import AsyncClient, Response

from src.sdk.schemas import (
    ClientResponse,
    CreateClientRequest,
    UpdateClientRequest,
)


class ClientApiClient:
    """HTTP client for interacting with the Client API."""

    def __init__(self, base_url: str, client: Optional[AsyncClient] = None):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the Client API (e.g., "http://localhost:8000")
            client: Optional httpx.AsyncClient instance. If not provided, a new one will be created.
        """
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        """Async context manager entry."""
        if self._owns_client:
            self._client = AsyncClient(base_url=self.base_url)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._owns_client and self._client:
            await self._client.aclose()

    @property
    def client(self) -> AsyncClient:
        """Get the underlying httpx client."""
        if self._client is None:
            raise RuntimeError("Client not initialized. Use async context manager.")
        return self._client

    async def list_clients(self) -> list[ClientResponse]:
        """
        List all clients.

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        response: Response = await self.client.get("/clients")
        response.raise_for_status()
        return [ClientResponse(**client) for client in response.json()]

    async def get_client(self, client_id: int) -> ClientResponse:
        """
        Get a client by ID.

        Args:
            client_id: ID of the client

        Returns:
            Client response

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.get(f"/clients/{client_id}")
        response.raise_for_status()
        return ClientResponse(**response.json())

    async def search_clients(self, name: Optional[str] = None) -> list[ClientResponse]:
        """
        Search clients by name fragment. A blank or missing name lists every client.

        Raises:
            httpx.HTTPStatusError: If the request fails (404 if a non-blank name matches nothing)
        """
        params = {"name": name} if name is not None else None
        response: Response = await self.client.get("/clients/search", params=params)
        response.raise_for_status()
        return [ClientResponse(**client) for client in response.json()]

    async def create_client(self, request: CreateClientRequest) -> ClientResponse:
        """
        Create a new client.

        Args:
            request: Client creation request

        Returns:
            Created client response

        Raises:
            httpx.HTTPStatusError: If the request fails (409 on duplicate CUIT or email)
        """
        response: Response = await self.client.post(
            "/clients",
            json=request.model_dump(mode="json", by_alias=True)
        )
        response.raise_for_status()
        return ClientResponse(**response.json())

    async def update_client(self, client_id: int, request: UpdateClientRequest) -> ClientResponse:
        """
        Replace every field of an existing client.

        Args:
            client_id: ID of the client, must equal ``request.id``
            request: Client update request

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        response: Response = await self.client.put(
            f"/clients/{client_id}",
            json=request.model_dump(mode="json", by_alias=True),
        )
        response.raise_for_status()
        return ClientResponse(**response.json())

    async def delete_client(self, client_id: int) -> None:
        """
        Delete a client.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.delete(f"/clients/{client_id}")
        response.raise_for_status()
