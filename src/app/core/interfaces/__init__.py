"""Persistence contracts implemented by the infrastructure layer."""
from src.app.core.interfaces.client_store import ClientStore

__all__ = [
    "ClientStore",
]
