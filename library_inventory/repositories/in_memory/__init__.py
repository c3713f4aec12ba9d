"""Thread-safe in-memory repository implementations."""

from .inventory_repository import InMemoryInventoryRepository

__all__ = [
    "InMemoryInventoryRepository",
]
