"""Dependency injection providers for API endpoints.

This module contains dependency providers that create and inject services
and repositories into API endpoints. It follows the dependency injection
pattern to decouple the API layer from concrete implementations.
"""

from functools import lru_cache

from library_inventory.repositories.in_memory import InMemoryInventoryRepository
from library_inventory.services import LibraryService


@lru_cache
def get_inventory_repository() -> InMemoryInventoryRepository:
    """Get the inventory repository instance.

    This function provides a singleton instance of the inventory repository.
    Using lru_cache ensures the same instance is reused across requests,
    so every request sees the same copy counts.

    Returns:
        The inventory repository instance
    """
    return InMemoryInventoryRepository()


@lru_cache
def get_library_service() -> LibraryService:
    """Get the library service instance.

    Returns:
        The library service instance bound to the shared repository
    """
    return LibraryService(get_inventory_repository())
