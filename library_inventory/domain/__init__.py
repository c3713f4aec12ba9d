"""Domain layer for the library inventory.

This package contains the core business logic, entities, and domain-specific
exceptions. It's framework-agnostic and represents the heart of the application's
business rules.
"""

from .entities import Book, BookAvailability, BookCategory, InventoryRecord
from .errors import (
    BookNotAvailableError,
    BookNotFoundError,
    DomainError,
    InvalidArgumentError,
    InventoryError,
    IsbnConflictError,
)
from .validation import (
    is_blank,
    normalize_lower,
    require_non_blank,
    require_non_negative,
    require_positive,
)

__all__ = [
    # Entities
    "Book",
    "BookAvailability",
    "BookCategory",
    "InventoryRecord",
    # Errors
    "DomainError",
    "InvalidArgumentError",
    "InventoryError",
    "IsbnConflictError",
    "BookNotFoundError",
    "BookNotAvailableError",
    # Validation
    "is_blank",
    "normalize_lower",
    "require_non_blank",
    "require_non_negative",
    "require_positive",
]
