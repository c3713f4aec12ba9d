"""Domain-specific exceptions for the library inventory.

This module contains all domain-level exceptions that represent business
rule violations and error conditions within the inventory domain.
These exceptions are framework-agnostic and should be mapped to appropriate
HTTP responses at the API layer.
"""

from library_inventory.core.constants import CONFLICT_MESSAGE


class DomainError(Exception):
    """Base class for all domain-specific business logic errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class InvalidArgumentError(DomainError, ValueError):
    """Raised when a required value is blank or a copy count is not positive.

    Always raised before any state is touched.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, "INVALID_ARGUMENT")
        self.field = field


class InventoryError(DomainError):
    """Base class for inventory-related errors."""


class IsbnConflictError(InventoryError):
    """Raised when an ISBN is re-added with different book metadata."""

    def __init__(self, isbn: str) -> None:
        message = f"{CONFLICT_MESSAGE}: '{isbn}'"
        super().__init__(message, "ISBN_CONFLICT")
        self.isbn = isbn


class BookNotFoundError(InventoryError):
    """Raised when a single-ISBN lookup expects a book that isn't stocked."""

    def __init__(self, isbn: str) -> None:
        message = f"No book with ISBN '{isbn}'"
        super().__init__(message, "BOOK_NOT_FOUND")
        self.isbn = isbn


class BookNotAvailableError(InventoryError):
    """Raised by the HTTP layer when a borrow of a stocked book is refused."""

    def __init__(self, isbn: str) -> None:
        message = f"Book with ISBN '{isbn}' cannot be borrowed"
        super().__init__(message, "BOOK_NOT_AVAILABLE")
        self.isbn = isbn
