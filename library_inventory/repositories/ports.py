"""Repository interfaces for dependency inversion."""

from typing import Protocol

from library_inventory.domain import Book, InventoryRecord


class InventoryRepository(Protocol):
    """Repository interface for book inventory."""

    def add_book(self, book: Book, copies: int) -> InventoryRecord:
        """Stock copies of a book, creating its record on first sight"""
        ...

    def find_by_isbn(self, isbn: str) -> InventoryRecord | None:
        """Retrieve the record for an exact ISBN"""
        ...

    def find_by_author(self, author: str) -> set[InventoryRecord] | None:
        """Retrieve records whose author matches exactly, ignoring case"""
        ...

    def find_by_title(self, title: str) -> set[InventoryRecord] | None:
        """Retrieve records whose title matches exactly, ignoring case"""
        ...

    def borrow(self, isbn: str) -> bool:
        """Lend one copy of a book if possible"""
        ...

    def total_borrowed_count(self) -> int:
        """Get the number of copies currently lent out"""
        ...

    def find_all(self) -> list[InventoryRecord]:
        """Retrieve every record"""
        ...

    def count_all(self) -> int:
        """Get the number of distinct ISBNs"""
        ...
