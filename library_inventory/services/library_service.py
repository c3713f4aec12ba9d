"""Library service for orchestrating inventory-related business operations.

This module contains the LibraryService class that implements the use cases
for stocking, finding and lending books, providing a clean interface between
the API layer and the domain/repository layers.
"""

import logging

from library_inventory.domain import (
    Book,
    BookAvailability,
    BookNotFoundError,
    InventoryRecord,
    is_blank,
    require_non_blank,
    require_positive,
)
from library_inventory.repositories.ports import InventoryRepository

logger = logging.getLogger(__name__)


class LibraryService:
    """Service class for inventory use cases.

    This service shapes raw repository results into read-only
    BookAvailability views and screens out requests that can never succeed
    (blank queries, reference books) before touching the repository.

    Attributes:
        _repository: The inventory repository implementation
    """

    def __init__(self, repository: InventoryRepository) -> None:
        """Initialize the library service.

        Args:
            repository: The inventory repository implementation to use
        """
        if repository is None:
            raise ValueError("repository must be provided")
        self._repository = repository

    def add_book(self, book: Book, copies: int) -> BookAvailability:
        """Stock copies of a book.

        Args:
            book: The book to stock
            copies: Number of copies to add, must be positive

        Returns:
            The book's availability after stocking

        Raises:
            InvalidArgumentError: If copies is not positive
            IsbnConflictError: If the ISBN is stocked with different metadata
        """
        require_positive(copies, "copies")
        record = self._repository.add_book(book, copies)
        logger.info(f"Added {copies} copies of ISBN {book.isbn}")
        return record.to_availability()

    def find_by_author(self, author: str) -> frozenset[BookAvailability]:
        """Find books by exact author name, ignoring case.

        Returns:
            Availability of every match; empty for a blank query or no match
        """
        if is_blank(author):
            return frozenset()
        return self._to_availabilities(self._repository.find_by_author(author))

    def find_by_title(self, title: str) -> frozenset[BookAvailability]:
        """Find books by exact title, ignoring case.

        Returns:
            Availability of every match; empty for a blank query or no match
        """
        if is_blank(title):
            return frozenset()
        return self._to_availabilities(self._repository.find_by_title(title))

    def find_by_isbn(self, isbn: str) -> BookAvailability:
        """Retrieve a book's availability by ISBN.

        Raises:
            InvalidArgumentError: If isbn is blank
            BookNotFoundError: If no book has that ISBN
        """
        return self._get_record(isbn).to_availability()

    def can_borrow(self, isbn: str) -> bool:
        """Check whether a copy could be lent right now.

        The answer may be stale by the time ``borrow`` is called.
        """
        if is_blank(isbn):
            return False
        record = self._repository.find_by_isbn(isbn)
        return self._is_lendable(record)

    def borrow(self, isbn: str) -> bool:
        """Lend one copy of a book.

        Returns:
            True if a copy was lent; False for a blank or unknown ISBN, a
            reference book, or when no copy is available
        """
        if is_blank(isbn):
            return False
        record = self._repository.find_by_isbn(isbn)
        if not self._is_lendable(record):
            logger.debug(f"Refused to lend ISBN {isbn}")
            return False

        borrowed = self._repository.borrow(isbn)
        if borrowed:
            logger.info(f"Lent one copy of ISBN {isbn}")
        else:
            logger.debug(f"Lost the race for the last copy of ISBN {isbn}")
        return borrowed

    def total_borrowed_count(self) -> int:
        return self._repository.total_borrowed_count()

    def remaining_by_isbn(self, isbn: str) -> int:
        """Get the available copies for one ISBN.

        Raises:
            InvalidArgumentError: If isbn is blank
            BookNotFoundError: If no book has that ISBN
        """
        return self._get_record(isbn).available_copies

    def remaining_by_title(self, title: str) -> int:
        """Get the available copies across every book with this exact title."""
        return sum(a.available_copies for a in self.find_by_title(title))

    def remaining_by_author(self, author: str) -> int:
        """Get the available copies across every book by this exact author."""
        return sum(a.available_copies for a in self.find_by_author(author))

    def count_titles(self) -> int:
        """Get the number of distinct ISBNs in stock."""
        return self._repository.count_all()

    def _get_record(self, isbn: str) -> InventoryRecord:
        require_non_blank(isbn, "isbn")
        record = self._repository.find_by_isbn(isbn)
        if record is None:
            raise BookNotFoundError(isbn)
        return record

    @staticmethod
    def _is_lendable(record: InventoryRecord | None) -> bool:
        return (
            record is not None
            and record.book.category.is_borrowable
            and record.available_copies > 0
        )

    @staticmethod
    def _to_availabilities(
        records: set[InventoryRecord] | None,
    ) -> frozenset[BookAvailability]:
        if not records:
            return frozenset()
        return frozenset(record.to_availability() for record in records)
