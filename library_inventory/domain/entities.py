"""Domain entities for the library inventory.

This module contains the core business entities: the immutable Book value,
the InventoryRecord that tracks stock for one ISBN, and the BookAvailability
view handed out to callers.
"""

import threading
from dataclasses import dataclass
from enum import Enum

from library_inventory.domain.errors import InvalidArgumentError
from library_inventory.domain.validation import (
    require_non_blank,
    require_non_negative,
    require_positive,
)


class BookCategory(str, Enum):
    """Lending category of a book."""

    NORMAL = "NORMAL"
    REFERENCE = "REFERENCE"

    @property
    def is_borrowable(self) -> bool:
        return self is not BookCategory.REFERENCE


@dataclass(frozen=True)
class Book:
    """Bibliographic metadata for one ISBN.

    Attributes:
        isbn: Unique identifier, the primary key of the inventory
        title: Title of the book
        author: Author of the book
        category: Lending category; REFERENCE books are never lent out
    """

    isbn: str
    title: str
    author: str
    category: BookCategory = BookCategory.NORMAL

    def __post_init__(self) -> None:
        """Validate book invariants."""
        require_non_blank(self.isbn, "isbn")
        require_non_blank(self.title, "title")
        require_non_blank(self.author, "author")

        if self.category is None:
            raise InvalidArgumentError("category must be provided", field="category")
        if not isinstance(self.category, BookCategory):
            try:
                category = BookCategory(str(self.category).upper())
            except ValueError as e:
                raise InvalidArgumentError(
                    f"Unknown category '{self.category}'", field="category"
                ) from e
            object.__setattr__(self, "category", category)


@dataclass(frozen=True)
class BookAvailability:
    """Read-only view of a book and its available copies at query time."""

    book: Book
    available_copies: int


class InventoryRecord:
    """Stock state for a single ISBN.

    The record guards its own counters with a private lock so that
    ``add_copies`` and ``borrow_one`` are atomic with respect to each other.
    ``borrowed_copies`` never exceeds ``total_copies``.
    """

    def __init__(self, book: Book, total_copies: int) -> None:
        if book is None:
            raise InvalidArgumentError("book must be provided", field="book")
        self._book = book
        self._total_copies = require_non_negative(total_copies, "total_copies")
        self._borrowed_copies = 0
        self._lock = threading.Lock()

    @classmethod
    def create(cls, book: Book, total_copies: int) -> "InventoryRecord":
        """Create a record with nothing borrowed yet.

        Raises:
            InvalidArgumentError: If total_copies is negative
        """
        return cls(book, total_copies)

    @property
    def book(self) -> Book:
        return self._book

    @property
    def isbn(self) -> str:
        return self._book.isbn

    @property
    def total_copies(self) -> int:
        with self._lock:
            return self._total_copies

    @property
    def borrowed_copies(self) -> int:
        with self._lock:
            return self._borrowed_copies

    @property
    def available_copies(self) -> int:
        """Copies currently on the shelf."""
        with self._lock:
            return self._total_copies - self._borrowed_copies

    def snapshot(self) -> tuple[int, int]:
        """Return (total_copies, borrowed_copies) read together."""
        with self._lock:
            return self._total_copies, self._borrowed_copies

    def add_copies(self, copies: int) -> int:
        """Add copies to the stock and return the new total.

        Raises:
            InvalidArgumentError: If copies is not positive
        """
        require_positive(copies, "copies")
        with self._lock:
            self._total_copies += copies
            return self._total_copies

    def borrow_one(self) -> bool:
        """Lend one copy if any is available.

        Returns:
            True if a copy was lent, False if none was left
        """
        with self._lock:
            if self._borrowed_copies >= self._total_copies:
                return False
            self._borrowed_copies += 1
            return True

    def to_availability(self) -> BookAvailability:
        return BookAvailability(book=self._book, available_copies=self.available_copies)

    def __repr__(self) -> str:
        total, borrowed = self.snapshot()
        return (
            f"InventoryRecord(isbn={self.isbn!r}, total_copies={total}, "
            f"borrowed_copies={borrowed})"
        )
