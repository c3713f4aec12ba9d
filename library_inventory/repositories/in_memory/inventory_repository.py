"""Thread-safe in-memory InventoryRepository implementation."""

import logging
from collections import defaultdict

from library_inventory.domain import (
    Book,
    InvalidArgumentError,
    InventoryRecord,
    IsbnConflictError,
    is_blank,
    normalize_lower,
    require_non_blank,
    require_positive,
)
from library_inventory.repositories.ports import InventoryRepository
from library_inventory.utils import RWLock

logger = logging.getLogger(__name__)


class InMemoryInventoryRepository(InventoryRepository):
    """Thread-safe in-memory book inventory.

    Records are keyed by ISBN. The author and title indexes map a lowercased
    value to the ISBNs sharing it; they are written only when an ISBN is first
    inserted, inside the same write-locked section as the primary insert.

    Copy counts live on the records themselves and are changed under each
    record's own lock while the store holds only a read lock, so traffic on
    different ISBNs does not serialize.
    """

    def __init__(self) -> None:
        self._records: dict[str, InventoryRecord] = {}
        self._author_index: dict[str, set[str]] = defaultdict(set)
        self._title_index: dict[str, set[str]] = defaultdict(set)
        self._lock = RWLock()

    def add_book(self, book: Book, copies: int) -> InventoryRecord:
        """Stock copies of a book.

        Raises:
            InvalidArgumentError: If book is missing or copies is not positive
            IsbnConflictError: If the ISBN is stocked with different metadata
        """
        if book is None:
            raise InvalidArgumentError("book must be provided", field="book")
        require_positive(copies, "copies")
        isbn = require_non_blank(book.isbn, "isbn")

        with self._lock.read_lock():
            record = self._records.get(isbn)
            if record is not None:
                return self._restock(record, book, copies)

        with self._lock.write_lock():
            # Another writer may have inserted it since the read lock was dropped
            record = self._records.get(isbn)
            if record is not None:
                return self._restock(record, book, copies)

            record = InventoryRecord.create(book, copies)
            self._records[isbn] = record
            self._index(self._author_index, book.author, isbn)
            self._index(self._title_index, book.title, isbn)
            logger.debug(f"Stocked new ISBN {isbn} with {copies} copies")
            return record

    def find_by_isbn(self, isbn: str) -> InventoryRecord | None:
        if is_blank(isbn):
            return None
        with self._lock.read_lock():
            return self._records.get(isbn)

    def find_by_author(self, author: str) -> set[InventoryRecord] | None:
        with self._lock.read_lock():
            return self._lookup(self._author_index, normalize_lower(author))

    def find_by_title(self, title: str) -> set[InventoryRecord] | None:
        with self._lock.read_lock():
            return self._lookup(self._title_index, normalize_lower(title))

    def borrow(self, isbn: str) -> bool:
        """Lend one copy of a book.

        Returns False for a blank or unknown ISBN, a reference book, or a book
        with no copies left. The availability check and the increment happen
        atomically under the record's lock.
        """
        if is_blank(isbn):
            return False
        with self._lock.read_lock():
            record = self._records.get(isbn)
            if record is None or not record.book.category.is_borrowable:
                return False
            return record.borrow_one()

    def total_borrowed_count(self) -> int:
        with self._lock.read_lock():
            return sum(record.borrowed_copies for record in self._records.values())

    def find_all(self) -> list[InventoryRecord]:
        with self._lock.read_lock():
            return sorted(self._records.values(), key=lambda r: r.isbn)

    def count_all(self) -> int:
        with self._lock.read_lock():
            return len(self._records)

    def clear(self) -> None:
        with self._lock.write_lock():
            self._records.clear()
            self._author_index.clear()
            self._title_index.clear()

    def _restock(self, record: InventoryRecord, book: Book, copies: int) -> InventoryRecord:
        if record.book != book:
            raise IsbnConflictError(book.isbn)
        record.add_copies(copies)
        return record

    def _index(self, index: dict[str, set[str]], value: str, isbn: str) -> None:
        normalized = normalize_lower(value)
        if is_blank(normalized):
            return
        index[normalized].add(isbn)

    def _lookup(
        self, index: dict[str, set[str]], normalized: str
    ) -> set[InventoryRecord] | None:
        isbns = index.get(normalized)
        if not isbns:
            return None
        # Skip entries whose primary record is gone
        matches = {self._records[isbn] for isbn in isbns if isbn in self._records}
        return matches or None
