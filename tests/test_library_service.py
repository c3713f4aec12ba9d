"""Unit tests for the LibraryService."""

from unittest.mock import Mock

import pytest

from library_inventory.domain import (
    Book,
    BookAvailability,
    BookNotFoundError,
    InvalidArgumentError,
    InventoryRecord,
)
from library_inventory.repositories.in_memory import InMemoryInventoryRepository
from library_inventory.services import LibraryService
from tests.conftest import capture_logger


class TestLibraryServiceWithMock:
    """Delegation and query shaping against a mocked repository."""

    @pytest.fixture
    def mock_repository(self):
        """Create a mock repository for testing."""
        return Mock()

    @pytest.fixture
    def service(self, mock_repository):
        """Create a service with mocked repository."""
        return LibraryService(mock_repository)

    def test_requires_repository(self):
        with pytest.raises(ValueError, match="repository must be provided"):
            LibraryService(None)

    def test_add_book_delegates(self, service: LibraryService, mock_repository, odyssey: Book):
        mock_repository.add_book.return_value = InventoryRecord.create(odyssey, 2)

        result = service.add_book(odyssey, 2)

        assert result == BookAvailability(book=odyssey, available_copies=2)
        mock_repository.add_book.assert_called_once_with(odyssey, 2)

    def test_add_book_rejects_non_positive_copies_before_repository(
        self, service: LibraryService, mock_repository, odyssey: Book
    ):
        with pytest.raises(InvalidArgumentError):
            service.add_book(odyssey, 0)

        mock_repository.add_book.assert_not_called()

    @pytest.mark.parametrize("query", [None, "", "   "])
    def test_blank_queries_skip_repository(
        self, service: LibraryService, mock_repository, query
    ):
        assert service.find_by_author(query) == frozenset()
        assert service.find_by_title(query) == frozenset()

        mock_repository.find_by_author.assert_not_called()
        mock_repository.find_by_title.assert_not_called()

    def test_no_match_becomes_empty_set(self, service: LibraryService, mock_repository):
        mock_repository.find_by_author.return_value = None
        mock_repository.find_by_title.return_value = None

        assert service.find_by_author("nobody") == frozenset()
        assert service.find_by_title("nothing") == frozenset()

    def test_find_by_author_shapes_availability(
        self, service: LibraryService, mock_repository, odyssey: Book, iliad: Book
    ):
        mock_repository.find_by_author.return_value = {
            InventoryRecord.create(odyssey, 2),
            InventoryRecord.create(iliad, 1),
        }

        result = service.find_by_author("homer")

        assert isinstance(result, frozenset)
        assert result == {
            BookAvailability(book=odyssey, available_copies=2),
            BookAvailability(book=iliad, available_copies=1),
        }
        mock_repository.find_by_author.assert_called_once_with("homer")

    def test_find_by_isbn_blank_raises(self, service: LibraryService, mock_repository):
        with pytest.raises(InvalidArgumentError, match="isbn must be provided"):
            service.find_by_isbn(" ")

        mock_repository.find_by_isbn.assert_not_called()

    def test_find_by_isbn_unknown_raises(self, service: LibraryService, mock_repository):
        mock_repository.find_by_isbn.return_value = None

        with pytest.raises(BookNotFoundError) as exc_info:
            service.find_by_isbn("missing")

        assert exc_info.value.isbn == "missing"
        assert exc_info.value.code == "BOOK_NOT_FOUND"

    def test_borrow_reference_book_never_reaches_repository(
        self, service: LibraryService, mock_repository, dictionary: Book
    ):
        mock_repository.find_by_isbn.return_value = InventoryRecord.create(dictionary, 3)

        assert service.borrow(dictionary.isbn) is False
        mock_repository.borrow.assert_not_called()

    def test_borrow_with_no_copies_left_never_reaches_repository(
        self, service: LibraryService, mock_repository, odyssey: Book
    ):
        mock_repository.find_by_isbn.return_value = InventoryRecord.create(odyssey, 0)

        assert service.borrow(odyssey.isbn) is False
        mock_repository.borrow.assert_not_called()

    def test_borrow_returns_repository_outcome(
        self, service: LibraryService, mock_repository, odyssey: Book
    ):
        """The repository has the last word when the pre-check passes."""
        mock_repository.find_by_isbn.return_value = InventoryRecord.create(odyssey, 1)
        mock_repository.borrow.return_value = False

        assert service.borrow(odyssey.isbn) is False
        mock_repository.borrow.assert_called_once_with(odyssey.isbn)

    def test_total_borrowed_count_delegates(self, service: LibraryService, mock_repository):
        mock_repository.total_borrowed_count.return_value = 4

        assert service.total_borrowed_count() == 4


class TestLibraryService:
    """Use cases against the real in-memory repository."""

    @pytest.fixture
    def service(self):
        return LibraryService(InMemoryInventoryRepository())

    def test_finds_by_author_title_and_isbn(
        self, service: LibraryService, odyssey: Book, iliad: Book
    ):
        service.add_book(odyssey, 2)
        service.add_book(iliad, 1)

        assert {a.book.author for a in service.find_by_author("homer")} == {"Homer"}
        assert len(service.find_by_author("homer")) == 2
        assert [a.book.isbn for a in service.find_by_title("the odyssey")] == [odyssey.isbn]
        assert service.find_by_title("Odyssey") == frozenset()
        assert service.find_by_isbn(iliad.isbn).book.author == "Homer"

    def test_borrows_books_and_tracks_outstanding(self, service: LibraryService, odyssey: Book):
        service.add_book(odyssey, 2)

        assert service.can_borrow(odyssey.isbn) is True
        assert service.borrow(odyssey.isbn) is True
        assert service.borrow(odyssey.isbn) is True
        assert service.can_borrow(odyssey.isbn) is False
        assert service.borrow(odyssey.isbn) is False
        assert service.total_borrowed_count() == 2

    def test_prevents_borrowing_reference_books(self, service: LibraryService, dictionary: Book):
        service.add_book(dictionary, 1)

        assert service.can_borrow(dictionary.isbn) is False
        assert service.borrow(dictionary.isbn) is False
        assert service.total_borrowed_count() == 0

    @pytest.mark.parametrize("isbn", [None, "", "unknown"])
    def test_cannot_borrow_blank_or_unknown(self, service: LibraryService, isbn):
        assert service.can_borrow(isbn) is False
        assert service.borrow(isbn) is False

    def test_availability_is_a_snapshot(self, service: LibraryService, odyssey: Book):
        service.add_book(odyssey, 2)
        before = service.find_by_isbn(odyssey.isbn)

        service.borrow(odyssey.isbn)

        assert before.available_copies == 2
        assert service.find_by_isbn(odyssey.isbn).available_copies == 1

    def test_remaining_counts(
        self, service: LibraryService, odyssey: Book, iliad: Book, dictionary: Book
    ):
        service.add_book(odyssey, 3)
        service.add_book(iliad, 2)
        service.add_book(dictionary, 1)
        service.borrow(odyssey.isbn)

        assert service.remaining_by_isbn(odyssey.isbn) == 2
        assert service.remaining_by_title("The Iliad") == 2
        assert service.remaining_by_author("Homer") == 4
        assert service.remaining_by_author("") == 0
        assert service.remaining_by_title("Unknown") == 0
        assert service.count_titles() == 3

    def test_remaining_by_unknown_isbn_raises(self, service: LibraryService):
        with pytest.raises(BookNotFoundError):
            service.remaining_by_isbn("missing")

    def test_borrow_logs_success(self, service: LibraryService, odyssey: Book, caplog):
        service.add_book(odyssey, 1)

        with capture_logger(caplog, "library_inventory.services.library_service"):
            service.borrow(odyssey.isbn)

        messages = [record.getMessage() for record in caplog.records]
        assert f"Lent one copy of ISBN {odyssey.isbn}" in messages
