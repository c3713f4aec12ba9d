"""Book stocking, lookup and borrowing endpoints."""

from fastapi import APIRouter, Depends, Query, status

from library_inventory.api.v1.deps import get_library_service
from library_inventory.domain import BookNotAvailableError, InvalidArgumentError
from library_inventory.schemas import (
    BookAvailabilityList,
    BookAvailabilityOut,
    BookCreate,
    BorrowResponse,
    CanBorrowResponse,
)
from library_inventory.services import LibraryService

router = APIRouter(prefix="/books", tags=["books"])


@router.post(
    "/",
    response_model=BookAvailabilityOut,
    status_code=status.HTTP_201_CREATED,
    summary="Stock copies of a book",
    description="Add copies of a book, creating its inventory record on first sight",
    responses={
        status.HTTP_409_CONFLICT: {
            "description": "ISBN already stocked with different metadata"
        },
        status.HTTP_422_UNPROCESSABLE_CONTENT: {"description": "Validation error"},
    },
)
async def add_book(
    book_data: BookCreate, service: LibraryService = Depends(get_library_service)
) -> BookAvailabilityOut:
    """Stock copies of a book."""
    availability = service.add_book(book_data.to_domain(), book_data.copies)
    return BookAvailabilityOut.from_domain(availability)


@router.get(
    "/",
    response_model=BookAvailabilityList,
    status_code=status.HTTP_200_OK,
    summary="Find books by author or title",
    description="Exact, case-insensitive match on exactly one of author or title",
)
async def find_books(
    author: str | None = Query(None, description="Exact author name"),
    title: str | None = Query(None, description="Exact title"),
    service: LibraryService = Depends(get_library_service),
) -> BookAvailabilityList:
    """Find books by author or title."""
    if (author is None) == (title is None):
        raise InvalidArgumentError(
            "Provide exactly one of 'author' or 'title'", field="query"
        )
    if author is not None:
        matches = service.find_by_author(author)
    else:
        matches = service.find_by_title(title)
    return BookAvailabilityList.from_domain_set(matches)


@router.get(
    "/{isbn}",
    response_model=BookAvailabilityOut,
    status_code=status.HTTP_200_OK,
    summary="Get a book by ISBN",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Book not found"}},
)
async def get_book(
    isbn: str, service: LibraryService = Depends(get_library_service)
) -> BookAvailabilityOut:
    """Get a book's availability by ISBN."""
    return BookAvailabilityOut.from_domain(service.find_by_isbn(isbn))


@router.get(
    "/{isbn}/can-borrow",
    response_model=CanBorrowResponse,
    status_code=status.HTTP_200_OK,
    summary="Check whether a book can be borrowed",
)
async def can_borrow(
    isbn: str, service: LibraryService = Depends(get_library_service)
) -> CanBorrowResponse:
    """Check whether a copy could be lent right now."""
    return CanBorrowResponse(isbn=isbn, can_borrow=service.can_borrow(isbn))


@router.post(
    "/{isbn}/borrow",
    response_model=BorrowResponse,
    status_code=status.HTTP_200_OK,
    summary="Borrow one copy of a book",
    responses={
        status.HTTP_404_NOT_FOUND: {"description": "Book not found"},
        status.HTTP_409_CONFLICT: {
            "description": "Reference book or no copies available"
        },
    },
)
async def borrow_book(
    isbn: str, service: LibraryService = Depends(get_library_service)
) -> BorrowResponse:
    """Borrow one copy of a book."""
    # Raises BookNotFoundError for unknown ISBNs
    service.find_by_isbn(isbn)

    if not service.borrow(isbn):
        raise BookNotAvailableError(isbn)
    return BorrowResponse(
        isbn=isbn, borrowed=True, available_copies=service.remaining_by_isbn(isbn)
    )
