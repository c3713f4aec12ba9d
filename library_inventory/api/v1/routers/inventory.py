"""Aggregate inventory endpoints."""

from fastapi import APIRouter, Depends, Query, status

from library_inventory.api.v1.deps import get_library_service
from library_inventory.domain import InvalidArgumentError
from library_inventory.schemas import InventorySummary, RemainingResponse
from library_inventory.services import LibraryService

router = APIRouter(prefix="/inventory", tags=["inventory"])


@router.get(
    "/summary",
    response_model=InventorySummary,
    status_code=status.HTTP_200_OK,
    summary="Inventory summary",
    description="Number of distinct ISBNs and copies currently lent out",
)
async def get_summary(
    service: LibraryService = Depends(get_library_service),
) -> InventorySummary:
    return InventorySummary(
        total_titles=service.count_titles(),
        total_borrowed=service.total_borrowed_count(),
    )


@router.get(
    "/remaining",
    response_model=RemainingResponse,
    status_code=status.HTTP_200_OK,
    summary="Available copies",
    description="Available copies for exactly one of isbn, title or author",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Book not found"}},
)
async def get_remaining(
    isbn: str | None = Query(None, description="Exact ISBN"),
    title: str | None = Query(None, description="Exact title"),
    author: str | None = Query(None, description="Exact author name"),
    service: LibraryService = Depends(get_library_service),
) -> RemainingResponse:
    provided = [value for value in (isbn, title, author) if value is not None]
    if len(provided) != 1:
        raise InvalidArgumentError(
            "Provide exactly one of 'isbn', 'title' or 'author'", field="query"
        )

    if isbn is not None:
        remaining = service.remaining_by_isbn(isbn)
    elif title is not None:
        remaining = service.remaining_by_title(title)
    else:
        remaining = service.remaining_by_author(author)
    return RemainingResponse(remaining=remaining)
