"""API schemas for the library inventory.

This package contains Pydantic models for API request/response validation
and serialization. These schemas serve as the contract between the API
and its clients.
"""

from .book import BookAvailabilityList, BookAvailabilityOut, BookBase, BookCreate
from .errors import ErrorDetail, ErrorResponse
from .health import HealthResponse
from .inventory import (
    BorrowResponse,
    CanBorrowResponse,
    InventorySummary,
    RemainingResponse,
)

__all__ = [
    # Book
    "BookAvailabilityList",
    "BookAvailabilityOut",
    "BookBase",
    "BookCreate",
    # Errors
    "ErrorDetail",
    "ErrorResponse",
    # Health
    "HealthResponse",
    # Inventory
    "BorrowResponse",
    "CanBorrowResponse",
    "InventorySummary",
    "RemainingResponse",
]
