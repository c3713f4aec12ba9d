"""Borrowing and inventory summary schemas."""

from pydantic import BaseModel, ConfigDict, Field


class BorrowResponse(BaseModel):
    """Result of a successful borrow."""

    model_config = ConfigDict(strict=True, extra="forbid")

    isbn: str
    borrowed: bool
    available_copies: int = Field(..., ge=0)


class CanBorrowResponse(BaseModel):
    """Whether a copy could be lent right now."""

    model_config = ConfigDict(strict=True, extra="forbid")

    isbn: str
    can_borrow: bool


class InventorySummary(BaseModel):
    """Aggregate stock figures."""

    model_config = ConfigDict(strict=True, extra="forbid")

    total_titles: int = Field(..., ge=0, description="Distinct ISBNs in stock")
    total_borrowed: int = Field(..., ge=0, description="Copies currently lent out")


class RemainingResponse(BaseModel):
    """Available copies for an ISBN, title or author query."""

    model_config = ConfigDict(strict=True, extra="forbid")

    remaining: int = Field(..., ge=0)
