"""Book schemas for API requests and responses."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from library_inventory.core.config import settings
from library_inventory.domain import Book, BookAvailability, BookCategory


class BookBase(BaseModel):
    """Base schema for book metadata."""

    model_config = ConfigDict(strict=False, extra="forbid")

    isbn: str = Field(
        ..., min_length=1, max_length=settings.max_isbn_length, description="Book ISBN"
    )
    title: str = Field(
        ..., min_length=1, max_length=settings.max_text_length, description="Book title"
    )
    author: str = Field(
        ..., min_length=1, max_length=settings.max_text_length, description="Book author"
    )
    category: BookCategory = Field(
        BookCategory.NORMAL, description="Lending category (REFERENCE is never lent)"
    )

    @field_validator("isbn", "title", "author")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Value cannot be empty or whitespace only")
        return v

    def to_domain(self) -> Book:
        """Convert to domain Book."""
        return Book(
            isbn=self.isbn,
            title=self.title,
            author=self.author,
            category=self.category,
        )


class BookCreate(BookBase):
    """Schema for stocking copies of a book."""

    copies: int = Field(
        ...,
        ge=1,
        le=settings.max_copies_per_request,
        description="Number of copies to add",
    )


class BookAvailabilityOut(BookBase):
    """Schema for a book together with its available copies."""

    available_copies: int = Field(..., ge=0, description="Copies on the shelf")

    @classmethod
    def from_domain(cls, availability: BookAvailability) -> "BookAvailabilityOut":
        book = availability.book
        return cls(
            isbn=book.isbn,
            title=book.title,
            author=book.author,
            category=book.category,
            available_copies=availability.available_copies,
        )


class BookAvailabilityList(BaseModel):
    """Schema for multi-result lookups."""

    model_config = ConfigDict(strict=False, extra="forbid")

    books: list[BookAvailabilityOut] = Field(..., description="Matching books")
    total: int = Field(..., ge=0, description="Number of matching books")

    @classmethod
    def from_domain_set(cls, availabilities) -> "BookAvailabilityList":
        ordered = sorted(availabilities, key=lambda a: a.book.isbn)
        return cls(
            books=[BookAvailabilityOut.from_domain(a) for a in ordered],
            total=len(ordered),
        )
