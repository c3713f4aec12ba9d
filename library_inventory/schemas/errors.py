"""Error response schemas for the API."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from library_inventory.domain.errors import DomainError


class ErrorDetail(BaseModel):
    """Individual error detail."""

    model_config = ConfigDict(strict=True, extra="forbid")

    code: str
    message: str
    field: str | None = None
    context: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Standard error response format."""

    model_config = ConfigDict(strict=True, extra="forbid")

    error: ErrorDetail

    @classmethod
    def from_domain_error(
        cls,
        error: DomainError,
        field: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> "ErrorResponse":
        """Build the envelope from a domain error's code and message."""
        return cls(
            error=ErrorDetail(
                code=error.code,
                message=error.message,
                field=field,
                context=context,
            )
        )
