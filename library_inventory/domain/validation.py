"""Common validation and normalization helpers for inventory values."""

from library_inventory.domain.errors import InvalidArgumentError


def is_blank(value: str | None) -> bool:
    """Check whether a value is missing, not a string, or whitespace-only."""
    return not isinstance(value, str) or not value.strip()


def normalize_lower(value: str | None) -> str:
    """Lowercase a value for index keys; non-strings become the empty string."""
    # str.lower() does not depend on the process locale
    return value.lower() if isinstance(value, str) else ""


def require_non_blank(value: str | None, field_name: str) -> str:
    """Validate that a required string was provided."""
    if value is not None and not isinstance(value, str):
        raise InvalidArgumentError(f"{field_name} must be a string", field=field_name)
    if is_blank(value):
        raise InvalidArgumentError(f"{field_name} must be provided", field=field_name)
    return value


def _require_count(value: int, field_name: str) -> int:
    # bool is an int subclass but never a copy count
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidArgumentError(f"{field_name} must be an integer", field=field_name)
    return value


def require_positive(value: int, field_name: str) -> int:
    """Validate that a count is a strictly positive integer."""
    if _require_count(value, field_name) <= 0:
        raise InvalidArgumentError(f"{field_name} must be positive", field=field_name)
    return value


def require_non_negative(value: int, field_name: str) -> int:
    """Validate that a count is a non-negative integer."""
    if _require_count(value, field_name) < 0:
        raise InvalidArgumentError(f"{field_name} cannot be negative", field=field_name)
    return value
