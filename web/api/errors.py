"""API errors and validation helpers."""

from collections.abc import Callable
from typing import Any

from app.models.common import LedgerError
from settings import MAX_SEQ

from .schemas import CallResponse, ErrorItem


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


# Unsigned 64-bit range of ids, indices and durations
MAX_UINT = MAX_SEQ


def validate_identity(identity: str, field: str = "caller") -> None:
    """Validate identity is a non-empty string."""
    if not isinstance(identity, str) or not identity:
        raise ValidationError(f"Invalid {field}: identity must be a non-empty string")


def validate_uint(value: int, field: str) -> None:
    """Validate value fits an unsigned 64-bit integer."""
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= MAX_UINT:
        raise ValidationError(f"Invalid {field}: {value!r}. Must be between 0 and {MAX_UINT}")


def error_item(error: LedgerError) -> ErrorItem:
    return ErrorItem(code=int(error.code), name=error.code.tag, message=error.message)


def run_call(fn: Callable[..., Any], *args: Any) -> CallResponse:
    """Run a ledger call, turning ``LedgerError`` into a tagged failure."""
    try:
        value = fn(*args)
    except LedgerError as e:
        return CallResponse(ok=False, error=error_item(e))
    return CallResponse(ok=True, value=value)
