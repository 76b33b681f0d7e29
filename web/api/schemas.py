"""Shared API response schemas."""

from typing import Any

from pydantic import BaseModel


class ErrorItem(BaseModel):
    """Tagged ledger failure."""

    code: int
    name: str
    message: str


class CallResponse(BaseModel):
    """Result of a ledger call: a value on success, an error otherwise."""

    ok: bool
    value: Any = None
    error: ErrorItem | None = None
