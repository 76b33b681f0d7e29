"""Ledger error codes and the exception carrying them."""

from enum import IntEnum


class ErrorCode(IntEnum):
    """Stable error codes returned to ledger callers."""

    OWNER_ONLY = 100
    NOT_FOUND = 101
    UNAUTHORIZED = 102
    ALREADY_EXISTS = 103
    ALREADY_VOTED = 104
    BALLOT_INACTIVE = 105
    INVALID_OPTION = 106
    BALLOT_ENDED = 107
    SAME_OPTION = 108
    EMPTY_TITLE = 201
    TOO_FEW_OPTIONS = 202
    TOO_MANY_OPTIONS = 203
    INVALID_DURATION = 204

    @property
    def tag(self) -> str:
        """Lowercase dashed name, e.g. ``already-voted``."""
        return self.name.lower().replace("_", "-")


class LedgerError(Exception):
    """Rejected ledger call."""

    def __init__(self, code: ErrorCode, message: str | None = None):
        self.code = code
        self.message = message or code.tag
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"LedgerError({self.code.name}, {self.message!r})"
