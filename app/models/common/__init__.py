"""Common models - base classes, errors and shared tables."""

from app.models.common.base import BaseEntity
from app.models.common.errors import ErrorCode, LedgerError
from app.models.common.state import LEDGER_STATE_DDL

__all__ = [
    "BaseEntity",
    "ErrorCode",
    "LedgerError",
    "LEDGER_STATE_DDL",
]
