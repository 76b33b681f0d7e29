"""Audit package - integrity checks and results export."""

from audit.export import results_frame, share_frame, write_results_csv
from audit.validation import validate_ledger

__all__ = [
    "validate_ledger",
    "results_frame",
    "share_frame",
    "write_results_csv",
]
