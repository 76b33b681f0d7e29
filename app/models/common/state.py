"""Ledger singleton state (admin, next ballot id)."""

LEDGER_STATE_DDL = """
CREATE TABLE IF NOT EXISTS ledger_state (
    id INTEGER PRIMARY KEY,
    admin VARCHAR NOT NULL,
    next_ballot_id UBIGINT NOT NULL
)
"""
