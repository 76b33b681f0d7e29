"""Registered voter model."""

from dataclasses import dataclass

from app.models.common import BaseEntity

VOTER_DDL = """
CREATE TABLE IF NOT EXISTS voter (
    identity VARCHAR PRIMARY KEY,
    registered BOOLEAN NOT NULL,
    registration_seq UBIGINT NOT NULL
)
"""


@dataclass
class VoterRecord(BaseEntity):
    """Voter registry entry. Present only while registered."""

    registered: bool
    registration_seq: int
