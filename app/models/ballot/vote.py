"""Vote and per-option vote count models."""

from dataclasses import dataclass

from app.models.common import BaseEntity

VOTE_DDL = """
CREATE TABLE IF NOT EXISTS vote (
    ballot_id UBIGINT NOT NULL,
    voter VARCHAR NOT NULL,
    option_index UINTEGER NOT NULL,
    vote_seq UBIGINT NOT NULL,
    PRIMARY KEY (ballot_id, voter)
)
"""

VOTE_COUNT_DDL = """
CREATE TABLE IF NOT EXISTS vote_count (
    ballot_id UBIGINT NOT NULL,
    option_index UINTEGER NOT NULL,
    tally UBIGINT NOT NULL,
    PRIMARY KEY (ballot_id, option_index)
)
"""


@dataclass
class VoteRecord(BaseEntity):
    """A voter's current choice on one ballot."""

    option_index: int
    vote_seq: int
