"""Ballot model."""

from dataclasses import dataclass, field
from enum import StrEnum

from app.models.common import BaseEntity

BALLOT_DDL = """
CREATE TABLE IF NOT EXISTS ballot (
    id UBIGINT PRIMARY KEY,
    title VARCHAR NOT NULL,
    description VARCHAR NOT NULL,
    options VARCHAR[] NOT NULL,
    creator VARCHAR NOT NULL,
    start_seq UBIGINT NOT NULL,
    end_seq UBIGINT NOT NULL,
    active BOOLEAN NOT NULL,
    total_votes UBIGINT NOT NULL
)
"""


class BallotStatus(StrEnum):
    """Ballot status derived from stored fields and the current sequence."""

    ACTIVE = "active"
    ENDED = "ended"
    DEACTIVATED = "deactivated"
    NOT_FOUND = "not-found"


@dataclass
class Ballot(BaseEntity):
    """Time-bounded multi-option ballot."""

    id: int
    title: str
    description: str
    options: list[str] = field(default_factory=list)
    creator: str = ""
    start_seq: int = 0
    end_seq: int = 0
    active: bool = True
    total_votes: int = 0

    def status_at(self, seq: int) -> BallotStatus:
        """Status of this ballot at sequence ``seq``."""
        if not self.active:
            return BallotStatus.DEACTIVATED
        if seq > self.end_seq:
            return BallotStatus.ENDED
        return BallotStatus.ACTIVE

    def has_option(self, option_index: int) -> bool:
        return 0 <= option_index < len(self.options)
