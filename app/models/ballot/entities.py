"""Ballot domain entities - assembled query results."""

from dataclasses import dataclass

from app.models.ballot.ballot import BallotStatus
from app.models.common import BaseEntity


@dataclass
class BallotResults(BaseEntity):
    """Ballot summary with computed status."""

    id: int
    title: str
    total_votes: int
    options: list[str]
    status: BallotStatus
    creator: str
    start_seq: int
    end_seq: int


@dataclass
class OptionResult(BaseEntity):
    """Tally for a single ballot option."""

    option: str
    count: int
