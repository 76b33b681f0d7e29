"""Ballot domain models - ballots, votes, counts and result entities."""

from app.models.ballot.ballot import BALLOT_DDL, Ballot, BallotStatus
from app.models.ballot.entities import BallotResults, OptionResult
from app.models.ballot.vote import VOTE_COUNT_DDL, VOTE_DDL, VoteRecord

__all__ = [
    "BALLOT_DDL",
    "VOTE_DDL",
    "VOTE_COUNT_DDL",
    "Ballot",
    "BallotStatus",
    "VoteRecord",
    "BallotResults",
    "OptionResult",
]
