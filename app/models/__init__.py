"""Models package - DDL and entities for all domains."""

from app.models.ballot import (
    BALLOT_DDL,
    VOTE_COUNT_DDL,
    VOTE_DDL,
    Ballot,
    BallotResults,
    BallotStatus,
    OptionResult,
    VoteRecord,
)
from app.models.common import LEDGER_STATE_DDL, BaseEntity, ErrorCode, LedgerError
from app.models.registry import VOTER_DDL, VoterRecord

ALL_DDL = [
    # Common
    LEDGER_STATE_DDL,
    # Registry
    VOTER_DDL,
    # Ballot
    BALLOT_DDL,
    VOTE_DDL,
    VOTE_COUNT_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "ErrorCode",
    "LedgerError",
    "LEDGER_STATE_DDL",
    # Registry
    "VOTER_DDL",
    "VoterRecord",
    # Ballot
    "BALLOT_DDL",
    "VOTE_DDL",
    "VOTE_COUNT_DDL",
    "Ballot",
    "BallotStatus",
    "VoteRecord",
    "BallotResults",
    "OptionResult",
    # All DDL
    "ALL_DDL",
]
