"""Services package - service class exports."""

from app.services.ballot import BallotLifecycle, VoteCasting
from app.services.clock import SequenceClock
from app.services.ledger import VotingLedger
from app.services.registry import VoterRegistry

__all__ = [
    "BallotLifecycle",
    "SequenceClock",
    "VoteCasting",
    "VoterRegistry",
    "VotingLedger",
]
