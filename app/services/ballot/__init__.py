from app.services.ballot.casting import VoteCasting
from app.services.ballot.lifecycle import BallotLifecycle

__all__ = [
    "BallotLifecycle",
    "VoteCasting",
]
