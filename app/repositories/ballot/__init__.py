from app.repositories.ballot.ballot import BallotRepository
from app.repositories.ballot.count import VoteCountRepository
from app.repositories.ballot.vote import VoteRepository

__all__ = [
    "BallotRepository",
    "VoteRepository",
    "VoteCountRepository",
]
