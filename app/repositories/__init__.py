"""Repositories package - data access layer for the ledger database."""

from app.repositories.ballot import BallotRepository, VoteCountRepository, VoteRepository
from app.repositories.base import BaseRepository
from app.repositories.common import StateRepository
from app.repositories.db import (
    bootstrap_state,
    connect,
    connect_read_only,
    init_tables,
)
from app.repositories.registry import VoterRepository

__all__ = [
    # DB
    "connect",
    "connect_read_only",
    "init_tables",
    "bootstrap_state",
    # Base
    "BaseRepository",
    # Common
    "StateRepository",
    # Registry
    "VoterRepository",
    # Ballot
    "BallotRepository",
    "VoteRepository",
    "VoteCountRepository",
]
