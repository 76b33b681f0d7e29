"""Vote repository - one record per (ballot, voter)."""

from loguru import logger

from app.models.ballot import VoteRecord
from app.repositories.base import BaseRepository


class VoteRepository(BaseRepository):
    """Repository for individual vote records."""

    def get(self, ballot_id: int, voter: str) -> VoteRecord | None:
        """Get voter's current choice, ``None`` if not voted."""
        if ballot_id < 0:
            return None
        row = self.fetchone(
            "SELECT option_index, vote_seq FROM vote WHERE ballot_id = ? AND voter = ?",
            [ballot_id, voter],
        )
        return VoteRecord.from_row(row) if row else None

    def insert(self, ballot_id: int, voter: str, option_index: int, vote_seq: int) -> None:
        self.execute(
            "INSERT INTO vote (ballot_id, voter, option_index, vote_seq) VALUES (?, ?, ?, ?)",
            [ballot_id, voter, option_index, vote_seq],
        )
        logger.debug("Vote inserted: ballot={}, voter={}, option={}", ballot_id, voter, option_index)

    def update(self, ballot_id: int, voter: str, option_index: int, vote_seq: int) -> None:
        self.execute(
            "UPDATE vote SET option_index = ?, vote_seq = ? WHERE ballot_id = ? AND voter = ?",
            [option_index, vote_seq, ballot_id, voter],
        )
        logger.debug("Vote updated: ballot={}, voter={}, option={}", ballot_id, voter, option_index)
