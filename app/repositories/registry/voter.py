"""Voter repository - registered voter records."""

from loguru import logger

from app.models.registry import VoterRecord
from app.repositories.base import BaseRepository


class VoterRepository(BaseRepository):
    """Repository for the voter registry."""

    def get(self, identity: str) -> VoterRecord | None:
        """Get voter record, ``None`` if not registered."""
        row = self.fetchone(
            "SELECT registered, registration_seq FROM voter WHERE identity = ?",
            [identity],
        )
        return VoterRecord.from_row(row) if row else None

    def exists(self, identity: str) -> bool:
        row = self.fetchone("SELECT COUNT(*) FROM voter WHERE identity = ?", [identity])
        return row[0] > 0

    def insert(self, identity: str, registration_seq: int) -> None:
        self.execute(
            "INSERT INTO voter (identity, registered, registration_seq) VALUES (?, TRUE, ?)",
            [identity, registration_seq],
        )
        logger.debug("Voter inserted: {} (seq={})", identity, registration_seq)

    def delete(self, identity: str) -> None:
        self.execute("DELETE FROM voter WHERE identity = ?", [identity])
        logger.debug("Voter deleted: {}", identity)
