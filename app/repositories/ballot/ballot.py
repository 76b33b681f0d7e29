"""Ballot repository - ballot rows and their option lists."""

from loguru import logger

from app.models.ballot import Ballot
from app.repositories.base import BaseRepository

_BALLOT_COLUMNS = "id, title, description, options, creator, start_seq, end_seq, active, total_votes"


class BallotRepository(BaseRepository):
    """Repository for ballot data access."""

    def get(self, ballot_id: int) -> Ballot | None:
        """Get ballot by id, ``None`` if absent."""
        if ballot_id < 0:
            return None
        row = self.fetchone(f"SELECT {_BALLOT_COLUMNS} FROM ballot WHERE id = ?", [ballot_id])
        return Ballot.from_row(row) if row else None

    def get_options(self, ballot_id: int) -> list[str] | None:
        """Get ballot options in index order. Options never change once stored."""

        def fetch():
            if ballot_id < 0:
                return None
            row = self.fetchone("SELECT options FROM ballot WHERE id = ?", [ballot_id])
            return list(row[0]) if row else None

        options = self._cached(f"options_{ballot_id}", fetch)
        return list(options) if options is not None else None

    def insert(self, ballot: Ballot) -> None:
        self.execute(
            f"INSERT INTO ballot ({_BALLOT_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
            [
                ballot.id,
                ballot.title,
                ballot.description,
                ballot.options,
                ballot.creator,
                ballot.start_seq,
                ballot.end_seq,
                ballot.active,
                ballot.total_votes,
            ],
        )
        logger.debug("Ballot inserted: {} ({} options)", ballot.id, len(ballot.options))

    def deactivate(self, ballot_id: int) -> None:
        self.execute("UPDATE ballot SET active = FALSE WHERE id = ?", [ballot_id])

    def increment_total(self, ballot_id: int) -> None:
        self.execute("UPDATE ballot SET total_votes = total_votes + 1 WHERE id = ?", [ballot_id])
