"""Vote count repository - running tally per (ballot, option)."""

from loguru import logger

from app.repositories.base import BaseRepository


class VoteCountRepository(BaseRepository):
    """Repository for per-option vote counts."""

    def init_counts(self, ballot_id: int, options_count: int) -> None:
        """Create one zero row per option index."""
        self._db.executemany(
            "INSERT INTO vote_count (ballot_id, option_index, tally) VALUES (?, ?, 0)",
            [[ballot_id, i] for i in range(options_count)],
        )
        logger.debug("Counts initialized: ballot={}, options={}", ballot_id, options_count)

    def get(self, ballot_id: int, option_index: int) -> int:
        """Count for one option, 0 if no such row."""
        if ballot_id < 0 or option_index < 0:
            return 0
        row = self.fetchone(
            "SELECT tally FROM vote_count WHERE ballot_id = ? AND option_index = ?",
            [ballot_id, option_index],
        )
        return int(row[0]) if row else 0

    def increment(self, ballot_id: int, option_index: int) -> None:
        self.execute(
            "UPDATE vote_count SET tally = tally + 1 WHERE ballot_id = ? AND option_index = ?",
            [ballot_id, option_index],
        )

    def decrement(self, ballot_id: int, option_index: int) -> None:
        # Floor at zero; tally is unsigned
        self.execute(
            "UPDATE vote_count SET tally = GREATEST(tally, 1) - 1 WHERE ballot_id = ? AND option_index = ?",
            [ballot_id, option_index],
        )
