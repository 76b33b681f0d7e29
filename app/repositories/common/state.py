"""Ledger state repository - admin identity and ballot id counter."""

from loguru import logger

from app.repositories.base import BaseRepository


class StateRepository(BaseRepository):
    """Access to the singleton ``ledger_state`` row."""

    def get_admin(self) -> str:
        return self.fetchone("SELECT admin FROM ledger_state WHERE id = 1")[0]

    def set_admin(self, admin: str) -> None:
        self.execute("UPDATE ledger_state SET admin = ? WHERE id = 1", [admin])
        logger.debug("Admin set to {}", admin)

    def get_next_ballot_id(self) -> int:
        return int(self.fetchone("SELECT next_ballot_id FROM ledger_state WHERE id = 1")[0])

    def set_next_ballot_id(self, ballot_id: int) -> None:
        self.execute("UPDATE ledger_state SET next_ballot_id = ? WHERE id = 1", [ballot_id])
