"""Dependency Injection container - initialized at app startup."""

from loguru import logger

from app.services.clock import SequenceClock
from app.services.ledger import VotingLedger
from settings import DB_PATH, DEFAULT_ADMIN


class Container:
    """Application DI container - holds the process-wide ledger."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(
        self,
        db_path: str = DB_PATH,
        admin: str = DEFAULT_ADMIN,
        clock: SequenceClock | None = None,
    ) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        self.clock = clock or SequenceClock()
        self.ledger = VotingLedger.open(db_path=db_path, admin=admin, clock=self.clock)
        logger.info("Ledger ready: {}", db_path)

        self._initialized = True

    def reset(self) -> None:
        """Close the ledger so the next ``init`` starts fresh."""
        if self._initialized:
            self.ledger.close()
        self._initialized = False


# Global container instance
container = Container()
