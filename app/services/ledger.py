"""Voting ledger - the atomic, serialized call interface over all services."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager

import duckdb
from loguru import logger

from app.models.ballot import Ballot, BallotResults, BallotStatus, OptionResult, VoteRecord
from app.models.common import LedgerError
from app.models.registry import VoterRecord
from app.repositories import (
    BallotRepository,
    StateRepository,
    VoteCountRepository,
    VoteRepository,
    VoterRepository,
    connect,
)
from app.services.ballot import BallotLifecycle, VoteCasting
from app.services.clock import SequenceClock
from app.services.registry import VoterRegistry
from settings import DB_PATH, DEFAULT_ADMIN


class VotingLedger:
    """Voter registry, ballots and vote tallies behind one lock.

    Every call runs alone: a single re-entrant lock is held for the whole
    call, and mutating calls run inside one DuckDB transaction that is
    rolled back on any error. A rejected call raises ``LedgerError`` and
    leaves no trace in the database.

    The sequence (logical time) is read from ``clock.now()`` once per call.
    """

    def __init__(self, conn: duckdb.DuckDBPyConnection, clock: SequenceClock | None = None):
        self._conn = conn
        self._clock = clock or SequenceClock()
        self._lock = threading.RLock()

        # Repositories
        self._state_repo = StateRepository(conn)
        self._voter_repo = VoterRepository(conn)
        self._ballot_repo = BallotRepository(conn)
        self._vote_repo = VoteRepository(conn)
        self._count_repo = VoteCountRepository(conn)

        # Services (with injected repos)
        self.registry = VoterRegistry(
            state_repo=self._state_repo,
            voter_repo=self._voter_repo,
        )
        self.lifecycle = BallotLifecycle(
            state_repo=self._state_repo,
            ballot_repo=self._ballot_repo,
            count_repo=self._count_repo,
            registry=self.registry,
        )
        self.casting = VoteCasting(
            ballot_repo=self._ballot_repo,
            vote_repo=self._vote_repo,
            count_repo=self._count_repo,
            lifecycle=self.lifecycle,
            registry=self.registry,
        )
        logger.debug("VotingLedger initialized")

    @classmethod
    def open(
        cls,
        db_path: str = DB_PATH,
        admin: str = DEFAULT_ADMIN,
        clock: SequenceClock | None = None,
    ) -> "VotingLedger":
        """Open (or create) a ledger database. ``:memory:`` gives a private ledger."""
        return cls(connect(db_path, admin), clock)

    @property
    def clock(self) -> SequenceClock:
        return self._clock

    @property
    def connection(self) -> duckdb.DuckDBPyConnection:
        return self._conn

    def close(self) -> None:
        with self._lock:
            self._conn.close()
            logger.debug("VotingLedger closed")

    @contextmanager
    def _transaction(self, operation: str) -> Iterator[int]:
        """Serialize and atomically apply one mutating call. Yields the sequence."""
        with self._lock:
            self._conn.begin()
            try:
                yield self._clock.now()
            except LedgerError as e:
                self._conn.rollback()
                logger.debug("{} rejected: {} ({})", operation, e.code.tag, e.message)
                raise
            except Exception as e:
                self._conn.rollback()
                self._ballot_repo.clear_cache()
                logger.warning("{} failed, rolled back: {}", operation, e)
                raise
            else:
                self._conn.commit()

    @contextmanager
    def _read(self) -> Iterator[int]:
        """Serialize one query. Yields the sequence."""
        with self._lock:
            yield self._clock.now()

    # Voter registry

    def register_voter(self, caller: str) -> str:
        with self._transaction("register_voter") as seq:
            return self.registry.register_voter(caller, seq)

    def unregister_voter(self, caller: str, target: str) -> str:
        with self._transaction("unregister_voter"):
            return self.registry.unregister_voter(caller, target)

    def update_admin(self, caller: str, new_admin: str) -> str:
        with self._transaction("update_admin"):
            return self.registry.update_admin(caller, new_admin)

    def get_contract_admin(self) -> str:
        with self._read():
            return self.registry.get_admin()

    def is_admin(self, identity: str) -> bool:
        with self._read():
            return self.registry.is_admin(identity)

    def is_voter_registered(self, identity: str) -> bool:
        with self._read():
            return self.registry.is_registered(identity)

    def get_voter_info(self, identity: str) -> VoterRecord | None:
        with self._read():
            return self.registry.get_voter_info(identity)

    def get_voter_registration_seq(self, identity: str) -> int | None:
        with self._read():
            return self.registry.get_registration_seq(identity)

    # Ballot lifecycle

    def create_ballot(
        self,
        caller: str,
        title: str,
        description: str,
        options: list[str],
        duration: int,
    ) -> int:
        with self._transaction("create_ballot") as seq:
            return self.lifecycle.create_ballot(caller, title, description, options, duration, seq)

    def deactivate_ballot(self, caller: str, ballot_id: int) -> str:
        with self._transaction("deactivate_ballot"):
            return self.lifecycle.deactivate_ballot(caller, ballot_id)

    def get_next_ballot_id(self) -> int:
        with self._read():
            return self._state_repo.get_next_ballot_id()

    def get_ballot_info(self, ballot_id: int) -> Ballot | None:
        with self._read():
            return self.lifecycle.get_ballot_info(ballot_id)

    def get_ballot_options(self, ballot_id: int) -> list[str] | None:
        with self._read():
            return self.lifecycle.get_ballot_options(ballot_id)

    def is_ballot_active(self, ballot_id: int) -> bool:
        with self._read() as seq:
            return self.lifecycle.is_ballot_active(ballot_id, seq)

    def get_ballot_status(self, ballot_id: int) -> BallotStatus:
        with self._read() as seq:
            return self.lifecycle.get_ballot_status(ballot_id, seq)

    def get_ballot_results(self, ballot_id: int) -> BallotResults:
        with self._read() as seq:
            return self.lifecycle.get_ballot_results(ballot_id, seq)

    def get_option_result(self, ballot_id: int, option_index: int) -> OptionResult:
        with self._read():
            return self.lifecycle.get_option_result(ballot_id, option_index)

    # Votes

    def cast_vote(self, caller: str, ballot_id: int, option_index: int) -> str:
        with self._transaction("cast_vote") as seq:
            return self.casting.cast_vote(caller, ballot_id, option_index, seq)

    def change_vote(self, caller: str, ballot_id: int, new_option_index: int) -> str:
        with self._transaction("change_vote") as seq:
            return self.casting.change_vote(caller, ballot_id, new_option_index, seq)

    def get_vote_count(self, ballot_id: int, option_index: int) -> int:
        with self._read():
            return self.casting.get_vote_count(ballot_id, option_index)

    def get_voter_choice(self, ballot_id: int, voter: str) -> VoteRecord | None:
        with self._read():
            return self.casting.get_voter_choice(ballot_id, voter)

    def has_voter_voted(self, ballot_id: int, voter: str) -> bool:
        with self._read():
            return self.casting.has_voter_voted(ballot_id, voter)
