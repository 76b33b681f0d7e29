"""Ballot lifecycle service - creation, deactivation and ballot queries."""

from loguru import logger

from app.models.ballot import Ballot, BallotResults, BallotStatus, OptionResult
from app.models.common import ErrorCode, LedgerError
from app.repositories.ballot import BallotRepository, VoteCountRepository
from app.repositories.common import StateRepository
from app.services.registry import VoterRegistry
from settings import MAX_OPTIONS, MAX_SEQ, MIN_OPTIONS

BALLOT_DEACTIVATED = "Ballot deactivated successfully"


class BallotLifecycle:
    """Ballot creation, deactivation and status/result queries."""

    def __init__(
        self,
        state_repo: StateRepository,
        ballot_repo: BallotRepository,
        count_repo: VoteCountRepository,
        registry: VoterRegistry,
    ):
        self._state = state_repo
        self._ballots = ballot_repo
        self._counts = count_repo
        self._registry = registry
        logger.debug("BallotLifecycle initialized")

    def require_ballot(self, ballot_id: int) -> Ballot:
        """Get ballot or raise ``NOT_FOUND``."""
        ballot = self._ballots.get(ballot_id)
        if ballot is None:
            raise LedgerError(ErrorCode.NOT_FOUND, f"Ballot {ballot_id} not found")
        return ballot

    def create_ballot(
        self,
        caller: str,
        title: str,
        description: str,
        options: list[str],
        duration: int,
        seq: int,
    ) -> int:
        """Create a ballot open from ``seq`` to ``seq + duration``. Returns its id."""
        if not title:
            raise LedgerError(ErrorCode.EMPTY_TITLE)
        if len(options) < MIN_OPTIONS:
            raise LedgerError(ErrorCode.TOO_FEW_OPTIONS, f"At least {MIN_OPTIONS} options required")
        if len(options) > MAX_OPTIONS:
            raise LedgerError(ErrorCode.TOO_MANY_OPTIONS, f"At most {MAX_OPTIONS} options allowed")
        if duration <= 0:
            raise LedgerError(ErrorCode.INVALID_DURATION, f"Duration must be positive, got {duration}")
        if seq + duration > MAX_SEQ:
            raise LedgerError(ErrorCode.INVALID_DURATION, f"Ballot would end past sequence {MAX_SEQ}")

        ballot_id = self._state.get_next_ballot_id()
        ballot = Ballot(
            id=ballot_id,
            title=title,
            description=description,
            options=list(options),
            creator=caller,
            start_seq=seq,
            end_seq=seq + duration,
        )
        self._ballots.insert(ballot)
        self._counts.init_counts(ballot_id, len(options))
        self._state.set_next_ballot_id(ballot_id + 1)

        logger.info("Ballot {} created by {}: {} options, ends at {}", ballot_id, caller, len(options), ballot.end_seq)
        return ballot_id

    def deactivate_ballot(self, caller: str, ballot_id: int) -> str:
        """Close a ballot early. Allowed for its creator and the admin."""
        ballot = self.require_ballot(ballot_id)
        if caller != ballot.creator and not self._registry.is_admin(caller):
            raise LedgerError(ErrorCode.UNAUTHORIZED, f"{caller} cannot deactivate ballot {ballot_id}")

        if not ballot.active:
            logger.debug("Ballot {} already deactivated", ballot_id)
        self._ballots.deactivate(ballot_id)
        logger.info("Ballot {} deactivated by {}", ballot_id, caller)
        return BALLOT_DEACTIVATED

    def get_ballot_info(self, ballot_id: int) -> Ballot | None:
        return self._ballots.get(ballot_id)

    def get_ballot_options(self, ballot_id: int) -> list[str] | None:
        return self._ballots.get_options(ballot_id)

    def get_ballot_status(self, ballot_id: int, seq: int) -> BallotStatus:
        ballot = self._ballots.get(ballot_id)
        if ballot is None:
            return BallotStatus.NOT_FOUND
        return ballot.status_at(seq)

    def is_ballot_active(self, ballot_id: int, seq: int) -> bool:
        return self.get_ballot_status(ballot_id, seq) == BallotStatus.ACTIVE

    def get_ballot_results(self, ballot_id: int, seq: int) -> BallotResults:
        ballot = self.require_ballot(ballot_id)
        return BallotResults(
            id=ballot.id,
            title=ballot.title,
            total_votes=ballot.total_votes,
            options=ballot.options,
            status=ballot.status_at(seq),
            creator=ballot.creator,
            start_seq=ballot.start_seq,
            end_seq=ballot.end_seq,
        )

    def get_option_result(self, ballot_id: int, option_index: int) -> OptionResult:
        options = self._ballots.get_options(ballot_id)
        if options is None:
            raise LedgerError(ErrorCode.NOT_FOUND, f"Ballot {ballot_id} not found")
        if not 0 <= option_index < len(options):
            raise LedgerError(ErrorCode.INVALID_OPTION, f"Ballot {ballot_id} has no option {option_index}")

        return OptionResult(
            option=options[option_index],
            count=self._counts.get(ballot_id, option_index),
        )
