"""Vote casting service - first votes, vote changes and vote queries."""

from loguru import logger

from app.models.ballot import Ballot, VoteRecord
from app.models.common import ErrorCode, LedgerError
from app.repositories.ballot import BallotRepository, VoteCountRepository, VoteRepository
from app.services.ballot.lifecycle import BallotLifecycle
from app.services.registry import VoterRegistry

VOTE_CAST = "Vote cast successfully"
VOTE_CHANGED = "Vote changed successfully"


class VoteCasting:
    """Records one vote per voter per ballot and keeps counts consistent.

    For every ballot the sum of its option counts, the number of vote
    records and ``Ballot.total_votes`` stay equal.
    """

    def __init__(
        self,
        ballot_repo: BallotRepository,
        vote_repo: VoteRepository,
        count_repo: VoteCountRepository,
        lifecycle: BallotLifecycle,
        registry: VoterRegistry,
    ):
        self._ballots = ballot_repo
        self._votes = vote_repo
        self._counts = count_repo
        self._lifecycle = lifecycle
        self._registry = registry
        logger.debug("VoteCasting initialized")

    def _require_registered(self, caller: str) -> None:
        if not self._registry.is_registered(caller):
            raise LedgerError(ErrorCode.UNAUTHORIZED, f"{caller} is not a registered voter")

    @staticmethod
    def _require_open(ballot: Ballot, seq: int) -> None:
        if not ballot.active:
            raise LedgerError(ErrorCode.BALLOT_INACTIVE, f"Ballot {ballot.id} is deactivated")
        if seq > ballot.end_seq:
            raise LedgerError(ErrorCode.BALLOT_ENDED, f"Ballot {ballot.id} ended at {ballot.end_seq}")

    @staticmethod
    def _require_option(ballot: Ballot, option_index: int) -> None:
        if not ballot.has_option(option_index):
            raise LedgerError(ErrorCode.INVALID_OPTION, f"Ballot {ballot.id} has no option {option_index}")

    def cast_vote(self, caller: str, ballot_id: int, option_index: int, seq: int) -> str:
        """Record the caller's first vote on a ballot."""
        ballot = self._lifecycle.require_ballot(ballot_id)
        self._require_registered(caller)
        self._require_open(ballot, seq)
        if self._votes.get(ballot_id, caller) is not None:
            raise LedgerError(ErrorCode.ALREADY_VOTED, f"{caller} already voted on ballot {ballot_id}")
        self._require_option(ballot, option_index)

        self._votes.insert(ballot_id, caller, option_index, seq)
        self._counts.increment(ballot_id, option_index)
        self._ballots.increment_total(ballot_id)

        logger.info("Vote cast: ballot={}, voter={}, option={}", ballot_id, caller, option_index)
        return VOTE_CAST

    def change_vote(self, caller: str, ballot_id: int, new_option_index: int, seq: int) -> str:
        """Move the caller's existing vote to another option.

        ``total_votes`` is left unchanged.
        """
        ballot = self._lifecycle.require_ballot(ballot_id)
        self._require_registered(caller)
        previous = self._votes.get(ballot_id, caller)
        if previous is None:
            raise LedgerError(ErrorCode.NOT_FOUND, f"{caller} has no vote on ballot {ballot_id}")
        self._require_open(ballot, seq)
        self._require_option(ballot, new_option_index)
        if new_option_index == previous.option_index:
            raise LedgerError(ErrorCode.SAME_OPTION, f"{caller} already chose option {new_option_index}")

        self._counts.decrement(ballot_id, previous.option_index)
        self._counts.increment(ballot_id, new_option_index)
        self._votes.update(ballot_id, caller, new_option_index, seq)

        logger.info(
            "Vote changed: ballot={}, voter={}, option {} -> {}",
            ballot_id,
            caller,
            previous.option_index,
            new_option_index,
        )
        return VOTE_CHANGED

    def get_vote_count(self, ballot_id: int, option_index: int) -> int:
        return self._counts.get(ballot_id, option_index)

    def get_voter_choice(self, ballot_id: int, voter: str) -> VoteRecord | None:
        return self._votes.get(ballot_id, voter)

    def has_voter_voted(self, ballot_id: int, voter: str) -> bool:
        return self._votes.get(ballot_id, voter) is not None
