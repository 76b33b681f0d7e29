"""Votes API views - thin layer over the ledger."""

from app.container import container
from web.api.errors import run_call, validate_identity, validate_uint
from web.api.schemas import CallResponse

from .schemas import VoteChoiceResponse


def cast_vote(caller: str, ballot_id: int, option_index: int) -> CallResponse:
    """Cast the caller's vote."""
    validate_identity(caller)
    validate_uint(ballot_id, "ballot_id")
    validate_uint(option_index, "option_index")
    return run_call(container.ledger.cast_vote, caller, ballot_id, option_index)


def change_vote(caller: str, ballot_id: int, new_option_index: int) -> CallResponse:
    """Move the caller's vote to another option."""
    validate_identity(caller)
    validate_uint(ballot_id, "ballot_id")
    validate_uint(new_option_index, "new_option_index")
    return run_call(container.ledger.change_vote, caller, ballot_id, new_option_index)


def get_vote_count(ballot_id: int, option_index: int) -> int:
    validate_uint(ballot_id, "ballot_id")
    validate_uint(option_index, "option_index")
    return container.ledger.get_vote_count(ballot_id, option_index)


def get_voter_choice(ballot_id: int, voter: str) -> VoteChoiceResponse | None:
    validate_uint(ballot_id, "ballot_id")
    record = container.ledger.get_voter_choice(ballot_id, voter)
    if record is None:
        return None
    return VoteChoiceResponse(
        ballot_id=ballot_id,
        voter=voter,
        option_index=record.option_index,
        vote_seq=record.vote_seq,
    )


def has_voter_voted(ballot_id: int, voter: str) -> bool:
    validate_uint(ballot_id, "ballot_id")
    return container.ledger.has_voter_voted(ballot_id, voter)
