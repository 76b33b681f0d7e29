"""Ballot API views - thin layer over the ledger."""

from app.container import container
from web.api.errors import run_call, validate_identity, validate_uint
from web.api.schemas import CallResponse

from .schemas import (
    BallotInfoResponse,
    BallotResultsResponse,
    CreateBallotRequest,
    OptionResultResponse,
)


def create_ballot(
    caller: str,
    title: str,
    description: str,
    options: list[str],
    duration: int,
) -> CallResponse:
    """Create a ballot; the value is the new ballot id.

    Raises pydantic ``ValidationError`` for oversized inputs (more than the
    allowed number of options, over-long text) before the ledger is called.
    """
    validate_identity(caller)
    request = CreateBallotRequest(title=title, description=description, options=options, duration=duration)
    validate_uint(request.duration, "duration")
    return run_call(
        container.ledger.create_ballot,
        caller,
        request.title,
        request.description,
        request.options,
        request.duration,
    )


def deactivate_ballot(caller: str, ballot_id: int) -> CallResponse:
    """Close a ballot early (creator or admin)."""
    validate_identity(caller)
    validate_uint(ballot_id, "ballot_id")
    return run_call(container.ledger.deactivate_ballot, caller, ballot_id)


def get_next_ballot_id() -> int:
    return container.ledger.get_next_ballot_id()


def get_ballot_info(ballot_id: int) -> BallotInfoResponse | None:
    validate_uint(ballot_id, "ballot_id")
    ballot = container.ledger.get_ballot_info(ballot_id)
    if ballot is None:
        return None
    return BallotInfoResponse(**ballot.to_dict())


def get_ballot_options(ballot_id: int) -> list[str] | None:
    validate_uint(ballot_id, "ballot_id")
    return container.ledger.get_ballot_options(ballot_id)


def is_ballot_active(ballot_id: int) -> bool:
    validate_uint(ballot_id, "ballot_id")
    return container.ledger.is_ballot_active(ballot_id)


def get_ballot_status(ballot_id: int) -> str:
    validate_uint(ballot_id, "ballot_id")
    return str(container.ledger.get_ballot_status(ballot_id))


def get_ballot_results(ballot_id: int) -> CallResponse:
    """Get ballot summary; fails with ``not-found`` for unknown ids."""
    validate_uint(ballot_id, "ballot_id")

    def fetch() -> BallotResultsResponse:
        results = container.ledger.get_ballot_results(ballot_id)
        data = results.to_dict()
        data["status"] = str(results.status)
        return BallotResultsResponse(**data)

    return run_call(fetch)


def get_option_result(ballot_id: int, option_index: int) -> CallResponse:
    """Get text and count of one option."""
    validate_uint(ballot_id, "ballot_id")
    validate_uint(option_index, "option_index")

    def fetch() -> OptionResultResponse:
        result = container.ledger.get_option_result(ballot_id, option_index)
        return OptionResultResponse(
            ballot_id=ballot_id,
            option_index=option_index,
            option=result.option,
            count=result.count,
        )

    return run_call(fetch)
