"""Ballot API."""

from web.api.ballots.views import (
    create_ballot,
    deactivate_ballot,
    get_ballot_info,
    get_ballot_options,
    get_ballot_results,
    get_ballot_status,
    get_next_ballot_id,
    get_option_result,
    is_ballot_active,
)

__all__ = [
    "create_ballot",
    "deactivate_ballot",
    "get_next_ballot_id",
    "get_ballot_info",
    "get_ballot_options",
    "is_ballot_active",
    "get_ballot_status",
    "get_ballot_results",
    "get_option_result",
]
