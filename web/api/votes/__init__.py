"""Votes API."""

from web.api.votes.views import (
    cast_vote,
    change_vote,
    get_vote_count,
    get_voter_choice,
    has_voter_voted,
)

__all__ = [
    "cast_vote",
    "change_vote",
    "get_vote_count",
    "get_voter_choice",
    "has_voter_voted",
]
