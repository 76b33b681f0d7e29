"""Votes API schemas."""

from pydantic import BaseModel


class VoteChoiceResponse(BaseModel):
    """A voter's current choice on a ballot."""

    ballot_id: int
    voter: str
    option_index: int
    vote_seq: int
