"""Ballot API request and response schemas."""

from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

from settings import MAX_DESCRIPTION_LENGTH, MAX_OPTION_LENGTH, MAX_OPTIONS, MAX_TITLE_LENGTH

OptionText = Annotated[str, StringConstraints(max_length=MAX_OPTION_LENGTH)]


class CreateBallotRequest(BaseModel):
    """New ballot. Only container bounds are checked here; the ledger validates the rest."""

    title: str = Field(max_length=MAX_TITLE_LENGTH)
    description: str = Field(default="", max_length=MAX_DESCRIPTION_LENGTH)
    options: list[OptionText] = Field(max_length=MAX_OPTIONS)
    duration: int = Field(ge=0)


class BallotInfoResponse(BaseModel):
    """Stored ballot."""

    id: int
    title: str
    description: str
    options: list[str]
    creator: str
    start_seq: int
    end_seq: int
    active: bool
    total_votes: int


class BallotResultsResponse(BaseModel):
    """Ballot summary with computed status."""

    id: int
    title: str
    total_votes: int
    options: list[str]
    status: str
    creator: str
    start_seq: int
    end_seq: int


class OptionResultResponse(BaseModel):
    """Tally for one option."""

    ballot_id: int
    option_index: int
    option: str
    count: int
