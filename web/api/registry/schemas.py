"""Registry API schemas."""

from pydantic import BaseModel


class VoterInfoResponse(BaseModel):
    """Registered voter."""

    identity: str
    registered: bool
    registration_seq: int
