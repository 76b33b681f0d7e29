"""Registry domain models - registered voters."""

from app.models.registry.voter import VOTER_DDL, VoterRecord

__all__ = [
    "VOTER_DDL",
    "VoterRecord",
]
