from app.services.registry.service import VoterRegistry

__all__ = ["VoterRegistry"]
