"""Voter registry service - self-registration and admin management."""

from loguru import logger

from app.models.common import ErrorCode, LedgerError
from app.models.registry import VoterRecord
from app.repositories.common import StateRepository
from app.repositories.registry import VoterRepository

VOTER_REGISTERED = "Voter registered successfully"
VOTER_UNREGISTERED = "Voter unregistered successfully"
ADMIN_UPDATED = "Admin updated successfully"


class VoterRegistry:
    """Voter registry and the ledger admin identity."""

    def __init__(self, state_repo: StateRepository, voter_repo: VoterRepository):
        self._state = state_repo
        self._voters = voter_repo
        logger.debug("VoterRegistry initialized")

    def get_admin(self) -> str:
        return self._state.get_admin()

    def is_admin(self, identity: str) -> bool:
        return identity == self._state.get_admin()

    def require_admin(self, caller: str) -> None:
        """Raise ``UNAUTHORIZED`` unless caller is the current admin."""
        if not self.is_admin(caller):
            raise LedgerError(ErrorCode.UNAUTHORIZED, f"{caller} is not the admin")

    def register_voter(self, caller: str, seq: int) -> str:
        """Register the caller as a voter at sequence ``seq``."""
        if self._voters.exists(caller):
            raise LedgerError(ErrorCode.ALREADY_EXISTS, f"Voter {caller} already registered")

        self._voters.insert(caller, seq)
        logger.info("Voter registered: {} (seq={})", caller, seq)
        return VOTER_REGISTERED

    def unregister_voter(self, caller: str, target: str) -> str:
        """Remove ``target`` from the registry. Votes already cast are kept."""
        self.require_admin(caller)
        if not self._voters.exists(target):
            raise LedgerError(ErrorCode.NOT_FOUND, f"Voter {target} not registered")

        self._voters.delete(target)
        logger.info("Voter unregistered: {} (by {})", target, caller)
        return VOTER_UNREGISTERED

    def update_admin(self, caller: str, new_admin: str) -> str:
        self.require_admin(caller)
        self._state.set_admin(new_admin)
        logger.info("Admin updated: {} -> {}", caller, new_admin)
        return ADMIN_UPDATED

    def is_registered(self, identity: str) -> bool:
        return self._voters.exists(identity)

    def get_voter_info(self, identity: str) -> VoterRecord | None:
        return self._voters.get(identity)

    def get_registration_seq(self, identity: str) -> int | None:
        record = self._voters.get(identity)
        return record.registration_seq if record else None
