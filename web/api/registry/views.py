"""Registry API views - thin layer over the ledger."""

from app.container import container
from web.api.errors import run_call, validate_identity
from web.api.schemas import CallResponse

from .schemas import VoterInfoResponse


def register_voter(caller: str) -> CallResponse:
    """Register the caller as a voter."""
    validate_identity(caller)
    return run_call(container.ledger.register_voter, caller)


def unregister_voter(caller: str, target: str) -> CallResponse:
    """Remove a voter (admin only)."""
    validate_identity(caller)
    validate_identity(target, "target")
    return run_call(container.ledger.unregister_voter, caller, target)


def update_admin(caller: str, new_admin: str) -> CallResponse:
    """Hand the admin role to another identity (admin only)."""
    validate_identity(caller)
    validate_identity(new_admin, "new_admin")
    return run_call(container.ledger.update_admin, caller, new_admin)


def get_contract_admin() -> str:
    return container.ledger.get_contract_admin()


def is_admin(identity: str) -> bool:
    return container.ledger.is_admin(identity)


def is_voter_registered(identity: str) -> bool:
    return container.ledger.is_voter_registered(identity)


def get_voter_info(identity: str) -> VoterInfoResponse | None:
    record = container.ledger.get_voter_info(identity)
    if record is None:
        return None
    return VoterInfoResponse(
        identity=identity,
        registered=record.registered,
        registration_seq=record.registration_seq,
    )


def get_voter_registration_seq(identity: str) -> int | None:
    return container.ledger.get_voter_registration_seq(identity)
