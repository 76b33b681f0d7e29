"""Registry API."""

from web.api.registry.views import (
    get_contract_admin,
    get_voter_info,
    get_voter_registration_seq,
    is_admin,
    is_voter_registered,
    register_voter,
    unregister_voter,
    update_admin,
)

__all__ = [
    "register_voter",
    "unregister_voter",
    "update_admin",
    "get_contract_admin",
    "is_admin",
    "is_voter_registered",
    "get_voter_info",
    "get_voter_registration_seq",
]
