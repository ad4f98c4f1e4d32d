"""Admin lookup and admin authorization checks."""

from __future__ import annotations

from .errors import ContractError, ErrorCode
from .ledger import Address, Env
from .types import DataKey, KeyKind

ADMIN_KEY = DataKey(KeyKind.ADMIN)


def get_admin(env: Env) -> Address:
    """Return the contract admin; raise NOT_INITIALIZED when none is stored."""
    stored = env.storage.get(ADMIN_KEY)
    if stored is None:
        raise ContractError(ErrorCode.NOT_INITIALIZED)
    return stored


def assert_admin(env: Env, admin: Address) -> None:
    """Require the caller's authorization and that the caller is the admin."""
    env.require_auth(admin)
    if get_admin(env) != admin:
        raise ContractError(ErrorCode.NOT_AUTHORIZED)