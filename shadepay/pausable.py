"""Pausing and resuming the contract."""

from __future__ import annotations

from . import core, events
from .errors import ContractError, ErrorCode
from .ledger import Address, Env
from .types import DataKey, KeyKind

PAUSED_KEY = DataKey(KeyKind.PAUSED)


def _require_admin(env: Env, admin: Address) -> None:
    env.require_auth(admin)
    if core.get_admin(env) != admin:
        raise ContractError(ErrorCode.NOT_AUTHORIZED)


def pause(env: Env, admin: Address) -> None:
    """Pause the contract; only the admin may, and only when it is running."""
    _require_admin(env, admin)
    assert_not_paused(env)
    env.storage.set(PAUSED_KEY, True)
    events.publish_contract_paused_event(env, admin, env.timestamp)


def unpause(env: Env, admin: Address) -> None:
    """Resume the contract; only the admin may, and only when it is paused."""
    _require_admin(env, admin)
    assert_paused(env)
    env.storage.set(PAUSED_KEY, False)
    events.publish_contract_unpaused_event(env, admin, env.timestamp)


def is_paused(env: Env) -> bool:
    """Return whether the contract is paused."""
    return bool(env.storage.get(PAUSED_KEY, False))


def assert_paused(env: Env) -> None:
    """Raise CONTRACT_NOT_PAUSED unless the contract is paused."""
    if not is_paused(env):
        raise ContractError(ErrorCode.CONTRACT_NOT_PAUSED)


def assert_not_paused(env: Env) -> None:
    """Raise CONTRACT_PAUSED if the contract is paused."""
    if is_paused(env):
        raise ContractError(ErrorCode.CONTRACT_PAUSED)