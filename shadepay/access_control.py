"""Role management: the admin grants and revokes roles for users."""

from __future__ import annotations

from . import core, events
from .errors import ContractError, ErrorCode
from .ledger import Address, Env
from .types import DataKey, KeyKind, Role


def _role_key(user: Address, role: Role) -> DataKey:
    return DataKey(KeyKind.ROLE, (user, role))


def _change_role(env: Env, admin: Address, user: Address, role: Role, granted: bool) -> None:
    core.assert_admin(env, admin)
    key = _role_key(user, role)
    if granted:
        env.storage.set(key, True)
        publish = events.publish_role_granted_event
    else:
        env.storage.remove(key)
        publish = events.publish_role_revoked_event
    publish(env, user, role, env.timestamp)


def grant_role(env: Env, admin: Address, user: Address, role: Role) -> None:
    """Give the user a role; only the admin may do this."""
    _change_role(env, admin, user, role, granted=True)


def revoke_role(env: Env, admin: Address, user: Address, role: Role) -> None:
    """Take a role away from the user; only the admin may do this."""
    _change_role(env, admin, user, role, granted=False)


def has_role(env: Env, user: Address, role: Role) -> bool:
    """Return whether the user holds the role; the admin holds every role."""
    return user == core.get_admin(env) or env.storage.has(_role_key(user, role))


def assert_has_role(env: Env, user: Address, role: Role) -> None:
    """Require the user to have authorized the call and to hold the role."""
    env.require_auth(user)
    if not has_role(env, user, role):
        raise ContractError(ErrorCode.NOT_AUTHORIZED)