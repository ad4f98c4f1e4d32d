import pytest

from shadepay.access_control import assert_has_role, grant_role, has_role, revoke_role
from shadepay.core import ADMIN_KEY
from shadepay.errors import AuthError, ContractError, ErrorCode
from shadepay.ledger import Address, Env
from shadepay.types import Role


def _roles_ledger(mock=True):
    """Return an initialized ledger, its admin and a plain user."""
    env = Env(timestamp=1234)
    if mock:
        env.mock_all_auths()
    admin, user = Address.generate(), Address.generate()
    env.storage.set(ADMIN_KEY, admin)
    return env, admin, user


def test_grant_then_revoke():
    env, admin, user = _roles_ledger()
    grant_role(env, admin, user, Role.MANAGER)
    held = [has_role(env, user, role) for role in (Role.MANAGER, Role.OPERATOR)]
    revoke_role(env, admin, user, Role.MANAGER)
    assert held == [True, False]
    assert has_role(env, user, Role.MANAGER) is False


@pytest.mark.parametrize("role", list(Role))
def test_admin_holds_every_role(role):
    env, admin, _user = _roles_ledger()
    assert has_role(env, admin, role) is True


@pytest.mark.parametrize("change, held_before", [(grant_role, False), (revoke_role, True)])
def test_role_change_by_non_admin_is_rejected(change, held_before):
    env, admin, user = _roles_ledger()
    if held_before:
        grant_role(env, admin, user, Role.MANAGER)
    with pytest.raises(ContractError) as denied:
        change(env, user, user, Role.MANAGER)
    assert denied.value.code is ErrorCode.NOT_AUTHORIZED
    assert has_role(env, user, Role.MANAGER) is held_before


@pytest.mark.parametrize(
    "call, expected",
    [
        (lambda env, user: has_role(Env(), user, Role.ADMIN), ErrorCode.NOT_INITIALIZED),
        (lambda env, user: assert_has_role(env, user, Role.OPERATOR), ErrorCode.NOT_AUTHORIZED),
    ],
)
def test_role_check_errors(call, expected):
    env, _admin, user = _roles_ledger()
    with pytest.raises(ContractError) as denied:
        call(env, user)
    assert denied.value.code is expected


def test_grant_and_assert_need_auth():
    env, admin, user = _roles_ledger(mock=False)
    with pytest.raises(AuthError):
        grant_role(env, admin, user, Role.MANAGER)
    assert has_role(env, user, Role.MANAGER) is False

    env.authorize(admin)
    grant_role(env, admin, user, Role.OPERATOR)
    with pytest.raises(AuthError) as missing:
        assert_has_role(env, user, Role.OPERATOR)
    assert missing.value.address == user
    env.authorize(user)
    assert assert_has_role(env, user, Role.OPERATOR) is None


def test_grant_and_revoke_publish_events():
    env, admin, user = _roles_ledger()
    grant_role(env, admin, user, Role.MANAGER)
    revoke_role(env, admin, user, Role.MANAGER)
    (_, granted), (_, revoked) = env.events
    payload = {"user": user, "role": Role.MANAGER, "timestamp": 1234}
    assert [granted.data, revoked.data] == [payload, payload]
    assert revoked.name != granted.name