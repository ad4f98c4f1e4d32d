import pytest

from shadepay.core import ADMIN_KEY
from shadepay.errors import AuthError, ContractError, ErrorCode
from shadepay.ledger import Address, Env
from shadepay.merchant import (
    get_merchant,
    get_merchant_key,
    get_merchants,
    is_merchant,
    is_merchant_verified,
    register_merchant,
    set_merchant_key,
    verify_merchant,
)
from shadepay.types import MerchantFilter


@pytest.fixture
def market():
    """A ledger with mocked auths and an admin, plus that admin."""
    env = Env(timestamp=1234)
    env.mock_all_auths()
    operator = Address.generate()
    env.storage.set(ADMIN_KEY, operator)
    return env, operator


def _register(env, count):
    merchants = [Address.generate() for _ in range(count)]
    for merchant in merchants:
        register_merchant(env, merchant)
    return merchants


def _error_code(call, *args):
    with pytest.raises(ContractError) as exc:
        call(*args)
    return exc.value.code


def test_register_assigns_sequential_ids(market):
    env, _ = market
    addresses = _register(env, 2)
    assert [get_merchant(env, i).address for i in (1, 2)] == addresses


def test_registered_merchant_record_and_event(market):
    env, _ = market
    (merchant,) = _register(env, 1)
    record = get_merchant(env, 1)
    assert (record.id, record.address, record.active, record.verified, record.date_registered) == (
        1,
        merchant,
        True,
        False,
        1234,
    )
    assert env.events[-1][1].data == {"merchant": merchant, "merchant_id": 1, "timestamp": 1234}


def test_register_twice_fails(market):
    env, _ = market
    (merchant,) = _register(env, 1)
    assert _error_code(register_merchant, env, merchant) is ErrorCode.MERCHANT_ALREADY_REGISTERED
    assert len(get_merchants(env, MerchantFilter())) == 1


def test_register_requires_auth():
    env = Env()
    merchant = Address.generate()
    with pytest.raises(AuthError):
        register_merchant(env, merchant)
    assert is_merchant(env, merchant) is False


@pytest.mark.parametrize("merchant_id", [0, 2])
def test_get_merchant_out_of_range(market, merchant_id):
    env, _ = market
    _register(env, 1)
    assert _error_code(get_merchant, env, merchant_id) is ErrorCode.MERCHANT_NOT_FOUND


def test_is_merchant(market):
    env, _ = market
    (merchant,) = _register(env, 1)
    assert is_merchant(env, merchant) is True
    assert is_merchant(env, Address.generate()) is False


def test_verify_merchant_round_trip(market):
    env, operator = market
    _register(env, 1)
    verify_merchant(env, operator, 1, True)
    assert is_merchant_verified(env, 1) is True
    assert env.events[-1][1].data == {"merchant_id": 1, "status": True, "timestamp": 1234}
    verify_merchant(env, operator, 1, False)
    assert is_merchant_verified(env, 1) is False


def test_verify_merchant_by_non_admin_fails(market):
    env, _ = market
    (merchant,) = _register(env, 1)
    assert _error_code(verify_merchant, env, merchant, 1, True) is ErrorCode.NOT_AUTHORIZED
    assert is_merchant_verified(env, 1) is False


def test_verify_unknown_merchant_fails(market):
    env, operator = market
    assert _error_code(verify_merchant, env, operator, 1, True) is ErrorCode.MERCHANT_NOT_FOUND


def test_set_merchant_key_success(market):
    env, _ = market
    (merchant,) = _register(env, 1)
    key = bytes([0] * 32)
    set_merchant_key(env, merchant, key)
    assert get_merchant_key(env, merchant) == key
    address, event = env.events[-1]
    assert address == env.contract_address
    assert (event.data["merchant"], event.data["key"]) == (merchant, key)


def test_update_merchant_key(market):
    env, _ = market
    (merchant,) = _register(env, 1)
    for fill in (0, 1):
        key = bytes([fill] * 32)
        set_merchant_key(env, merchant, key)
        assert get_merchant_key(env, merchant) == key


def test_get_non_existent_key(market):
    env, _ = market
    (merchant,) = _register(env, 1)
    assert _error_code(get_merchant_key, env, merchant) is ErrorCode.MERCHANT_KEY_NOT_FOUND


def test_set_key_for_unregistered_merchant_fails(market):
    env, _ = market
    stranger = Address.generate()
    assert _error_code(set_merchant_key, env, stranger, bytes(32)) is ErrorCode.MERCHANT_NOT_FOUND


def test_set_key_of_wrong_length_fails(market):
    env, _ = market
    (merchant,) = _register(env, 1)
    with pytest.raises(ValueError):
        set_merchant_key(env, merchant, bytes(31))
    assert _error_code(get_merchant_key, env, merchant) is ErrorCode.MERCHANT_KEY_NOT_FOUND


@pytest.mark.parametrize(
    "merchant_filter, expected_ids",
    [
        (MerchantFilter(), [1, 2, 3]),
        (MerchantFilter(is_verified=True), [2]),
        (MerchantFilter(is_verified=False), [1, 3]),
        (MerchantFilter(is_active=True), [1, 2, 3]),
        (MerchantFilter(is_active=False), []),
        (MerchantFilter(is_active=True, is_verified=True), [2]),
    ],
)
def test_get_merchants_filters(market, merchant_filter, expected_ids):
    env, operator = market
    _register(env, 3)
    verify_merchant(env, operator, 2, True)
    assert [m.id for m in get_merchants(env, merchant_filter)] == expected_ids


def test_get_merchants_empty(market):
    env, _ = market
    assert get_merchants(env, MerchantFilter()) == []