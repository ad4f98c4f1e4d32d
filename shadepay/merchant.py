"""Merchant registration, verification, keys and listing."""

from __future__ import annotations

from dataclasses import replace

from . import core, events
from .errors import ContractError, ErrorCode
from .ledger import Address, Env
from .types import DataKey, KeyKind, Merchant, MerchantFilter

MERCHANT_COUNT_KEY = DataKey(KeyKind.MERCHANT_COUNT)
KEY_LENGTH = 32


def _merchant_count(env: Env) -> int:
    return env.storage.get(MERCHANT_COUNT_KEY, 0)


def register_merchant(env: Env, merchant: Address) -> None:
    """Register the address as a new merchant with the next id."""
    env.require_auth(merchant)
    if env.storage.has(DataKey(KeyKind.MERCHANT_ID, (merchant,))):
        raise ContractError(ErrorCode.MERCHANT_ALREADY_REGISTERED)

    new_id = _merchant_count(env) + 1
    record = Merchant(
        id=new_id,
        address=merchant,
        active=True,
        verified=False,
        date_registered=env.timestamp,
    )
    env.storage.set(DataKey(KeyKind.MERCHANT, (new_id,)), record)
    env.storage.set(DataKey(KeyKind.MERCHANT_ID, (merchant,)), new_id)
    env.storage.set(MERCHANT_COUNT_KEY, new_id)

    events.publish_merchant_registered_event(env, merchant, new_id, env.timestamp)


def get_merchant(env: Env, merchant_id: int) -> Merchant:
    """Return the merchant with the id, or raise MERCHANT_NOT_FOUND."""
    if merchant_id == 0 or merchant_id > _merchant_count(env):
        raise ContractError(ErrorCode.MERCHANT_NOT_FOUND)
    key = DataKey(KeyKind.MERCHANT, (merchant_id,))
    if not env.storage.has(key):
        raise ContractError(ErrorCode.MERCHANT_NOT_FOUND)
    return env.storage.get(key)


def is_merchant(env: Env, merchant: Address) -> bool:
    """Return whether the address is a registered merchant."""
    return env.storage.has(DataKey(KeyKind.MERCHANT_ID, (merchant,)))


def verify_merchant(env: Env, admin: Address, merchant_id: int, status: bool) -> None:
    """Set a merchant's verification status; only the admin may do this."""
    core.assert_admin(env, admin)
    record = replace(get_merchant(env, merchant_id), verified=status)
    env.storage.set(DataKey(KeyKind.MERCHANT, (merchant_id,)), record)
    events.publish_merchant_verified_event(env, merchant_id, status, env.timestamp)


def is_merchant_verified(env: Env, merchant_id: int) -> bool:
    """Return whether the merchant with the id is verified."""
    return get_merchant(env, merchant_id).verified


def set_merchant_key(env: Env, merchant: Address, key: bytes) -> None:
    """Store a 32-byte key for a registered merchant."""
    env.require_auth(merchant)
    if not is_merchant(env, merchant):
        raise ContractError(ErrorCode.MERCHANT_NOT_FOUND)
    key = bytes(key)
    if len(key) != KEY_LENGTH:
        raise ValueError(f"merchant key must be {KEY_LENGTH} bytes, got {len(key)}")
    env.storage.set(DataKey(KeyKind.MERCHANT_KEY, (merchant,)), key)
    events.publish_merchant_key_set_event(env, merchant, key, env.timestamp)


def get_merchant_key(env: Env, merchant: Address) -> bytes:
    """Return the merchant's key, or raise MERCHANT_KEY_NOT_FOUND."""
    storage_key = DataKey(KeyKind.MERCHANT_KEY, (merchant,))
    if not env.storage.has(storage_key):
        raise ContractError(ErrorCode.MERCHANT_KEY_NOT_FOUND)
    return env.storage.get(storage_key)


def get_merchants(env: Env, merchant_filter: MerchantFilter | None = None) -> list[Merchant]:
    """Return the merchants that pass the filter, in registration order."""
    merchant_filter = merchant_filter or MerchantFilter()
    found = (
        env.storage.get(DataKey(KeyKind.MERCHANT, (merchant_id,)))
        for merchant_id in range(1, _merchant_count(env) + 1)
    )
    return [m for m in found if m is not None and merchant_filter.matches(m)]