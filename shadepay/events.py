"""Events emitted by the payment contract."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Event:
    """A named contract event and its data fields."""

    name: str
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def topics(self) -> tuple[str, ...]:
        return (self.name,)


def _emit(env: Any, name: str, **data: Any) -> None:
    env.publish(Event(name, data))


def publish_initialized_event(env, admin, timestamp):
    _emit(env, "initalized_event", admin=admin, timestamp=timestamp)


def publish_token_added_event(env, token, timestamp):
    _emit(env, "token_added_event", token=token, timestamp=timestamp)


def publish_token_removed_event(env, token, timestamp):
    _emit(env, "token_removed_event", token=token, timestamp=timestamp)


def publish_merchant_registered_event(env, merchant, merchant_id, timestamp):
    _emit(
        env,
        "merchant_registered_event",
        merchant=merchant,
        merchant_id=merchant_id,
        timestamp=timestamp,
    )


def publish_invoice_created_event(env, invoice_id, merchant, amount, token):
    _emit(
        env,
        "invoice_created_event",
        invoice_id=invoice_id,
        merchant=merchant,
        amount=amount,
        token=token,
    )


def publish_merchant_verified_event(env, merchant_id, status, timestamp):
    _emit(
        env,
        "merchant_verified_event",
        merchant_id=merchant_id,
        status=status,
        timestamp=timestamp,
    )


def publish_merchant_key_set_event(env, merchant, key, timestamp):
    _emit(env, "merchant_key_set_event", merchant=merchant, key=key, timestamp=timestamp)


def publish_role_granted_event(env, user, role, timestamp):
    _emit(env, "role_granted_event", user=user, role=role, timestamp=timestamp)


def publish_role_revoked_event(env, user, role, timestamp):
    _emit(env, "role_revoked_event", user=user, role=role, timestamp=timestamp)


def publish_contract_paused_event(env, admin, timestamp):
    _emit(env, "contract_paused_event", admin=admin, timestamp=timestamp)


def publish_contract_unpaused_event(env, admin, timestamp):
    _emit(env, "contract_unpaused_event", admin=admin, timestamp=timestamp)


def publish_contract_upgraded_event(env, admin, new_wasm_hash, timestamp):
    _emit(
        env,
        "contract_upgraded_event",
        admin=admin,
        new_wasm_hash=new_wasm_hash,
        timestamp=timestamp,
    )