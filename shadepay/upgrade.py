"""Replacing the contract code."""

from __future__ import annotations

from . import core, events
from .ledger import Env


def upgrade(env: Env, new_wasm_hash: bytes) -> None:
    """Switch the contract to previously uploaded code; admin only."""
    current_admin = core.get_admin(env)
    core.assert_admin(env, current_admin)
    wasm_hash = bytes(new_wasm_hash)
    env.update_current_contract_wasm(wasm_hash)
    events.publish_contract_upgraded_event(env, current_admin, wasm_hash, env.timestamp)