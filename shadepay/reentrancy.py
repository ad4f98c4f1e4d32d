"""A storage flag that blocks a call from re-entering the contract."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from .errors import ContractError, ErrorCode
from .ledger import Env
from .types import DataKey, KeyKind

REENTRANCY_KEY = DataKey(KeyKind.REENTRANCY_STATUS)


def enter(env: Env) -> None:
    """Set the flag, raising REENTRANCY if it is already set."""
    if env.storage.has(REENTRANCY_KEY):
        raise ContractError(ErrorCode.REENTRANCY)
    env.storage.set(REENTRANCY_KEY, True)


def exit(env: Env) -> None:
    """Clear the flag."""
    env.storage.remove(REENTRANCY_KEY)


@contextmanager
def guard(env: Env) -> Iterator[None]:
    """Hold the flag for the duration of the block."""
    enter(env)
    try:
        yield
    finally:
        exit(env)