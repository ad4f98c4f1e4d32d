"""An in-memory ledger environment: addresses, storage, auth and events."""

from __future__ import annotations

import copy
import hashlib
import itertools
from dataclasses import dataclass
from typing import Any

from .errors import AuthError

_address_counter = itertools.count(1)


@dataclass(frozen=True)
class Address:
    """An account or contract address."""

    value: str

    @classmethod
    def generate(cls) -> "Address":
        """Return a fresh address, distinct from every other generated one."""
        return cls(f"G{next(_address_counter):055d}")

    def __str__(self) -> str:
        return self.value


class Storage:
    """Key-value storage with value semantics: values are copied in and out."""

    def __init__(self) -> None:
        self._entries: dict[Any, Any] = {}

    def has(self, key: Any) -> bool:
        return key in self._entries

    def get(self, key: Any, default: Any = None) -> Any:
        if key not in self._entries:
            return default
        return copy.deepcopy(self._entries[key])

    def set(self, key: Any, value: Any) -> None:
        self._entries[key] = copy.deepcopy(value)

    def remove(self, key: Any) -> None:
        self._entries.pop(key, None)


class Env:
    """The environment a contract runs in: ledger time, storage, auth, events."""

    def __init__(self, timestamp: int = 0) -> None:
        self.timestamp = timestamp
        self.storage = Storage()
        self.contract_address = Address.generate()
        self.events: list[tuple[Address, Any]] = []
        self.current_wasm_hash: bytes | None = None
        self._mock_all_auths = False
        self._authorized: set[Any] = set()
        self._uploaded: dict[bytes, bytes] = {}

    def mock_all_auths(self) -> None:
        """Treat every address as having authorized every call."""
        self._mock_all_auths = True

    def authorize(self, address: Any) -> None:
        """Record that the given address authorizes calls."""
        self._authorized.add(address)

    def require_auth(self, address: Any) -> None:
        """Raise AuthError unless the address has authorized the call."""
        if not (self._mock_all_auths or address in self._authorized):
            raise AuthError(address)

    def publish(self, event: Any) -> None:
        """Record an event emitted by the current contract."""
        self.events.append((self.contract_address, event))

    def upload_contract_wasm(self, wasm: bytes) -> bytes:
        """Store contract code and return its 32-byte hash."""
        code = bytes(wasm)
        digest = hashlib.sha256(code).digest()
        self._uploaded[digest] = code
        return digest

    def update_current_contract_wasm(self, wasm_hash: bytes) -> None:
        """Switch the current contract to previously uploaded code."""
        wasm_hash = bytes(wasm_hash)
        if len(wasm_hash) != 32:
            raise ValueError("wasm hash must be 32 bytes")
        if wasm_hash not in self._uploaded:
            raise ValueError("no contract code uploaded with this hash")
        self.current_wasm_hash = wasm_hash