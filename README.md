# shadepay

`shadepay` is a small merchant payment ledger that runs in memory. It is a
set of functions that work on an `Env`, the environment that holds the
ledger's time, storage, authorisations and published events. The ledger keeps:

- one administrator
- registered merchants, with sequential ids, an active flag and a verified flag
- a 32-byte key for each merchant
- roles (`Role.ADMIN`, `Role.MANAGER`, `Role.OPERATOR`) that the administrator
  grants and revokes
- a pause switch
- a reentrancy flag
- a record of the code hash the ledger has been upgraded to

Every change publishes an event, and you can inspect the events afterwards.

## Installation

```
pip install shadepay
```

Python 3.10 or later is required. There are no runtime dependencies.

## Modules

| Module | Contents |
| --- | --- |
| `shadepay.ledger` | `Address`, `Storage`, `Env` |
| `shadepay.errors` | `ErrorCode`, `ContractError`, `AuthError` |
| `shadepay.types` | `Role`, `InvoiceStatus`, `KeyKind`, `DataKey`, `ContractInfo`, `Merchant`, `Invoice`, `MerchantFilter`, `InvoiceFilter` |
| `shadepay.events` | `Event` and one `publish_*_event` function per event |
| `shadepay.core` | `get_admin`, `assert_admin`, `ADMIN_KEY` |
| `shadepay.merchant` | `register_merchant`, `get_merchant`, `get_merchants`, `is_merchant`, `verify_merchant`, `is_merchant_verified`, `set_merchant_key`, `get_merchant_key` |
| `shadepay.access_control` | `grant_role`, `revoke_role`, `has_role`, `assert_has_role` |
| `shadepay.pausable` | `pause`, `unpause`, `is_paused`, `assert_paused`, `assert_not_paused` |
| `shadepay.reentrancy` | `enter`, `exit`, `guard` |
| `shadepay.upgrade` | `upgrade` |

## Usage

```python
from shadepay import access_control, core, merchant, pausable, upgrade
from shadepay.errors import ContractError, ErrorCode
from shadepay.ledger import Address, Env
from shadepay.types import MerchantFilter, Role

env = Env(timestamp=1_700_000_000)
env.mock_all_auths()                      # every address counts as authorised

admin = Address.generate()
env.storage.set(core.ADMIN_KEY, admin)    # see "What the package does not do"

seller = Address.generate()
merchant.register_merchant(env, seller)   # gets id 1
merchant.verify_merchant(env, admin, 1, True)
assert merchant.is_merchant_verified(env, 1)

merchant.set_merchant_key(env, seller, bytes(32))
assert merchant.get_merchant_key(env, seller) == bytes(32)

verified = merchant.get_merchants(env, MerchantFilter(is_verified=True))

operator = Address.generate()
access_control.grant_role(env, admin, operator, Role.OPERATOR)
assert access_control.has_role(env, operator, Role.OPERATOR)

pausable.pause(env, admin)
try:
    pausable.assert_not_paused(env)
except ContractError as err:
    assert err.code is ErrorCode.CONTRACT_PAUSED
pausable.unpause(env, admin)

code_hash = env.upload_contract_wasm(b"new code")
upgrade.upgrade(env, code_hash)
assert env.current_wasm_hash == code_hash
```

### The environment

`Env(timestamp=0)` holds:

- `timestamp`, the ledger time that is stamped on new records and events
- `storage`, a `Storage` that copies values on the way in and on the way out
- `contract_address`, a generated `Address`
- `events`, the list of published events
- `current_wasm_hash`, the code hash last set by an upgrade, or `None`

`Address.generate()` returns a new address that differs from every other
generated address.

### Authorisation

Operations that need an address's consent call `env.require_auth(address)`.
That call raises `AuthError` unless one of these is true:

- `env.mock_all_auths()` has been called
- the address was authorised with `env.authorize(address)`

### Storage keys

Entries are stored under `DataKey(kind, args)`, where `kind` is a `KeyKind`
member. Keys such as `KeyKind.MERCHANT` take one argument, `KeyKind.ROLE`
takes two (user and role), and the rest take none. A wrong number of
arguments raises `ValueError`.

### Merchants

- `register_merchant` needs the merchant's authorisation. It gives the next id,
  starting at 1. Registering an address twice raises
  `MERCHANT_ALREADY_REGISTERED`.
- `get_merchant` raises `MERCHANT_NOT_FOUND` for id 0 and for unknown ids.
- `get_merchants(env, merchant_filter=None)` returns the merchants in
  registration order. With a `MerchantFilter`, a field left as `None` matches
  any merchant.
- `verify_merchant` can only be called by the administrator.
- `set_merchant_key` needs the merchant's authorisation and a registered
  merchant. The key must be 32 bytes, otherwise it raises `ValueError`.
  `get_merchant_key` raises `MERCHANT_KEY_NOT_FOUND` when no key has been set.

### Roles

`grant_role` and `revoke_role` can only be called by the administrator.
`has_role` is always true for the administrator. `assert_has_role` needs the
user's authorisation and raises `NOT_AUTHORIZED` when the user lacks the role.

### Pausing and reentrancy

`pause` and `unpause` can only be called by the administrator. Pausing a paused
ledger raises `CONTRACT_PAUSED`, and unpausing a running one raises
`CONTRACT_NOT_PAUSED`.

`reentrancy.guard(env)` is a context manager. It sets the reentrancy flag for
the duration of the block and raises `REENTRANCY` if the flag is already set.

### Upgrades

`env.upload_contract_wasm(code)` stores code and returns its 32-byte SHA-256
hash. `upgrade.upgrade(env, code_hash)` needs the administrator's
authorisation. It sets `env.current_wasm_hash` and publishes a
`contract_upgraded_event`. A hash that was never uploaded raises `ValueError`.
Stored state is not touched by an upgrade.

### Errors

Failures raise `ContractError`. Its `code` is an `ErrorCode` member:

| Code | Value |
| --- | --- |
| `NOT_AUTHORIZED` | 1 |
| `ALREADY_INITIALIZED` | 2 |
| `NOT_INITIALIZED` | 3 |
| `REENTRANCY` | 4 |
| `MERCHANT_ALREADY_REGISTERED` | 5 |
| `MERCHANT_NOT_FOUND` | 6 |
| `INVALID_AMOUNT` | 7 |
| `INVOICE_NOT_FOUND` | 8 |
| `CONTRACT_PAUSED` | 9 |
| `CONTRACT_NOT_PAUSED` | 10 |
| `MERCHANT_KEY_NOT_FOUND` | 11 |

`core.get_admin` raises `NOT_INITIALIZED` when no administrator is stored.

### Events

Published events are appended to `env.events` as
`(contract_address, Event)` pairs, in the order they happened. An `Event` has
a `name`, such as `"merchant_key_set_event"`, and a `data` dict of its fields.
`topics` is the one-element tuple `(name,)`.

## What the package does not do

- There is no single ledger object and no initialisation call. Nothing in the
  package stores the administrator or a `ContractInfo` record, and nothing
  raises `ALREADY_INITIALIZED`. Store the administrator yourself under
  `core.ADMIN_KEY`.
- Pausing is not enforced by the merchant, role or upgrade functions. Call
  `pausable.assert_not_paused(env)` before the operations you want to block.
- There are no accepted-token, invoice or balance operations. `Invoice`,
  `InvoiceStatus` and `InvoiceFilter` are record types only, and the token and
  invoice events can only be published by calling their `publish_*` functions.
- Everything lives in memory, and nothing is saved to disk.
- There is no command-line program.

## Running the tests

```
pip install "shadepay[test]"
pytest
```