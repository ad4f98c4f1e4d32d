"""In-memory merchant payment ledger: merchants, roles, pausing, keys and upgrades."""

__version__ = "0.1.0"

__all__ = [
    "access_control",
    "core",
    "errors",
    "events",
    "ledger",
    "merchant",
    "pausable",
    "reentrancy",
    "types",
    "upgrade",
]