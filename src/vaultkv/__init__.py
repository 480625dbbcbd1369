"""
vaultkv - HashiCorp Vault KV Demo Client

Token-authenticated command-line client that writes, reads and deletes
secrets in Vault's KV v2 secrets engine.

Modules:
- secrets: Vault configuration, client wrapper and helpers
- cli: read/write/delete command-line driver
- examples: walkthrough of the client API
"""

__version__ = "0.1.0"

from vaultkv.secrets import VaultClient, VaultConfig

__all__ = [
    "__version__",
    "VaultClient",
    "VaultConfig",
]
