"""
vaultkv Secrets Access

Reads, writes and deletes secrets in HashiCorp Vault's KV v2 engine.
"""

from vaultkv.secrets.config import VaultConfig
from vaultkv.secrets.vault_client import VaultClient
from vaultkv.secrets.helpers import (
    parse_key_value_string,
    prompt_for_secrets,
    print_formatted_secret_data,
    is_valid_path,
)

__all__ = [
    'VaultClient',
    'VaultConfig',
    'parse_key_value_string',
    'prompt_for_secrets',
    'print_formatted_secret_data',
    'is_valid_path',
]
