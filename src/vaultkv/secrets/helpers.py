"""
Vault Helper Functions

Small helpers used by the command-line drivers: parsing key/value input,
prompting for secrets and printing secret data.
"""
import logging
from typing import Optional, Dict, Any, Callable

from vaultkv.secrets.vault_client import VaultClient

logger = logging.getLogger(__name__)


def parse_key_value_string(kv_string: Optional[str]) -> Dict[str, Any]:
    """
    Parse "key1=value1,key2=value2" into a dictionary.

    Pairs without "=" are skipped. Only the first "=" in a pair separates
    key from value.

    Args:
        kv_string: String containing key/value pairs

    Returns:
        Dictionary of key/value pairs
    """
    result: Dict[str, Any] = {}

    if not kv_string or not kv_string.strip():
        return result

    for pair in kv_string.split(","):
        key, sep, value = pair.partition("=")
        if sep:
            result[key.strip()] = value.strip()
        else:
            logger.debug(f"Skipping malformed pair: {pair!r}")

    return result


def prompt_for_secrets(input_fn: Optional[Callable[[str], str]] = None) -> Dict[str, Any]:
    """
    Interactively prompt for key=value pairs until an empty line.

    Args:
        input_fn: Function used to read a line (defaults to builtin input)

    Returns:
        Dictionary of entered key/value pairs
    """
    read_line = input_fn or input
    secrets: Dict[str, Any] = {}

    print("Enter secrets (key=value format, empty line to finish):")

    while True:
        try:
            line = read_line("> ").strip()
        except EOFError:
            break

        if not line:
            break

        key, sep, value = line.partition("=")
        if sep:
            secrets[key.strip()] = value.strip()
            print(f"Added secret: {key.strip()}")
        else:
            print("Invalid format. Use key=value")

    return secrets


def print_formatted_secret_data(response: Optional[Dict[str, Any]], vault: VaultClient) -> None:
    """Print the secret map of a read response, one key per line."""
    if response is None:
        print("No response received from Vault")
        return

    secret_data = vault.extract_secret_data(response)

    if not secret_data:
        print("No secret data found in response")
        return

    print("\n=== Secret Data ===")
    for key, value in secret_data.items():
        print(f"{key}: {value}")
    print("==================\n")


def is_valid_path(path: Optional[str]) -> bool:
    """
    Validate a secret path.

    A valid path is non-blank, contains no ".." or "//" and neither starts
    nor ends with "/".
    """
    if not path or not path.strip():
        return False

    if ".." in path or "//" in path:
        return False

    if path.startswith("/") or path.endswith("/"):
        return False

    return True
