"""
vaultkv - Command Line Entry Point

Reads, writes and deletes secrets in HashiCorp Vault:

    vaultkv write_secret <path> <key> <value>
    vaultkv read_secret <path>
    vaultkv delete_secret <path>
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from pydantic import ValidationError

from vaultkv.secrets import VaultClient, VaultConfig

logger = logging.getLogger(__name__)

METHODS = ("write_secret", "read_secret", "delete_secret")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def normalize_log_level(level: Optional[str]) -> Optional[str]:
    """Upper-case a log level name, or None if it is not one of LOG_LEVELS."""
    level = (level or "").strip().upper()
    return level if level in LOG_LEVELS else None


def setup_logging(level: str = "INFO"):
    """Set up logging."""
    logging.basicConfig(
        level=getattr(logging, normalize_log_level(level) or "INFO"),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def print_usage():
    """Print usage information."""
    print("\nUsage:")
    print("  write_secret <path> <key> <value>  - Write a secret to Vault")
    print("  read_secret <path>                - Read a secret from Vault")
    print("  delete_secret <path>              - Delete a secret from Vault")
    print("\nExample:")
    print("  vaultkv write_secret my/secret/path myKey myValue")


class UsageParser(argparse.ArgumentParser):
    """Argument parser that prints usage and exits with status 1 on errors."""

    def error(self, message):
        print(f"{self.prog}: error: {message}")
        print_usage()
        sys.exit(1)


def init_server(config: Optional[VaultConfig] = None) -> VaultClient:
    """
    Build the Vault client and report whether it carries a token.

    Args:
        config: Vault configuration (defaults and environment if None)

    Returns:
        Initialized VaultClient
    """
    vault = VaultClient(config)
    print(f"Is client authenticated: {str(vault.is_authenticated()).lower()}")
    return vault


def write_secret(vault: VaultClient, secret_path: str, key: str, value: str):
    """Write a key/value secret and print the response data."""
    try:
        response = vault.write_secret(secret_path, key, value)
        print(response.get("data") if response else "No response data")
    except Exception as e:
        logger.error(f"Error writing secret: {e}", exc_info=True)


def read_secret(vault: VaultClient, secret_path: str):
    """Read a secret and print its data."""
    try:
        response = vault.read_secret(secret_path)
        if response is not None:
            secret_data = vault.extract_secret_data(response)
            if secret_data is not None:
                print(f"Secret data: {secret_data}")
            else:
                print(f"No secret data found at path: {secret_path}")
            print(f"Full response: {response.get('data')}")
        else:
            print(f"No secret found at path: {secret_path}")
    except Exception as e:
        logger.error(f"Error reading secret: {e}", exc_info=True)


def delete_secret(vault: VaultClient, secret_path: str):
    """Delete a secret."""
    try:
        vault.delete_secret(secret_path)
        print(f"Secret at path {secret_path} deleted successfully.")
    except Exception as e:
        logger.error(f"Error deleting secret: {e}", exc_info=True)


def build_parser() -> argparse.ArgumentParser:
    """Build the vaultkv argument parser."""
    parser = UsageParser(
        prog="vaultkv",
        description="Read, write and delete secrets in HashiCorp Vault",
    )
    parser.add_argument(
        "arguments",
        nargs="*",
        metavar="method path [key value]",
        help="One of: " + ", ".join(METHODS) + ", followed by its arguments"
    )
    parser.add_argument(
        "--host",
        type=str,
        help="Vault host (default: from VAULT_HOST env var or localhost)"
    )
    parser.add_argument(
        "--port",
        type=int,
        help="Vault port (default: from VAULT_PORT env var or 8200)"
    )
    parser.add_argument(
        "--scheme",
        type=str,
        choices=["http", "https"],
        help="Connection scheme (default: from VAULT_SCHEME env var or http)"
    )
    parser.add_argument(
        "--mount-point",
        type=str,
        help="KV v2 mount point (default: from VAULT_MOUNT_POINT env var or secret)"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=os.getenv("VAULT_LOG_LEVEL", "INFO"),
        choices=LOG_LEVELS,
        help="Logging level (default: from VAULT_LOG_LEVEL env var or INFO)"
    )
    return parser


def build_config(args: argparse.Namespace) -> VaultConfig:
    """Create config, overriding environment defaults with CLI args."""
    overrides = {
        "host": args.host,
        "port": args.port,
        "scheme": args.scheme,
        "mount_point": args.mount_point,
    }
    return VaultConfig(**{k: v for k, v in overrides.items() if v is not None})


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # argparse does not check choices against the env-derived default
    if normalize_log_level(args.log_level) is None:
        parser.error(f"invalid VAULT_LOG_LEVEL: {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")

    setup_logging(args.log_level)

    try:
        config = build_config(args)
    except ValidationError as e:
        logger.error(f"Invalid Vault configuration: {e}")
        return 1

    vault = init_server(config)

    arguments = args.arguments
    if len(arguments) < 2:
        print("Insufficient arguments inputted. Please include the method name AND secret path.")
        print_usage()
        return 1

    method_name, path = arguments[0], arguments[1]

    if method_name == "write_secret":
        if len(arguments) < 4:
            print("Insufficient arguments inputted. Please include the secret key AND value.")
            print_usage()
            return 1
        write_secret(vault, path, arguments[2], arguments[3])
    elif method_name == "read_secret":
        if len(arguments) > 2:
            print("Too many arguments. Please only include the secret path.")
            print_usage()
            return 1
        read_secret(vault, path)
    elif method_name == "delete_secret":
        if len(arguments) > 2:
            print("Too many arguments. Please only include the secret path.")
            print_usage()
            return 1
        delete_secret(vault, path)
    else:
        print("Please input one of the valid methods: " + " OR ".join(METHODS))
        print_usage()
        return 1

    return 0


def run():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
