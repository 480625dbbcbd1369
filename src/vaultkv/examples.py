"""
vaultkv API Examples

Walks through the client API against a running Vault server: basic
initialization, single and multiple secrets, deletion and a custom
configuration. Requires VAULT_TOKEN to be set.

Usage:
    vaultkv-examples [--interactive] [--log-level LEVEL]
"""
import argparse
import logging
import os
import sys
from typing import List, Optional

from pydantic import ValidationError

from vaultkv.cli import LOG_LEVELS, normalize_log_level, setup_logging
from vaultkv.secrets import (
    VaultClient,
    VaultConfig,
    is_valid_path,
    parse_key_value_string,
    print_formatted_secret_data,
    prompt_for_secrets,
)

logger = logging.getLogger(__name__)


def _header(title: str):
    print(f"\n{title}")
    print("-" * len(title))


def basic_initialization(config: Optional[VaultConfig] = None) -> bool:
    """Example 1: Build a client from the default configuration."""
    _header("Example 1: Basic Initialization")

    vault = VaultClient(config)
    authenticated = vault.is_authenticated()
    print(f"Is authenticated: {str(authenticated).lower()}")

    if not authenticated:
        logger.error("Authentication failed. Please check your VAULT_TOKEN.")
    return authenticated


def single_secret_example(vault: Optional[VaultClient] = None):
    """Example 2: Write one key/value pair and read it back."""
    _header("Example 2: Single Secret")

    vault = vault or VaultClient()
    path = "example/single"
    key, value = "username", "admin"

    try:
        print(f"Writing secret: {key}={value} to path: {path}")
        write_response = vault.write_secret(path, key, value)
        print(f"Write response: {write_response.get('data')}")

        print(f"\nReading secret from path: {path}")
        read_response = vault.read_secret(path)
        print_formatted_secret_data(read_response, vault)
    except Exception as e:
        logger.error(f"Error in single secret example: {e}", exc_info=True)


def multiple_secrets_example(vault: Optional[VaultClient] = None):
    """Example 3: Write several key/value pairs at one path."""
    _header("Example 3: Multiple Secrets")

    vault = vault or VaultClient()
    path = "example/multiple"

    try:
        secrets = parse_key_value_string(
            "username=admin,password=secret123,api_key=abcd1234,environment=development"
        )

        print(f"Writing multiple secrets to path: {path}")
        write_response = vault.write_secrets(path, secrets)
        print(f"Write response: {write_response.get('data')}")

        print(f"\nReading secrets from path: {path}")
        read_response = vault.read_secret(path)
        print_formatted_secret_data(read_response, vault)
    except Exception as e:
        logger.error(f"Error in multiple secrets example: {e}", exc_info=True)


def delete_secret_example(vault: Optional[VaultClient] = None):
    """Example 4: Write, delete and verify a secret is gone."""
    _header("Example 4: Deleting Secrets")

    vault = vault or VaultClient()
    path = "example/to-delete"

    try:
        print(f"Writing a test secret to path: {path}")
        vault.write_secrets(path, {"test_key": "test_value"})

        print(f"Verifying secret exists at path: {path}")
        read_response = vault.read_secret(path)
        if read_response is not None:
            print(f"Secret exists. Data: {vault.extract_secret_data(read_response)}")

        print(f"Deleting secret at path: {path}")
        vault.delete_secret(path)
        print("Secret deleted successfully")

        print(f"Verifying secret is deleted from path: {path}")
        try:
            verify_response = vault.read_secret(path)
            if verify_response is None or vault.extract_secret_data(verify_response) is None:
                print("Secret successfully deleted")
            else:
                print("Secret still exists (this might happen if using Vault with versioning)")
        except Exception as e:
            print(f"Secret successfully deleted (verified by exception: {e})")
    except Exception as e:
        logger.error(f"Error in delete secret example: {e}", exc_info=True)


def custom_config_example(host: str = "localhost", port: int = 8200, scheme: str = "http"):
    """Example 5: Build a client from an explicit configuration."""
    _header("Example 5: Custom Vault Configuration")

    try:
        token = os.getenv("VAULT_TOKEN")

        print("Creating custom Vault configuration:")
        print(f"Host: {host}")
        print(f"Port: {port}")
        print(f"Scheme: {scheme}")

        custom_config = VaultConfig(host=host, port=port, scheme=scheme, token=token)
        vault = VaultClient(custom_config)

        authenticated = vault.is_authenticated()
        print(f"Is authenticated with custom config: {str(authenticated).lower()}")

        if authenticated:
            path = "example/custom-config"
            print(f"Writing secret with custom config to path: {path}")
            vault.write_secrets(path, {"custom_key": "custom_value"})

            print(f"Reading secret with custom config from path: {path}")
            read_response = vault.read_secret(path)
            print_formatted_secret_data(read_response, vault)
    except Exception as e:
        logger.error(f"Error in custom config example: {e}", exc_info=True)


def interactive_example(vault: Optional[VaultClient] = None, path: str = "example/interactive"):
    """Example 6: Prompt for secrets and write them."""
    _header("Example 6: Interactive Secrets")

    vault = vault or VaultClient()

    if not is_valid_path(path):
        logger.error(f"Invalid secret path: {path!r}")
        return

    try:
        secrets = prompt_for_secrets()
        if not secrets:
            print("No secrets entered")
            return

        print(f"Writing {len(secrets)} secret(s) to path: {path}")
        vault.write_secrets(path, secrets)
        print_formatted_secret_data(vault.read_secret(path), vault)
    except Exception as e:
        logger.error(f"Error in interactive example: {e}", exc_info=True)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the examples; returns the process exit status."""
    parser = argparse.ArgumentParser(description="vaultkv API examples")
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Also prompt for key=value secrets and write them"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=os.getenv("VAULT_LOG_LEVEL", "INFO"),
        choices=LOG_LEVELS,
        help="Logging level (default: from VAULT_LOG_LEVEL env var or INFO)"
    )
    args = parser.parse_args(argv)

    if normalize_log_level(args.log_level) is None:
        print(f"Error: invalid VAULT_LOG_LEVEL: {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")
        return 1

    setup_logging(args.log_level)

    print("vaultkv API Example")
    print("===================")

    if not os.getenv("VAULT_TOKEN"):
        logger.error("Error: VAULT_TOKEN environment variable is not set")
        logger.error("Please set it using: export VAULT_TOKEN=your-vault-token")
        return 1

    try:
        config = VaultConfig()
    except ValidationError as e:
        logger.error(f"Invalid Vault configuration: {e}")
        return 1

    if not basic_initialization(config):
        return 1

    single_secret_example()
    multiple_secrets_example()
    delete_secret_example()
    custom_config_example()

    if args.interactive:
        interactive_example()

    print("\nAll examples completed successfully!")
    return 0


def run():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
