"""
HashiCorp Vault Client Wrapper

Thin interface over hvac for writing, reading and deleting secrets in the
KV v2 secrets engine. Errors from Vault or the transport propagate to the
caller; a missing secret on read is reported as None.
"""
import logging
from typing import Optional, Dict, Any

import hvac
from hvac.exceptions import VaultError, InvalidPath

from vaultkv.secrets.config import VaultConfig

logger = logging.getLogger(__name__)


class VaultClient:
    """
    HashiCorp Vault client wrapper.

    Each instance is bound to one Vault server through its configuration.
    Token authentication only; a missing token yields an unauthenticated
    client rather than an error.
    """

    def __init__(self, config: Optional[VaultConfig] = None):
        """
        Initialize Vault client.

        Args:
            config: Vault configuration. If None, loads defaults and environment.
        """
        self.config = config or VaultConfig()
        self._client = hvac.Client(
            url=self.config.address,
            token=self.config.token or "",
            timeout=self.config.timeout,
            verify=self.config.verify,
        )

        logger.debug(f"Vault client initialized: {self.config.address}")

    @property
    def client(self) -> hvac.Client:
        """Underlying hvac client."""
        return self._client

    def is_authenticated(self) -> bool:
        """
        Check whether the client carries a token.

        Returns:
            True if a non-empty token is configured
        """
        return self.config.is_authenticated()

    def write_secret(self, path: str, key: str, value: Any) -> Dict[str, Any]:
        """
        Write a single key/value secret to Vault.

        Args:
            path: Secret path (relative to mount point)
            key: Secret key
            value: Secret value

        Returns:
            Vault response envelope for the write
        """
        return self.write_secrets(path, {key: value})

    def write_secrets(self, path: str, secrets: Dict[str, Any]) -> Dict[str, Any]:
        """
        Write a map of secrets to Vault at once.

        Args:
            path: Secret path (relative to mount point)
            secrets: Flat dictionary of secret key/value pairs

        Returns:
            Vault response envelope for the write
        """
        full_path = self.config.get_secret_path(path)
        try:
            response = self._client.secrets.kv.v2.create_or_update_secret(
                path=path,
                secret=dict(secrets),
                mount_point=self.config.mount_point,
            )
        except VaultError as e:
            logger.error(f"Failed to write secret to {full_path}: {e}")
            raise
        logger.debug(f"Secret written to {full_path}")
        return response

    def read_secret(self, path: str) -> Optional[Dict[str, Any]]:
        """
        Read a secret from Vault.

        Args:
            path: Secret path (relative to mount point)

        Returns:
            Vault response envelope, or None if nothing is stored at the path
        """
        full_path = self.config.get_secret_path(path)
        try:
            return self._client.secrets.kv.v2.read_secret_version(
                path=path,
                mount_point=self.config.mount_point,
                raise_on_deleted_version=True,
            )
        except InvalidPath:
            logger.debug(f"Secret not found at {full_path}")
            return None
        except VaultError as e:
            logger.error(f"Failed to read secret from {full_path}: {e}")
            raise

    def delete_secret(self, path: str) -> None:
        """
        Delete the latest version of a secret.

        Args:
            path: Secret path (relative to mount point)
        """
        full_path = self.config.get_secret_path(path)
        try:
            self._client.secrets.kv.v2.delete_latest_version_of_secret(
                path=path,
                mount_point=self.config.mount_point,
            )
        except VaultError as e:
            logger.error(f"Failed to delete secret from {full_path}: {e}")
            raise
        logger.debug(f"Secret deleted from {full_path}")

    @staticmethod
    def extract_secret_data(response: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        """
        Extract the secret map from a read response.

        Args:
            response: Envelope returned by read_secret

        Returns:
            The nested secret dictionary, or None if the response has none
        """
        if not response or not response.get("data"):
            return None

        data = response["data"]
        if isinstance(data, dict) and isinstance(data.get("data"), dict):
            return data["data"]
        return None
