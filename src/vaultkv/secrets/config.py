"""
Vault Configuration

Connection settings for the HashiCorp Vault KV secrets engine.
"""
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VaultConfig(BaseModel):
    """
    Vault connection configuration.

    Environment defaults are read as raw strings and go through the same
    coercion and validators as explicit values.
    """

    model_config = ConfigDict(validate_default=True)

    host: str = Field(
        default_factory=lambda: os.getenv("VAULT_HOST", "localhost")
    )
    port: int = Field(
        default_factory=lambda: os.getenv("VAULT_PORT", "8200")
    )
    scheme: str = Field(
        default_factory=lambda: os.getenv("VAULT_SCHEME", "http")
    )
    token: Optional[str] = Field(
        default_factory=lambda: os.getenv("VAULT_TOKEN")
    )

    # KV v2 secrets engine mount point
    mount_point: str = Field(
        default_factory=lambda: os.getenv("VAULT_MOUNT_POINT", "secret")
    )

    # Connection settings
    timeout: int = Field(
        default_factory=lambda: os.getenv("VAULT_TIMEOUT", "30")
    )
    verify: bool = Field(
        default_factory=lambda: os.getenv("VAULT_VERIFY", "true").lower() == "true"
    )

    @field_validator("scheme")
    @classmethod
    def check_scheme(cls, value: str) -> str:
        value = value.lower()
        if value not in ("http", "https"):
            raise ValueError(f"scheme must be 'http' or 'https', got {value!r}")
        return value

    @field_validator("port")
    @classmethod
    def check_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError(f"port out of range: {value}")
        return value

    @field_validator("timeout")
    @classmethod
    def check_timeout(cls, value: int) -> int:
        if value <= 0:
            raise ValueError(f"timeout must be positive: {value}")
        return value

    @property
    def address(self) -> str:
        """Vault server URL."""
        return f"{self.scheme}://{self.host}:{self.port}"

    def is_authenticated(self) -> bool:
        """True if a non-empty token is configured."""
        return bool(self.token)

    def get_secret_path(self, path: str) -> str:
        """Get the KV v2 data path for a secret."""
        return f"{self.mount_point}/data/{path}"
