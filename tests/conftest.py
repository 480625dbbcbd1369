"""
Shared fixtures.

Unit tests run against an in-memory stand-in for the hvac KV v2 API,
patched over hvac.Client.
"""
import pytest
import hvac
from hvac.exceptions import InvalidPath

VAULT_ENV_VARS = (
    "VAULT_HOST",
    "VAULT_PORT",
    "VAULT_SCHEME",
    "VAULT_TOKEN",
    "VAULT_MOUNT_POINT",
    "VAULT_TIMEOUT",
    "VAULT_VERIFY",
    "VAULT_LOG_LEVEL",
)


class InMemoryKV:
    """KV v2 engine keyed by (mount_point, path), with soft deletes."""

    def __init__(self):
        self.versions = {}
        self.deleted = set()
        self.fail_with = None
        self.calls = []

    def _check(self, name, **kwargs):
        self.calls.append((name, kwargs))
        if self.fail_with is not None:
            raise self.fail_with

    def create_or_update_secret(self, path, secret, mount_point="secret", cas=None):
        self._check("create_or_update_secret", path=path, secret=secret, mount_point=mount_point)
        key = (mount_point, path)
        history = self.versions.setdefault(key, [])
        history.append(dict(secret))
        self.deleted.discard(key)
        return {
            "request_id": "fake-request",
            "data": {"version": len(history), "destroyed": False, "deletion_time": ""},
        }

    def read_secret_version(self, path, version=None, mount_point="secret",
                            raise_on_deleted_version=None):
        self._check("read_secret_version", path=path, mount_point=mount_point)
        key = (mount_point, path)
        if key not in self.versions:
            raise InvalidPath(f"no secret at {mount_point}/data/{path}")
        if key in self.deleted:
            if raise_on_deleted_version:
                raise InvalidPath(f"latest version of {mount_point}/data/{path} is deleted")
            return {"data": {"data": None, "metadata": {"version": len(self.versions[key])}}}
        history = self.versions[key]
        return {
            "request_id": "fake-request",
            "data": {
                "data": dict(history[-1]),
                "metadata": {"version": len(history), "destroyed": False},
            },
        }

    def delete_latest_version_of_secret(self, path, mount_point="secret"):
        self._check("delete_latest_version_of_secret", path=path, mount_point=mount_point)
        key = (mount_point, path)
        if key in self.versions:
            self.deleted.add(key)


class _KVNamespace:
    def __init__(self, backend):
        self.v2 = backend


class _SecretsNamespace:
    def __init__(self, backend):
        self.kv = _KVNamespace(backend)


@pytest.fixture(autouse=True)
def clean_vault_env(monkeypatch):
    """Keep tests independent of the caller's Vault environment."""
    for name in VAULT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_kv(monkeypatch):
    """Patch hvac.Client so every client shares one in-memory KV engine."""
    backend = InMemoryKV()
    created = []

    class FakeHvacClient:
        def __init__(self, url=None, token=None, timeout=30, verify=True, **kwargs):
            self.url = url
            self.token = token
            self.timeout = timeout
            self.verify = verify
            self.secrets = _SecretsNamespace(backend)
            created.append(self)

    monkeypatch.setattr(hvac, "Client", FakeHvacClient)
    backend.clients = created
    return backend
