"""
Unit tests for the secrets helper functions.
"""

import pytest

from vaultkv.secrets import (
    VaultClient,
    VaultConfig,
    is_valid_path,
    parse_key_value_string,
    print_formatted_secret_data,
    prompt_for_secrets,
)


class TestParseKeyValueString:
    """Tests for parse_key_value_string."""

    def test_pairs(self):
        """Test comma-separated pairs are parsed and stripped."""
        assert parse_key_value_string("a=1, b = 2") == {"a": "1", "b": "2"}

    def test_value_keeps_later_equals(self):
        """Test only the first equals sign splits key from value."""
        assert parse_key_value_string("conn=host=db;port=5432") == {"conn": "host=db;port=5432"}

    def test_malformed_pairs_skipped(self):
        """Test pairs without an equals sign are skipped."""
        assert parse_key_value_string("a=1,junk,b=2") == {"a": "1", "b": "2"}

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_blank(self, text):
        """Test blank input yields an empty map."""
        assert parse_key_value_string(text) == {}


class TestPromptForSecrets:
    """Tests for prompt_for_secrets."""

    def test_reads_until_empty_line(self, capsys):
        """Test prompting stops at an empty line and reports bad lines."""
        lines = iter(["user=admin", "bad line", "pass = s3cr3t", ""])

        secrets = prompt_for_secrets(lambda prompt: next(lines))

        assert secrets == {"user": "admin", "pass": "s3cr3t"}
        out = capsys.readouterr().out
        assert "Added secret: user" in out
        assert "Invalid format. Use key=value" in out

    def test_stops_on_eof(self):
        """Test end of input ends the prompt."""
        def raise_eof(prompt):
            raise EOFError

        assert prompt_for_secrets(raise_eof) == {}


class TestPrintFormattedSecretData:
    """Tests for print_formatted_secret_data."""

    @pytest.fixture
    def vault(self, fake_kv):
        return VaultClient(VaultConfig(token="t"))

    def test_no_response(self, vault, capsys):
        """Test a missing response is reported."""
        print_formatted_secret_data(None, vault)
        assert "No response received from Vault" in capsys.readouterr().out

    def test_empty_data(self, vault, capsys):
        """Test an empty secret map is reported."""
        print_formatted_secret_data({"data": {"data": {}}}, vault)
        assert "No secret data found in response" in capsys.readouterr().out

    def test_prints_each_key(self, vault, capsys):
        """Test each secret key is printed on its own line."""
        vault.write_secrets("app", {"username": "admin", "password": "pw"})

        print_formatted_secret_data(vault.read_secret("app"), vault)

        out = capsys.readouterr().out
        assert "=== Secret Data ===" in out
        assert "username: admin" in out
        assert "password: pw" in out


class TestIsValidPath:
    """Tests for is_valid_path."""

    @pytest.mark.parametrize("path", ["app", "my/secret/path", "a-b_c.d"])
    def test_valid(self, path):
        """Test well-formed paths are accepted."""
        assert is_valid_path(path) is True

    @pytest.mark.parametrize("path", [None, "", "  ", "a/../b", "a//b", "/a", "a/"])
    def test_invalid(self, path):
        """Test blank, traversal and slash-delimited edge paths are rejected."""
        assert is_valid_path(path) is False
