"""Tests for ed25519_verification_key.cli.main — CLI commands via Click test runner."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner
from pydantic import ValidationError

from ed25519_verification_key.backends import get_backend, nacl_backend
from ed25519_verification_key.cli.main import cli
from ed25519_verification_key.encoding.base58 import base58_encode
from ed25519_verification_key.fingerprint import fingerprint_from_public_key

SEED_HEX = "00" * 32
PUBLIC_KEY_BASE58 = base58_encode(bytes(range(1, 33)))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def key_file(runner: CliRunner, tmp_path: Path) -> Path:
    path = tmp_path / "key.json"
    result = runner.invoke(cli, ["generate", "--seed", SEED_HEX, "--output", str(path)])
    assert result.exit_code == 0, result.output
    return path


# ---------------------------------------------------------------------------
# Root CLI
# ---------------------------------------------------------------------------


class TestRootCLI:
    def test_help_exits_zero(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0

    def test_version_command(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["version"])
        assert result.exit_code == 0
        assert "ed25519-verification-key" in result.output.lower()

    def test_unknown_backend_is_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--backend", "openssl", "version"])
        assert result.exit_code != 0

    def test_invalid_backend_environment_fails_cleanly(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["fingerprint", PUBLIC_KEY_BASE58], env={"ED25519_KEY_BACKEND": "openssl"}
        )
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "ED25519_KEY_BACKEND" in result.output
        assert not isinstance(result.exception, ValidationError)

    def test_invalid_log_level_environment_fails_cleanly(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["version"], env={"ED25519_KEY_LOG_LEVEL": "LOUD"})
        assert result.exit_code == 1
        assert "ED25519_KEY_LOG_LEVEL" in result.output

    def test_missing_nacl_backend_fails_cleanly(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(nacl_backend, "_NACL_AVAILABLE", False)
        get_backend.cache_clear()
        try:
            result = runner.invoke(cli, ["--backend", "nacl", "generate"])
        finally:
            get_backend.cache_clear()
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "pynacl" in result.output
        assert not isinstance(result.exception, ImportError)


# ---------------------------------------------------------------------------
# generate
# ---------------------------------------------------------------------------


class TestGenerateCommand:
    def test_prints_record_with_private_key(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["generate"])
        assert result.exit_code == 0, result.output
        record = json.loads(result.output)
        assert record["type"] == "Ed25519VerificationKey2018"
        assert "publicKeyBase58" in record
        assert "privateKeyBase58" in record

    def test_public_only(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["generate", "--public-only"])
        assert result.exit_code == 0
        assert "privateKeyBase58" not in json.loads(result.output)

    def test_seed_is_deterministic(self, runner: CliRunner) -> None:
        first = runner.invoke(cli, ["generate", "--seed", SEED_HEX])
        second = runner.invoke(cli, ["generate", "--seed", SEED_HEX])
        assert json.loads(first.output) == json.loads(second.output)

    def test_controller_defaults_id(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["generate", "--controller", "did:example:cli"])
        record = json.loads(result.output)
        assert record["controller"] == "did:example:cli"
        assert record["id"].startswith("did:example:cli#z6Mk")

    def test_short_seed_fails(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["generate", "--seed", "00" * 16])
        assert result.exit_code == 1
        assert "seed" in result.output

    def test_non_hex_seed_fails(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["generate", "--seed", "zz"])
        assert result.exit_code == 1

    def test_writes_output_file(self, key_file: Path) -> None:
        record = json.loads(key_file.read_text(encoding="utf-8"))
        assert "privateKeyBase58" in record


# ---------------------------------------------------------------------------
# fingerprints
# ---------------------------------------------------------------------------


class TestFingerprintCommands:
    def test_fingerprint(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["fingerprint", PUBLIC_KEY_BASE58])
        assert result.exit_code == 0
        assert result.output.strip() == fingerprint_from_public_key(PUBLIC_KEY_BASE58)

    def test_fingerprint_invalid_key(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["fingerprint", "0OIl"])
        assert result.exit_code == 1
        assert "Base58" in result.output

    def test_verify_fingerprint_valid(self, runner: CliRunner) -> None:
        fingerprint = fingerprint_from_public_key(PUBLIC_KEY_BASE58)
        result = runner.invoke(cli, ["verify-fingerprint", fingerprint, PUBLIC_KEY_BASE58])
        assert result.exit_code == 0
        assert "VALID" in result.output

    def test_verify_fingerprint_invalid(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["verify-fingerprint", "abc", PUBLIC_KEY_BASE58])
        assert result.exit_code == 1
        assert "INVALID" in result.output

    def test_from_fingerprint(self, runner: CliRunner) -> None:
        fingerprint = fingerprint_from_public_key(PUBLIC_KEY_BASE58)
        result = runner.invoke(
            cli, ["from-fingerprint", fingerprint, "--controller", "did:example:x"]
        )
        assert result.exit_code == 0, result.output
        record = json.loads(result.output)
        assert record["publicKeyBase58"] == PUBLIC_KEY_BASE58
        assert record["id"] == f"did:example:x#{fingerprint}"

    def test_from_fingerprint_unsupported(self, runner: CliRunner) -> None:
        fingerprint = "z" + base58_encode(b"\x12\x20" + bytes(32))
        result = runner.invoke(cli, ["from-fingerprint", fingerprint])
        assert result.exit_code == 1
        assert "Unsupported Fingerprint Type" in result.output


# ---------------------------------------------------------------------------
# sign / verify
# ---------------------------------------------------------------------------


class TestSignVerifyCommands:
    def test_sign_then_verify(self, runner: CliRunner, key_file: Path) -> None:
        signed = runner.invoke(cli, ["sign", "--key-file", str(key_file), "hello"])
        assert signed.exit_code == 0, signed.output
        signature = signed.output.strip()
        verified = runner.invoke(cli, ["verify", "--key-file", str(key_file), "hello", signature])
        assert verified.exit_code == 0
        assert "VALID" in verified.output

    def test_verify_wrong_message(self, runner: CliRunner, key_file: Path) -> None:
        signature = runner.invoke(cli, ["sign", "-k", str(key_file), "hello"]).output.strip()
        result = runner.invoke(cli, ["verify", "-k", str(key_file), "goodbye", signature])
        assert result.exit_code == 1
        assert "INVALID" in result.output

    def test_sign_without_private_key(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "public.json"
        path.write_text(
            json.dumps({"type": "Ed25519VerificationKey2018", "publicKeyBase58": PUBLIC_KEY_BASE58}),
            encoding="utf-8",
        )
        result = runner.invoke(cli, ["sign", "-k", str(path), "hello"])
        assert result.exit_code == 1
        assert "No private key to sign with." in result.output

    def test_sign_with_invalid_json(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        result = runner.invoke(cli, ["sign", "-k", str(path), "hello"])
        assert result.exit_code == 1
        assert "JSON" in result.output

    def test_verify_non_base58_signature(self, runner: CliRunner, key_file: Path) -> None:
        result = runner.invoke(cli, ["verify", "-k", str(key_file), "hello", "0OIl"])
        assert result.exit_code == 1
        assert "The signature must be Base58 encoded." in result.output
        assert "key material" not in result.output
