"""CLI entry point for ed25519-verification-key.

Invoked as::

    ed25519-key [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m ed25519_verification_key.cli.main

Commands
--------
generate             Generate a key pair and print its record
fingerprint          Print the fingerprint of a Base58 public key
verify-fingerprint   Check a fingerprint against a Base58 public key
from-fingerprint     Print the public key record encoded in a fingerprint
sign                 Sign a message with a key pair record file
verify               Verify a signature with a key pair record file
"""
from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from ed25519_verification_key.backends import BACKEND_NAMES, Ed25519Backend, get_backend
from ed25519_verification_key.config import ENV_PREFIX, load_settings
from ed25519_verification_key.encoding.base58 import base58_encode, try_base58_decode
from ed25519_verification_key.errors import KeyPairError
from ed25519_verification_key.key_pair import Ed25519VerificationKey2018

console = Console()


def _fail(message: object) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(str(message))}")
    sys.exit(1)


def _settings_error(exc: ValidationError) -> str:
    """Name the offending environment variables in a one-line message."""
    problems = [
        f"{ENV_PREFIX}{str(error['loc'][0]).upper()}: {error['msg']}" if error["loc"] else error["msg"]
        for error in exc.errors()
    ]
    return "Invalid configuration. " + "; ".join(problems)


def _backend(ctx: click.Context) -> Ed25519Backend:
    try:
        return get_backend(ctx.obj.get("backend"))
    except ValidationError as exc:
        _fail(_settings_error(exc))
    except ImportError as exc:
        _fail(exc)


def _load_key_pair(key_file: str) -> Ed25519VerificationKey2018:
    try:
        record = json.loads(Path(key_file).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        _fail(f"{key_file} is not valid JSON: {exc}")
    if not isinstance(record, dict):
        _fail(f"{key_file} must hold a JSON object.")
    try:
        return Ed25519VerificationKey2018.from_record(record)
    except KeyPairError as exc:
        _fail(exc)


def _print_json(data: object) -> None:
    click.echo(json.dumps(data, indent=2))


# ------------------------------------------------------------------
# Root group
# ------------------------------------------------------------------


@click.group()
@click.version_option(package_name="ed25519-verification-key")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (defaults to $ED25519_KEY_LOG_LEVEL or WARNING).",
)
@click.option(
    "--backend",
    type=click.Choice(list(BACKEND_NAMES)),
    default=None,
    help="Ed25519 backend (defaults to $ED25519_KEY_BACKEND or cryptography).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, backend: str | None) -> None:
    """Ed25519VerificationKey2018 key pairs, fingerprints and signatures"""
    try:
        settings = load_settings()
    except ValidationError as exc:
        _fail(_settings_error(exc))
    logging.basicConfig(level=getattr(logging, (log_level or settings.log_level).upper()))
    ctx.ensure_object(dict)
    ctx.obj["backend"] = backend


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from ed25519_verification_key import __version__

    console.print(f"[bold]ed25519-verification-key[/bold] v{__version__}")


# ------------------------------------------------------------------
# generate
# ------------------------------------------------------------------


@cli.command(name="generate")
@click.option("--seed", default=None, help="32-byte seed as 64 hex characters.")
@click.option("--controller", default=None, help="Controller identifier, e.g. a DID.")
@click.option("--id", "key_id", default=None, help="Key identifier (defaults to controller#fingerprint).")
@click.option(
    "--include-private/--public-only",
    default=True,
    help="Include the private key in the printed record.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the record to this file instead of stdout.",
)
@click.pass_context
def generate_command(
    ctx: click.Context,
    seed: str | None,
    controller: str | None,
    key_id: str | None,
    include_private: bool,
    output: str | None,
) -> None:
    """Generate a new key pair."""
    seed_bytes: bytes | None = None
    if seed is not None:
        try:
            seed_bytes = bytes.fromhex(seed)
        except ValueError:
            _fail("--seed must be hexadecimal.")

    try:
        key_pair = asyncio.run(
            Ed25519VerificationKey2018.generate(
                seed=seed_bytes,
                backend=_backend(ctx),
                controller=controller,
                id=key_id,
            )
        )
    except KeyPairError as exc:
        _fail(exc)

    record = key_pair.export(public_key=True, private_key=include_private)
    if output:
        Path(output).write_text(json.dumps(record, indent=2), encoding="utf-8")
        console.print(f"[green]Wrote[/green] key pair [bold]{key_pair.fingerprint()}[/bold] to {output}")
    else:
        _print_json(record)


# ------------------------------------------------------------------
# fingerprints
# ------------------------------------------------------------------


@cli.command(name="fingerprint")
@click.argument("public_key_base58")
def fingerprint_command(public_key_base58: str) -> None:
    """Print the fingerprint of PUBLIC_KEY_BASE58."""
    try:
        click.echo(Ed25519VerificationKey2018.fingerprint_from_public_key(public_key_base58))
    except KeyPairError as exc:
        _fail(exc)


@cli.command(name="verify-fingerprint")
@click.argument("fingerprint")
@click.argument("public_key_base58")
def verify_fingerprint_command(fingerprint: str, public_key_base58: str) -> None:
    """Check that FINGERPRINT was derived from PUBLIC_KEY_BASE58."""
    from ed25519_verification_key.fingerprint import verify_fingerprint

    result = verify_fingerprint(fingerprint, public_key_base58)
    if result.valid:
        console.print("[green]VALID[/green] fingerprint matches public key")
        return
    console.print(f"[red]INVALID[/red] {result.error}")
    sys.exit(1)


@cli.command(name="from-fingerprint")
@click.argument("fingerprint")
@click.option("--controller", default=None, help="Controller identifier, e.g. a DID.")
def from_fingerprint_command(fingerprint: str, controller: str | None) -> None:
    """Print the public key record encoded in FINGERPRINT."""
    try:
        key_pair = Ed25519VerificationKey2018.from_fingerprint(fingerprint)
        if controller:
            key_pair = Ed25519VerificationKey2018(
                public_key_base58=key_pair.public_key_base58, controller=controller
            )
    except KeyPairError as exc:
        _fail(exc)
    _print_json(key_pair.export())


# ------------------------------------------------------------------
# sign / verify
# ------------------------------------------------------------------


@cli.command(name="sign")
@click.option(
    "--key-file",
    "-k",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="JSON key pair record including privateKeyBase58.",
)
@click.argument("message")
@click.pass_context
def sign_command(ctx: click.Context, key_file: str, message: str) -> None:
    """Sign MESSAGE and print the Base58 signature."""
    key_pair = _load_key_pair(key_file)
    try:
        signature = asyncio.run(key_pair.signer(_backend(ctx)).sign(message.encode("utf-8")))
    except KeyPairError as exc:
        _fail(exc)
    click.echo(base58_encode(signature))


@cli.command(name="verify")
@click.option(
    "--key-file",
    "-k",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="JSON key pair record including publicKeyBase58.",
)
@click.argument("message")
@click.argument("signature")
@click.pass_context
def verify_command(ctx: click.Context, key_file: str, message: str, signature: str) -> None:
    """Verify the Base58 SIGNATURE of MESSAGE."""
    key_pair = _load_key_pair(key_file)
    decoded = try_base58_decode(signature, "signature")
    if not decoded.ok:
        _fail("The signature must be Base58 encoded.")
    signature_bytes = decoded.unwrap()
    try:
        valid = asyncio.run(
            key_pair.verifier(_backend(ctx)).verify(message.encode("utf-8"), signature_bytes)
        )
    except KeyPairError as exc:
        _fail(exc)
    if valid:
        console.print("[green]VALID[/green] signature")
        return
    console.print("[red]INVALID[/red] signature")
    sys.exit(1)


if __name__ == "__main__":
    cli()
