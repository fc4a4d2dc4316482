"""The Ed25519 primitive every backend provides.

Key material crosses this boundary as raw bytes only:

* public keys are 32 bytes;
* private keys are 64 bytes (32-byte seed followed by the public key) on
  output, and either that form or the bare 32-byte seed on input.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from ed25519_verification_key.encoding.der import EXPANDED_PRIVATE_KEY_LENGTH, KEY_LENGTH
from ed25519_verification_key.errors import InvalidArgumentError

SIGNATURE_LENGTH: int = 64


@runtime_checkable
class Ed25519Backend(Protocol):
    """Generate, sign and verify with Ed25519."""

    name: str

    def generate_keypair(self, seed: bytes | None = None) -> tuple[bytes, bytes]:
        """Return ``(private_key_bytes, public_key_bytes)`` (64 and 32 bytes).

        With a 32-byte *seed* the result is deterministic.
        """
        ...

    def sign(self, private_key_bytes: bytes, data: bytes) -> bytes:
        """Return the 64-byte signature of *data*."""
        ...

    def verify(self, public_key_bytes: bytes, data: bytes, signature: bytes) -> bool:
        """Return ``True`` if *signature* is valid for *data*, ``False`` otherwise."""
        ...


def signing_seed(private_key_bytes: bytes) -> bytes:
    """Return the 32-byte seed of a 32- or 64-byte private key."""
    if len(private_key_bytes) == EXPANDED_PRIVATE_KEY_LENGTH:
        return bytes(private_key_bytes[:KEY_LENGTH])
    if len(private_key_bytes) == KEY_LENGTH:
        return bytes(private_key_bytes)
    raise InvalidArgumentError(
        f"Ed25519 private key must be 32 or 64 bytes, got {len(private_key_bytes)}."
    )


def check_seed(seed: object) -> bytes:
    """Return *seed* as bytes, raising :class:`InvalidArgumentError` unless it is 32 bytes."""
    if not (isinstance(seed, (bytes, bytearray, memoryview)) and len(seed) == KEY_LENGTH):
        raise InvalidArgumentError("`seed` must be a 32 byte bytes-like object.")
    return bytes(seed)


__all__ = ["SIGNATURE_LENGTH", "Ed25519Backend", "check_seed", "signing_seed"]
