"""Signer and verifier objects bound to one key pair.

A signer is one of two variants:

* :class:`UsableSigner` holds decoded private key bytes and signs.
* :class:`UnusableSigner` is produced for a key pair without a private
  key. Building it succeeds; every ``sign`` call raises
  :class:`~ed25519_verification_key.errors.NoPrivateKeyError`.

Both satisfy the :class:`Signer` protocol, so callers can hold a signer for
a read-only key pair and only fail if they actually try to sign.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ed25519_verification_key.backends import Ed25519Backend, get_backend
from ed25519_verification_key.encoding.base58 import base58_decode
from ed25519_verification_key.errors import NoPrivateKeyError

if TYPE_CHECKING:
    from ed25519_verification_key.key_pair import Ed25519VerificationKey2018

logger = logging.getLogger(__name__)

ALGORITHM = "EdDSA"


@runtime_checkable
class Signer(Protocol):
    id: str | None
    algorithm: str

    async def sign(self, data: bytes) -> bytes: ...


@dataclass(frozen=True)
class UsableSigner:
    """Signs with the key pair's private key."""

    key_bytes: bytes = field(repr=False)
    backend: Ed25519Backend
    id: str | None = None
    algorithm: str = ALGORITHM

    async def sign(self, data: bytes) -> bytes:
        return self.backend.sign(self.key_bytes, data)


@dataclass(frozen=True)
class UnusableSigner:
    """Stands in for a signer when there is no private key; fails on use."""

    reason: str = "No private key to sign with."
    id: str | None = None
    algorithm: str = ALGORITHM

    async def sign(self, data: bytes) -> bytes:
        raise NoPrivateKeyError(self.reason)


@dataclass(frozen=True)
class Verifier:
    """Verifies signatures against the key pair's public key."""

    public_key_bytes: bytes
    backend: Ed25519Backend
    id: str | None = None
    algorithm: str = ALGORITHM

    async def verify(self, data: bytes, signature: bytes) -> bool:
        return self.backend.verify(self.public_key_bytes, data, signature)


def signer_for(
    key_pair: Ed25519VerificationKey2018,
    backend: Ed25519Backend | None = None,
) -> Signer:
    """Build a signer from the key pair's current private key material.

    Raises
    ------
    InvalidEncodingError
        If the private key material is present but not Base58.
    """
    if not key_pair.private_key_base58:
        logger.debug("Key pair %s has no private key; signer is unusable", key_pair.id)
        return UnusableSigner(id=key_pair.id)
    private_key_bytes = base58_decode(key_pair.private_key_base58, "private")
    return UsableSigner(
        key_bytes=private_key_bytes,
        backend=backend or get_backend(),
        id=key_pair.id,
    )


def verifier_for(
    key_pair: Ed25519VerificationKey2018,
    backend: Ed25519Backend | None = None,
) -> Verifier:
    """Build a verifier from the key pair's public key material."""
    public_key_bytes = base58_decode(key_pair.public_key_base58, "public")
    return Verifier(
        public_key_bytes=public_key_bytes,
        backend=backend or get_backend(),
        id=key_pair.id,
    )


__all__ = [
    "ALGORITHM",
    "Signer",
    "UnusableSigner",
    "UsableSigner",
    "Verifier",
    "signer_for",
    "verifier_for",
]
