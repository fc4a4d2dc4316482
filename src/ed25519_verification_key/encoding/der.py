"""Fixed-prefix DER encoding of raw Ed25519 key material.

Ed25519 keys have a single possible ASN.1 shape, so no parser is needed:

* PKCS#8 private key: 16-byte prefix ``302e020100300506032b657004220420``
  followed by the 32-byte seed (48 bytes total).
* SubjectPublicKeyInfo: 12-byte prefix ``302a300506032b6570032100``
  followed by the 32-byte public key (44 bytes total).

The 64-byte "expanded" private key used elsewhere in this package is the
32-byte seed followed by the 32-byte public key; only the seed is encoded.
"""
from __future__ import annotations

from ed25519_verification_key.errors import InvalidArgumentError, InvalidFormatError

DER_PRIVATE_KEY_PREFIX: bytes = bytes.fromhex("302e020100300506032b657004220420")
DER_PUBLIC_KEY_PREFIX: bytes = bytes.fromhex("302a300506032b6570032100")

KEY_LENGTH: int = 32
EXPANDED_PRIVATE_KEY_LENGTH: int = 64

_BYTES_LIKE = (bytes, bytearray, memoryview)


def _is_bytes_of_length(value: object, length: int) -> bool:
    return isinstance(value, _BYTES_LIKE) and len(value) == length


def private_key_der_encode(
    *,
    private_key_bytes: bytes | None = None,
    seed_bytes: bytes | None = None,
) -> bytes:
    """Encode an Ed25519 private key as a 48-byte PKCS#8 DER blob.

    Exactly one form of key material is expected: a 32-byte ``seed_bytes``
    or a 64-byte expanded ``private_key_bytes`` (of which only the first
    32 bytes are used). When both are given the seed wins.

    Raises
    ------
    InvalidArgumentError
        If neither argument is supplied, or the supplied one has the wrong
        type or length.
    """
    if not (private_key_bytes or seed_bytes):
        raise InvalidArgumentError("`private_key_bytes` or `seed_bytes` is required.")
    if seed_bytes:
        if not _is_bytes_of_length(seed_bytes, KEY_LENGTH):
            raise InvalidArgumentError("`seed_bytes` must be 32 bytes.")
        seed = bytes(seed_bytes)
    else:
        if not _is_bytes_of_length(private_key_bytes, EXPANDED_PRIVATE_KEY_LENGTH):
            raise InvalidArgumentError("`private_key_bytes` must be 64 bytes.")
        seed = bytes(private_key_bytes[:KEY_LENGTH])
    return DER_PRIVATE_KEY_PREFIX + seed


def public_key_der_encode(public_key_bytes: bytes) -> bytes:
    """Encode a 32-byte Ed25519 public key as a 44-byte SPKI DER blob."""
    if not _is_bytes_of_length(public_key_bytes, KEY_LENGTH):
        raise InvalidArgumentError("`public_key_bytes` must be 32 bytes.")
    return DER_PUBLIC_KEY_PREFIX + bytes(public_key_bytes)


def _strip_prefix(der: bytes, prefix: bytes, kind: str) -> bytes:
    if not isinstance(der, _BYTES_LIKE):
        raise InvalidArgumentError(f"DER {kind} key must be bytes.")
    der = bytes(der)
    if len(der) != len(prefix) + KEY_LENGTH:
        raise InvalidFormatError(
            f"DER {kind} key must be {len(prefix) + KEY_LENGTH} bytes, got {len(der)}."
        )
    if der[: len(prefix)] != prefix:
        raise InvalidFormatError(
            f"DER {kind} key prefix 0x{der[:len(prefix)].hex()} is not the "
            f"Ed25519 prefix 0x{prefix.hex()}."
        )
    return der[len(prefix):]


def private_key_der_decode(der: bytes) -> bytes:
    """Return the 32-byte seed held in a PKCS#8 Ed25519 DER blob.

    Raises
    ------
    InvalidFormatError
        If the blob length or its prefix does not match.
    """
    return _strip_prefix(der, DER_PRIVATE_KEY_PREFIX, "private")


def public_key_der_decode(der: bytes) -> bytes:
    """Return the 32-byte public key held in an SPKI Ed25519 DER blob."""
    return _strip_prefix(der, DER_PUBLIC_KEY_PREFIX, "public")


__all__ = [
    "DER_PRIVATE_KEY_PREFIX",
    "DER_PUBLIC_KEY_PREFIX",
    "EXPANDED_PRIVATE_KEY_LENGTH",
    "KEY_LENGTH",
    "private_key_der_decode",
    "private_key_der_encode",
    "public_key_der_decode",
    "public_key_der_encode",
]
