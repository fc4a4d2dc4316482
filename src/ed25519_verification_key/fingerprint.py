"""Multiformats fingerprints for Ed25519 public keys.

Fingerprint encoding
--------------------
1. Decode the Base58 public key (32 raw bytes).
2. Prepend the Ed25519 multicodec tag: ``0xed 0x01`` (2 bytes).
3. Encode the 34-byte result with Base58 (bitcoin alphabet).
4. Prefix with ``z``, the multibase indicator for base58btc.

The fingerprint is a pure function of the public key; it is the suffix of
a ``did:key`` identifier and the default fragment of a key pair's ``id``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from ed25519_verification_key.encoding.base58 import (
    base58_decode,
    base58_encode,
    try_base58_decode,
)
from ed25519_verification_key.errors import (
    FingerprintMismatchError,
    InvalidFormatError,
    UnsupportedFingerprintTypeError,
)

logger = logging.getLogger(__name__)

# Multicodec tag for Ed25519 public keys (varint-encoded 0xed)
ED25519_MULTICODEC_PREFIX: bytes = b"\xed\x01"
MULTIBASE_BASE58BTC_PREFIX: str = "z"


@dataclass(frozen=True)
class FingerprintVerification:
    """Result of :func:`verify_fingerprint`.

    Parameters
    ----------
    valid:
        ``True`` when the fingerprint was derived from the public key.
    error:
        Why verification failed. ``None`` when ``valid`` is ``True``.
    """

    valid: bool
    error: Exception | None = None

    def __bool__(self) -> bool:
        return self.valid

    def to_dict(self) -> dict[str, object]:
        """Serialize to ``{"valid": ...}`` plus ``"error"`` when one is set."""
        result: dict[str, object] = {"valid": self.valid}
        if self.error is not None:
            result["error"] = str(self.error)
        return result


def fingerprint_from_public_key(public_key_base58: str) -> str:
    """Return the ``z``-prefixed multicodec fingerprint of a Base58 public key.

    The decoded key length is not checked here; see DESIGN.md.

    Raises
    ------
    InvalidEncodingError
        If *public_key_base58* is not Base58.
    """
    public_key_bytes = base58_decode(public_key_base58, "public")
    return MULTIBASE_BASE58BTC_PREFIX + base58_encode(ED25519_MULTICODEC_PREFIX + public_key_bytes)


def _has_multibase_prefix(fingerprint: object) -> bool:
    return isinstance(fingerprint, str) and fingerprint.startswith(MULTIBASE_BASE58BTC_PREFIX)


def verify_fingerprint(fingerprint: str, public_key_base58: str) -> FingerprintVerification:
    """Check whether *fingerprint* was derived from *public_key_base58*.

    Never raises: malformed input, undecodable material and mismatches are
    all reported through the returned :class:`FingerprintVerification`.
    """
    if not _has_multibase_prefix(fingerprint):
        return FingerprintVerification(
            valid=False,
            error=InvalidFormatError("`fingerprint` must be a multibase encoded string."),
        )

    fingerprint_result = try_base58_decode(fingerprint[1:], "fingerprint's")
    if not fingerprint_result.ok:
        logger.debug("Fingerprint %r is not Base58", fingerprint)
        return FingerprintVerification(valid=False, error=fingerprint_result.error)

    public_key_result = try_base58_decode(public_key_base58, "public")
    if not public_key_result.ok:
        return FingerprintVerification(valid=False, error=public_key_result.error)

    fingerprint_bytes = fingerprint_result.unwrap()
    public_key_bytes = public_key_result.unwrap()
    prefix_length = len(ED25519_MULTICODEC_PREFIX)
    valid = (
        fingerprint_bytes[:prefix_length] == ED25519_MULTICODEC_PREFIX
        and fingerprint_bytes[prefix_length:] == public_key_bytes
    )
    if not valid:
        logger.debug("Fingerprint %r does not match public key", fingerprint)
        return FingerprintVerification(valid=False, error=FingerprintMismatchError())
    return FingerprintVerification(valid=True)


def public_key_from_fingerprint(fingerprint: str) -> bytes:
    """Recover the raw public key bytes encoded in an Ed25519 fingerprint.

    Raises
    ------
    InvalidFormatError
        If *fingerprint* is not a ``z``-prefixed string.
    InvalidEncodingError
        If the remainder is not Base58.
    UnsupportedFingerprintTypeError
        If the multicodec tag is not Ed25519.
    """
    if not _has_multibase_prefix(fingerprint):
        raise InvalidFormatError("`fingerprint` must be a multibase encoded string.")
    decoded = base58_decode(fingerprint[1:], "fingerprint")
    if decoded[: len(ED25519_MULTICODEC_PREFIX)] != ED25519_MULTICODEC_PREFIX:
        raise UnsupportedFingerprintTypeError(fingerprint)
    return decoded[len(ED25519_MULTICODEC_PREFIX):]


__all__ = [
    "ED25519_MULTICODEC_PREFIX",
    "MULTIBASE_BASE58BTC_PREFIX",
    "FingerprintVerification",
    "fingerprint_from_public_key",
    "public_key_from_fingerprint",
    "verify_fingerprint",
]
