"""Ed25519 backend built on PyNaCl (libsodium).

Optional dependency
-------------------
Requires the ``pynacl`` package. Install via::

    pip install ed25519-verification-key[nacl]
"""
from __future__ import annotations

from ed25519_verification_key.backends.base import SIGNATURE_LENGTH, check_seed, signing_seed
from ed25519_verification_key.encoding.der import KEY_LENGTH
from ed25519_verification_key.errors import InvalidArgumentError

try:
    from nacl.exceptions import BadSignatureError
    from nacl.signing import SigningKey, VerifyKey

    _NACL_AVAILABLE = True
except ImportError:
    _NACL_AVAILABLE = False


class NaClBackend:
    """Ed25519 via libsodium's ``crypto_sign`` family.

    If PyNaCl is not installed, the constructor raises :class:`ImportError`
    with an actionable message.
    """

    name = "nacl"

    def __init__(self) -> None:
        if not _NACL_AVAILABLE:
            raise ImportError(
                "The 'pynacl' package is required for the nacl backend. "
                "Install it with: pip install ed25519-verification-key[nacl]"
            )

    def generate_keypair(self, seed: bytes | None = None) -> tuple[bytes, bytes]:
        """Return ``(private_key_bytes, public_key_bytes)``, 64 and 32 bytes."""
        if seed is None:
            signing_key = SigningKey.generate()
        else:
            signing_key = SigningKey(check_seed(seed))
        public_bytes = bytes(signing_key.verify_key)
        return bytes(signing_key) + public_bytes, public_bytes

    def sign(self, private_key_bytes: bytes, data: bytes) -> bytes:
        """Sign *data*; only the 32-byte seed of the private key is used."""
        signing_key = SigningKey(signing_seed(private_key_bytes))
        return signing_key.sign(bytes(data)).signature

    def verify(self, public_key_bytes: bytes, data: bytes, signature: bytes) -> bool:
        """Verify an Ed25519 signature; ``False`` on any signature mismatch."""
        if len(public_key_bytes) != KEY_LENGTH:
            raise InvalidArgumentError("`public_key_bytes` must be 32 bytes.")
        if len(signature) != SIGNATURE_LENGTH:
            return False
        try:
            VerifyKey(bytes(public_key_bytes)).verify(bytes(data), bytes(signature))
            return True
        except BadSignatureError:
            return False


__all__ = ["NaClBackend"]
