"""Ed25519 backend built on the ``cryptography`` package.

Raw key bytes are moved in and out of ``cryptography`` key objects through
their PKCS#8 / SPKI DER form, using the fixed-prefix codec in
:mod:`ed25519_verification_key.encoding.der`.
"""
from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    PublicFormat,
    load_der_private_key,
    load_der_public_key,
)

from ed25519_verification_key.backends.base import SIGNATURE_LENGTH, check_seed, signing_seed
from ed25519_verification_key.encoding.der import (
    private_key_der_decode,
    private_key_der_encode,
    public_key_der_decode,
    public_key_der_encode,
)


class CryptographyBackend:
    """Ed25519 key generation, signing, and verification via ``cryptography``.

    Example
    -------
    ::

        backend = CryptographyBackend()
        private_bytes, public_bytes = backend.generate_keypair()
        signature = backend.sign(private_bytes, b"hello world")
        assert backend.verify(public_bytes, b"hello world", signature)
    """

    name = "cryptography"

    def generate_keypair(self, seed: bytes | None = None) -> tuple[bytes, bytes]:
        """Generate a new Ed25519 keypair, deterministically when *seed* is given.

        Returns
        -------
        tuple[bytes, bytes]
            ``(private_key_bytes, public_key_bytes)``; the private key is the
            64-byte seed + public key form.
        """
        if seed is None:
            private_key = Ed25519PrivateKey.generate()
        else:
            private_key = self._load_private_key(check_seed(seed))

        seed_bytes = private_key_der_decode(
            private_key.private_bytes(Encoding.DER, PrivateFormat.PKCS8, NoEncryption())
        )
        public_bytes = public_key_der_decode(
            private_key.public_key().public_bytes(
                Encoding.DER, PublicFormat.SubjectPublicKeyInfo
            )
        )
        return seed_bytes + public_bytes, public_bytes

    def sign(self, private_key_bytes: bytes, data: bytes) -> bytes:
        """Sign *data* with a 32-byte seed or 64-byte expanded private key."""
        private_key = self._load_private_key(signing_seed(private_key_bytes))
        return private_key.sign(bytes(data))

    def verify(self, public_key_bytes: bytes, data: bytes, signature: bytes) -> bool:
        """Verify an Ed25519 signature; ``False`` on any signature mismatch."""
        public_key = load_der_public_key(public_key_der_encode(public_key_bytes))
        assert isinstance(public_key, Ed25519PublicKey)
        if len(signature) != SIGNATURE_LENGTH:
            return False
        try:
            public_key.verify(bytes(signature), bytes(data))
            return True
        except InvalidSignature:
            return False

    @staticmethod
    def _load_private_key(seed: bytes) -> Ed25519PrivateKey:
        private_key = load_der_private_key(private_key_der_encode(seed_bytes=seed), password=None)
        assert isinstance(private_key, Ed25519PrivateKey)
        return private_key


__all__ = ["CryptographyBackend"]
