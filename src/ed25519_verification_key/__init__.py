"""ed25519-verification-key — Ed25519VerificationKey2018 key pairs.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> import ed25519_verification_key
>>> ed25519_verification_key.__version__
'0.1.0'

Quick start
-----------
::

    from ed25519_verification_key import Ed25519VerificationKey2018

    key_pair = await Ed25519VerificationKey2018.generate(controller="did:example:alice")
    fingerprint = key_pair.fingerprint()          # "z6Mk..."
    assert key_pair.verify_fingerprint(fingerprint).valid

    signature = await key_pair.signer().sign(b"data")
    assert await key_pair.verifier().verify(b"data", signature)
"""
from __future__ import annotations

__version__: str = "0.1.0"

# ------------------------------------------------------------------
# Errors
# ------------------------------------------------------------------
from ed25519_verification_key.errors import (
    FingerprintMismatchError,
    InvalidArgumentError,
    InvalidEncodingError,
    InvalidFormatError,
    KeyPairError,
    MissingFieldError,
    NoPrivateKeyError,
    UnsupportedFingerprintTypeError,
)

# ------------------------------------------------------------------
# Encodings
# ------------------------------------------------------------------
from ed25519_verification_key.encoding import (
    DER_PRIVATE_KEY_PREFIX,
    DER_PUBLIC_KEY_PREFIX,
    Base58DecodeResult,
    base58_decode,
    base58_encode,
    private_key_der_decode,
    private_key_der_encode,
    public_key_der_decode,
    public_key_der_encode,
    try_base58_decode,
)
from ed25519_verification_key.fingerprint import (
    FingerprintVerification,
    fingerprint_from_public_key,
    verify_fingerprint,
)

# ------------------------------------------------------------------
# Backends and configuration
# ------------------------------------------------------------------
from ed25519_verification_key.backends import (
    CryptographyBackend,
    Ed25519Backend,
    create_backend,
    get_backend,
)
from ed25519_verification_key.config import KeyPairSettings, load_settings

# ------------------------------------------------------------------
# Key pair
# ------------------------------------------------------------------
from ed25519_verification_key.adapters import Signer, UnusableSigner, UsableSigner, Verifier
from ed25519_verification_key.key_pair import SUITE_ID, Ed25519VerificationKey2018
from ed25519_verification_key.lifecycle import KeyPairRecord

__all__ = [
    # version
    "__version__",
    # errors
    "FingerprintMismatchError",
    "InvalidArgumentError",
    "InvalidEncodingError",
    "InvalidFormatError",
    "KeyPairError",
    "MissingFieldError",
    "NoPrivateKeyError",
    "UnsupportedFingerprintTypeError",
    # encodings
    "DER_PRIVATE_KEY_PREFIX",
    "DER_PUBLIC_KEY_PREFIX",
    "Base58DecodeResult",
    "base58_decode",
    "base58_encode",
    "private_key_der_decode",
    "private_key_der_encode",
    "public_key_der_decode",
    "public_key_der_encode",
    "try_base58_decode",
    # fingerprints
    "FingerprintVerification",
    "fingerprint_from_public_key",
    "verify_fingerprint",
    # backends and configuration
    "CryptographyBackend",
    "Ed25519Backend",
    "KeyPairSettings",
    "create_backend",
    "get_backend",
    "load_settings",
    # key pair
    "SUITE_ID",
    "Ed25519VerificationKey2018",
    "KeyPairRecord",
    "Signer",
    "UnusableSigner",
    "UsableSigner",
    "Verifier",
]
