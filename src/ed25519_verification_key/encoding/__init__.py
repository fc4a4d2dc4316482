"""ed25519_verification_key.encoding — binary and textual key encodings.

Submodules
----------
der
    Fixed-prefix PKCS#8 / SPKI DER encode and decode for raw Ed25519 keys.
base58
    Base58 encode, and a decode guard with a single failure contract.
"""
from __future__ import annotations

from ed25519_verification_key.encoding.base58 import (
    Base58DecodeResult,
    base58_decode,
    base58_encode,
    try_base58_decode,
)
from ed25519_verification_key.encoding.der import (
    DER_PRIVATE_KEY_PREFIX,
    DER_PUBLIC_KEY_PREFIX,
    private_key_der_decode,
    private_key_der_encode,
    public_key_der_decode,
    public_key_der_encode,
)

__all__ = [
    # base58
    "Base58DecodeResult",
    "base58_decode",
    "base58_encode",
    "try_base58_decode",
    # der
    "DER_PRIVATE_KEY_PREFIX",
    "DER_PUBLIC_KEY_PREFIX",
    "private_key_der_decode",
    "private_key_der_encode",
    "public_key_der_decode",
    "public_key_der_encode",
]
