"""Exception hierarchy for Ed25519 key pair operations.

Every error raised by this package derives from :class:`KeyPairError`.
Most subclasses also derive from a builtin (``TypeError`` / ``ValueError``)
so callers that already catch those keep working.
"""
from __future__ import annotations


class KeyPairError(Exception):
    """Base class for all key pair errors."""


class MissingFieldError(KeyPairError, TypeError):
    """Raised when a required constructor field is absent."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f'The "{field_name}" property is required.')


class InvalidArgumentError(KeyPairError, ValueError):
    """Raised when raw key material has the wrong type or length."""


class InvalidEncodingError(KeyPairError, ValueError):
    """Raised when key material is not valid Base58.

    Parameters
    ----------
    role:
        Which key material failed to decode (``"public"``, ``"private"``,
        ``"fingerprint's"``...). Included verbatim in the message.
    """

    def __init__(self, role: str) -> None:
        self.role = role
        super().__init__(f"The {role} key material must be Base58 encoded.")


class InvalidFormatError(KeyPairError, ValueError):
    """Raised when a fingerprint or DER blob does not have the expected prefix."""


class UnsupportedFingerprintTypeError(KeyPairError, ValueError):
    """Raised when a fingerprint's multicodec tag is not Ed25519 (``0xed 0x01``)."""

    def __init__(self, fingerprint: str) -> None:
        self.fingerprint = fingerprint
        super().__init__(f"Unsupported Fingerprint Type: {fingerprint}")


class FingerprintMismatchError(KeyPairError, ValueError):
    """Reported (not raised) when a fingerprint was derived from another key."""

    def __init__(self) -> None:
        super().__init__("The fingerprint does not match the public key.")


class NoPrivateKeyError(KeyPairError):
    """Raised on first use of a signer whose key pair has no private key."""

    def __init__(self, message: str = "No private key to sign with.") -> None:
        super().__init__(message)


__all__ = [
    "FingerprintMismatchError",
    "InvalidArgumentError",
    "InvalidEncodingError",
    "InvalidFormatError",
    "KeyPairError",
    "MissingFieldError",
    "NoPrivateKeyError",
    "UnsupportedFingerprintTypeError",
]
