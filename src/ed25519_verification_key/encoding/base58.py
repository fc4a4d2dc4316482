"""Base58 (bitcoin alphabet) helpers with a uniform failure contract.

Base58 decoders disagree on how they report bad input: ``base58.b58decode``
raises ``ValueError``, others return ``None``. :func:`try_base58_decode`
folds every failure shape into a :class:`Base58DecodeResult` so callers see
exactly one: an :class:`~ed25519_verification_key.errors.InvalidEncodingError`
naming which key material was malformed.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from base58 import b58decode, b58encode

from ed25519_verification_key.errors import InvalidEncodingError

Decoder = Callable[[str], Optional[bytes]]


@dataclass(frozen=True)
class Base58DecodeResult:
    """Outcome of decoding one piece of Base58 key material.

    Exactly one of ``value`` / ``error`` is set.
    """

    value: bytes | None = None
    error: InvalidEncodingError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> bytes:
        """Return the decoded bytes or raise the carried error."""
        if self.error is not None:
            raise self.error
        assert self.value is not None
        return self.value


def try_base58_decode(
    key_material: str,
    role: str,
    decode: Decoder = b58decode,
) -> Base58DecodeResult:
    """Decode *key_material* with *decode*, never raising on bad input.

    Parameters
    ----------
    key_material:
        Base58 text to decode.
    role:
        Label for the error message, e.g. ``"public"`` or ``"fingerprint's"``.
    decode:
        The decoder to use. Defaults to ``base58.b58decode``.
    """
    if not isinstance(key_material, str):
        return Base58DecodeResult(error=InvalidEncodingError(role))
    try:
        decoded = decode(key_material)
    except Exception as exc:
        error = InvalidEncodingError(role)
        error.__cause__ = exc
        return Base58DecodeResult(error=error)
    if decoded is None:
        return Base58DecodeResult(error=InvalidEncodingError(role))
    return Base58DecodeResult(value=bytes(decoded))


def base58_decode(
    key_material: str,
    role: str,
    decode: Decoder = b58decode,
) -> bytes:
    """Decode *key_material*, raising :class:`InvalidEncodingError` on failure."""
    return try_base58_decode(key_material, role, decode).unwrap()


def base58_encode(data: bytes) -> str:
    """Encode *data* to Base58 text."""
    return b58encode(bytes(data)).decode("ascii")


__all__ = [
    "Base58DecodeResult",
    "Decoder",
    "base58_decode",
    "base58_encode",
    "try_base58_decode",
]
