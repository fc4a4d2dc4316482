"""ed25519_verification_key.backends — pluggable Ed25519 primitives.

The backend is chosen once per process from :mod:`ed25519_verification_key.config`
(``ED25519_KEY_BACKEND``) and cached; call sites never branch on platform.
Pass an explicit backend to any operation to override the default.

Available backends
------------------
cryptography
    :class:`CryptographyBackend` (default).
nacl
    :class:`NaClBackend`, requires ``pip install ed25519-verification-key[nacl]``.
"""
from __future__ import annotations

import logging
from functools import lru_cache

from ed25519_verification_key.backends.base import Ed25519Backend
from ed25519_verification_key.backends.cryptography_backend import CryptographyBackend
from ed25519_verification_key.config import load_settings
from ed25519_verification_key.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

BACKEND_NAMES: tuple[str, ...] = ("cryptography", "nacl")


def create_backend(name: str) -> Ed25519Backend:
    """Instantiate the backend called *name*.

    Raises
    ------
    InvalidArgumentError
        If *name* is not a known backend.
    ImportError
        If the backend's optional dependency is not installed.
    """
    if name == "cryptography":
        return CryptographyBackend()
    if name == "nacl":
        from ed25519_verification_key.backends.nacl_backend import NaClBackend

        return NaClBackend()
    raise InvalidArgumentError(
        f"Unknown Ed25519 backend {name!r}; expected one of {', '.join(BACKEND_NAMES)}."
    )


@lru_cache(maxsize=None)
def get_backend(name: str | None = None) -> Ed25519Backend:
    """Return the process-wide backend, *name* or the configured default."""
    resolved = name or load_settings().backend
    backend = create_backend(resolved)
    logger.info("Using %s Ed25519 backend", backend.name)
    return backend


__all__ = [
    "BACKEND_NAMES",
    "CryptographyBackend",
    "Ed25519Backend",
    "create_backend",
    "get_backend",
]
