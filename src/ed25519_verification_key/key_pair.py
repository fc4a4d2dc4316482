"""Ed25519VerificationKey2018 — an Ed25519 key pair for linked-data proofs.

Key material is held as Base58 text:

* ``public_key_base58`` encodes the 32-byte raw public key (required);
* ``private_key_base58`` encodes the 64-byte expanded private key, i.e. the
  32-byte seed followed by the public key (optional).

Both are fixed at construction. To change keys, build a new key pair.

Example
-------
::

    key_pair = await Ed25519VerificationKey2018.generate(controller="did:example:1234")
    signer = key_pair.signer()
    signature = await signer.sign(b"payload")
    assert await key_pair.verifier().verify(b"payload", signature)
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, MutableMapping

from ed25519_verification_key.adapters import Signer, Verifier, signer_for, verifier_for
from ed25519_verification_key.backends import Ed25519Backend, get_backend
from ed25519_verification_key.backends.base import check_seed
from ed25519_verification_key.encoding.base58 import base58_decode, base58_encode
from ed25519_verification_key.encoding.der import EXPANDED_PRIVATE_KEY_LENGTH, KEY_LENGTH
from ed25519_verification_key.errors import InvalidArgumentError, MissingFieldError
from ed25519_verification_key.fingerprint import (
    FingerprintVerification,
    fingerprint_from_public_key,
    public_key_from_fingerprint,
    verify_fingerprint,
)
from ed25519_verification_key.lifecycle import KeyPairRecord, export_record, resolve_key_id

logger = logging.getLogger(__name__)

SUITE_ID = "Ed25519VerificationKey2018"


class Ed25519VerificationKey2018:
    """An Ed25519 verification key pair.

    Parameters
    ----------
    public_key_base58:
        Base58 encoded public key (32 bytes decoded). Required.
    private_key_base58:
        Base58 encoded private key (64 bytes decoded).
    controller:
        Identifier of the entity controlling the key, e.g. a DID.
    id:
        Key identifier. Defaults to ``controller#fingerprint`` when a
        controller is given without an id.

    Raises
    ------
    MissingFieldError
        If *public_key_base58* is missing or empty.
    InvalidEncodingError
        If key material is not Base58.
    InvalidArgumentError
        If decoded key material has the wrong length.
    """

    suite: str = SUITE_ID

    def __init__(
        self,
        *,
        public_key_base58: str | None = None,
        private_key_base58: str | None = None,
        controller: str | None = None,
        id: str | None = None,
        type: str | None = None,
    ) -> None:
        if not public_key_base58:
            raise MissingFieldError("publicKeyBase58")
        _check_length(base58_decode(public_key_base58, "public"), KEY_LENGTH, "public")
        if private_key_base58:
            _check_length(
                base58_decode(private_key_base58, "private"),
                EXPANDED_PRIVATE_KEY_LENGTH,
                "private",
            )

        # The suite is fixed; a serialized ``type`` is accepted and ignored.
        self.type: str = SUITE_ID
        self._public_key_base58: str = public_key_base58
        self._private_key_base58: str | None = private_key_base58 or None
        self.controller: str | None = controller
        self.id: str | None = resolve_key_id(controller, id, self.fingerprint)

    # ------------------------------------------------------------------
    # Key material
    # ------------------------------------------------------------------

    @property
    def public_key_base58(self) -> str:
        return self._public_key_base58

    @property
    def private_key_base58(self) -> str | None:
        return self._private_key_base58

    @property
    def public_key(self) -> str:
        """The Base58 encoded public key."""
        return self._public_key_base58

    @property
    def private_key(self) -> str | None:
        """The Base58 encoded private key, or ``None``."""
        return self._private_key_base58

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_fingerprint(cls, fingerprint: str) -> "Ed25519VerificationKey2018":
        """Create a public-key-only key pair from a key fingerprint.

        Raises
        ------
        InvalidFormatError
            If *fingerprint* does not start with ``z``.
        InvalidEncodingError
            If the rest of *fingerprint* is not Base58.
        UnsupportedFingerprintTypeError
            If the fingerprint is not for an Ed25519 key.
        """
        public_key_bytes = public_key_from_fingerprint(fingerprint)
        return cls(public_key_base58=base58_encode(public_key_bytes))

    @classmethod
    async def generate(
        cls,
        *,
        seed: bytes | None = None,
        backend: Ed25519Backend | None = None,
        **options: Any,
    ) -> "Ed25519VerificationKey2018":
        """Generate a key pair, deterministically from *seed* when given.

        Parameters
        ----------
        seed:
            32 bytes of seed material.
        backend:
            Ed25519 primitive to use. Defaults to the configured backend.
        **options:
            Remaining constructor arguments (``controller``, ``id``...). Key
            material passed here replaces the generated keys.

        Raises
        ------
        InvalidArgumentError
            If *seed* is given and is not 32 bytes.
        """
        backend = backend or get_backend()
        if seed is not None:
            seed = check_seed(seed)
        private_key_bytes, public_key_bytes = backend.generate_keypair(seed)
        fields: dict[str, Any] = {
            "public_key_base58": base58_encode(public_key_bytes),
            "private_key_base58": base58_encode(private_key_bytes),
        }
        fields.update(options)
        key_pair = cls(**fields)
        logger.info(
            "Generated %s key pair %s (%s)",
            SUITE_ID,
            key_pair.fingerprint(),
            "seeded" if seed is not None else "random",
        )
        return key_pair

    @classmethod
    def from_record(
        cls,
        record: Mapping[str, Any] | KeyPairRecord,
    ) -> "Ed25519VerificationKey2018":
        """Create a key pair from a previously exported record.

        Accepts either a :class:`KeyPairRecord` or a mapping using the
        JSON-LD names (``publicKeyBase58``, ``privateKeyBase58``, ...).
        """
        if isinstance(record, KeyPairRecord):
            record = record.to_dict()
        return cls(
            type=record.get("type"),
            controller=record.get("controller"),
            id=record.get("id"),
            public_key_base58=record.get("publicKeyBase58"),
            private_key_base58=record.get("privateKeyBase58"),
        )

    # ------------------------------------------------------------------
    # Fingerprints
    # ------------------------------------------------------------------

    @staticmethod
    def fingerprint_from_public_key(public_key_base58: str) -> str:
        """Return the multicodec fingerprint of a Base58 public key."""
        return fingerprint_from_public_key(public_key_base58)

    def fingerprint(self) -> str:
        """Return this key pair's multicodec fingerprint."""
        return fingerprint_from_public_key(self._public_key_base58)

    def verify_fingerprint(self, fingerprint: str) -> FingerprintVerification:
        """Check whether *fingerprint* was generated from this key pair. Never raises."""
        return verify_fingerprint(fingerprint, self._public_key_base58)

    # ------------------------------------------------------------------
    # Signing
    # ------------------------------------------------------------------

    def signer(self, backend: Ed25519Backend | None = None) -> Signer:
        """Return a signer bound to this key pair's private key.

        A key pair without a private key still returns a signer; its
        ``sign`` raises :class:`~ed25519_verification_key.errors.NoPrivateKeyError`.
        """
        return signer_for(self, backend)

    def verifier(self, backend: Ed25519Backend | None = None) -> Verifier:
        """Return a verifier bound to this key pair's public key."""
        return verifier_for(self, backend)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def add_public_key(self, node: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
        """Set ``publicKeyBase58`` on *node* and return it."""
        node["publicKeyBase58"] = self._public_key_base58
        return node

    def add_private_key(self, node: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
        """Set ``privateKeyBase58`` on *node* and return it."""
        node["privateKeyBase58"] = self._private_key_base58
        return node

    def export(
        self,
        *,
        public_key: bool = True,
        private_key: bool = False,
        include_context: bool = False,
    ) -> dict[str, object]:
        """Export the key pair as a serializable record.

        Private key material is only included when *private_key* is true.

        Raises
        ------
        InvalidArgumentError
            If neither *public_key* nor *private_key* is requested.
        """
        if not (public_key or private_key):
            raise InvalidArgumentError(
                "Export requires specifying either `public_key` or `private_key`."
            )
        return export_record(
            suite=self.type,
            key_id=self.id,
            controller=self.controller,
            public_key_base58=self._public_key_base58 if public_key else None,
            private_key_base58=self._private_key_base58 if private_key else None,
            include_context=include_context,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ed25519VerificationKey2018):
            return NotImplemented
        return (
            self.id == other.id
            and self.controller == other.controller
            and self._public_key_base58 == other._public_key_base58
        )

    def __hash__(self) -> int:
        return hash((self.type, self.id, self.controller, self._public_key_base58))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id!r}, controller={self.controller!r}, "
            f"public_key_base58={self._public_key_base58!r}, "
            f"has_private_key={self._private_key_base58 is not None})"
        )


def _check_length(key_bytes: bytes, expected: int, role: str) -> None:
    if len(key_bytes) != expected:
        raise InvalidArgumentError(
            f"The {role} key material must be {expected} bytes, got {len(key_bytes)}."
        )


__all__ = ["SUITE_ID", "Ed25519VerificationKey2018"]
