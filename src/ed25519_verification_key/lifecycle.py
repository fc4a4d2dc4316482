"""Controller / id handling and the serialized key pair record.

These are the lifecycle pieces every linked-data key pair shares. Key pair
classes call them explicitly from their constructor and ``export`` instead
of inheriting them.
"""
from __future__ import annotations

from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

SUITE_CONTEXT_URL = "https://w3id.org/security/suites/ed25519-2018/v1"


class KeyPairRecord(BaseModel):
    """The exported / imported shape of a key pair.

    Field names follow the JSON-LD vocabulary (``publicKeyBase58`` etc.);
    snake_case names are accepted on input too.
    """

    model_config = ConfigDict(populate_by_name=True)

    context: Optional[str] = Field(default=None, alias="@context")
    type: str
    id: Optional[str] = None
    controller: Optional[str] = None
    public_key_base58: Optional[str] = Field(default=None, alias="publicKeyBase58")
    private_key_base58: Optional[str] = Field(default=None, alias="privateKeyBase58")

    def to_dict(self) -> dict[str, object]:
        """Serialize with JSON-LD names, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


def resolve_key_id(
    controller: str | None,
    key_id: str | None,
    fingerprint: Callable[[], str],
) -> str | None:
    """Return *key_id*, or ``controller#fingerprint`` when only a controller is set.

    *fingerprint* is only called when the id has to be defaulted.
    """
    if controller and not key_id:
        return f"{controller}#{fingerprint()}"
    return key_id


def export_record(
    *,
    suite: str,
    key_id: str | None,
    controller: str | None,
    public_key_base58: str | None = None,
    private_key_base58: str | None = None,
    include_context: bool = False,
) -> dict[str, object]:
    """Build the serialized record for a key pair.

    Only the key material passed in is included; pass ``None`` to leave a
    key out of the export.
    """
    record = KeyPairRecord(
        context=SUITE_CONTEXT_URL if include_context else None,
        type=suite,
        id=key_id,
        controller=controller,
        public_key_base58=public_key_base58,
        private_key_base58=private_key_base58,
    )
    return record.to_dict()


__all__ = ["SUITE_CONTEXT_URL", "KeyPairRecord", "export_record", "resolve_key_id"]
