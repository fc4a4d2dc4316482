#!/usr/bin/env python3
"""Example: Quickstart

Generates an Ed25519VerificationKey2018 key pair, derives its fingerprint,
signs a payload, and verifies the signature with a public-only copy.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install ed25519-verification-key
"""
from __future__ import annotations

import asyncio

import ed25519_verification_key
from ed25519_verification_key import Ed25519VerificationKey2018


async def main() -> None:
    print(f"ed25519-verification-key version: {ed25519_verification_key.__version__}")

    # Step 1: Generate a key pair controlled by a DID
    key_pair = await Ed25519VerificationKey2018.generate(controller="did:example:alice")
    print(f"Key id: {key_pair.id}")

    # Step 2: Fingerprint round trip
    fingerprint = key_pair.fingerprint()
    print(f"Fingerprint valid: {key_pair.verify_fingerprint(fingerprint).valid}")

    # Step 3: Sign, then verify with a key pair rebuilt from the fingerprint
    signature = await key_pair.signer().sign(b"hello linked data")
    public_only = Ed25519VerificationKey2018.from_fingerprint(fingerprint)
    verified = await public_only.verifier().verify(b"hello linked data", signature)
    print(f"Signature verified: {verified}")

    print("\nQuickstart complete.")


if __name__ == "__main__":
    asyncio.run(main())
