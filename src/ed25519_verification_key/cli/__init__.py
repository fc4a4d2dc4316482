"""Command-line interface for ed25519-verification-key."""
