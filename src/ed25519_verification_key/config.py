"""Process-level settings, read from the environment.

``ED25519_KEY_BACKEND``
    Which Ed25519 primitive to use: ``cryptography`` (default) or ``nacl``.
``ED25519_KEY_LOG_LEVEL``
    Log level applied by the CLI. Defaults to ``WARNING``.

Empty variables fall back to the defaults.
"""
from __future__ import annotations

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "ED25519_KEY_"
BACKEND_ENV_VAR = f"{ENV_PREFIX}BACKEND"
LOG_LEVEL_ENV_VAR = f"{ENV_PREFIX}LOG_LEVEL"

BackendName = Literal["cryptography", "nacl"]


class KeyPairSettings(BaseSettings):
    """Validated settings for backend selection and logging."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, env_ignore_empty=True, frozen=True)

    backend: BackendName = "cryptography"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @field_validator("backend", mode="before")
    @classmethod
    def _normalize_backend(cls, value: object) -> object:
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value


def load_settings() -> KeyPairSettings:
    """Read :class:`KeyPairSettings` from the process environment.

    Raises
    ------
    pydantic.ValidationError
        If a variable holds an unsupported value.
    """
    return KeyPairSettings()


__all__ = [
    "BACKEND_ENV_VAR",
    "ENV_PREFIX",
    "LOG_LEVEL_ENV_VAR",
    "BackendName",
    "KeyPairSettings",
    "load_settings",
]
