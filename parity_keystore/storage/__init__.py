# parity_keystore/storage/__init__.py

from .models import KeystoreRecord, KeystoreConfig
from .keystore import Keystore
from parity_keystore.constants import ENV_KEYSTORE_DIR, ENV_KEYSTORE_FILE, ENV_TOKEN_EXPIRY
from dataclasses import asdict
import os


def load_keystore(config: dict | KeystoreConfig | None = None) -> Keystore:
    """
    Factory resolver for the runtime keystore.

    Accepts a dict or a KeystoreConfig. For each field, an explicit value
    wins, then PARITY_KEYSTORE_DIR / PARITY_KEYSTORE_FILE /
    PARITY_TOKEN_EXPIRY, then the built-in defaults.
    """
    if isinstance(config, KeystoreConfig):
        config = asdict(config)

    config = config or {}
    unknown = set(config) - {"dir_path", "file_name", "token_expiry"}
    if unknown:
        raise ValueError(f"Unknown keystore option(s): {', '.join(sorted(unknown))}")

    token_expiry = config.get("token_expiry")
    if token_expiry is None and os.getenv(ENV_TOKEN_EXPIRY):
        raw = os.getenv(ENV_TOKEN_EXPIRY)
        try:
            token_expiry = int(raw)
        except ValueError as e:
            raise ValueError(f"{ENV_TOKEN_EXPIRY} must be an integer, got {raw!r}") from e

    return Keystore(KeystoreConfig(
        dir_path=config.get("dir_path") or os.getenv(ENV_KEYSTORE_DIR) or None,
        file_name=config.get("file_name") or os.getenv(ENV_KEYSTORE_FILE) or None,
        token_expiry=token_expiry,
    ))


__all__ = [
    "Keystore",
    "KeystoreConfig",
    "KeystoreRecord",
    "load_keystore",
]
