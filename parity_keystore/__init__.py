"""
Parity Keystore Package
=======================
Local credential store shared by Parity command line tools.

Provides:
- A single-record JSON keystore (auth token + private key)
- Token expiry and key validation on every read
- secp256k1 key parsing helpers
"""

from .errors import KeystoreError
from .storage import Keystore, KeystoreConfig, KeystoreRecord, load_keystore

__all__ = [
    "Keystore",
    "KeystoreConfig",
    "KeystoreError",
    "KeystoreRecord",
    "load_keystore",
]
