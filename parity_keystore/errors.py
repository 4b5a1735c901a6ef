"""
parity_keystore.errors
----------------------
Error taxonomy for the keystore.

Callers branch on these types, most importantly NoKeystoreError
(never configured, prompt first-time setup) versus InvalidTokenError /
TokenExpiredError (configured, prompt re-authentication).
"""

from __future__ import annotations
from typing import Optional


class KeystoreError(Exception):
    pass


# --------- token / key lifecycle ----------
class EmptyTokenError(KeystoreError):
    def __init__(self, message: str = "token cannot be empty"):
        super().__init__(message)


class NoKeystoreError(KeystoreError):
    def __init__(self, path: Optional[str] = None):
        self.path = path
        msg = "no keystore found - please authenticate first"
        if path:
            msg = f"{msg} at {path}"
        super().__init__(msg)


class TokenExpiredError(KeystoreError):
    def __init__(self, message: str = "token has expired - please re-authenticate"):
        super().__init__(message)


class InvalidTokenError(KeystoreError):
    def __init__(self, message: str = "invalid token found in keystore"):
        super().__init__(message)


class NoPrivateKeyError(KeystoreError):
    def __init__(self, message: str = "no private key found in keystore"):
        super().__init__(message)


class InvalidKeyFormatError(KeystoreError):
    pass


class KeyDecodeError(KeystoreError):
    """Raised by the key parser when hex input is not a valid secp256k1 scalar."""


# --------- infrastructure ----------
class DirectoryError(KeystoreError):
    pass


class ReadError(KeystoreError):
    pass


class WriteError(KeystoreError):
    pass


class ParseError(KeystoreError):
    pass


class SerializationError(KeystoreError):
    pass
