# parity_keystore/storage/models.py
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional
import os

from parity_keystore import fs
from parity_keystore.constants import DEFAULT_DIR_NAME, DEFAULT_FILE_NAME, DEFAULT_TOKEN_EXPIRY
from parity_keystore.errors import DirectoryError


@dataclass
class KeystoreRecord:
    """
    The single persisted keystore record.

    Empty strings / zero mean "never saved". created_at is only meaningful
    alongside a non-empty auth_token.
    """
    auth_token: str = ""
    private_key: str = ""    # hex-encoded secp256k1 scalar
    created_at: int = 0      # unix seconds, set with auth_token

    def to_dict(self) -> Dict[str, Any]:
        # empty fields are omitted on disk
        d: Dict[str, Any] = {}
        if self.auth_token:
            d["auth_token"] = self.auth_token
        if self.private_key:
            d["private_key"] = self.private_key
        if self.created_at:
            d["created_at"] = self.created_at
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KeystoreRecord":
        if not isinstance(data, dict):
            raise ValueError(f"keystore must be a JSON object, got {type(data).__name__}")

        # null counts as absent; any other falsy value must still type-check
        auth_token = data.get("auth_token")
        private_key = data.get("private_key")
        created_at = data.get("created_at")
        if auth_token is None:
            auth_token = ""
        if private_key is None:
            private_key = ""
        if created_at is None:
            created_at = 0

        if not isinstance(auth_token, str):
            raise ValueError("auth_token must be a string")
        if not isinstance(private_key, str):
            raise ValueError("private_key must be a string")
        if isinstance(created_at, bool) or not isinstance(created_at, int):
            raise ValueError("created_at must be an integer")

        return cls(auth_token=auth_token, private_key=private_key, created_at=created_at)


@dataclass
class KeystoreConfig:
    """
    Keystore location and token policy.

    Unset fields fall back to ~/.parity/keystore.json and a one hour expiry.
    """
    dir_path: Optional[str] = None
    file_name: Optional[str] = None
    token_expiry: Optional[int] = None   # seconds

    def with_defaults(self) -> "KeystoreConfig":
        dir_path = self.dir_path
        if not dir_path:
            try:
                dir_path = os.path.join(fs.resolve_home_directory(), DEFAULT_DIR_NAME)
            except RuntimeError as e:
                raise DirectoryError(f"failed to get home directory: {e}") from e

        token_expiry = self.token_expiry
        if token_expiry is None:
            token_expiry = DEFAULT_TOKEN_EXPIRY
        if isinstance(token_expiry, bool) or not isinstance(token_expiry, int) or token_expiry <= 0:
            raise ValueError(f"token_expiry must be a positive number of seconds, got {token_expiry!r}")

        return replace(
            self,
            dir_path=os.fspath(dir_path),
            file_name=self.file_name or DEFAULT_FILE_NAME,
            token_expiry=token_expiry,
        )
