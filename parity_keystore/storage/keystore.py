"""
parity_keystore.storage.keystore
--------------------------------
Keystore: a single JSON record holding one auth token and one private key.

Every read refreshes the in-memory record from disk first, so edits made to
the file by another process are picked up. The instance itself does no
locking; callers sharing one across threads must serialize access.
"""

from __future__ import annotations
from dataclasses import replace
from typing import Optional
import json, os

from cryptography.hazmat.primitives.asymmetric import ec

from parity_keystore import fs
from parity_keystore.constants import DEFAULT_DIR_MODE, DEFAULT_FILE_MODE
from parity_keystore.crypto import parse_private_key
from parity_keystore.errors import (
    DirectoryError, EmptyTokenError, InvalidKeyFormatError, InvalidTokenError,
    KeyDecodeError, NoKeystoreError, NoPrivateKeyError, ParseError, ReadError,
    SerializationError, TokenExpiredError, WriteError,
)
from parity_keystore.logger import get_logger
from parity_keystore.storage.models import KeystoreConfig, KeystoreRecord
from parity_keystore.utils import now_unix, record_json

log = get_logger("Parity.Keystore")


class Keystore:
    def __init__(self, config: Optional[KeystoreConfig] = None):
        self._config = (config or KeystoreConfig()).with_defaults()
        self.record = KeystoreRecord()

        try:
            fs.ensure_directory(self._config.dir_path, DEFAULT_DIR_MODE)
        except OSError as e:
            raise DirectoryError(f"failed to create keystore directory {self._config.dir_path}: {e}") from e

        log.debug(f"[KEYSTORE] opened path={self.path}")

    @classmethod
    def open(cls, config: Optional[KeystoreConfig] = None) -> "Keystore":
        return cls(config)

    @property
    def config(self) -> KeystoreConfig:
        return self._config

    @property
    def path(self) -> str:
        return os.path.join(self._config.dir_path, self._config.file_name)

    def exists(self) -> bool:
        return os.path.isfile(self.path)

    # ------------------------------------------------------------------
    # Token
    # ------------------------------------------------------------------
    def save_token(self, token: str) -> None:
        if token is not None and not isinstance(token, str):
            raise TypeError(f"token must be a string, got {type(token).__name__}")
        if not token:
            raise EmptyTokenError()

        self._save(replace(self.record, auth_token=token, created_at=now_unix()))
        log.info(f"[KEYSTORE] token saved path={self.path}")

    def load_token(self) -> str:
        """
        Return the stored token.

        Raises NoKeystoreError when the file is missing, InvalidTokenError
        when it holds no token and TokenExpiredError once the token is older
        than config.token_expiry seconds. A token exactly at the threshold
        is still valid.
        """
        self._load()

        if not self.record.auth_token:
            log.warning(f"[KEYSTORE] no token in {self.path}")
            raise InvalidTokenError()

        age = now_unix() - self.record.created_at
        if age > self._config.token_expiry:
            log.warning(f"[KEYSTORE] token expired age={age}s expiry={self._config.token_expiry}s")
            raise TokenExpiredError()

        return self.record.auth_token

    # ------------------------------------------------------------------
    # Private key
    # ------------------------------------------------------------------
    def save_private_key(self, key_hex: str) -> None:
        # validate before touching the record so a bad key is never written
        try:
            parse_private_key(key_hex)
        except KeyDecodeError as e:
            log.warning(f"[KEYSTORE] rejected private key: {e}")
            raise InvalidKeyFormatError(f"invalid private key format: {e}") from e

        self._save(replace(self.record, private_key=key_hex))
        log.info(f"[KEYSTORE] private key saved path={self.path}")

    def load_private_key(self) -> ec.EllipticCurvePrivateKey:
        # KeyDecodeError here means the file was altered after a validated save
        return parse_private_key(self.get_private_key_hex())

    def get_private_key_hex(self) -> str:
        self._load()

        if not self.record.private_key:
            raise NoPrivateKeyError()

        return self.record.private_key

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def _save(self, record: KeystoreRecord) -> None:
        # the in-memory record only changes once the write has succeeded
        try:
            data = record_json(record.to_dict())
        except (TypeError, ValueError) as e:
            raise SerializationError(f"failed to marshal keystore: {e}") from e

        try:
            fs.write_file(self.path, data, DEFAULT_FILE_MODE)
        except OSError as e:
            raise WriteError(f"failed to write keystore file: {e}") from e

        self.record = record
        log.debug(f"[KEYSTORE] wrote {len(data)} bytes to {self.path}")

    def _load(self) -> None:
        try:
            data = fs.read_file(self.path)
        except FileNotFoundError as e:
            raise NoKeystoreError(self.path) from e
        except OSError as e:
            raise ReadError(f"failed to read keystore: {e}") from e

        try:
            self.record = KeystoreRecord.from_dict(json.loads(data.decode("utf-8")))
        except (UnicodeDecodeError, ValueError) as e:
            raise ParseError(f"failed to parse keystore: {e}") from e

        log.debug(f"[KEYSTORE] loaded {self.path}")
