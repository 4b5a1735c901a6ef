# parity_keystore/constants.py

DEFAULT_DIR_NAME = ".parity"
DEFAULT_FILE_NAME = "keystore.json"

DEFAULT_FILE_MODE = 0o600   # owner read/write
DEFAULT_DIR_MODE = 0o700    # owner read/write/execute

# seconds after which a saved token is rejected
DEFAULT_TOKEN_EXPIRY = 3600

ENV_KEYSTORE_DIR = "PARITY_KEYSTORE_DIR"
ENV_KEYSTORE_FILE = "PARITY_KEYSTORE_FILE"
ENV_TOKEN_EXPIRY = "PARITY_TOKEN_EXPIRY"
ENV_LOG_LEVEL = "PARITY_LOG_LEVEL"
ENV_LOG_FILE = "PARITY_LOG_FILE"
