"""
parity_keystore.logger
----------------------
JSON-line logging for keystore components.

Each record is one JSON object on stdout (UTC timestamps). PARITY_LOG_LEVEL
overrides the default level and PARITY_LOG_FILE adds a file sink.
"""

import logging, json, sys, time, os

from .constants import ENV_LOG_FILE, ENV_LOG_LEVEL

_LINE = json.dumps({
    "ts": "%(asctime)s",
    "level": "%(levelname)s",
    "name": "%(name)s",
    "msg": "%(message)s",
})


def _json_formatter() -> logging.Formatter:
    formatter = logging.Formatter(fmt=_LINE, datefmt="%Y-%m-%dT%H:%M:%SZ")
    formatter.converter = time.gmtime
    return formatter


def _file_handler(path: str, formatter: logging.Formatter) -> logging.Handler:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    handler = logging.FileHandler(path)
    handler.setFormatter(formatter)
    return handler


def get_logger(name="parity", level=None, to_file=None):
    """Return a named logger, attaching handlers only on first use."""
    logger = logging.getLogger(name)
    logger.setLevel(level if level is not None else os.getenv(ENV_LOG_LEVEL, "INFO").upper())

    if logger.handlers:
        return logger

    formatter = _json_formatter()
    stream = logging.StreamHandler(sys.stdout)
    stream.setFormatter(formatter)
    logger.addHandler(stream)

    to_file = to_file or os.getenv(ENV_LOG_FILE)
    if to_file:
        logger.addHandler(_file_handler(to_file, formatter))

    return logger
