"""
parity_keystore.fs
------------------
Filesystem primitives for the keystore: home directory resolution,
directory creation and whole-file reads/writes with explicit permission bits.

These raise plain OSError / RuntimeError; the keystore maps them onto its
own error taxonomy.
"""

from __future__ import annotations
import os
from pathlib import Path


def resolve_home_directory() -> str:
    # Path.home() raises RuntimeError (or KeyError on some platforms) when unresolvable
    try:
        return str(Path.home())
    except KeyError as e:
        raise RuntimeError(f"could not determine home directory: {e}") from e


def ensure_directory(path: str, mode: int) -> None:
    os.makedirs(path, mode=mode, exist_ok=True)


def read_file(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def write_file(path: str, data: bytes, mode: int) -> None:
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    # os.open only applies mode on creation; tighten an existing file before any bytes land
    try:
        if hasattr(os, "fchmod"):
            os.fchmod(fd, mode)
        else:
            os.chmod(path, mode)
    except OSError:
        os.close(fd)
        raise
    with os.fdopen(fd, "wb") as f:
        f.write(data)
