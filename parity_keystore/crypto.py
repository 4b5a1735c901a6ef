"""
parity_keystore.crypto
----------------------
secp256k1 private key helpers used to validate and decode key material:

- parse_private_key(): strict 32-byte hex scalar -> EllipticCurvePrivateKey
- private_key_to_hex(): inverse of parse_private_key()
- generate_private_key_hex(), public_key_hex(): convenience for callers
"""

from __future__ import annotations
import binascii
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives import serialization
from .errors import KeyDecodeError

CURVE = ec.SECP256K1()
KEY_SIZE = 32  # bytes

# group order n; valid scalars are 1..n-1
SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


# --------- decode / encode ----------
def parse_private_key(key_hex: str) -> ec.EllipticCurvePrivateKey:
    if not isinstance(key_hex, str):
        raise KeyDecodeError(f"private key must be a hex string, got {type(key_hex).__name__}")
    try:
        raw = binascii.unhexlify(key_hex)
    except (binascii.Error, ValueError) as e:
        raise KeyDecodeError(f"invalid hex string: {e}") from e

    if len(raw) != KEY_SIZE:
        raise KeyDecodeError(f"invalid length, need {KEY_SIZE * 8} bits")

    d = int.from_bytes(raw, "big")
    if d == 0 or d >= SECP256K1_ORDER:
        raise KeyDecodeError("invalid private key, out of curve range")

    try:
        return ec.derive_private_key(d, CURVE)
    except ValueError as e:
        raise KeyDecodeError(f"invalid private key: {e}") from e


def private_key_to_hex(key: ec.EllipticCurvePrivateKey) -> str:
    d = key.private_numbers().private_value
    return format(d, "0%dx" % (KEY_SIZE * 2))


# --------- helpers ----------
def generate_private_key_hex() -> str:
    return private_key_to_hex(ec.generate_private_key(CURVE))


def public_key_hex(key: ec.EllipticCurvePrivateKey) -> str:
    """Uncompressed SEC1 point (0x04 || X || Y) as hex."""
    raw = key.public_key().public_bytes(
        serialization.Encoding.X962,
        serialization.PublicFormat.UncompressedPoint,
    )
    return raw.hex()
