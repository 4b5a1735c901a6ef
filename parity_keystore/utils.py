"""
parity_keystore.utils
---------------------
Clock and serialization helpers used by the keystore.
"""

from __future__ import annotations
import json, time
from typing import Any, Dict


def now_unix() -> int:
    # whole seconds, matching the precision of created_at
    return int(time.time())


def record_json(obj: Dict[str, Any]) -> bytes:
    # Stable, human-readable JSON for the on-disk record
    return json.dumps(obj, indent=2, sort_keys=True, ensure_ascii=False, allow_nan=False).encode("utf-8")
