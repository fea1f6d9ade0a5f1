from __future__ import annotations

import hashlib
import re
from datetime import datetime, timedelta, timezone

EOS_NAME_RE = re.compile(r"^[.1-5a-z]{1,12}[.a-j]?$")


def digest(text: str) -> bytes:
    """SHA-256 of a UTF-8 string, used as an opaque 32-byte identifier."""
    if not isinstance(text, str):
        raise TypeError(f"digest() expects str, got {type(text).__name__}")
    return hashlib.sha256(text.encode("utf-8")).digest()


def digest_hex(text: str) -> str:
    return digest(text).hex()


def is_account_name(value: str) -> bool:
    return bool(EOS_NAME_RE.match(value))


def expiration_after(seconds: int, now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    expires = (now + timedelta(seconds=seconds)).replace(microsecond=0)
    return expires.strftime("%Y-%m-%dT%H:%M:%S")


def ref_block_prefix(block_id: str) -> int:
    """Little-endian uint32 taken from bytes 8..12 of a block id."""
    raw = bytes.fromhex(block_id)
    if len(raw) < 12:
        raise ValueError(f"Block id too short: {block_id}")
    return int.from_bytes(raw[8:12], "little")
