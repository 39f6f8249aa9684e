from __future__ import annotations

import hashlib
import hmac
import secrets
from typing import Final

from protocol import CryptoUnavailable

SCHEME_ID: Final[str] = "hmac-sha256"
KEY_BYTES: Final[int] = 32


def generate_key(num_bytes: int = KEY_BYTES) -> str:
    """Return a fresh secret key as lowercase hex (two characters per byte)."""
    try:
        raw = secrets.token_bytes(num_bytes)
    except (NotImplementedError, OSError) as exc:
        raise CryptoUnavailable("secure random source is unavailable") from exc
    return raw.hex()


def compute_commitment(message: str, key: str) -> str:
    # The key is MACed as the text it is displayed as, so the disclosed hex
    # string can be pasted into any HMAC tool to check the commitment.
    try:
        mac = hmac.new(key.encode("utf-8"), message.encode("utf-8"), hashlib.sha256)
    except ValueError as exc:
        raise CryptoUnavailable(f"{SCHEME_ID} is unavailable") from exc
    return mac.hexdigest()


def verify_commitment(*, expected_commitment: str, message: str, key: str) -> bool:
    computed = compute_commitment(message, key)
    # compare_digest only accepts ASCII text, so compare encoded bytes.
    expected = expected_commitment.strip().lower().encode("utf-8")
    return hmac.compare_digest(expected, computed.encode("ascii"))
