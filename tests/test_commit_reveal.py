from __future__ import annotations

import hashlib
import hmac
import re
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "app"
sys.path.insert(0, str(APP_DIR))

import commit_reveal  # type: ignore[import-not-found]  # noqa: E402
from commit_reveal import (  # type: ignore[import-not-found]  # noqa: E402
    compute_commitment,
    generate_key,
    verify_commitment,
)
from protocol import CryptoUnavailable  # type: ignore[import-not-found]  # noqa: E402


def test_generate_key_is_64_hex_chars() -> None:
    key = generate_key()
    assert len(key) == 64
    assert re.fullmatch(r"[0-9a-f]{64}", key)


def test_generated_keys_differ() -> None:
    assert generate_key() != generate_key()


def test_generate_key_fails_without_secure_source(monkeypatch: pytest.MonkeyPatch) -> None:
    def unavailable(num_bytes: int) -> bytes:
        raise NotImplementedError("no urandom")

    monkeypatch.setattr(commit_reveal.secrets, "token_bytes", unavailable)
    with pytest.raises(CryptoUnavailable) as info:
        generate_key()
    assert isinstance(info.value.__cause__, NotImplementedError)


def test_commitment_is_hmac_sha256_over_key_text() -> None:
    key = "00" * 32
    expected = hmac.new(key.encode("utf-8"), b"rock", hashlib.sha256).hexdigest()
    assert compute_commitment("rock", key) == expected
    assert re.fullmatch(r"[0-9a-f]{64}", expected)


def test_commitment_is_deterministic() -> None:
    key = generate_key()
    assert compute_commitment("paper", key) == compute_commitment("paper", key)


def test_commitment_changes_with_message_or_key() -> None:
    key = generate_key()
    base = compute_commitment("paper", key)
    assert compute_commitment("rock", key) != base
    assert compute_commitment("paper", generate_key()) != base


def test_verify_commitment_roundtrip() -> None:
    key = generate_key()
    commitment = compute_commitment("spock", key)
    assert verify_commitment(expected_commitment=commitment, message="spock", key=key)
    assert verify_commitment(expected_commitment=commitment.upper(), message="spock", key=key)
    assert not verify_commitment(expected_commitment=commitment, message="lizard", key=key)
    assert not verify_commitment(expected_commitment=commitment, message="spock", key=generate_key())


def test_verify_commitment_rejects_non_ascii_hex() -> None:
    key = "00" * 32
    assert not verify_commitment(expected_commitment="é" * 64, message="rock", key=key)
    assert not verify_commitment(expected_commitment="ünicode", message="rock", key=key)


def test_compute_commitment_fails_without_mac_primitive(monkeypatch: pytest.MonkeyPatch) -> None:
    def unsupported(*args: object, **kwargs: object) -> object:
        raise ValueError("unsupported hash type sha256")

    monkeypatch.setattr(commit_reveal.hmac, "new", unsupported)
    with pytest.raises(CryptoUnavailable) as info:
        compute_commitment("rock", "00" * 32)
    assert isinstance(info.value.__cause__, ValueError)
