"""Unit tests for utils.py functions."""

from __future__ import annotations

import hashlib
from datetime import datetime, timezone

import pytest

from shine.utils import digest, digest_hex, expiration_after, is_account_name, ref_block_prefix


class TestDigest:
    """Tests for digest / digest_hex."""

    def test_known_value(self) -> None:
        assert digest_hex("hello") == "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"

    def test_empty_string(self) -> None:
        assert digest_hex("") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"

    def test_fixed_length(self) -> None:
        for text in ("", "user.1", "a much longer message body " * 20):
            assert len(digest(text)) == 32

    def test_deterministic(self) -> None:
        assert digest("user.1") == digest("user.1")

    def test_distinct_inputs(self) -> None:
        values = {digest(f"user.{i}") for i in range(100)}
        assert len(values) == 100

    def test_utf8(self) -> None:
        assert digest("\u00e9") == hashlib.sha256("\u00e9".encode("utf-8")).digest()

    def test_rejects_bytes(self) -> None:
        with pytest.raises(TypeError):
            digest(b"user.1")  # type: ignore[arg-type]


class TestAccountName:
    """Tests for is_account_name."""

    @pytest.mark.parametrize("name", ["shine", "eos.user3", "a", "abcde12345.z", "user.1"])
    def test_valid(self, name: str) -> None:
        assert is_account_name(name)

    @pytest.mark.parametrize("name", ["", "Shine", "user_1", "user6", "abcdefghijklmn", "has space"])
    def test_invalid(self, name: str) -> None:
        assert not is_account_name(name)


class TestTransactionHelpers:
    """Tests for expiration and TaPoS helpers."""

    def test_expiration_format(self) -> None:
        now = datetime(2018, 6, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)
        assert expiration_after(30, now=now) == "2018-06-01T12:00:30"

    def test_ref_block_prefix(self) -> None:
        block_id = "0000000a" + "00000000" + "01020304" + "00" * 20
        assert ref_block_prefix(block_id) == 0x04030201

    def test_ref_block_prefix_too_short(self) -> None:
        with pytest.raises(ValueError):
            ref_block_prefix("00")
