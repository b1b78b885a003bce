#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for round-trip verification."""

from __future__ import annotations

import pytest

from davesave.codec import decode_save, encode_save, first_difference, verify_roundtrip
from davesave.exceptions import DecodingError
from davesave.utils import xor_text


class TestVerifyRoundtrip:
    """Byte-for-byte comparison after decode and re-encode."""

    def test_identical(self, sample_save_bytes: bytes) -> None:
        result = verify_roundtrip(sample_save_bytes)
        assert result.identical is True
        assert result.decoded is True
        assert result.original_size == result.resaved_size == len(sample_save_bytes)
        assert result.first_mismatch is None

    def test_resaved_file_verifies(self, sample_save_bytes: bytes) -> None:
        resaved = encode_save(decode_save(sample_save_bytes).text)
        assert verify_roundtrip(resaved).identical is True

    def test_non_compact_save_is_reproduced(self) -> None:
        """Whitespace the game wrote is kept because decode skips formatting."""
        data = xor_text('{ "a" : 1 }').encode("utf-8")
        assert verify_roundtrip(data).identical is True

    def test_wrong_key_reports_not_decoded(self, sample_save_bytes: bytes) -> None:
        result = verify_roundtrip(sample_save_bytes, key="nope")
        assert result.identical is False
        assert result.decoded is False
        assert result.original_size == len(sample_save_bytes)

    def test_invalid_utf8_propagates(self) -> None:
        with pytest.raises(DecodingError):
            verify_roundtrip(b"\xc3\x28")


class TestFirstDifference:
    def test_equal(self) -> None:
        assert first_difference(b"abc", b"abc") is None

    def test_content_mismatch(self) -> None:
        assert first_difference(b"abc", b"abd") == 2

    def test_prefix(self) -> None:
        assert first_difference(b"ab", b"abc") == 2


# 🌶️📦🔚
