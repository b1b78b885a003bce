#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Character-level save codec: cipher, raw formatter/compactor and pipeline."""

from __future__ import annotations

from davesave.codec.compactor import compact_raw
from davesave.codec.formatter import format_raw
from davesave.codec.pipeline import DecodeResult, check_structure, decode_save, encode_save
from davesave.codec.scanner import ScanState, scan_tokens
from davesave.codec.verify import VerificationResult, first_difference, verify_roundtrip

__all__ = [
    "DecodeResult",
    "ScanState",
    "VerificationResult",
    "check_structure",
    "compact_raw",
    "decode_save",
    "encode_save",
    "first_difference",
    "format_raw",
    "scan_tokens",
    "verify_roundtrip",
]

# 🌶️📦🔚
