#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Round-trip verification of the save codec."""

from __future__ import annotations

from attrs import define
from provide.foundation import logger

from davesave.codec.pipeline import decode_save, encode_save
from davesave.utils.xor import XOR_KEY


@define(frozen=True)
class VerificationResult:
    """Outcome of decoding and re-encoding a save."""

    identical: bool
    decoded: bool
    original_size: int
    resaved_size: int = 0
    first_mismatch: int | None = None


def first_difference(left: bytes, right: bytes) -> int | None:
    """Return the offset of the first differing byte, or None if equal."""
    for offset, (a, b) in enumerate(zip(left, right)):
        if a != b:
            return offset
    if len(left) != len(right):
        return min(len(left), len(right))
    return None


def verify_roundtrip(original: bytes, *, key: str = XOR_KEY) -> VerificationResult:
    """
    Decode to compact text, re-encode, and compare with the original bytes.

    A mismatch is reported in the result rather than raised.

    Args:
        original: Raw .sav contents
        key: XOR cipher key

    Returns:
        VerificationResult describing the comparison

    Raises:
        DecodingError: If original is not valid UTF-8
    """
    decoded = decode_save(original, pretty=False, key=key)
    if not decoded.ok:
        logger.warning("Round trip aborted, decode step failed", error=decoded.error)
        return VerificationResult(identical=False, decoded=False, original_size=len(original))

    resaved = encode_save(decoded.text, already_compact=True, key=key)
    mismatch = first_difference(original, resaved)

    logger.debug(
        "Round trip compared",
        original_size=len(original),
        resaved_size=len(resaved),
        first_mismatch=mismatch,
    )
    return VerificationResult(
        identical=mismatch is None,
        decoded=True,
        original_size=len(original),
        resaved_size=len(resaved),
        first_mismatch=mismatch,
    )


# 🌶️📦🔚
