#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Directional save codec: .sav bytes to editable text and back.

decode_save: UTF-8 decode -> XOR -> throwaway json.loads check -> format_raw
encode_save: compact_raw -> XOR -> UTF-8 encode

The parsed value from the validity check is never used; json.loads would
round large integers through float-compatible types and the codec must keep
every digit.
"""

from __future__ import annotations

import json

from attrs import define
from provide.foundation import logger

from davesave.codec.compactor import compact_raw
from davesave.codec.formatter import format_raw
from davesave.config.defaults import DEFAULT_INDENT_UNIT, FILE_ENCODING
from davesave.exceptions import DecodingError, EncodingError
from davesave.utils.xor import XOR_KEY, xor_text


@define(frozen=True)
class DecodeResult:
    """Outcome of decoding a save.

    When ok is False, text holds the decrypted but unformatted text so it can
    be kept for inspection, and error carries the parser message.
    """

    text: str
    ok: bool
    error: str | None = None


def _reject_constant(name: str) -> None:
    raise ValueError(f"Non-standard JSON constant: {name}")


def check_structure(text: str) -> str | None:
    """Parse text and discard the result; return the parser error, if any.

    NaN and Infinity are rejected, as the game's own parser does.
    """
    try:
        json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        return str(e)
    return None


def decode_save(
    data: bytes,
    *,
    pretty: bool = True,
    key: str = XOR_KEY,
    indent_unit: str = DEFAULT_INDENT_UNIT,
) -> DecodeResult:
    """
    Decrypt raw save bytes into JSON-shaped text.

    Args:
        data: Raw .sav file contents
        pretty: Indent the output; when False the compact text is returned
        key: XOR cipher key
        indent_unit: Indentation per nesting level when pretty

    Returns:
        DecodeResult with ok=False if the decrypted text is not valid JSON

    Raises:
        DecodingError: If data is not valid UTF-8
    """
    try:
        encrypted = data.decode(FILE_ENCODING)
    except UnicodeDecodeError as e:
        logger.error("Save data is not valid UTF-8", size=len(data), error=str(e))
        raise DecodingError(f"Save data is not valid UTF-8: {e}") from e

    decrypted = xor_text(encrypted, key)

    error = check_structure(decrypted)
    if error is not None:
        logger.warning("Decrypted data is not valid JSON", error=error, size=len(decrypted))
        return DecodeResult(text=decrypted, ok=False, error=error)

    logger.debug("Decoded save", size=len(data), pretty=pretty)
    text = format_raw(decrypted, indent_unit) if pretty else decrypted
    return DecodeResult(text=text, ok=True)


def encode_save(text: str, *, already_compact: bool = False, key: str = XOR_KEY) -> bytes:
    """
    Encrypt JSON-shaped text into raw save bytes.

    No validity check is made; malformed text yields a save the game rejects.

    Args:
        text: Pretty or compact JSON-shaped text
        already_compact: Skip whitespace stripping
        key: XOR cipher key

    Returns:
        Bytes to write to a .sav file

    Raises:
        EncodingError: If the encrypted text cannot be encoded as UTF-8
    """
    compact = text if already_compact else compact_raw(text)
    encrypted = xor_text(compact, key)

    try:
        data = encrypted.encode(FILE_ENCODING)
    except UnicodeEncodeError as e:
        logger.error("Encrypted text is not encodable as UTF-8", error=str(e))
        raise EncodingError(f"Encrypted text is not encodable as UTF-8: {e}") from e

    logger.debug("Encoded save", size=len(data), compacted=not already_compact)
    return data


# 🌶️📦🔚
