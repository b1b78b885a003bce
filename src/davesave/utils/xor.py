#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Repeating-key XOR over UTF-16 code units."""

from __future__ import annotations

from array import array
import sys

from davesave.config.defaults import DEFAULT_XOR_KEY

XOR_KEY = DEFAULT_XOR_KEY  # SaveDataType name the game derives its key from


def _code_units(text: str) -> array:
    """Return the UTF-16 code units of text as an unsigned 16-bit array."""
    units = array("H")
    units.frombytes(text.encode("utf-16-le", "surrogatepass"))
    if sys.byteorder == "big":
        units.byteswap()
    return units


def _from_code_units(units: array) -> str:
    if sys.byteorder == "big":
        units.byteswap()
    return units.tobytes().decode("utf-16-le", "surrogatepass")


def xor_text(text: str, key: str = XOR_KEY) -> str:
    """
    XOR every code unit of text with the key, cycling the key per unit.

    Surrogate halves of non-BMP characters are XORed independently, which is
    what the game's own string cipher does. Applying the function twice with
    the same key returns the original text.

    Args:
        text: Text to transform
        key: Non-empty cipher key (defaults to "GameData")

    Returns:
        Transformed text of the same code-unit length

    Raises:
        ValueError: If key is empty
    """
    if not key:
        raise ValueError("XOR key must not be empty")

    if text.isascii() and key.isascii():
        key_len = len(key)
        return "".join(chr(ord(ch) ^ ord(key[i % key_len])) for i, ch in enumerate(text))

    units = _code_units(text)
    key_units = _code_units(key)
    key_len = len(key_units)
    for i in range(len(units)):
        units[i] ^= key_units[i % key_len]
    return _from_code_units(units)


def xor_encode(text: str, key: str = XOR_KEY) -> str:
    """XOR encode text with the repeating key."""
    return xor_text(text, key)


def xor_decode(text: str, key: str = XOR_KEY) -> str:
    """
    XOR decode text with the repeating key.

    Since XOR is symmetric, this is the same as encoding.
    """
    return xor_text(text, key)  # XOR is its own inverse


# 🌶️📦🔚
