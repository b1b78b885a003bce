#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""String-aware character scanning shared by the formatter and compactor.

The scanner is a two-state machine: outside a string literal every character
is structural, inside one every character is content. Backslash escapes are
consumed as a single two-character token so an escaped quote never ends the
literal.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum


class ScanState(Enum):
    """Where the scanner currently is relative to string literals."""

    NORMAL = "normal"
    IN_STRING = "in_string"


def scan_tokens(text: str) -> Iterator[tuple[str, bool]]:
    """
    Split text into tokens tagged with whether they belong to a string literal.

    A token is a single character, or a backslash plus the character after it
    when inside a string. Opening and closing quotes are tagged as literal.

    Args:
        text: Raw JSON-shaped text

    Yields:
        (token, is_literal) pairs that concatenate back to text
    """
    state = ScanState.NORMAL
    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        if state is ScanState.IN_STRING:
            if ch == "\\":
                yield text[i : i + 2], True
                i += 2
                continue
            if ch == '"':
                state = ScanState.NORMAL
            yield ch, True
        elif ch == '"':
            state = ScanState.IN_STRING
            yield ch, True
        else:
            yield ch, False
        i += 1


# 🌶️📦🔚
