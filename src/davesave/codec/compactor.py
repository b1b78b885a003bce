#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Whitespace stripper that inverts format_raw without parsing."""

from __future__ import annotations

from davesave.codec.scanner import scan_tokens
from davesave.config.defaults import INSIGNIFICANT_WHITESPACE


def compact_raw(pretty: str) -> str:
    """
    Remove whitespace outside string literals.

    String contents, including any whitespace inside them, are copied
    unchanged. For minified input m, compact_raw(format_raw(m)) == m.

    Args:
        pretty: Indented or hand-edited JSON-shaped text

    Returns:
        Minified text
    """
    return "".join(
        token
        for token, is_literal in scan_tokens(pretty)
        if is_literal or token not in INSIGNIFICANT_WHITESPACE
    )


# 🌶️📦🔚
