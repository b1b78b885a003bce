#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Pretty-printer that works on raw text instead of a parsed document.

Avoids json.loads/json.dumps so large integers, number spelling and key order
survive exactly.
"""

from __future__ import annotations

from davesave.codec.scanner import scan_tokens
from davesave.config.defaults import DEFAULT_INDENT_UNIT

OPENERS = frozenset("{[")
CLOSERS = frozenset("}]")


def format_raw(compact: str, indent_unit: str = DEFAULT_INDENT_UNIT) -> str:
    """
    Expand minified JSON-shaped text into an indented, multi-line form.

    The input is not validated. Malformed brackets still produce output that
    keeps every input character.

    Args:
        compact: Minified text
        indent_unit: String emitted once per nesting level

    Returns:
        Indented text
    """
    parts: list[str] = []
    depth = 0

    for token, is_literal in scan_tokens(compact):
        if is_literal:
            parts.append(token)
        elif token in OPENERS:
            depth += 1
            parts.append(token + "\n" + indent_unit * depth)
        elif token in CLOSERS:
            depth -= 1
            parts.append("\n" + indent_unit * depth + token)
        elif token == ",":
            parts.append(",\n" + indent_unit * depth)
        elif token == ":":
            parts.append(": ")
        else:
            parts.append(token)

    return "".join(parts)


# 🌶️📦🔚
