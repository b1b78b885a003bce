#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Low-level helpers shared by the codec."""

from __future__ import annotations

from davesave.utils.xor import (
    XOR_KEY,
    xor_decode,
    xor_encode,
    xor_text,
)

__all__ = [
    "XOR_KEY",
    "xor_decode",
    "xor_encode",
    "xor_text",
]

# 🌶️📦🔚
