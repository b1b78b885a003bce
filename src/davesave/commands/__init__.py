#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the davesave CLI."""

from __future__ import annotations

from davesave.commands.convert import convert_command, decode_command, encode_command
from davesave.commands.verify import verify_command

__all__ = [
    "convert_command",
    "decode_command",
    "encode_command",
    "verify_command",
]

# 🌶️📦🔚
