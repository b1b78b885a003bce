#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for the save codec."""

from __future__ import annotations

# =================================
# Cipher defaults
# =================================
DEFAULT_XOR_KEY = "GameData"

# =================================
# Formatting defaults
# =================================
DEFAULT_INDENT_WIDTH = 4
DEFAULT_INDENT_UNIT = " " * DEFAULT_INDENT_WIDTH

# Characters the compactor treats as insignificant outside string literals
INSIGNIFICANT_WHITESPACE = frozenset(" \t\r\n")

# =================================
# File suffixes
# =================================
SAVE_SUFFIX = ".sav"
JSON_SUFFIX = ".json"
FAILED_DECODE_SUFFIX = ".failed_decode.txt"
RESAVE_SUFFIX = ".resave"

# =================================
# Encodings
# =================================
FILE_ENCODING = "utf-8"

# =================================
# Logging defaults
# =================================
DEFAULT_LOG_LEVEL = "WARNING"

# 🌶️📦🔚
