#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for the save codec."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class SaveCodecError(FoundationError):
    """Base exception for all save codec errors."""

    pass


class DecodingError(SaveCodecError):
    """Raised when save file bytes are not valid UTF-8."""

    pass


class EncodingError(SaveCodecError):
    """Raised when encoded text cannot be written out as UTF-8."""

    pass


# 🌶️📦🔚
