#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Save codec configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from davesave.config.runtime import SaveCodecRuntimeConfig

__all__ = [
    "SaveCodecRuntimeConfig",
]

# 🌶️📦🔚
