#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Logger helpers for CLI commands."""

from __future__ import annotations

from typing import Any

from provide.foundation.logger import get_logger


def get_command_logger(command_name: str) -> Any:
    """Return a structured logger named after a CLI command."""
    return get_logger(f"davesave.commands.{command_name}")


# 🌶️📦🔚
