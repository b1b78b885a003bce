#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Save codec runtime configuration for CLI startup."""

from __future__ import annotations

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from davesave.config.defaults import DEFAULT_INDENT_WIDTH, DEFAULT_LOG_LEVEL, DEFAULT_XOR_KEY

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_key(value: str) -> str:
    """Reject empty cipher keys."""
    if not value:
        raise ValueError("Cipher key must not be empty")
    return value


def parse_indent_width(value: str | int) -> int:
    """Parse and validate the pretty-print indent width."""
    width = int(value)
    if width < 0:
        raise ValueError(f"Invalid indent width: {value}")
    return width


@define
class SaveCodecRuntimeConfig(RuntimeConfig):
    """Save codec runtime configuration for CLI startup."""

    log_level: str = field(
        default=DEFAULT_LOG_LEVEL,
        env_var="DAVESAVE_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for codec operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    key: str = field(
        default=DEFAULT_XOR_KEY,
        env_var="DAVESAVE_KEY",
        converter=parse_key,
        metadata={"help": "XOR cipher key used for .sav files"},
    )

    indent_width: int = field(
        default=DEFAULT_INDENT_WIDTH,
        env_var="DAVESAVE_INDENT",
        converter=parse_indent_width,
        metadata={"help": "Number of spaces per indentation level in decoded JSON"},
    )

    @property
    def indent_unit(self) -> str:
        return " " * self.indent_width


# 🌶️📦🔚
