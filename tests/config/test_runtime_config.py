#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for SaveCodecRuntimeConfig."""

from __future__ import annotations

import pytest

from davesave.config import SaveCodecRuntimeConfig
from davesave.config.runtime import parse_indent_width, parse_key, parse_log_level


class TestParsers:
    def test_log_level_normalized(self) -> None:
        assert parse_log_level(" debug ") == "DEBUG"

    def test_log_level_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            parse_log_level("loud")

    def test_key_empty(self) -> None:
        with pytest.raises(ValueError):
            parse_key("")

    def test_indent_width(self) -> None:
        assert parse_indent_width("2") == 2
        assert parse_indent_width(0) == 0

    def test_indent_width_negative(self) -> None:
        with pytest.raises(ValueError):
            parse_indent_width("-1")


class TestSaveCodecRuntimeConfig:
    def test_defaults(self) -> None:
        config = SaveCodecRuntimeConfig()
        assert config.key == "GameData"
        assert config.log_level == "WARNING"
        assert config.indent_unit == "    "

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DAVESAVE_KEY", "OtherKey")
        monkeypatch.setenv("DAVESAVE_LOG_LEVEL", "debug")
        monkeypatch.setenv("DAVESAVE_INDENT", "2")

        config = SaveCodecRuntimeConfig.from_env()

        assert config.key == "OtherKey"
        assert config.log_level == "DEBUG"
        assert config.indent_width == 2
        assert config.indent_unit == "  "


# 🌶️📦🔚
