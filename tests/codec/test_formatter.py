#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the raw pretty-printer."""

from __future__ import annotations

from davesave.codec import format_raw


class TestFormatRaw:
    """Indentation and string handling."""

    def test_nested_object_and_array(self) -> None:
        assert format_raw('{"a":1,"b":[1,2]}') == (
            '{\n    "a": 1,\n    "b": [\n        1,\n        2\n    ]\n}'
        )

    def test_custom_indent_unit(self) -> None:
        assert format_raw('{"a":[1]}', indent_unit="\t") == '{\n\t"a": [\n\t\t1\n\t]\n}'

    def test_escaped_quote_stays_in_string(self) -> None:
        formatted = format_raw('{"a":"x\\"y"}')
        assert formatted == '{\n    "a": "x\\"y"\n}'

    def test_structural_chars_inside_strings_untouched(self) -> None:
        formatted = format_raw('{"k":"{a:[b,c]}"}')
        assert '"{a:[b,c]}"' in formatted

    def test_whitespace_inside_strings_untouched(self) -> None:
        formatted = format_raw('["a b\tc"]')
        assert '"a b\tc"' in formatted

    def test_large_integer_digits_kept(self) -> None:
        formatted = format_raw('{"id":12345678901234567890}')
        assert "12345678901234567890" in formatted

    def test_number_spelling_kept(self) -> None:
        formatted = format_raw("[1.50,-0,1E+2]")
        assert "1.50" in formatted
        assert "-0" in formatted
        assert "1E+2" in formatted

    def test_unbalanced_input_does_not_raise(self) -> None:
        formatted = format_raw("]]")
        assert formatted == "\n]\n]"

    def test_empty_input(self) -> None:
        assert format_raw("") == ""


# 🌶️📦🔚
