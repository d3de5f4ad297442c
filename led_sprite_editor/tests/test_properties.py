#!/usr/bin/env python3
"""
Tests for the key=value document reader and writer
"""

import pytest

from led_sprite_editor.exceptions import FormatError
from led_sprite_editor.utils.properties import format_properties, parse_properties


@pytest.mark.unit
class TestParseProperties:
    """Test reading documents"""

    def test_simple_pairs(self):
        assert parse_properties("a=1\nb=two\n") == {"a": "1", "b": "two"}

    def test_comments_and_blank_lines_ignored(self):
        text = "# header\n! other comment\n\n   \nkey=value\n"
        assert parse_properties(text) == {"key": "value"}

    @pytest.mark.parametrize("line", ["key=value", "key = value", "key:value", "key value", "  key=value"])
    def test_separators(self, line):
        assert parse_properties(line) == {"key": "value"}

    def test_value_keeps_inner_separators(self):
        assert parse_properties("image.0=0x1, 0x2=3") == {"image.0": "0x1, 0x2=3"}

    def test_key_without_value(self):
        assert parse_properties("lonely\n") == {"lonely": ""}

    def test_escapes(self):
        text = r"path=C\:\\Users\\me" + "\n" + r"tab=a\tb" + "\n" + r"uni=\u00e9"
        assert parse_properties(text) == {"path": "C:\\Users\\me", "tab": "a\tb", "uni": "é"}

    def test_escaped_separator_in_key(self):
        assert parse_properties(r"a\=b=c") == {"a=b": "c"}

    def test_line_continuation(self):
        text = "list=one,\\\n     two,\\\n  three\nnext=1"
        assert parse_properties(text) == {"list": "one,two,three", "next": "1"}

    def test_crlf_line_endings(self):
        assert parse_properties("a=1\r\nb=2\r\n") == {"a": "1", "b": "2"}

    def test_later_duplicate_wins(self):
        assert parse_properties("a=1\na=2") == {"a": "2"}

    def test_malformed_unicode_escape(self):
        with pytest.raises(FormatError):
            parse_properties(r"a=\u12")


@pytest.mark.unit
class TestFormatProperties:
    """Test writing documents"""

    def test_header_and_order(self):
        text = format_properties([("b", "1"), ("a", "2")], comment="Header", timestamp=False)
        assert text == "#Header\nb=1\na=2\n"

    def test_timestamp_comment(self):
        lines = format_properties([("a", "1")], timestamp=True).splitlines()
        assert lines[0].startswith("#")
        assert lines[1] == "a=1"

    def test_special_characters_escaped(self):
        text = format_properties([("recentFiles", "C:\\dir\\a b#c")], timestamp=False)
        assert text == "recentFiles=C\\:\\\\dir\\\\a b\\#c\n"

    def test_output_is_ascii(self):
        text = format_properties([("name", "smile \u263a \U0001F600")], timestamp=False)
        assert text.isascii()

    def test_written_values_read_back(self):
        values = {
            "name": " leading space",
            "path": "C:\\x\\y=z",
            "multi": "line1\nline2",
            "unicode": "caf\u00e9 \U0001F600",
            "key with space": "v",
        }
        assert parse_properties(format_properties(values.items())) == values
