"""
Unit Tests for Segment Byte Counting
====================================
"""

import pytest

from helpers import ABC, ABC_RUS, generate


class TestGenerate:
    """Sanity checks for the text generator used below."""

    @pytest.mark.parametrize("abc,n,expected", [
        ("abc", 0, ""),
        ("abc", 2, "ab"),
        ("abc", 5, "abcab"),
    ])
    def test_generate(self, abc, n, expected):
        assert generate(abc, n) == expected


class TestCountBytes:
    """Tests for count_bytes."""

    def test_empty_text(self):
        """Empty text costs nothing."""
        from smsc.messaging import count_bytes

        assert count_bytes("") == 0

    def test_single_character(self):
        from smsc.messaging import count_bytes

        assert count_bytes("a") == 1
        assert count_bytes("ж") == 2

    @pytest.mark.parametrize("text", [
        generate(ABC, 159),
        generate(ABC_RUS, 79),
        "Привет, world!",
    ])
    def test_short_text_is_raw_byte_length(self, text):
        """Below one segment no header is charged."""
        from smsc.messaging import count_bytes

        assert count_bytes(text) == len(text.encode("utf-8"))

    def test_latin_segments_charge_headers(self):
        """153 latin chars fit before a segment is closed."""
        from smsc.messaging import count_bytes

        assert count_bytes(generate(ABC, 160)) == 160 + 7
        assert count_bytes(generate(ABC, 765)) == 765 + 4 * 7
        assert count_bytes(generate(ABC, 766)) == 766 + 5 * 7

    def test_cyrillic_segments_charge_headers(self):
        """76 two-byte chars fit before a segment is closed."""
        from smsc.messaging import count_bytes

        assert count_bytes(generate(ABC_RUS, 80)) == 160 + 7
        assert count_bytes(generate(ABC_RUS, 335)) == 670 + 4 * 7
        assert count_bytes(generate(ABC_RUS, 382)) == 764 + 5 * 7

    def test_multibyte_character_not_split(self):
        """A 2-byte char that would overflow opens a new segment."""
        from smsc.messaging import count_bytes

        # 152 single bytes then a 2-byte char: 152 + 2 + 7 > 160
        text = generate(ABC, 152) + "ж" + generate(ABC, 10)
        assert count_bytes(text) == 152 + 7 + 2 + 10

    def test_monotonic_when_appending(self):
        """Appending characters never lowers the count."""
        from smsc.messaging import count_bytes

        text = ""
        previous = 0
        for char in generate(ABC + ABC_RUS + "€😀", 500):
            text += char
            current = count_bytes(text)
            assert current >= previous
            previous = current


class TestCountSegments:
    """Tests for count_segments."""

    def test_short_text_is_one_segment(self):
        from smsc.messaging import count_segments

        assert count_segments("") == 1
        assert count_segments("Hello") == 1

    def test_long_text_segments(self):
        from smsc.messaging import count_segments

        assert count_segments(generate(ABC, 200)) == 2
        assert count_segments(generate(ABC, 765)) == 5
        assert count_segments(generate(ABC, 766)) == 6
        assert count_segments(generate(ABC_RUS, 335)) == 5
