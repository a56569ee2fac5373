"""Unit tests for Poketext character table loading and lookup."""

import pytest

from gba.core.charset import (
    TERMINATOR_GLYPH,
    CharacterTable,
    load_character_table,
    parse_character_table,
)
from gba.core.errors import UnmappableCharacterError


class TestDefaultTable:
    """Tests against the packaged character_set.ini."""

    def test_letters(self, charset):
        assert charset.decode(0xBB) == "A"
        assert charset.decode(0xD4) == "Z"
        assert charset.decode(0xD5) == "a"
        assert charset.decode(0xEE) == "z"

    def test_digits(self, charset):
        assert charset.decode(0xA1) == "0"
        assert charset.decode(0xAA) == "9"

    def test_space_glyph_preserved(self, charset):
        assert charset.decode(0x00) == " "

    def test_equals_sign_value(self, charset):
        """A value of '=' survives the key=value split."""
        assert charset.decode(0x35) == "="

    def test_newline_escape(self, charset):
        assert charset.decode(0xFE) == "\n"

    def test_terminator(self, charset):
        assert charset.terminator_byte == 0xFF
        assert charset.is_terminator(charset.decode(0xFF))

    def test_default_table_is_shared(self):
        assert load_character_table() is load_character_table()


class TestDecode:
    """Tests for CharacterTable.decode()."""

    def test_unmapped_byte_escaped(self, charset):
        assert charset.decode(0x18) == "[18]"

    def test_terminator_case_insensitive(self, charset):
        assert charset.is_terminator("|END|")
        assert not charset.is_terminator("A")


class TestEncode:
    """Tests for CharacterTable.encode()."""

    def test_simple_text(self, charset):
        assert charset.encode("AB") == bytes([0xBB, 0xBC])

    def test_multi_character_glyph(self, charset):
        """'Lv' is a single byte; the greedy match takes it over 'L' + 'v'."""
        assert charset.encode("Lv5") == bytes([0x34, 0xA6])

    def test_terminator_glyph(self, charset):
        assert charset.encode("A" + TERMINATOR_GLYPH) == bytes([0xBB, 0xFF])

    def test_escape_round_trip(self, charset):
        assert charset.encode("[18]") == bytes([0x18])
        assert charset.encode(charset.decode(0x18)) == bytes([0x18])

    def test_unmappable_character(self, charset):
        with pytest.raises(UnmappableCharacterError) as exc_info:
            charset.encode("AB~")
        assert exc_info.value.character == "~"
        assert exc_info.value.index == 2

    def test_bracket_without_escape_is_unmappable(self, charset):
        with pytest.raises(UnmappableCharacterError):
            charset.encode("[ZZ]")

    def test_round_trip_sentence(self, charset):
        text = "PIKACHU used THUNDERBOLT!"
        encoded = charset.encode(text)
        assert "".join(charset.decode(b) for b in encoded) == text


class TestParsing:
    """Tests for parse_character_table() and load_character_table()."""

    def test_parse_skips_comments_and_junk(self):
        table = parse_character_table(["# comment", "junk", "00= ", "FF=|end|"])
        assert len(table) == 2
        assert table.decode(0x00) == " "

    def test_parse_strips_line_endings_only(self):
        table = parse_character_table(["01=a\r\n", "FF=|end|\n"])
        assert table.decode(0x01) == "a"

    def test_invalid_key_raises(self):
        with pytest.raises(ValueError, match="invalid character code"):
            parse_character_table(["ZZ=x", "FF=|end|"])

    def test_missing_terminator_raises(self):
        with pytest.raises(ValueError, match="end"):
            parse_character_table(["00=A"])

    def test_key_out_of_range_raises(self):
        with pytest.raises(ValueError, match="not a byte value"):
            CharacterTable({0x100: "A", 0xFF: TERMINATOR_GLYPH})

    def test_duplicate_glyph_lowest_byte_wins(self):
        table = CharacterTable({0x10: "A", 0x05: "A", 0xFF: TERMINATOR_GLYPH})
        assert table.encode("A") == bytes([0x05])
        assert table.decode(0x10) == "A"

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "chars.ini"
        path.write_text("01=X\n02=Y\n80=|end|\n", encoding="utf-8")
        table = load_character_table(str(path))
        assert table.encode("XY") == bytes([1, 2])
        assert table.terminator_byte == 0x80

    def test_load_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Character table not found"):
            load_character_table(str(tmp_path / "missing.ini"))
