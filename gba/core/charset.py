"""
GBA ROM Toolkit - Poketext Character Table

Byte <-> glyph mapping for the single-byte character encoding used by
in-game strings. The table is loaded from a `key=value` resource where the
key is a hex byte and the value is its glyph.
"""

from functools import lru_cache
from pathlib import Path

from .errors import UnmappableCharacterError

# Literal marker used in the table for the string terminator byte
TERMINATOR_GLYPH = "|end|"


def _get_default_charset_path() -> Path:
    """Get default path to character_set.ini."""
    return Path(__file__).parent.parent / "data" / "character_set.ini"


class CharacterTable:
    """
    Two-way Poketext lookup.

    Both directions are plain dicts built once at construction. Glyphs may
    be longer than one character (e.g. "Lv", "PK"), so encoding uses a
    greedy longest match.
    """

    def __init__(self, mapping: dict[int, str]):
        """
        Build the forward and reverse tables.

        Args:
            mapping: Byte value (0-255) to glyph

        Raises:
            ValueError: If a key is not a byte value or no terminator glyph is mapped
        """
        self.glyphs: dict[int, str] = {}
        self.codes: dict[str, int] = {}

        for code in sorted(mapping):
            if not 0 <= code <= 0xFF:
                raise ValueError(f"Character code 0x{code:X} is not a byte value")
            glyph = mapping[code]
            self.glyphs[code] = glyph
            # Lowest byte wins when a glyph is mapped more than once
            self.codes.setdefault(glyph, code)

        if TERMINATOR_GLYPH not in self.codes:
            raise ValueError(f"Character table has no '{TERMINATOR_GLYPH}' entry")

        self.terminator_byte = self.codes[TERMINATOR_GLYPH]
        self._max_glyph_length = max(len(g) for g in self.codes)

    def __len__(self) -> int:
        return len(self.glyphs)

    def decode(self, code: int) -> str:
        """
        Get the glyph for a byte.

        Bytes without a glyph come back as a `[XX]` escape so that the text
        survives an encode round trip.
        """
        glyph = self.glyphs.get(code)
        if glyph is None:
            return f"[{code:02X}]"
        return glyph

    def is_terminator(self, glyph: str) -> bool:
        """Check whether a decoded glyph is the terminator marker."""
        return glyph.lower() == TERMINATOR_GLYPH

    def encode(self, text: str) -> bytes:
        """
        Encode text into Poketext bytes.

        Args:
            text: Text to encode. `[XX]` escapes are written as the raw byte.

        Returns:
            Encoded bytes (no terminator is appended)

        Raises:
            UnmappableCharacterError: If a character has no byte mapping
        """
        result = bytearray()
        i = 0
        while i < len(text):
            escape = self._match_escape(text, i)
            if escape is not None:
                result.append(escape)
                i += 4
                continue

            for length in range(min(self._max_glyph_length, len(text) - i), 0, -1):
                code = self.codes.get(text[i : i + length])
                if code is not None:
                    result.append(code)
                    i += length
                    break
            else:
                raise UnmappableCharacterError(text[i], i)

        return bytes(result)

    @staticmethod
    def _match_escape(text: str, i: int) -> int | None:
        """Parse a `[XX]` escape starting at text[i], if there is one."""
        if text[i] != "[" or i + 4 > len(text) or text[i + 3] != "]":
            return None
        try:
            return int(text[i + 1 : i + 3], 16)
        except ValueError:
            return None


def parse_character_table(lines) -> CharacterTable:
    """
    Parse `key=value` lines into a CharacterTable.

    Lines without `=` and comment lines starting with `#` are skipped. Only
    the line ending is stripped, so a glyph may be a single space.

    Args:
        lines: Iterable of text lines

    Returns:
        Parsed table

    Raises:
        ValueError: If a key is not a hex byte
    """
    mapping = {}
    for line_num, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if line.startswith("#") or "=" not in line:
            continue

        key, value = line.split("=", 1)
        try:
            code = int(key.strip(), 16)
        except ValueError:
            raise ValueError(f"Line {line_num}: invalid character code '{key}'")

        if value == "\\n":
            value = "\n"
        mapping[code] = value

    return CharacterTable(mapping)


@lru_cache(maxsize=None)
def _load_default_table() -> CharacterTable:
    with open(_get_default_charset_path(), encoding="utf-8") as f:
        return parse_character_table(f)


def load_character_table(charset_path: str | None = None) -> CharacterTable:
    """
    Load a Poketext character table.

    Args:
        charset_path: Path to a `key=value` table. If None, uses the packaged
            default (loaded once and shared).

    Returns:
        Loaded table

    Raises:
        FileNotFoundError: If the table file does not exist
        ValueError: If the table is malformed
    """
    if charset_path is None:
        return _load_default_table()

    path = Path(charset_path)
    if not path.exists():
        raise FileNotFoundError(f"Character table not found: {path}")

    with open(path, encoding="utf-8") as f:
        return parse_character_table(f)
