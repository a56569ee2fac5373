"""Unit tests for the ROM header and bulk persistence."""

import pytest

from gba.core.header import (
    GAME_CODE_ADDRESS,
    GAME_TITLE_ADDRESS,
    GAME_VERSION_ADDRESS,
    RomHeader,
)
from gba.core.palette import Palette
from gba.core.savable import Savable, persist_all


@pytest.fixture
def header_rom(make_rom):
    title = "POKEMON FIRE".encode("ascii").hex(" ")
    return make_rom(
        0x200,
        {
            GAME_TITLE_ADDRESS: title,
            GAME_CODE_ADDRESS: "42 50 52 45",  # BPRE
            GAME_VERSION_ADDRESS: "01",
        },
    )


class TestRead:
    """Tests for RomHeader.read()."""

    def test_fields(self, header_rom):
        header = RomHeader.read(header_rom)
        assert header.title == "POKEMON FIRE"
        assert header.game_code == "BPRE"
        assert header.version == "1.1"
        assert header.revision == 1

    def test_short_title_padding_stripped(self, make_rom):
        rom = make_rom(0x200, {GAME_TITLE_ADDRESS: "41 42 43"})
        assert RomHeader.read(rom).title == "ABC"


class TestPersist:
    """Tests for RomHeader.persist()."""

    def test_round_trip(self, header_rom):
        original = bytes(header_rom.data)
        RomHeader.read(header_rom).persist(header_rom)
        assert bytes(header_rom.data) == original

    def test_edit(self, header_rom):
        header = RomHeader.read(header_rom)
        header.title = "HACK"
        header.version = "1.2"
        header.persist(header_rom)

        reread = RomHeader.read(header_rom)
        assert reread.title == "HACK"
        assert reread.game_code == "BPRE"
        assert reread.revision == 2
        assert header_rom.read_bytes(12, GAME_TITLE_ADDRESS) == b"HACK" + bytes(8)

    def test_long_title_truncated(self, header_rom):
        header = RomHeader.read(header_rom)
        header.title = "A VERY LONG TITLE"
        header.persist(header_rom)
        assert RomHeader.read(header_rom).title == "A VERY LONG "
        assert header_rom.read_bytes(4, GAME_CODE_ADDRESS) == b"BPRE"

    @pytest.mark.parametrize("version", ["2", "1.", "1.x", "2.0", "1.256"])
    def test_bad_version_raises(self, header_rom, version):
        original = bytes(header_rom.data)
        header = RomHeader.read(header_rom)
        header.title = "CHANGED"
        header.version = version
        with pytest.raises(ValueError, match="Version"):
            header.persist(header_rom)
        assert bytes(header_rom.data) == original


class TestPersistAll:
    """Tests for persist_all()."""

    def test_writes_each_item(self, header_rom, palette_hex):
        header_rom.write_u8s(bytes.fromhex(palette_hex), 0x100)
        header = RomHeader.read(header_rom)
        palette = Palette.read(header_rom, 0x100, 16)
        header.game_code = "AXVE"
        palette.set_color(0, (248, 0, 0))

        assert persist_all(header_rom, [header, palette]) == 2
        assert header_rom.read_bytes(4, GAME_CODE_ADDRESS) == b"AXVE"
        assert header_rom.read_u16(0x100) == 0x001F

    def test_empty(self, header_rom):
        assert persist_all(header_rom, []) == 0

    def test_savable_is_abstract(self):
        with pytest.raises(TypeError):
            Savable()
