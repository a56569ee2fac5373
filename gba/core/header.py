"""
GBA ROM Toolkit - ROM Header

Title, game code, and version fields of the cartridge header.
"""

from .rom_buffer import RomBuffer
from .savable import Savable

GAME_TITLE_ADDRESS = 0xA0
GAME_TITLE_LENGTH = 12
GAME_CODE_ADDRESS = 0xAC
GAME_CODE_LENGTH = 4
GAME_VERSION_ADDRESS = 0xBC


def _fit_ascii(text: str, length: int) -> bytes:
    """Encode text as ASCII, padded with zeros or truncated to length."""
    return text.encode("ascii")[:length].ljust(length, b"\x00")


class RomHeader(Savable):
    """Editable copy of the header fields (title, game code, version)."""

    def __init__(self, title: str, game_code: str, version: str):
        self.title = title
        self.game_code = game_code
        self.version = version

    @classmethod
    def read(cls, rom: RomBuffer) -> "RomHeader":
        """Read the header fields from a ROM."""
        title = rom.read_bytes(GAME_TITLE_LENGTH, GAME_TITLE_ADDRESS)
        game_code = rom.read_bytes(GAME_CODE_LENGTH, GAME_CODE_ADDRESS)
        version = rom.read_u8(GAME_VERSION_ADDRESS)
        return cls(
            title.rstrip(b"\x00").decode("ascii", errors="replace"),
            game_code.decode("ascii", errors="replace"),
            f"1.{version}",
        )

    @property
    def revision(self) -> int:
        """
        Numeric revision byte (the part after "1.").

        Raises:
            ValueError: If version is not of the form "1.<n>" with n in 0-255
        """
        major, _, minor = self.version.partition(".")
        if major != "1" or not minor.isdigit() or int(minor) > 0xFF:
            raise ValueError(f'Version must look like "1.<0-255>", got {self.version!r}')
        return int(minor)

    def persist(self, rom: RomBuffer) -> None:
        revision = self.revision
        rom.write_u8s(_fit_ascii(self.title, GAME_TITLE_LENGTH), GAME_TITLE_ADDRESS)
        rom.write_u8s(_fit_ascii(self.game_code, GAME_CODE_LENGTH), GAME_CODE_ADDRESS)
        rom.write_u8(revision, GAME_VERSION_ADDRESS)
