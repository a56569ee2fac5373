"""
Savable base class.

Objects that hold editable game data implement persist() so changes can be
cached and written back to the ROM in bulk or one at a time.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .rom_buffer import RomBuffer


class Savable(ABC):
    """Game data that can be written back to a ROM buffer."""

    @abstractmethod
    def persist(self, rom: "RomBuffer") -> None:
        """
        Write this object's data to the ROM.

        Args:
            rom: Buffer to modify

        Raises:
            RomError: If the data cannot be written
        """
        pass


def persist_all(rom: "RomBuffer", items) -> int:
    """
    Persist several objects in order.

    Args:
        rom: Buffer to modify
        items: Savable objects

    Returns:
        Number of objects written
    """
    count = 0
    for item in items:
        item.persist(rom)
        count += 1
    return count
