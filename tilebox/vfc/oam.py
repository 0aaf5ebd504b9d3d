"""Object attribute memory: the table of hardware sprites."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .constants import NUM_OAM_ENTRIES, SCREEN_HEIGHT, TILE_HEIGHT, TILE_WIDTH
from .types import TileAttributes


@dataclass
class OamEntry:
    """One sprite: a tile drawn at a pixel position with its attributes."""

    x: int = 0
    y: int = SCREEN_HEIGHT
    tile_index: int = 0
    attributes: TileAttributes = field(default_factory=TileAttributes.oam_default)

    def bounding_box_contains_pixel(self, x: int, y: int) -> bool:
        """Whether a screen pixel lies inside the sprite, wrapping at 256."""
        left = self.x
        right = (self.x + TILE_WIDTH) & 0xFF
        top = self.y
        bottom = (self.y + TILE_HEIGHT) & 0xFF

        if left <= right:
            horizontal = left <= x < right
        else:
            horizontal = x >= left or x < right

        if top <= bottom:
            vertical = top <= y < bottom
        else:
            vertical = y >= top or y < bottom

        return horizontal and vertical

    def hide(self) -> None:
        """Move the sprite below the visible screen."""
        self.y = SCREEN_HEIGHT


class OamTable:
    """A fixed table of sprite entries addressed by an 8-bit index."""

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries = [OamEntry() for _ in range(NUM_OAM_ENTRIES)]

    @staticmethod
    def _check(index: int) -> None:
        if not 0 <= index < NUM_OAM_ENTRIES:
            raise IndexError(f"OAM index {index} out of range")

    def __getitem__(self, index: int) -> OamEntry:
        self._check(index)
        return self._entries[index]

    def __setitem__(self, index: int, entry: OamEntry) -> None:
        self._check(index)
        self._entries[index] = entry

    def __len__(self) -> int:
        return NUM_OAM_ENTRIES

    def __iter__(self) -> Iterator[OamEntry]:
        return iter(self._entries)