"""Lists of sprites that can be built as tile groups and copied into an OAM table."""

from __future__ import annotations

import dataclasses
from typing import Iterator, Sequence

from ..vfc.constants import TILE_HEIGHT, TILE_WIDTH
from ..vfc.oam import OamEntry, OamTable
from ..vfc.types import TileAttributes


class SpriteList:
    """An ordered list of sprite entries."""

    def __init__(self) -> None:
        self._entries: list[OamEntry] = []

    @property
    def entries(self) -> tuple[OamEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[OamEntry]:
        return iter(self._entries)

    def add_sprite_centered(
        self,
        center_x: int,
        center_y: int,
        w: int,
        h: int,
        tiles: Sequence[int],
        attributes: Sequence[TileAttributes],
    ) -> None:
        """Add a block of tiles centred on a pixel; positions wrap at 256."""
        pixel_w = w * TILE_WIDTH
        pixel_h = h * TILE_HEIGHT
        for yi in range(w):
            for xi in range(h):
                x = (center_x - pixel_w // 2 + xi * TILE_WIDTH) & 0xFF
                y = (center_y - pixel_h // 2 + yi * TILE_HEIGHT) & 0xFF
                i = yi * w + xi
                self._entries.append(OamEntry(x, y, tiles[i], attributes[i]))

    def render(self, offset: int, table: OamTable) -> None:
        """Copy every sprite into the table starting at an index, wrapping at 256."""
        for i, entry in enumerate(self._entries):
            table[(offset + i) & 0xFF] = dataclasses.replace(entry)

    def render_partial(self, offset: int, start: int, length: int, table: OamTable) -> None:
        """Copy ``length`` sprites from ``start`` (cycling through the list) into the table."""
        if length and not self._entries:
            raise ValueError("cannot render from an empty sprite list")
        for i in range(length):
            entry = self._entries[((start + i) & 0xFF) % len(self._entries)]
            table[(offset + i) & 0xFF] = dataclasses.replace(entry)

    def clear(self) -> None:
        self._entries.clear()


def test_list(x: int, y: int) -> SpriteList:
    """A 2x2 sample sprite centred on (x, y), one tile at each priority level."""
    sprites = SpriteList()
    base = TileAttributes()
    sprites.add_sprite_centered(
        x,
        y,
        2,
        2,
        [0x10, 0x11, 0x12, 0x13],
        [base.with_priority(priority) for priority in range(4)],
    )
    return sprites