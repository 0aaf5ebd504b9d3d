"""Colours, palettes, tile attributes, tile data and background layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

from .constants import (
    BG_WIDTH,
    BYTES_PER_TILE_PLANE,
    NUM_BG_TILES,
    NUM_PALETTE_ENTRIES,
    NUM_PLANES,
    NUM_TILES,
    SUBPALETTE_SIZE,
    TILE_HEIGHT,
    TILE_WIDTH,
)

# Small integer quantities used throughout the console.
TileIndex = int
PaletteIndex = int
Subpalette = int
RawPixel = int


def _require_u8(value: int, name: str) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be in 0..=255, got {value}")
    return value


@dataclass(frozen=True)
class Rgb:
    """An opaque colour stored as a packed 0xAARRGGBB value."""

    argb: int = 0

    @classmethod
    def from_components(cls, r: int, g: int, b: int) -> Rgb:
        _require_u8(r, "r")
        _require_u8(g, "g")
        _require_u8(b, "b")
        return cls(0xFF000000 | (r << 16) | (g << 8) | b)

    @classmethod
    def from_argb(cls, argb: int) -> Rgb:
        """Build a colour from the three most significant bytes of a packed value."""
        first, second, third, _ = argb.to_bytes(4, "big")
        return cls.from_components(first, second, third)

    def as_argb(self) -> int:
        return self.argb


class Palette:
    """A fixed-size table of colours addressed by palette index."""

    __slots__ = ("_colors",)

    def __init__(self, colors: Iterable[Rgb] | None = None) -> None:
        if colors is None:
            self._colors = [Rgb() for _ in range(NUM_PALETTE_ENTRIES)]
            return
        listed = list(colors)
        if len(listed) != NUM_PALETTE_ENTRIES:
            raise ValueError(
                f"a palette holds {NUM_PALETTE_ENTRIES} colours, got {len(listed)}"
            )
        self._colors = listed

    def _check(self, index: int) -> None:
        if not 0 <= index < NUM_PALETTE_ENTRIES:
            raise IndexError(f"palette index {index} out of range")

    def __getitem__(self, index: int) -> Rgb:
        self._check(index)
        return self._colors[index]

    def __setitem__(self, index: int, value: Rgb) -> None:
        self._check(index)
        self._colors[index] = value

    def __len__(self) -> int:
        return NUM_PALETTE_ENTRIES

    def __iter__(self) -> Iterator[Rgb]:
        return iter(self._colors)


def colorize_pixel(subpalette: Subpalette, pixel: RawPixel) -> PaletteIndex:
    """Map a raw tile pixel into the palette through a subpalette."""
    return (subpalette * SUBPALETTE_SIZE + pixel) & 0xFF


@dataclass(frozen=True)
class TileAttributes:
    """Packed per-tile flags: palette (bits 0-2), rotation (3-5), priority (6-7)."""

    bits: int = 0

    @classmethod
    def oam_default(cls) -> TileAttributes:
        return cls().with_priority(1)

    def with_palette(self, subpalette: Subpalette) -> TileAttributes:
        return TileAttributes((self.bits & 0b11_111_000) | (subpalette & 0b111))

    def with_rotation(self, rotation: int) -> TileAttributes:
        return TileAttributes((self.bits & 0b11_000_111) | ((rotation & 0b111) << 3))

    def with_priority(self, priority: int) -> TileAttributes:
        return TileAttributes((self.bits & 0b00_111_111) | ((priority & 0b11) << 6))

    @property
    def palette(self) -> Subpalette:
        return self.bits & 0b111

    @property
    def rotation(self) -> int:
        return (self.bits >> 3) & 0b111

    @property
    def flip_x(self) -> bool:
        return bool((self.bits >> 3) & 1)

    @property
    def flip_y(self) -> bool:
        return bool((self.bits >> 4) & 1)

    @property
    def flip_diagonal(self) -> bool:
        return bool((self.bits >> 5) & 1)

    @property
    def priority(self) -> int:
        return (self.bits >> 6) & 0b11


@dataclass(frozen=True)
class Tile:
    """The bit planes of one tile, one byte per pixel row in each plane."""

    planes: tuple[bytes, ...]

    def get_pixel(self, pixel_x: int, pixel_y: int) -> RawPixel:
        """Return the raw pixel at local coordinates, reading each row from its high bit."""
        column = TILE_WIDTH - 1 - (pixel_x % TILE_WIDTH)
        row = pixel_y % TILE_HEIGHT
        pixel = 0
        for plane in self.planes:
            pixel = (pixel << 1) | ((plane[row] >> column) & 1)
        return pixel


class Tileset:
    """Pixel data for every tile, stored as pixel_data[plane][tile][row]."""

    def __init__(self) -> None:
        self.pixel_data: list[list[bytearray]] = [
            [bytearray(BYTES_PER_TILE_PLANE) for _ in range(NUM_TILES)]
            for _ in range(NUM_PLANES)
        ]

    def write_tile(self, tile_index: TileIndex, tile: Sequence[Sequence[int]]) -> None:
        if len(tile) != NUM_PLANES:
            raise ValueError(f"a tile has {NUM_PLANES} planes, got {len(tile)}")
        for plane in tile:
            if len(plane) != BYTES_PER_TILE_PLANE:
                raise ValueError(
                    f"a tile plane has {BYTES_PER_TILE_PLANE} bytes, got {len(plane)}"
                )
        for plane_data, plane in zip(self.pixel_data, tile):
            plane_data[tile_index] = bytearray(plane)

    def tile(self, tile_index: TileIndex) -> Tile:
        return Tile(tuple(bytes(plane_data[tile_index]) for plane_data in self.pixel_data))


@dataclass
class BgLayer:
    """A scrollable grid of tiles with per-tile attributes."""

    x: int = 0
    y: int = 0
    tiles: list[TileIndex] = field(default_factory=lambda: [0] * NUM_BG_TILES)
    attributes: list[TileAttributes] = field(
        default_factory=lambda: [TileAttributes() for _ in range(NUM_BG_TILES)]
    )
    hidden: bool = False

    @staticmethod
    def _index(tile_x: int, tile_y: int) -> int:
        index = tile_x + tile_y * BG_WIDTH
        if tile_x < 0 or tile_y < 0 or index >= NUM_BG_TILES:
            raise IndexError(f"tile ({tile_x}, {tile_y}) is outside the layer")
        return index

    def tile_index_at(self, tile_x: int, tile_y: int) -> TileIndex:
        return self.tiles[self._index(tile_x, tile_y)]

    def attribute_at(self, tile_x: int, tile_y: int) -> TileAttributes:
        return self.attributes[self._index(tile_x, tile_y)]