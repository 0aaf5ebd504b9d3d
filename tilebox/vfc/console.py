"""The virtual console: sprite table, background layers, tileset, palette and renderer."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .constants import (
    NUM_BG_LAYERS,
    NUM_OBJECT_PRIORITY_LEVELS,
    NUM_PLANES,
    NUM_SCREEN_PIXELS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TILE_HEIGHT,
    TILE_SIZE,
    TILE_WIDTH,
    palette_index_range,
)
from .oam import OamTable
from .types import (
    BgLayer,
    Palette,
    PaletteIndex,
    RawPixel,
    Rgb,
    TileAttributes,
    TileIndex,
    Tileset,
    colorize_pixel,
)


class LayerKind(enum.Enum):
    """Where a rendered pixel came from."""

    BG_COLOR = enum.auto()
    BG_LAYER = enum.auto()
    OAM = enum.auto()


@dataclass(frozen=True)
class LayerHit:
    """The palette index found at a pixel, with its source and priority.

    ``index`` is the background layer number or the OAM index, depending on ``kind``.
    """

    kind: LayerKind
    hit: PaletteIndex
    priority: int
    index: int = 0


def test_palette() -> Palette:
    """A diagnostic palette whose colours encode their own index."""
    return Palette(
        Rgb.from_components((i % 16) * 16, (i // 16) * 16, i)
        for i in palette_index_range()
    )


def fb_pixel_index(x: int, y: int) -> int:
    """Index of a screen pixel in the framebuffer."""
    return x + SCREEN_WIDTH * y


class Console:
    """A tile-based virtual console with two background layers and 256 sprites."""

    def __init__(self) -> None:
        self.framebuffer: list[Rgb] = [Rgb() for _ in range(NUM_SCREEN_PIXELS)]
        self.oam = OamTable()
        self.oam_hidden = False
        self.palette = Palette()
        self.background_color: PaletteIndex = 0
        self.tileset = Tileset()
        self.bg_layers: list[BgLayer] = [BgLayer() for _ in range(NUM_BG_LAYERS)]

    def render_frame(self) -> None:
        """Render every scanline into the framebuffer."""
        for scanline in range(SCREEN_HEIGHT):
            self.render_scanline(self.objects_on_scanline(scanline), scanline)

    def render_scanline(self, object_list: list[int], y: int) -> None:
        for x in range(SCREEN_WIDTH):
            hit = self.top_pixel(object_list, x, y)
            self.framebuffer[fb_pixel_index(x, y)] = self.palette[hit.hit]

    def objects_on_scanline(self, scanline: int) -> list[int]:
        """OAM indices of every sprite that covers the scanline, in table order."""
        wrap_top = (0 - TILE_HEIGHT) & 0xFF
        found = []
        for index, entry in enumerate(self.oam):
            bottom = (entry.y + TILE_HEIGHT) & 0xFF
            if (scanline >= entry.y or entry.y > wrap_top) and scanline < bottom:
                found.append(index)
        return found

    def bg_layer_hit(self, x: int, y: int) -> LayerHit | None:
        """The first visible background layer with an opaque pixel at (x, y)."""
        for layer_index, layer in enumerate(self.bg_layers):
            if layer.hidden:
                continue
            relative_x = (x - layer.x) & 0xFF
            relative_y = (y - layer.y) & 0xFF
            tile_x, tile_pixel_x = divmod(relative_x, TILE_SIZE)
            tile_y, tile_pixel_y = divmod(relative_y, TILE_SIZE)

            pixel = self.tile_pixel(
                layer.tile_index_at(tile_x, tile_y), tile_pixel_x, tile_pixel_y
            )
            if pixel != 0:
                subpalette = layer.attribute_at(tile_x, tile_y).palette
                return LayerHit(
                    LayerKind.BG_LAYER,
                    colorize_pixel(subpalette, pixel),
                    layer_index,
                    layer_index,
                )
        return None

    def _oam_hit(self, object_list: list[int], x: int, y: int) -> LayerHit | None:
        if self.oam_hidden:
            return None
        for index in object_list:
            pixel = self.tile_pixel_global(index, x, y)
            if pixel != 0:
                attributes = self.oam[index].attributes
                return LayerHit(
                    LayerKind.OAM,
                    colorize_pixel(attributes.palette, pixel),
                    attributes.priority,
                    index,
                )
        return None

    def top_pixel(self, object_list: list[int], x: int, y: int) -> LayerHit:
        """The visible pixel at (x, y): sprites, then backgrounds, then the backdrop."""
        oam_hit = self._oam_hit(object_list, x, y)
        bg_hit = self.bg_layer_hit(x, y)

        for priority in reversed(range(NUM_OBJECT_PRIORITY_LEVELS)):
            if oam_hit is not None:
                if oam_hit.priority == priority:
                    return oam_hit
            elif bg_hit is not None and bg_hit.priority == priority:
                return bg_hit

        return LayerHit(LayerKind.BG_COLOR, self.background_color, 0)

    def tile_pixel_global(self, oam_index: int, screen_x: int, screen_y: int) -> RawPixel:
        """The raw pixel of a sprite at screen coordinates, or 0 outside it."""
        entry = self.oam[oam_index]
        local_x = (screen_x - entry.x) & 0xFF
        local_y = (screen_y - entry.y) & 0xFF
        return self.tile_pixel_rotated(entry.tile_index, entry.attributes, local_x, local_y)

    def _read_pixel(self, tile_index: TileIndex, x: int, y: int) -> RawPixel:
        pixel = 0
        for plane in self.tileset.pixel_data[:NUM_PLANES]:
            pixel = (pixel << 1) | ((plane[tile_index][y] >> x) & 1)
        return pixel

    def tile_pixel(self, tile_index: TileIndex, x: int, y: int) -> RawPixel:
        """The raw pixel of a tile at local coordinates; bit x of each row byte."""
        return self._read_pixel(tile_index, x, y)

    def tile_pixel_rotated(
        self, tile_index: TileIndex, attributes: TileAttributes, x: int, y: int
    ) -> RawPixel:
        """The raw pixel of a tile after applying the attributes' flips."""
        if not (0 <= x < TILE_WIDTH and 0 <= y < TILE_HEIGHT):
            return 0
        rotation = attributes.rotation
        if rotation & 1:
            x = TILE_WIDTH - 1 - x
        if (rotation >> 1) & 1:
            y = TILE_HEIGHT - 1 - y
        if (rotation >> 2) & 1:
            x, y = y, x
        return self._read_pixel(tile_index, x, y)

    def argb_frame(self) -> list[int]:
        """The framebuffer as packed 0xAARRGGBB values."""
        return [rgb.as_argb() for rgb in self.framebuffer]