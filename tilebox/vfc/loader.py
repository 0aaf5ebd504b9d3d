"""Loading tilesets from images: red channel selects the colour, alpha the transparency."""

from __future__ import annotations

import os

from PIL import Image

from .constants import NUM_PLANES, TILE_HEIGHT, TILE_PALETTE_SIZE, TILE_WIDTH
from .types import Tileset

_COLOUR_STEP = 256 // TILE_PALETTE_SIZE


def _colour_index(red: int, alpha: int) -> int:
    return 0 if alpha < 128 else red // _COLOUR_STEP


def tileset_from_image(image: Image.Image) -> Tileset:
    """Cut an image into 8x8 tiles and pack their colours into bit planes."""
    tileset = Tileset()
    rgba = image.convert("RGBA")
    width, height = rgba.size
    tile_columns = width // TILE_WIDTH
    tile_rows = height // TILE_HEIGHT

    for column in range(tile_columns):
        for row in range(tile_rows):
            tile_index = column + row * tile_rows
            tile_x = column * TILE_WIDTH
            tile_y = row * TILE_HEIGHT

            for pixel_y in range(TILE_HEIGHT):
                planes = [0] * NUM_PLANES
                for pixel_x in range(TILE_WIDTH):
                    red, _green, _blue, alpha = rgba.getpixel(
                        (tile_x + pixel_x, tile_y + pixel_y)
                    )
                    colour = _colour_index(red, alpha)
                    for plane_index in range(NUM_PLANES):
                        bit = (colour >> plane_index) & 1
                        planes[NUM_PLANES - 1 - plane_index] |= bit << pixel_x

                for plane_data, byte in zip(tileset.pixel_data, planes):
                    plane_data[tile_index][pixel_y] = byte

    return tileset


def load_tileset(path: str | os.PathLike[str]) -> Tileset:
    """Read an image file and build a tileset from it."""
    with Image.open(path) as image:
        return tileset_from_image(image)