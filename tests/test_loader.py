import pytest
from PIL import Image

from tilebox.vfc.console import Console
from tilebox.vfc.constants import TILE_HEIGHT, TILE_PALETTE_SIZE, TILE_WIDTH
from tilebox.vfc.loader import load_tileset, tileset_from_image

STEP = 256 // TILE_PALETTE_SIZE


def _gradient_tile_image(columns=1, rows=1):
    image = Image.new("RGBA", (TILE_WIDTH * columns, TILE_HEIGHT * rows), (0, 0, 0, 255))
    for y in range(TILE_HEIGHT):
        for x in range(TILE_WIDTH):
            image.putpixel((x, y), (x * STEP, 0, 0, 255))
    return image


def _console_with(tileset):
    console = Console()
    console.tileset = tileset
    return console


def test_colours_round_trip():
    console = _console_with(tileset_from_image(_gradient_tile_image()))
    for y in range(TILE_HEIGHT):
        assert [console.tile_pixel(0, x, y) for x in range(TILE_WIDTH)] == list(
            range(TILE_PALETTE_SIZE)
        )


def test_transparent_pixels_are_zero():
    image = Image.new("RGBA", (TILE_WIDTH, TILE_HEIGHT), (255, 255, 255, 0))
    console = _console_with(tileset_from_image(image))
    assert all(
        console.tile_pixel(0, x, y) == 0
        for x in range(TILE_WIDTH)
        for y in range(TILE_HEIGHT)
    )


def test_opaque_white_is_highest_colour():
    image = Image.new("RGBA", (TILE_WIDTH, TILE_HEIGHT), (255, 255, 255, 255))
    console = _console_with(tileset_from_image(image))
    assert console.tile_pixel(0, 3, 3) == TILE_PALETTE_SIZE - 1


def test_square_sheet_layout():
    image = Image.new("RGBA", (TILE_WIDTH * 2, TILE_HEIGHT * 2), (0, 0, 0, 0))
    for y in range(TILE_HEIGHT, 2 * TILE_HEIGHT):
        for x in range(TILE_WIDTH, 2 * TILE_WIDTH):
            image.putpixel((x, y), (255, 0, 0, 255))
    console = _console_with(tileset_from_image(image))
    assert console.tile_pixel(3, 0, 0) == TILE_PALETTE_SIZE - 1
    assert all(console.tile_pixel(i, 0, 0) == 0 for i in (0, 1, 2))


def test_partial_tiles_are_ignored():
    image = Image.new("RGBA", (TILE_WIDTH - 1, TILE_HEIGHT), (255, 0, 0, 255))
    console = _console_with(tileset_from_image(image))
    assert console.tile_pixel(0, 0, 0) == 0


def test_load_from_file(tmp_path):
    path = tmp_path / "tiles.png"
    _gradient_tile_image().save(path)
    console = _console_with(load_tileset(path))
    assert console.tile_pixel(0, 5, 2) == 5


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_tileset(tmp_path / "absent.png")