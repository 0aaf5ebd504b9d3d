import pytest

from tilebox.vfc.constants import (
    BG_HEIGHT,
    BG_WIDTH,
    BYTES_PER_TILE_PLANE,
    NUM_BG_TILES,
    NUM_PALETTE_ENTRIES,
    NUM_PLANES,
    SUBPALETTE_SIZE,
    TILE_PALETTE_SIZE,
    TILE_WIDTH,
)
from tilebox.vfc.types import (
    BgLayer,
    Palette,
    Rgb,
    Tile,
    TileAttributes,
    Tileset,
    colorize_pixel,
)


def test_rgb_packs_opaque_argb():
    assert Rgb.from_components(0xEE, 0xEE, 0xDD).as_argb() == 0xFFEEEEDD


def test_rgb_default_is_zero():
    assert Rgb().as_argb() == 0


def test_rgb_from_argb_reads_leading_bytes():
    colour = Rgb.from_components(0x12, 0x34, 0x56)
    assert Rgb.from_argb(colour.as_argb()) == Rgb.from_components(0xFF, 0x12, 0x34)


def test_rgb_rejects_out_of_range_component():
    with pytest.raises(ValueError):
        Rgb.from_components(256, 0, 0)


def test_palette_default_and_roundtrip():
    palette = Palette()
    assert len(palette) == NUM_PALETTE_ENTRIES
    assert all(colour == Rgb() for colour in palette)
    colour = Rgb.from_components(0x77, 0x88, 0x44)
    palette[NUM_PALETTE_ENTRIES - 1] = colour
    assert palette[NUM_PALETTE_ENTRIES - 1] == colour


def test_palette_rejects_wrong_length_and_bad_index():
    with pytest.raises(ValueError):
        Palette([Rgb()] * (NUM_PALETTE_ENTRIES - 1))
    palette = Palette()
    with pytest.raises(IndexError):
        palette[NUM_PALETTE_ENTRIES]
    with pytest.raises(IndexError):
        palette[-1]


def test_colorize_pixel():
    assert colorize_pixel(0, 5) == 5
    assert colorize_pixel(1, 0) == SUBPALETTE_SIZE
    assert colorize_pixel(256 // SUBPALETTE_SIZE, 0) == 0


def test_tile_attribute_fields_are_independent():
    attrs = TileAttributes().with_palette(5).with_rotation(6).with_priority(3)
    assert attrs.palette == 5
    assert attrs.rotation == 6
    assert attrs.priority == 3
    changed = attrs.with_palette(2)
    assert changed.palette == 2
    assert changed.rotation == 6
    assert changed.priority == 3


def test_tile_attribute_values_are_masked():
    attrs = TileAttributes().with_rotation(9)
    assert attrs.rotation == 1
    assert attrs.palette == 0
    assert attrs.priority == 0


def test_tile_attribute_flip_bits():
    assert TileAttributes().with_rotation(1).flip_x
    assert not TileAttributes().with_rotation(1).flip_y
    assert TileAttributes().with_rotation(2).flip_y
    assert TileAttributes().with_rotation(4).flip_diagonal
    assert not TileAttributes().with_rotation(3).flip_diagonal


def test_oam_default_attributes():
    attrs = TileAttributes.oam_default()
    assert attrs.priority == 1
    assert attrs.palette == 0
    assert attrs.rotation == 0


def test_tile_get_pixel_reads_high_bit_first():
    row = bytes([0x01] + [0] * (BYTES_PER_TILE_PLANE - 1))
    tile = Tile(tuple(row for _ in range(NUM_PLANES)))
    assert tile.get_pixel(TILE_WIDTH - 1, 0) == TILE_PALETTE_SIZE - 1
    assert tile.get_pixel(0, 0) == 0
    assert tile.get_pixel(TILE_WIDTH - 1, 1) == 0
    assert tile.get_pixel(2 * TILE_WIDTH - 1, 0) == TILE_PALETTE_SIZE - 1


def test_tileset_write_and_read_tile():
    tileset = Tileset()
    planes = [bytes(range(p, p + BYTES_PER_TILE_PLANE)) for p in range(NUM_PLANES)]
    tileset.write_tile(7, planes)
    assert tileset.tile(7).planes == tuple(planes)
    assert tileset.tile(6).planes == tuple(bytes(BYTES_PER_TILE_PLANE) for _ in range(NUM_PLANES))


def test_tileset_rejects_malformed_tile():
    tileset = Tileset()
    with pytest.raises(ValueError):
        tileset.write_tile(0, [bytes(BYTES_PER_TILE_PLANE)] * (NUM_PLANES - 1))
    with pytest.raises(ValueError):
        tileset.write_tile(0, [bytes(BYTES_PER_TILE_PLANE - 1)] * NUM_PLANES)


def test_bg_layer_lookup_is_row_major():
    layer = BgLayer(tiles=[i % 256 for i in range(NUM_BG_TILES)])
    assert layer.tile_index_at(1, 0) == 1
    assert layer.tile_index_at(0, 1) == BG_WIDTH
    marked = TileAttributes().with_palette(4)
    layer.attributes[BG_WIDTH] = marked
    assert layer.attribute_at(0, 1) == marked


def test_bg_layer_rejects_outside_coordinates():
    layer = BgLayer()
    with pytest.raises(IndexError):
        layer.tile_index_at(0, BG_HEIGHT)
    with pytest.raises(IndexError):
        layer.attribute_at(-1, 0)