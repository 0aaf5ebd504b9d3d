"""Fixed dimensions of the virtual console: screen, tiles, sprites, layers and palette."""

# screen
SCREEN_WIDTH = 192
SCREEN_HEIGHT = 160
NUM_SCREEN_PIXELS = SCREEN_WIDTH * SCREEN_HEIGHT

# tiles
TILE_SIZE = 8
TILE_WIDTH = TILE_SIZE
TILE_HEIGHT = TILE_SIZE
NUM_PLANES = 3
BYTES_PER_TILE_PLANE = TILE_WIDTH * TILE_HEIGHT // 8
TILE_INDEX_BITS = 8
NUM_TILES = 2**TILE_INDEX_BITS

# object attribute memory
NUM_OAM_ENTRIES = 256
OBJECTS_PER_LINE = 16

# background layers
NUM_BG_LAYERS = 2
BG_SIZE = 32
BG_WIDTH = BG_SIZE
BG_HEIGHT = BG_SIZE
NUM_BG_TILES = BG_WIDTH * BG_HEIGHT
NUM_BG_PRIORITY_LEVELS = 2

# palette and priorities
NUM_PALETTE_ENTRIES = 64
TILE_PALETTE_SIZE = 2**NUM_PLANES
NUM_OBJECT_PRIORITY_LEVELS = 4
SUBPALETTE_SIZE = 8


def palette_index_range() -> range:
    """Return the range of valid indices into a palette."""
    return range(NUM_PALETTE_ENTRIES)