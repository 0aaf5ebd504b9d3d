"""Playfield layout, tile numbers and helpers for reading and writing background layers."""

from __future__ import annotations

from ..vfc.console import Console
from ..vfc.constants import BG_HEIGHT, BG_WIDTH

FIELD_CLEAR_COLOR = 0

FIELD_X = 7
FIELD_Y = 21
FIELD_WIDTH = 10
FIELD_HEIGHT = 31
CEILING_HEIGHT = FIELD_HEIGHT // 2
TOP_VISIBLE_ROW = CEILING_HEIGHT - 3
SCORE_Y = FIELD_Y + TOP_VISIBLE_ROW - 1

TILE_EMPTY = 0x00
TILE_CEILING = 0x01
TILE_WALL = 0x7F
TILE_BLOCK = 0x80
TILE_SHADOW_OFFSET = 0x04
TILE_PIECE_ICON = 0x08
TILE_ROW_CLEAR = 0x18
TILE_GAME_OVER_BLOCK = 0x20

TILE_BLOCKS = (0x80, 0x84, 0x88, 0x8C, 0xC4, 0xC4, 0xC8, 0xC8)

GAME_LAYER = 0
MENU_LAYER = 1


def _cell(x: int, y: int) -> int:
    return (y % BG_HEIGHT) * BG_WIDTH + x % BG_WIDTH


def poke_bg(console: Console, bg: int, x: int, y: int, tile: int) -> None:
    """Write a tile on a background layer; coordinates wrap around the layer."""
    console.bg_layers[bg].tiles[_cell(x, y)] = tile


def poke_game_layer(console: Console, x: int, y: int, tile: int) -> None:
    poke_bg(console, GAME_LAYER, x, y, tile)


def peek_game_layer(console: Console, x: int, y: int) -> int:
    return console.bg_layers[GAME_LAYER].tiles[_cell(x, y)]


def poke_menu_layer(console: Console, x: int, y: int, tile: int) -> None:
    poke_bg(console, MENU_LAYER, x, y, tile)


def poke_game_layer_palette(console: Console, x: int, y: int, subpalette: int) -> None:
    poke_bg_palette(console, GAME_LAYER, x, y, subpalette)


def peek_game_layer_palette(console: Console, x: int, y: int) -> int:
    return peek_bg_palette(console, GAME_LAYER, x, y)


def poke_bg_rotation(console: Console, bg: int, x: int, y: int, rotation: int) -> None:
    attributes = console.bg_layers[bg].attributes
    i = _cell(x, y)
    attributes[i] = attributes[i].with_rotation(rotation)


def poke_bg_palette(console: Console, bg: int, x: int, y: int, subpalette: int) -> None:
    attributes = console.bg_layers[bg].attributes
    i = _cell(x, y)
    attributes[i] = attributes[i].with_palette(subpalette)


def peek_bg_palette(console: Console, bg: int, x: int, y: int) -> int:
    return console.bg_layers[bg].attributes[_cell(x, y)].palette


def draw_text(console: Console, bg: int, x: int, y: int, text: str) -> None:
    """Write printable ASCII text as font tiles, one tile per character."""
    encoded = text.encode("utf-8")
    for byte in encoded:
        if not 32 <= byte < 128:
            raise ValueError(f"cannot draw byte {byte:#04x} in {text!r}")
    for offset, byte in enumerate(encoded):
        poke_bg(console, bg, x + offset, y, byte + 32)


def init_playfield(console: Console) -> None:
    """Draw the walls and floor and clear the field."""
    left_x = FIELD_X - 1
    right_x = FIELD_X + FIELD_WIDTH
    for yi in range(FIELD_HEIGHT + 1):
        y = FIELD_Y + yi
        for x in (left_x, right_x):
            poke_game_layer(console, x, y, TILE_WALL)
            poke_bg_palette(console, GAME_LAYER, x, y, FIELD_CLEAR_COLOR)

    clear_playfield(console)

    for xi in range(FIELD_WIDTH):
        poke_game_layer(console, FIELD_X + xi, FIELD_Y + FIELD_HEIGHT, TILE_WALL)


def clear_playfield(console: Console) -> None:
    """Empty every field cell and redraw the ceiling line."""
    for yi in range(FIELD_HEIGHT):
        for xi in range(FIELD_WIDTH):
            x, y = FIELD_X + xi, FIELD_Y + yi
            poke_bg(console, GAME_LAYER, x, y, TILE_EMPTY)
            poke_game_layer_palette(console, x, y, FIELD_CLEAR_COLOR)
            poke_bg_rotation(console, GAME_LAYER, x, y, (xi + yi) % 8)

    for xi in range(FIELD_WIDTH):
        x = FIELD_X + xi
        poke_bg(console, GAME_LAYER, x, FIELD_Y + CEILING_HEIGHT, TILE_CEILING)
        poke_game_layer_palette(console, x, FIELD_Y + CEILING_HEIGHT, FIELD_CLEAR_COLOR)
        poke_bg(console, MENU_LAYER, x, FIELD_Y + TOP_VISIBLE_ROW, TILE_EMPTY)


def clear_text_layer(console: Console) -> None:
    """Blank the menu layer over the field and a one-tile border around it."""
    for yi in range(-1, FIELD_HEIGHT + 1):
        for xi in range(-1, FIELD_WIDTH + 1):
            poke_bg(
                console,
                MENU_LAYER,
                (FIELD_X + xi) % BG_WIDTH,
                (FIELD_Y + yi) % BG_HEIGHT,
                TILE_EMPTY,
            )