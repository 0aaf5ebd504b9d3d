"""The game's colours: a background subpalette followed by one subpalette per tetromino."""

from __future__ import annotations

from ..vfc.constants import NUM_PALETTE_ENTRIES
from ..vfc.types import Palette, Rgb

_WHITE = (0xEE, 0xEE, 0xDD)
_BLACK = (0x00, 0x11, 0x11)
_UNUSED = (0x00, 0x00, 0x00)
_PLACEHOLDER = (0x99, 0x00, 0x99)


def _piece_subpalette(dark: tuple[int, int, int], light: tuple[int, int, int]):
    return [_UNUSED, _BLACK, dark, light, _PLACEHOLDER, _PLACEHOLDER, _PLACEHOLDER, _WHITE]


_COLOURS: tuple[tuple[int, int, int], ...] = tuple(
    [
        # background
        _WHITE,
        _BLACK,
        (0x55, 0x66, 0x66),  # dull teal
        (0x77, 0x88, 0x44),  # moss green
        _PLACEHOLDER,
        _PLACEHOLDER,
        _PLACEHOLDER,
        (0xBB, 0xBB, 0x88),  # tan
    ]
    + _piece_subpalette((0xDD, 0x99, 0x44), (0xEE, 0xEE, 0x77))  # O
    + _piece_subpalette((0x77, 0x99, 0xEE), (0xBB, 0xDD, 0xCC))  # I
    + _piece_subpalette((0x88, 0x66, 0x88), (0xBB, 0x99, 0xAA))  # T
    + _piece_subpalette((0x44, 0x44, 0x88), (0x77, 0x99, 0xEE))  # J
    + _piece_subpalette((0x88, 0x66, 0x44), (0xDD, 0x99, 0x44))  # L
    + _piece_subpalette((0xCC, 0x44, 0x33), (0xEE, 0xBB, 0xAA))  # S
    + _piece_subpalette((0x77, 0x88, 0x44), (0x99, 0xDD, 0x55))  # Z
)


def palette_colors() -> list[Rgb]:
    """Every palette entry, padded with the default colour where the game defines none."""
    colours = [Rgb.from_components(*rgb) for rgb in _COLOURS[:NUM_PALETTE_ENTRIES]]
    colours.extend(Rgb() for _ in range(NUM_PALETTE_ENTRIES - len(colours)))
    return colours


def build_palette() -> Palette:
    return Palette(palette_colors())