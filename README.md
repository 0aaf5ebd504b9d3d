# tilebox

tilebox is a tiny tile-and-sprite fantasy console written in plain Python,
together with building blocks for games that run on it.

## What is in it

- `tilebox.vfc` — the console.
  - `constants`: a 192×160 screen, 8×8 tiles with 3 bit planes (8 colours
    per tile), 256 tiles, 256 sprites, two 32×32 background layers and a
    64-entry palette split into 8-colour subpalettes.
  - `types`: `Rgb`, `Palette`, `TileAttributes` (packed subpalette, rotation
    and priority bits), `Tile`, `Tileset` and `BgLayer`, plus
    `colorize_pixel`.
  - `oam`: `OamEntry` and `OamTable`, the sprite table.
  - `console`: `Console`, which holds the sprite table, background layers,
    tileset and palette and renders them scanline by scanline into a
    framebuffer; `argb_frame()` returns it as packed `0xAARRGGBB` values.
    `test_palette()` builds a diagnostic palette.
  - `loader`: `load_tileset(path)` and `tileset_from_image(image)` cut an
    image into 8×8 tiles. A pixel whose alpha is below 128 is transparent;
    otherwise its red channel divided by 32 gives its colour number.
- `tilebox.prng.Prng` — a xoroshiro32++ generator: an endless iterator of
  16-bit values seeded with two 16-bit words.
- `tilebox.sayre` — fixed-point numbers (`I8p8`, `U8p8`, `U16p16`,
  `I16p16`), an immutable `Vector` with element-wise and scalar arithmetic,
  and `SpriteList`, which lays out groups of sprites and copies them into an
  `OamTable`.
- `tilebox.quadrantal` — pieces of a falling-block puzzle game:
  - `playfield`: the field's position and size, its tile numbers, helpers
    to read and write tiles and subpalettes on the background layers,
    `draw_text`, and `init_playfield`, `clear_playfield` and
    `clear_text_layer`.
  - `palette`: the game's colours, `palette_colors()` and `build_palette()`.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Example

```python
from tilebox.vfc.console import Console
from tilebox.vfc.loader import load_tileset
from tilebox.quadrantal.palette import build_palette
from tilebox.quadrantal.playfield import draw_text, init_playfield

console = Console()
console.palette = build_palette()
console.tileset = load_tileset("tiles.png")

init_playfield(console)
draw_text(console, 1, 6, 32, "SCORE")

console.render_frame()
pixels = console.argb_frame()  # one 0xAARRGGBB value per screen pixel
```

Sprites are placed through the sprite table:

```python
from tilebox.sayre.sprite import test_list

test_list(96, 80).render(0, console.oam)
```

And the helpers stand on their own:

```python
from tilebox.prng import Prng
from tilebox.sayre.fixed_point import I8p8
from tilebox.sayre.vector import Vector

next(Prng([1, 0]))                 # 0x0201
I8p8.from_float(0.5).raw           # 128
Vector(3.0, 4.0).mag()             # 5.0
```

## What it does not do

tilebox has no window and no command to run. It renders frames into a list
of colour values; showing them on screen is left to the caller.

The puzzle game is not playable from this package: it holds the playfield
layout, drawing helpers and palette, but no pieces, movement, rotation,
line clearing, scoring or game loop.