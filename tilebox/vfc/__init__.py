"""The tile console: palettes, tilesets, background layers, sprites, rendering and tileset loading."""