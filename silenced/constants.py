"""Fixed sizes of tilesets and sprite atlases, and tile-index lookups."""

from typing import NamedTuple

# Tilesets use 32x32 tiles laid out 8 tiles wide by 16 tiles high.
TILESET_TILE_SIZE_PIXELS = 32
TILESET_WIDTH_TILES = 8
TILESET_HEIGHT_TILES = 16

# Character sprite atlases use 64x64 sprites laid out 12 wide by 8 high.
SPRITE_ATLAS_SPRITE_SIZE_PIXELS = 64
SPRITE_ATLAS_WIDTH_SPRITES = 12
SPRITE_ATLAS_HEIGHT_SPRITES = 8

# Map files store tile IDs as single bytes.
MAX_TILE_ID = 0xFF


class Rect(NamedTuple):
    """An integer rectangle in pixels."""

    left: int
    top: int
    width: int
    height: int


def atlas_rect(tile_index: int) -> Rect:
    """Return the texture rectangle of a sprite in a character atlas."""
    if tile_index < 0:
        raise ValueError(f"sprite atlas index must not be negative: {tile_index}")
    row, column = divmod(tile_index, SPRITE_ATLAS_WIDTH_SPRITES)
    size = SPRITE_ATLAS_SPRITE_SIZE_PIXELS
    return Rect(column * size, row * size, size, size)


def tileset_rect(tile_id: int) -> Rect:
    """Return the texture rectangle of a tile in a tileset."""
    if not 0 <= tile_id <= MAX_TILE_ID:
        raise ValueError(f"tile id must be between 0 and {MAX_TILE_ID}: {tile_id}")
    row, column = divmod(tile_id, TILESET_WIDTH_TILES)
    size = TILESET_TILE_SIZE_PIXELS
    return Rect(column * size, row * size, size, size)