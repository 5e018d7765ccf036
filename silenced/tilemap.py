"""Tile maps: the map file format, tile geometry and drawing."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import Iterator, NamedTuple, Optional, Union

import pygame

from .constants import MAX_TILE_ID, TILESET_TILE_SIZE_PIXELS, TILESET_WIDTH_TILES

log = logging.getLogger(__name__)

MAP_HEADER = b"MAP"
_WHITESPACE = frozenset(b" \t\n\v\f\r")

Point = tuple[int, int]


@dataclass(frozen=True)
class MapData:
    """A map's size in tiles and its tile IDs, row by row."""

    width: int
    height: int
    tiles: tuple[int, ...]

    def __post_init__(self) -> None:
        for name, size in (("width", self.width), ("height", self.height)):
            if not 0 <= size <= MAX_TILE_ID:
                raise ValueError(f"map {name} must be between 0 and {MAX_TILE_ID}: {size}")
        if len(self.tiles) != self.width * self.height:
            raise ValueError(
                f"a {self.width}x{self.height} map needs {self.width * self.height} tiles, "
                f"got {len(self.tiles)}"
            )
        if any(not 0 <= tile <= MAX_TILE_ID for tile in self.tiles):
            raise ValueError(f"tile ids must be between 0 and {MAX_TILE_ID}")

    def tile_at(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"tile ({x}, {y}) is outside the map")
        return self.tiles[y * self.width + x]


class Quad(NamedTuple):
    """Screen and texture corners of one tile: top-left, top-right, bottom-right, bottom-left."""

    positions: tuple[Point, Point, Point, Point]
    tex_coords: tuple[Point, Point, Point, Point]


def _next_non_space(stream: Iterator[int]) -> Optional[int]:
    return next((byte for byte in stream if byte not in _WHITESPACE), None)


def parse_map(data: bytes) -> MapData:
    """Parse map file contents.

    The header characters and the width and height bytes may each be
    preceded by whitespace; the tile bytes that follow are read raw.
    """
    stream = iter(data)
    for expected in MAP_HEADER:
        if _next_non_space(stream) != expected:
            raise ValueError("Invalid map file provided")

    width = _next_non_space(stream)
    height = _next_non_space(stream)
    if width is None or height is None:
        raise ValueError("Invalid map file provided: missing width or height")

    count = width * height
    tiles = tuple(islice(stream, count))
    if len(tiles) < count:
        raise ValueError(f"Map file ends after {len(tiles)} of {count} tiles")
    log.info("Map is %d by %d tiles", width, height)
    return MapData(width, height, tiles)


def read_map(path: Union[str, Path]) -> MapData:
    """Read and parse a map file."""
    path = Path(path)
    log.info("Loading map %s", path)
    return parse_map(path.read_bytes())


def _corners(column: int, row: int) -> tuple[Point, Point, Point, Point]:
    size = TILESET_TILE_SIZE_PIXELS
    left, top = column * size, row * size
    right, bottom = left + size, top + size
    return ((left, top), (right, top), (right, bottom), (left, bottom))


def build_quads(map_data: MapData) -> list[Quad]:
    """Return one quad per tile, in map order."""
    quads = []
    for index, tile_id in enumerate(map_data.tiles):
        y, x = divmod(index, map_data.width)
        v, u = divmod(tile_id, TILESET_WIDTH_TILES)
        quads.append(Quad(_corners(x, y), _corners(u, v)))
    return quads


class TileMap:
    """A map drawn from a tileset surface."""

    def __init__(
        self,
        map_data: MapData,
        tileset: pygame.Surface,
        position: tuple[float, float] = (0.0, 0.0),
    ) -> None:
        self.map_data = map_data
        self.tileset = tileset
        self.position = position
        self.quads = build_quads(map_data)

    @classmethod
    def from_file(cls, path: Union[str, Path], tileset: pygame.Surface) -> TileMap:
        return cls(read_map(path), tileset)

    @property
    def pixel_size(self) -> tuple[int, int]:
        size = TILESET_TILE_SIZE_PIXELS
        return (self.map_data.width * size, self.map_data.height * size)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every tile onto ``surface`` at the map's position."""
        offset_x, offset_y = self.position
        size = TILESET_TILE_SIZE_PIXELS
        for quad in self.quads:
            x, y = quad.positions[0]
            u, v = quad.tex_coords[0]
            surface.blit(
                self.tileset,
                (round(offset_x + x), round(offset_y + y)),
                pygame.Rect(u, v, size, size),
            )