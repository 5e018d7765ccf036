# silenced

A small tile-based 2D role-playing game engine built on pygame. It loads
tileset and character textures from an asset directory, draws tile maps read
from `.map` files, moves a keyboard-controlled player across them, and switches
between scenes: a title menu and a level.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the game

```
silenced --asset-dir /path/to/assets --framerate 30
```

Options:

- `--asset-dir` (aliases `--assetdir`, `--assets`): the root asset directory,
  by default `/workspace/silenced-engine/SilencedAssets/`. It must hold
  `Graphics/Tilesets/`, `Graphics/Titles1/`, `Graphics/Characters/` and
  `Fonts/`.
- `--framerate`: the frame rate limit (default `30`; `0` means no limit).
- `--help` / `-h` prints the usage line; `--version` / `-v` prints the version.

Options can also be written as `--framerate=60`. On a bad command line, a
missing asset or an unusable framerate the command prints `Error: ...` to
standard error and exits with status 1.

The window is 544 by 416 pixels. The title screen shows
`Graphics/Titles1/00.png`; press Enter to start the level. The level draws
the map at `/workspace/silenced-engine/TestMap2.map` with tileset
`Graphics/Tilesets/00.png`, a standing entity from `Graphics/Characters/22.png`
and a player from `Graphics/Characters/00.png`. Move the player with the
arrow keys at 32 pixels per second. Closing the window ends the program.

## Modules

- `silenced.args` — `ArgParser`, a command-line parser with flags, options
  with fallbacks, whitespace-separated aliases and sub-commands; errors raise
  `ArgError`.
- `silenced.assets` — `load_texture`, `load_font` (returns a `FontFile`),
  and `AssetCache`; load failures raise `AssetLoadError`.
- `silenced.tilemap` — `parse_map`, `read_map`, `build_quads`, `MapData`,
  `Quad` and the drawable `TileMap`.
- `silenced.entity` — `Entity` (one cell of a character atlas) and `Player`.
- `silenced.animation` — `Frame` and the looping `AnimationNode`.
- `silenced.datafiles` — `DataFile`, a binary file opened after its text
  header has been checked; usable as a context manager.
- `silenced.gui` — `GuiCanvas` of static text items with `TextStyle` flags.
- `silenced.engine` — the abstract `Scene` and `GameEngine`, which owns the
  window and calls the current scene once per frame.
- `silenced.scenes` — `MainMenu` and `Level`.
- `silenced.constants` — tile and sprite sizes, `atlas_rect` and
  `tileset_rect`.

## Asset loading

Given a priority prefix, an asset cache loads files whose names begin with it
when it is created and everything else on first request; without one it
loads every file up front:

```python
from silenced.assets import AssetCache, load_texture

cache = AssetCache("assets/Graphics/Characters", load_texture, priority_prefix="_")
texture = cache.get("00.png")       # raises AssetLoadError if it cannot be loaded
maybe = cache.find("missing.png")   # returns None instead
"00.png" in cache                   # True once loaded
```

## Map files

A map file starts with the characters `MAP`, then one byte for the width and
one byte for the height in tiles (whitespace before each of these five bytes
is skipped), then one raw byte per tile, row by row, giving the tile's index
in the tileset (8 tiles wide, 32 pixels square):

```python
from silenced.tilemap import read_map, build_quads

map_data = read_map("TestMap2.map")
map_data.tile_at(0, 0)
quads = build_quads(map_data)       # one Quad per tile, in map order
```

## Command-line parsing

```python
from silenced.args import ArgParser

parser = ArgParser(helptext="Usage: ...", version="0.1")
parser.option("framerate", "30")
parser.flag("quiet q")
parser.parse(["--framerate", "60", "-q"])
parser.value("framerate")   # "60"
parser.found("quiet")       # True
print(parser.dump())
```

## What it does not do

The game itself is fixed: the map path is not an option, and the fonts,
`GuiCanvas`, `AnimationNode` and `DataFile` are not used by the title menu or
the level. There is no collision, no saving, and no way to load entities from
data files.