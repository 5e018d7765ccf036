"""Command-line entry point that opens the game window."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

from .args import ArgError, ArgParser
from .assets import AssetCache, AssetLoadError, load_font, load_texture
from .engine import GameEngine
from .scenes import Level, MainMenu

HELPTEXT = 'Usage: <executable name> [--asset-dir="..."] [--framerate <number>] ...'
VERSION = "0.1"
DEFAULT_ASSET_DIR = "/workspace/silenced-engine/SilencedAssets/"
DEFAULT_FRAMERATE = "30"

WINDOW_TITLE = "Engine"
WINDOW_WIDTH = 544
WINDOW_HEIGHT = 416


def build_parser() -> ArgParser:
    """Return the parser for the game's command line."""
    parser = ArgParser(helptext=HELPTEXT, version=VERSION)
    parser.option("asset-dir assetdir assets", DEFAULT_ASSET_DIR)
    parser.option("framerate", DEFAULT_FRAMERATE)
    return parser


def _error(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    try:
        parser.parse(sys.argv[1:] if argv is None else argv)
    except ArgError as exc:
        return _error(str(exc))

    asset_dir = Path(parser.value("asset-dir"))
    try:
        framerate = int(parser.value("framerate"))
    except ValueError:
        return _error(f"invalid framerate {parser.value('framerate')!r}.")
    if framerate < 0:
        return _error(f"framerate must not be negative: {framerate}.")

    try:
        tilesets = AssetCache(asset_dir / "Graphics" / "Tilesets", load_texture, "_")
        images = AssetCache(asset_dir / "Graphics" / "Titles1", load_texture, "_")
        sprite_atlases = AssetCache(asset_dir / "Graphics" / "Characters", load_texture, "_")
        AssetCache(asset_dir / "Fonts", load_font)

        engine = GameEngine(WINDOW_TITLE, WINDOW_WIDTH, WINDOW_HEIGHT)
        try:
            engine.set_framerate_limit(framerate)
            level = Level(engine, sprite_atlases, tilesets)
            menu = MainMenu(engine, images.get("00.png"), level)
            engine.set_scene(menu)
            engine.run()
        finally:
            engine.close()
    except (AssetLoadError, OSError, ValueError) as exc:
        return _error(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())