"""Loading textures and fonts, and caches of them keyed by file name."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Callable, Generic, Optional, TypeVar, Union

import pygame

log = logging.getLogger(__name__)

T = TypeVar("T")
PathLike = Union[str, Path]

# Point size used only to check that a font file can be opened.
_PROBE_FONT_SIZE = 12


class AssetLoadError(ValueError):
    """Raised when an asset file cannot be loaded."""


def load_texture(path: PathLike) -> pygame.Surface:
    """Load an image file into a surface."""
    path = Path(path)
    try:
        surface = pygame.image.load(str(path))
    except (pygame.error, OSError) as exc:
        raise AssetLoadError(f"Failed to load texture from {path}") from exc
    log.info("Loaded texture from %s", path)
    return surface


def _ensure_font_module() -> None:
    if not pygame.font.get_init():
        pygame.font.init()


class FontFile:
    """A loaded font file from which fonts of any point size are made."""

    def __init__(self, path: PathLike, data: bytes) -> None:
        self.path = Path(path)
        self.data = data
        self._fonts: dict[int, pygame.font.Font] = {}

    def font(self, size: int) -> pygame.font.Font:
        """Return this font at the given point size, reusing earlier ones."""
        if size <= 0:
            raise ValueError(f"font size must be positive: {size}")
        if size not in self._fonts:
            _ensure_font_module()
            self._fonts[size] = pygame.font.Font(io.BytesIO(self.data), size)
        return self._fonts[size]


def load_font(path: PathLike) -> FontFile:
    """Read a font file and check that it can be opened."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise AssetLoadError(f"Failed to load asset from {path}") from exc
    _ensure_font_module()
    try:
        pygame.font.Font(io.BytesIO(data), _PROBE_FONT_SIZE)
    except (pygame.error, OSError, ValueError) as exc:
        raise AssetLoadError(f"Failed to load asset from {path}") from exc
    log.info("Loaded asset from %s", path)
    return FontFile(path, data)


class AssetCache(Generic[T]):
    """Assets from one directory, keyed by file name.

    Without a priority prefix every file is loaded up front. With one, only
    files whose names start with it are loaded up front and the rest are
    loaded the first time they are asked for.
    """

    def __init__(
        self,
        directory: PathLike,
        loader: Callable[[Path], T],
        priority_prefix: Optional[str] = None,
    ) -> None:
        self.directory = Path(directory)
        self._loader = loader
        self._assets: dict[str, T] = {}

        if priority_prefix is None:
            log.info("Caching assets from %s", self.directory)
        else:
            log.info("Caching priority assets from %s", self.directory)

        for entry in sorted(self.directory.iterdir()):
            if not entry.is_file():
                continue
            if priority_prefix is not None and not entry.name.startswith(priority_prefix):
                continue
            self._load(entry, entry.name)

    def _load(self, path: Path, key: str) -> T:
        asset = self._loader(path)
        return self._assets.setdefault(key, asset)

    def get(self, filename: str) -> T:
        """Return the named asset, loading it now if it is not cached yet."""
        if filename in self._assets:
            return self._assets[filename]
        try:
            return self._load(self.directory / filename, filename)
        except AssetLoadError as exc:
            log.warning("Failed to load asset from %s", filename)
            raise AssetLoadError(f"Could not load asset from {filename}") from exc

    def find(self, filename: str) -> Optional[T]:
        """Like ``get``, but return None when the asset cannot be loaded."""
        try:
            return self.get(filename)
        except AssetLoadError:
            return None

    def __contains__(self, filename: object) -> bool:
        return filename in self._assets

    def __len__(self) -> int:
        return len(self._assets)