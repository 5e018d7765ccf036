"""The title menu and the playable level."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import pygame

from .assets import AssetCache
from .engine import Event, GameEngine, Scene
from .entity import Entity, KeyState, Player
from .tilemap import TileMap

DEFAULT_MAP_PATH = Path("/workspace/silenced-engine/TestMap2.map")


class MainMenu(Scene):
    """Shows a background image until Enter is pressed, then moves on."""

    def __init__(
        self,
        engine: GameEngine,
        background: pygame.Surface,
        next_scene: Scene,
        key_state: Optional[KeyState] = None,
    ) -> None:
        self.engine = engine
        self.background = background
        self.next_scene = next_scene
        self._key_state = key_state if key_state is not None else pygame.key.get_pressed

    def __call__(self, events: list[Event], delta_time: float) -> None:
        self.engine.clear()
        self.engine.window.blit(self.background, (0, 0))
        self.engine.present()

        if self._key_state()[pygame.K_RETURN]:
            self.engine.set_scene(self.next_scene)


class Level(Scene):
    """A map with one standing entity and a player walking over it."""

    def __init__(
        self,
        engine: GameEngine,
        sprite_atlas_cache: AssetCache[pygame.Surface],
        tileset_cache: AssetCache[pygame.Surface],
        map_path: Union[str, Path] = DEFAULT_MAP_PATH,
        key_state: Optional[KeyState] = None,
    ) -> None:
        self.engine = engine
        self.sprite_atlas_cache = sprite_atlas_cache
        self.tileset_cache = tileset_cache
        self.entity = Entity(sprite_atlas_cache.get("22.png"), 8)
        self.player = Player(sprite_atlas_cache.get("00.png"), 4, key_state=key_state)
        self.map = TileMap.from_file(map_path, tileset_cache.get("00.png"))

    def __call__(self, events: list[Event], delta_time: float) -> None:
        self.player.update(delta_time)

        self.engine.clear()
        self.map.draw(self.engine.window)
        self.entity.draw(self.engine.window)
        self.player.draw(self.engine.window)
        self.engine.present()