"""Sprites drawn from a character atlas, and the keyboard-driven player."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

import pygame

from .constants import atlas_rect

KeyState = Callable[[], Sequence[bool]]

PLAYER_SPEED = 32.0


class Entity:
    """A sprite showing one cell of a character atlas at a position."""

    def __init__(
        self,
        texture: pygame.Surface,
        starting_tile_index: int,
        position: tuple[float, float] = (0.0, 0.0),
    ) -> None:
        self.texture = texture
        self.texture_rect = atlas_rect(starting_tile_index)
        self.x, self.y = (float(value) for value in position)

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def move(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def update(self, delta_time: float) -> None:
        """Advance by ``delta_time`` seconds; a plain entity stays as it is."""

    def draw(self, surface: pygame.Surface) -> None:
        surface.blit(
            self.texture,
            (round(self.x), round(self.y)),
            pygame.Rect(*self.texture_rect),
        )


class Player(Entity):
    """An entity moved by the arrow keys at a fixed speed in pixels per second."""

    def __init__(
        self,
        texture: pygame.Surface,
        starting_tile_index: int,
        position: tuple[float, float] = (0.0, 0.0),
        key_state: Optional[KeyState] = None,
    ) -> None:
        super().__init__(texture, starting_tile_index, position)
        self.speed = PLAYER_SPEED
        self.x_movement = 0.0
        self.y_movement = 0.0
        self._key_state = key_state if key_state is not None else pygame.key.get_pressed

    def update(self, delta_time: float) -> None:
        keys = self._key_state()
        self.x_movement = 0.0
        self.y_movement = 0.0
        if keys[pygame.K_LEFT]:
            self.x_movement -= self.speed
        if keys[pygame.K_RIGHT]:
            self.x_movement += self.speed
        if keys[pygame.K_UP]:
            self.y_movement -= self.speed
        if keys[pygame.K_DOWN]:
            self.y_movement += self.speed
        self.move(self.x_movement * delta_time, self.y_movement * delta_time)