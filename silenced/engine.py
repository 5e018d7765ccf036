"""The game window, its loop, and the scenes it runs."""

from __future__ import annotations

import abc
import logging
from typing import Optional

import pygame

log = logging.getLogger(__name__)

Event = pygame.event.Event


class Scene(abc.ABC):
    """One screen of the game, called once per frame with that frame's events."""

    @abc.abstractmethod
    def __call__(self, events: list[Event], delta_time: float) -> None:
        """Handle ``events`` and advance by ``delta_time`` seconds."""


class GameEngine:
    """Owns the window and calls the current scene once per frame."""

    def __init__(self, title: str, width: int, height: int) -> None:
        log.info("Initialising window (%d, %d)", width, height)
        pygame.display.init()
        self.window = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.title = title
        self.scene: Optional[Scene] = None
        self.delta_time = 0.0
        self._clock = pygame.time.Clock()
        self._framerate_limit = 0
        self._open = True

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def framerate_limit(self) -> int:
        return self._framerate_limit

    def set_scene(self, scene: Scene) -> None:
        log.info("Changed game loop")
        self.scene = scene

    def set_framerate_limit(self, limit: int) -> None:
        """Cap frames per second; zero means no cap."""
        if limit < 0:
            raise ValueError(f"framerate limit must not be negative: {limit}")
        self._framerate_limit = limit

    def clear(self, color: tuple[int, int, int] = (0, 0, 0)) -> None:
        self.window.fill(color)

    def present(self) -> None:
        pygame.display.flip()

    def step(self) -> None:
        """Run one frame: time it, collect events, then call the scene."""
        if not self._open:
            raise RuntimeError("the window is closed")
        if self.scene is None:
            raise RuntimeError("no scene has been set")
        self.delta_time = self._clock.tick(self._framerate_limit) / 1000.0
        events = pygame.event.get()
        if any(event.type == pygame.QUIT for event in events):
            self.close()
            return
        self.scene(events, self.delta_time)

    def run(self) -> None:
        """Run frames until the window is closed."""
        while self._open:
            self.step()

    def close(self) -> None:
        if self._open:
            self._open = False
            pygame.display.quit()