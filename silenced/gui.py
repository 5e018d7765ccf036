"""A canvas of static text drawn over the game."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

import pygame

from .assets import FontFile

Color = Union[pygame.Color, tuple[int, int, int], tuple[int, int, int, int]]

DEFAULT_TEXT_COLOR = (255, 255, 255)


class TextStyle(enum.IntFlag):
    """Text styles that can be combined with ``|``."""

    REGULAR = 0
    BOLD = 1
    ITALIC = 2
    UNDERLINED = 4
    STRIKETHROUGH = 8


@dataclass
class StaticText:
    """One piece of text placed on a canvas."""

    text: str
    font: FontFile
    size: int
    style: TextStyle = TextStyle.REGULAR
    position: tuple[float, float] = (0.0, 0.0)
    color: Color = DEFAULT_TEXT_COLOR

    def render(self) -> pygame.Surface:
        font = self.font.font(self.size)
        font.set_bold(bool(self.style & TextStyle.BOLD))
        font.set_italic(bool(self.style & TextStyle.ITALIC))
        font.set_underline(bool(self.style & TextStyle.UNDERLINED))
        font.set_strikethrough(bool(self.style & TextStyle.STRIKETHROUGH))
        return font.render(self.text, True, self.color)


class GuiCanvas:
    """Holds text items and draws them offset by the canvas position."""

    def __init__(self, position: tuple[float, float] = (0.0, 0.0)) -> None:
        self.position = position
        self.texts: list[StaticText] = []

    def add_static_text(
        self,
        text: str,
        font: FontFile,
        size: int,
        style: TextStyle = TextStyle.REGULAR,
        position: tuple[float, float] = (0.0, 0.0),
    ) -> StaticText:
        """Add a text item and return it so it can be adjusted later."""
        if size <= 0:
            raise ValueError(f"text size must be positive: {size}")
        item = StaticText(text, font, size, TextStyle(style), position)
        self.texts.append(item)
        return item

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every text item onto ``surface``."""
        offset_x, offset_y = self.position
        for item in self.texts:
            x, y = item.position
            surface.blit(item.render(), (round(offset_x + x), round(offset_y + y)))