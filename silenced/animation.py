"""Frame-based sprite animations over a character atlas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .constants import Rect, atlas_rect

_MAX_FRAME_TILE_INDEX = 0xFF


@dataclass(frozen=True)
class Frame:
    """One atlas sprite shown for a fixed number of seconds."""

    tile_index: int
    duration: float

    def __post_init__(self) -> None:
        if not 0 <= self.tile_index <= _MAX_FRAME_TILE_INDEX:
            raise ValueError(
                f"frame tile index must be between 0 and {_MAX_FRAME_TILE_INDEX}: "
                f"{self.tile_index}"
            )
        if self.duration <= 0:
            raise ValueError(f"frame duration must be positive: {self.duration}")

    @property
    def texture_rect(self) -> Rect:
        return atlas_rect(self.tile_index)


class AnimationNode:
    """A looping sequence of frames that all last the same time."""

    def __init__(self, frame_duration: float, frames: Iterable[int]) -> None:
        self.frame_duration = frame_duration
        self.frames = [Frame(index, frame_duration) for index in frames]
        if not self.frames:
            raise ValueError("an animation needs at least one frame")
        self._index = 0
        self.time = 0.0

    @property
    def frame_index(self) -> int:
        return self._index

    def current_frame(self) -> Frame:
        return self.frames[self._index]

    def set_frame(self, frame: int) -> None:
        """Jump to a frame and start timing it from zero."""
        if not 0 <= frame < len(self.frames):
            raise IndexError(f"frame {frame} out of range for {len(self.frames)} frames")
        self._index = frame
        self.time = 0.0

    def reset(self) -> None:
        self.set_frame(0)

    def tick(self, delta_time: float) -> None:
        """Advance the animation by ``delta_time`` seconds, looping at the end."""
        if delta_time < 0:
            raise ValueError(f"delta time must not be negative: {delta_time}")
        self.time += delta_time
        while self.time >= self.current_frame().duration:
            self.time -= self.current_frame().duration
            self._index = (self._index + 1) % len(self.frames)