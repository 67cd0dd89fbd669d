"""Positioned sprites: the base game object and the jumping chicken."""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

GROUND_Y = 320
JUMP_VELOCITY = -12.0


def _f32(value: float) -> float:
    """Round a float to single precision, as the physics is specified in it."""
    return struct.unpack("f", struct.pack("f", value))[0]


_GRAVITY = _f32(0.6)


@dataclass
class Rect:
    """An axis-aligned rectangle in screen pixels."""

    x: int
    y: int
    w: int
    h: int

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    @property
    def empty(self) -> bool:
        return self.w <= 0 or self.h <= 0

    def intersects(self, other: Rect) -> bool:
        """True when both rectangles are non-empty and share some area."""
        if self.empty or other.empty:
            return False
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )


@dataclass
class GameObject:
    """A texture drawn at a rectangle on the screen."""

    rect: Rect
    texture: Any = None

    def render(self, surface: Any) -> None:
        """Blit the texture onto the surface at the object's position."""
        if self.texture is None or surface is None:
            logger.error("Cannot render GameObject, texture or renderer is invalid!")
            return
        surface.blit(self.texture, (self.rect.x, self.rect.y))

    def set_x(self, x: int) -> None:
        self.rect.x = x

    def move_x(self, dx: int) -> None:
        self.rect.x += dx


@dataclass
class Ga(GameObject):
    """The player: a chicken that jumps and falls back to the ground."""

    y_velocity: float = field(default=0.0, init=False)
    is_jumping: bool = field(default=False, init=False)

    def jump(self) -> None:
        """Start a jump unless one is already under way."""
        if not self.is_jumping:
            self.y_velocity = JUMP_VELOCITY
            self.is_jumping = True

    def update(self) -> None:
        """Advance the jump by one frame, landing on the ground."""
        if not self.is_jumping:
            return
        self.rect.y += int(self.y_velocity)
        self.y_velocity = _f32(self.y_velocity + _GRAVITY)
        floor = GROUND_Y - self.rect.h
        if self.rect.y >= floor:
            self.rect.y = floor
            self.is_jumping = False