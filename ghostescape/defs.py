"""Shared enumerations, colours and anchor geometry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

import pygame


class ObjectType(Enum):
    """Kind of a game object; decides which scene list holds it."""

    NONE = auto()
    OBJECT_SCREEN = auto()
    OBJECT_WORLD = auto()
    ENEMY = auto()


class Anchor(Enum):
    """Point of an attached element that sits on its parent's position."""

    NONE = auto()
    TOP_LEFT = auto()
    TOP_CENTER = auto()
    TOP_RIGHT = auto()
    CENTER_LEFT = auto()
    CENTER = auto()
    CENTER_RIGHT = auto()
    BOTTOM_LEFT = auto()
    BOTTOM_CENTER = auto()
    BOTTOM_RIGHT = auto()


def _channel(value: float) -> int:
    return max(0, min(255, round(value * 255)))


@dataclass(frozen=True)
class Color:
    """An RGBA colour with float channels in the range 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def to_pygame(self) -> tuple[int, int, int, int]:
        """Return the colour as clamped 8-bit RGBA."""
        return (_channel(self.r), _channel(self.g), _channel(self.b), _channel(self.a))


_ANCHOR_FACTORS = {
    Anchor.TOP_LEFT: (0.0, 0.0),
    Anchor.TOP_CENTER: (0.5, 0.0),
    Anchor.TOP_RIGHT: (1.0, 0.0),
    Anchor.CENTER_LEFT: (0.0, 0.5),
    Anchor.CENTER: (0.5, 0.5),
    Anchor.CENTER_RIGHT: (1.0, 0.5),
    Anchor.BOTTOM_LEFT: (0.0, 1.0),
    Anchor.BOTTOM_CENTER: (0.5, 1.0),
    Anchor.BOTTOM_RIGHT: (1.0, 1.0),
}


def anchor_offset(anchor: Anchor, size) -> pygame.Vector2 | None:
    """Offset that places an element of ``size`` by ``anchor``.

    Returns None for ``Anchor.NONE``, meaning the current offset is kept.
    """
    factors = _ANCHOR_FACTORS.get(anchor)
    if factors is None:
        return None
    size = pygame.Vector2(size)
    fx, fy = factors
    return pygame.Vector2(-size.x * fx, -size.y * fy)