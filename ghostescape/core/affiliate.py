"""Objects attached to a parent and placed relative to it by an anchor."""

from __future__ import annotations

import pygame

from ..defs import Anchor, anchor_offset
from .object import GameObject


class ObjectAffiliate(GameObject):
    """A child element with an offset from its parent, a size and an anchor."""

    def __init__(self) -> None:
        super().__init__()
        self.parent = None
        self.offset = pygame.Vector2()
        self._size = pygame.Vector2()
        self.anchor = Anchor.CENTER

    def set_offset_by_anchor(self, anchor: Anchor) -> None:
        """Adopt ``anchor`` and recompute the offset from the current size."""
        self.anchor = anchor
        offset = anchor_offset(anchor, self._size)
        if offset is not None:
            self.offset = offset

    @property
    def size(self) -> pygame.Vector2:
        return pygame.Vector2(self._size)

    @size.setter
    def size(self, value) -> None:
        self._size = pygame.Vector2(value)
        self.set_offset_by_anchor(self.anchor)

    def set_scale(self, scale: float) -> None:
        """Multiply the size by ``scale``, keeping the anchor."""
        self._size = self._size * scale
        self.set_offset_by_anchor(self.anchor)