"""Textures and static sprites drawn relative to their parent."""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame

from ..core.affiliate import ObjectAffiliate
from ..defs import Anchor
from ..game import Game


@dataclass
class Texture:
    """An image together with the region of it to draw and how to orient it."""

    surface: pygame.Surface | None = None
    src_rect: pygame.Rect = field(default_factory=lambda: pygame.Rect(0, 0, 0, 0))
    angle: float = 0.0
    is_flip: bool = False

    @classmethod
    def from_path(cls, path: str) -> Texture:
        """Texture covering the whole image at ``path``, loaded through the asset store."""
        surface = Game.get_instance().asset_store.get_texture(path)
        return cls(surface, pygame.Rect((0, 0), surface.get_size()))

    def copy(self) -> Texture:
        return Texture(self.surface, pygame.Rect(self.src_rect), self.angle, self.is_flip)


class Sprite(ObjectAffiliate):
    """A texture drawn at its parent's render position plus an offset."""

    def __init__(self) -> None:
        super().__init__()
        self.texture = Texture()
        self.is_finish = False
        self._percentage = pygame.Vector2(1.0, 1.0)

    @classmethod
    def create(cls, parent, path: str, scale: float = 1.0, anchor: Anchor = Anchor.CENTER):
        """Load ``path``, scale it, anchor it and attach it to ``parent``."""
        sprite = cls()
        sprite.init()
        sprite.anchor = anchor
        sprite.set_texture(Texture.from_path(path))
        sprite.set_scale(scale)
        sprite.parent = parent
        parent.add_child(sprite)
        return sprite

    def render(self) -> None:
        if self.texture.surface is None or self.parent is None or self.is_finish:
            return
        position = self.parent.render_position + self.offset
        self.game.render_texture(self.texture, position, self.size, self._percentage)

    def set_texture(self, texture) -> None:
        """Use ``texture`` (or the image at a path) and take its size; the offset is kept."""
        if isinstance(texture, str):
            texture = Texture.from_path(texture)
        self.texture = texture.copy()
        self._size = pygame.Vector2(self.texture.src_rect.w, self.texture.src_rect.h)

    @property
    def flip(self) -> bool:
        return self.texture.is_flip

    @flip.setter
    def flip(self, value: bool) -> None:
        self.texture.is_flip = bool(value)

    @property
    def angle(self) -> float:
        return self.texture.angle

    @angle.setter
    def angle(self, value: float) -> None:
        self.texture.angle = value

    @property
    def percentage(self) -> pygame.Vector2:
        """Share of the width and of the height (from the bottom) that is drawn."""
        return pygame.Vector2(self._percentage)

    @percentage.setter
    def percentage(self, value) -> None:
        self._percentage = pygame.Vector2(value)