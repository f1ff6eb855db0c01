"""Sprites that play a horizontal strip of square frames."""

from __future__ import annotations

import pygame

from ..defs import Anchor
from .sprite import Sprite, Texture


class SpriteAnim(Sprite):
    """Animated sprite; frames are squares laid side by side in the texture."""

    def __init__(self) -> None:
        super().__init__()
        self.current_frame = 0
        self.frame_count = 0
        self.fps = 10
        self.frame_timer = 0.0
        self.is_loop = True

    @classmethod
    def create(cls, parent, path: str, scale: float = 1.0, anchor: Anchor = Anchor.CENTER):
        return super().create(parent, path, scale, anchor)

    def update(self, delta_time: float) -> None:
        """Advance frames at ``fps``; a non-looping animation finishes after the last one."""
        if self.is_finish:
            return
        self.frame_timer += delta_time
        if self.frame_timer >= 1.0 / self.fps:
            self.current_frame += 1
            if self.current_frame >= self.frame_count:
                self.current_frame = 0
                if not self.is_loop:
                    self.is_finish = True
            self.frame_timer = 0.0
        self.texture.src_rect.x = self.current_frame * self.texture.src_rect.w

    def set_texture(self, texture) -> None:
        """Use a sprite sheet; the frame count is its width over its height."""
        if isinstance(texture, str):
            texture = Texture.from_path(texture)
        texture = texture.copy()
        height = texture.src_rect.h
        if height <= 0:
            raise ValueError("sprite sheet has no height")
        self.texture = texture
        self.frame_count = int(texture.src_rect.w / height)
        self.texture.src_rect.w = height
        self._size = pygame.Vector2(self.texture.src_rect.w, self.texture.src_rect.h)