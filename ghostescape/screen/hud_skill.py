"""Skill icon that fills up as the skill's cooldown runs out."""

from __future__ import annotations

import pygame

from ..affiliate.sprite import Sprite
from ..core.object import ObjectScreen
from ..defs import Anchor

_SHADE = (77, 77, 77)


class HUDSkill(ObjectScreen):
    """A dimmed icon with a bright part that grows from the bottom."""

    def __init__(self) -> None:
        super().__init__()
        self.icon: Sprite | None = None
        self._percentage = 1.0

    @classmethod
    def create(cls, parent, path: str, position, scale: float = 1.0,
               anchor: Anchor = Anchor.CENTER) -> HUDSkill:
        skill = cls()
        skill.init()
        skill.icon = Sprite.create(skill, path, scale, anchor)
        skill.render_position = position
        if parent is not None:
            parent.add_child(skill)
        return skill

    def render(self) -> None:
        """Draw the whole icon dimmed, then its ready part in full colour."""
        if self.icon is not None and self.icon.texture.surface is not None:
            shaded = self.icon.texture.copy()
            shaded.surface = shaded.surface.copy()
            shaded.surface.fill(_SHADE, special_flags=pygame.BLEND_RGB_MULT)
            position = self.render_position + self.icon.offset
            self.game.render_texture(shaded, position, self.icon.size)
        super().render()

    @property
    def percentage(self) -> float:
        return self._percentage

    @percentage.setter
    def percentage(self, value: float) -> None:
        self._percentage = min(max(value, 0.0), 1.0)
        if self.icon is not None:
            self.icon.percentage = (1.0, self._percentage)