"""Health and mana bars of an actor shown on screen."""

from __future__ import annotations

import pygame

from ..affiliate.sprite import Sprite
from ..core.object import ObjectScreen
from ..defs import Anchor

_BAR_BG = "assets/UI/bar_bg.png"
_BAR_RED = "assets/UI/bar_red.png"
_BAR_BLUE = "assets/UI/bar_blue.png"
_ICON_HEALTH = "assets/UI/Red Potion.png"
_ICON_MANA = "assets/UI/Blue Potion.png"


class HudStats(ObjectScreen):
    """Shows the target's health and mana as filled bars."""

    def __init__(self) -> None:
        super().__init__()
        self.target = None
        self.health_bar: Sprite | None = None
        self.health_bar_bg: Sprite | None = None
        self.health_icon: Sprite | None = None
        self.mana_bar: Sprite | None = None
        self.mana_bar_bg: Sprite | None = None
        self.mana_icon: Sprite | None = None
        self.health_percentage = 1.0
        self.mana_percentage = 1.0

    @classmethod
    def create(cls, parent, target, render_position) -> HudStats:
        hud = cls()
        hud.init()
        hud.render_position = render_position
        hud.target = target
        if parent is not None:
            parent.add_child(hud)
        return hud

    def init(self) -> None:
        super().init()
        health_shift = pygame.Vector2(30.0, 0.0)
        mana_shift = pygame.Vector2(275.0, 35.0)
        self.health_bar_bg = self._sprite(_BAR_BG, 3.0, health_shift)
        self.health_bar = self._sprite(_BAR_RED, 3.0, health_shift)
        self.health_icon = self._sprite(_ICON_HEALTH, 0.5)
        self.mana_bar_bg = self._sprite(_BAR_BG, 3.0, mana_shift)
        self.mana_bar = self._sprite(_BAR_BLUE, 3.0, mana_shift)
        self.mana_icon = self._sprite(_ICON_MANA, 0.5, pygame.Vector2(270.0, 30.0))

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        self._update_health_bar()
        self._update_mana_bar()

    def _sprite(self, path: str, scale: float, shift=None) -> Sprite:
        sprite = Sprite.create(self, path, scale, Anchor.CENTER_LEFT)
        if shift is not None:
            sprite.offset = sprite.offset + shift
        return sprite

    def _update_health_bar(self) -> None:
        if self.target is None or self.health_bar is None or self.target.stats is None:
            return
        stats = self.target.stats
        self.health_bar.percentage = (stats.health / stats.max_health, 1.0)

    def _update_mana_bar(self) -> None:
        if self.target is None or self.mana_bar is None or self.target.stats is None:
            return
        stats = self.target.stats
        self.mana_bar.percentage = (stats.mana / stats.max_mana, 1.0)