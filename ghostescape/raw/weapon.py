"""Weapons: cooldown and mana gate for casting spells."""

from __future__ import annotations

import pygame

from ..core.object import GameObject


class Weapon(GameObject):
    """Fires spells for its owning actor once cooled down and paid for."""

    def __init__(self, parent=None, cool_down: float = 1.0, mana_cost: float = 0.0) -> None:
        super().__init__()
        self.parent = parent
        self.spell = None
        self.cool_down = cool_down
        self.mana_cost = mana_cost
        self.cool_down_timer = 0.0

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        self.cool_down_timer += delta_time

    def attack(self, position, spell) -> None:
        """Pay mana, restart the cooldown and place ``spell`` in the current scene."""
        if spell is None:
            return
        self.parent.stats.use_mana(self.mana_cost)
        self.cool_down_timer = 0.0
        spell.position = pygame.Vector2(position)
        self.game.current_scene.safe_add_child(spell)

    def can_attack(self) -> bool:
        if self.cool_down_timer < self.cool_down:
            return False
        return self.parent.stats.can_use_mana(self.mana_cost)