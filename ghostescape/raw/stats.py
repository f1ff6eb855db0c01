"""Health, mana, damage and invincibility frames of an actor."""

from __future__ import annotations

import logging

from ..core.object import GameObject

log = logging.getLogger(__name__)


class Stats(GameObject):
    """Combat numbers of an actor."""

    def __init__(
        self,
        max_health: float = 100.0,
        max_mana: float = 100.0,
        damage: float = 40.0,
        mana_regen: float = 10.0,
    ) -> None:
        super().__init__()
        self.parent = None
        self.max_health = max_health
        self.health = max_health
        self.max_mana = max_mana
        self.mana = max_mana
        self.damage = damage
        self.mana_regen = mana_regen
        self.invincible_time = 1.5
        self.invincible_timer = 0.0
        self.is_alive = True
        self.is_invincible = False

    @classmethod
    def create(
        cls,
        parent,
        max_health: float = 100.0,
        max_mana: float = 100.0,
        damage: float = 40.0,
        mana_regen: float = 10.0,
    ) -> Stats:
        stats = cls(max_health, max_mana, damage, mana_regen)
        stats.parent = parent
        parent.add_child(stats)
        return stats

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        self.regen_mana(delta_time)
        if self.is_invincible:
            self.invincible_timer += delta_time
            if self.invincible_timer > self.invincible_time:
                self.is_invincible = False
                self.invincible_timer = 0.0

    def can_use_mana(self, mana_cost: float) -> bool:
        return self.mana >= mana_cost

    def use_mana(self, mana_cost: float) -> None:
        self.mana = max(self.mana - mana_cost, 0.0)

    def regen_mana(self, delta_time: float) -> None:
        self.mana = min(self.mana + self.mana_regen * delta_time, self.max_mana)

    def take_damage(self, damage: float) -> None:
        """Lose health unless invincible; a hit grants a short invincibility."""
        if self.is_invincible:
            return
        self.health -= damage
        if self.health < 0:
            self.health = 0.0
            self.is_alive = False
        log.debug("hit, health now %f", self.health)
        self.is_invincible = True
        self.invincible_timer = 0.0