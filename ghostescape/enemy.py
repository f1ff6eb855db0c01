"""Ghost enemies that chase the player and hurt it on contact."""

from __future__ import annotations

from enum import Enum, auto

import pygame

from .affiliate.bar import AffiliateBar
from .affiliate.collider import Collider
from .affiliate.sprite_anim import SpriteAnim
from .core.actor import Actor
from .defs import Anchor, ObjectType
from .raw.stats import Stats

_SHEET_NORMAL = "assets/sprite/ghost-Sheet.png"
_SHEET_HURT = "assets/sprite/ghostHurt-Sheet.png"
_SHEET_DIE = "assets/sprite/ghostDead-Sheet.png"


class EnemyState(Enum):
    NORMAL = auto()
    HURT = auto()
    DIE = auto()


class Enemy(Actor):
    """Drifts towards its target at a quarter of its top speed."""

    def __init__(self) -> None:
        super().__init__()
        self.current_state = EnemyState.NORMAL
        self.target = None
        self.anim_normal: SpriteAnim | None = None
        self.anim_hurt: SpriteAnim | None = None
        self.anim_die: SpriteAnim | None = None
        self.current_anim: SpriteAnim | None = None
        self.score = 10

    @classmethod
    def create(cls, parent, position, target) -> Enemy:
        enemy = cls()
        enemy.init()
        enemy.position = position
        enemy.target = target
        if parent is not None:
            parent.add_child(enemy)
        return enemy

    def init(self) -> None:
        super().init()
        self.anim_normal = SpriteAnim.create(self, _SHEET_NORMAL, 2.0)
        self.anim_hurt = SpriteAnim.create(self, _SHEET_HURT, 2.0)
        self.anim_die = SpriteAnim.create(self, _SHEET_DIE, 2.0)
        self.anim_hurt.active = False
        self.anim_die.active = False
        self.anim_die.is_loop = False
        self.current_anim = self.anim_normal

        self.collider = Collider.create(self, self.current_anim.size)
        self.stats = Stats.create(self)
        size = self.anim_normal.size
        self.health_bar = AffiliateBar.create(self, (size.x, 10), Anchor.BOTTOM_CENTER)
        self.health_bar.offset = self.health_bar.offset + pygame.Vector2(0, size.y / 2)
        self.type = ObjectType.ENEMY

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        if self.target is not None and self.target.active:
            self.aim_target(self.target)
            self.move(delta_time)
            self.attack()
        self.check_state()
        self.remove()

    def aim_target(self, target) -> None:
        if target is None:
            return
        direction = target.position - self.position
        if direction.length_squared() == 0:
            self.velocity = pygame.Vector2()
            return
        self.velocity = direction.normalize() * self.max_speed / 4.0

    def check_state(self) -> None:
        if self.stats.health <= 0:
            state = EnemyState.DIE
        elif self.stats.health < self.stats.max_health:
            state = EnemyState.HURT
        else:
            state = EnemyState.NORMAL
        if state is not self.current_state:
            self.change_state(state)

    def change_state(self, new_state: EnemyState) -> None:
        """Swap to the state's animation; dying scores points and lowers the enemy count."""
        self.current_anim.active = False
        self.current_anim = {
            EnemyState.NORMAL: self.anim_normal,
            EnemyState.HURT: self.anim_hurt,
            EnemyState.DIE: self.anim_die,
        }[new_state]
        self.current_anim.active = True
        if new_state is EnemyState.DIE:
            self.game.add_score(self.score)
            self.game.enemy_count -= 1
        self.current_state = new_state

    def remove(self) -> None:
        """Mark for removal once the death animation has finished."""
        if self.anim_die.is_finish:
            self.need_remove = True

    def attack(self) -> None:
        """Hurt the target while touching it."""
        if self.collider is None or self.target is None or self.target.collider is None:
            return
        if self.collider.is_colliding(self.target.collider):
            if self.stats is not None and self.target.stats is not None:
                self.target.take_damage(self.stats.damage)