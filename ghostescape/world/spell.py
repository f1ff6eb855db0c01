"""Spells: animations in the world that hurt enemies they touch."""

from __future__ import annotations

from ..affiliate.collider import Collider, ColliderShape
from ..affiliate.sprite_anim import SpriteAnim
from ..core.object import ObjectWorld
from ..defs import Anchor, ObjectType


class Spell(ObjectWorld):
    """Damages every enemy its collider touches while its animation plays."""

    def __init__(self) -> None:
        super().__init__()
        self.sprite: SpriteAnim | None = None
        self.damage = 60.0

    @classmethod
    def create(cls, parent, path: str, position, damage: float, scale: float = 1.0,
               anchor: Anchor = Anchor.CENTER) -> Spell:
        spell = cls()
        spell.init()
        spell.damage = damage
        spell.sprite = SpriteAnim.create(spell, path, scale, anchor)
        spell.collider = Collider.create(spell, spell.sprite.size, ColliderShape.CIRCLE, anchor)
        spell.sprite.is_loop = False
        spell.position = position
        if parent is not None:
            parent.add_child(spell)
        return spell

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        if self.sprite.is_finish:
            self.need_remove = True
        self._attack()

    def _attack(self) -> None:
        scene = self.game.current_scene
        if scene is None or self.collider is None:
            return
        for obj in list(scene.children_world):
            if obj.type is not ObjectType.ENEMY:
                continue
            if obj.collider is not None and self.collider.is_colliding(obj.collider):
                obj.take_damage(self.damage)