"""One-shot animations placed in the world."""

from __future__ import annotations

from ..affiliate.sprite_anim import SpriteAnim
from ..core.object import ObjectWorld


class Effect(ObjectWorld):
    """Plays an animation once, then removes itself and may release a follow-up object."""

    def __init__(self) -> None:
        super().__init__()
        self.sprite: SpriteAnim | None = None
        self.next_object = None

    @classmethod
    def create(cls, parent, path: str, position, scale: float = 1.0, next_object=None) -> Effect:
        effect = cls()
        effect.init()
        effect.sprite = SpriteAnim.create(effect, path, scale)
        effect.sprite.is_loop = False
        effect.position = position
        effect.next_object = next_object
        if parent is not None:
            parent.add_child(effect)
        return effect

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        self._check_finish()

    def _check_finish(self) -> None:
        if not self.sprite.is_finish:
            return
        self.need_remove = True
        if self.next_object is not None:
            self.game.current_scene.safe_add_child(self.next_object)