"""A custom mouse cursor that alternates between two images."""

from __future__ import annotations

from ..affiliate.sprite import Sprite
from ..core.object import ObjectScreen
from ..defs import Anchor

_FIRST_PHASE = 0.3
_SECOND_PHASE = 0.6


class UIMouse(ObjectScreen):
    """Follows the mouse, blinking between two sprites."""

    def __init__(self) -> None:
        super().__init__()
        self.sprite1: Sprite | None = None
        self.sprite2: Sprite | None = None
        self.timer = 0.0

    @classmethod
    def create(cls, parent, path1: str, path2: str, scale: float = 1.0,
               anchor: Anchor = Anchor.CENTER) -> UIMouse:
        mouse = cls()
        mouse.init()
        mouse.sprite1 = Sprite.create(mouse, path1, scale, anchor)
        mouse.sprite2 = Sprite.create(mouse, path2, scale, anchor)
        if parent is not None:
            parent.add_child(mouse)
        return mouse

    def update(self, delta_time: float) -> None:
        self.timer += delta_time
        if self.timer < _FIRST_PHASE:
            self.sprite1.active = True
            self.sprite2.active = False
        elif self.timer < _SECOND_PHASE:
            self.sprite1.active = False
            self.sprite2.active = True
        else:
            self.timer = 0.0
        self.render_position = self.game.mouse_position