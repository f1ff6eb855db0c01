"""Collision shapes attached to world objects."""

from __future__ import annotations

from enum import Enum, auto

from ..core.affiliate import ObjectAffiliate
from ..defs import Anchor


class ColliderShape(Enum):
    CIRCLE = auto()  # size.x is the diameter
    RECTANGLE = auto()


class Collider(ObjectAffiliate):
    """A shape following its parent's map position."""

    debug = False

    def __init__(self) -> None:
        super().__init__()
        self.shape = ColliderShape.CIRCLE

    @classmethod
    def create(cls, parent, size, shape: ColliderShape = ColliderShape.CIRCLE,
               anchor: Anchor = Anchor.CENTER) -> Collider:
        collider = cls()
        collider.init()
        collider.anchor = anchor
        collider.parent = parent
        collider.size = size
        collider.shape = shape
        parent.add_child(collider)
        return collider

    def render(self) -> None:
        """Draw the shape only when debugging."""
        if not self.debug:
            return
        super().render()
        position = self.parent.render_position + self.offset
        self.game.render_fill_circle(position, self.size, 0.3)

    def is_colliding(self, other: Collider | None) -> bool:
        """True when two circles overlap; other shape pairs never collide."""
        if other is None:
            return False
        if self.shape is ColliderShape.CIRCLE and other.shape is ColliderShape.CIRCLE:
            own = self.parent.position + self.offset + self.size / 2
            theirs = other.parent.position + other.offset + other.size / 2
            return (own - theirs).length() < (self.size.x + other.size.x) / 2
        return False