"""Small coloured bars attached to objects, such as health bars."""

from __future__ import annotations

from ..core.affiliate import ObjectAffiliate
from ..defs import Anchor, Color


class AffiliateBar(ObjectAffiliate):
    """A horizontal bar whose colour follows how full it is."""

    def __init__(self) -> None:
        super().__init__()
        self.percentage = 1.0
        self.color_high = Color(0, 1, 0, 1)
        self.color_mid = Color(1, 0.65, 0, 1)
        self.color_low = Color(1, 0, 0, 1)

    @classmethod
    def create(cls, parent, size, anchor: Anchor = Anchor.CENTER) -> AffiliateBar:
        bar = cls()
        bar.init()
        bar.anchor = anchor
        bar.size = size
        if parent is not None:
            bar.parent = parent
            parent.add_child(bar)
        return bar

    @property
    def current_color(self) -> Color:
        """High above 70 %, middle above 30 %, low otherwise."""
        if self.percentage > 0.7:
            return self.color_high
        if self.percentage > 0.3:
            return self.color_mid
        return self.color_low

    def render(self) -> None:
        position = self.parent.render_position + self.offset
        self.game.render_hbar(position, self.size, self.percentage, self.current_color)