"""Text boxes on screen: a background image with a label on top."""

from __future__ import annotations

import pygame

from ..affiliate.sprite import Sprite
from ..affiliate.text_label import TextLabel
from ..core.object import ObjectScreen
from ..defs import Anchor

DEFAULT_FONT = "assets/font/VonwaonBitmap-16px.ttf"
DEFAULT_BACKGROUND = "assets/UI/Textfield_01.png"


class HUDText(ObjectScreen):
    """A label drawn over a background stretched to a chosen size."""

    def __init__(self) -> None:
        super().__init__()
        self.text_label: TextLabel | None = None
        self.sprite_bg: Sprite | None = None
        self.bg_size = pygame.Vector2()

    @classmethod
    def create(cls, parent, text: str, render_position, size, font_path=DEFAULT_FONT,
               font_size: int = 24, bg_path: str = DEFAULT_BACKGROUND,
               anchor: Anchor = Anchor.CENTER) -> HUDText:
        hud = cls()
        hud.init()
        hud.render_position = render_position
        hud.sprite_bg = Sprite.create(hud, bg_path, 1, anchor)
        hud.set_bg_size(size)
        hud.text_label = TextLabel.create(hud, text, font_path, font_size, anchor)
        if parent is not None:
            parent.add_child(hud)
        return hud

    def set_bg_size_by_text(self, margin: float = 10.0) -> None:
        """Fit the background to the text plus ``margin`` on each axis."""
        self.set_bg_size(self.text_label.size + pygame.Vector2(margin, margin))

    def set_background(self, file_path: str) -> None:
        if self.sprite_bg is not None:
            self.sprite_bg.set_texture(file_path)
        else:
            self.sprite_bg = Sprite.create(self, file_path, 1, Anchor.CENTER)

    def set_bg_size(self, size) -> None:
        self.bg_size = pygame.Vector2(size)
        self.sprite_bg.size = self.bg_size

    @property
    def text(self) -> str:
        return self.text_label.text

    @text.setter
    def text(self, value: str) -> None:
        self.text_label.text = value