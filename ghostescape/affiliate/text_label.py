"""Text rendered with a font and attached to a parent."""

from __future__ import annotations

import pygame

from ..core.affiliate import ObjectAffiliate
from ..defs import Anchor


class TextLabel(ObjectAffiliate):
    """A rendered piece of text; its size is that of the rendered text."""

    def __init__(self) -> None:
        super().__init__()
        self._text = ""
        self._font_path: str | None = None
        self._font_size = 16
        self.surface: pygame.Surface | None = None

    @classmethod
    def create(cls, parent, text: str, font_path, font_size: int,
               anchor: Anchor = Anchor.CENTER) -> TextLabel:
        label = cls()
        label.init()
        label.set_font(font_path, font_size)
        label.text = text
        label.anchor = anchor
        label._update_size()
        if parent is not None:
            parent.add_child(label)
            label.parent = parent
        return label

    def render(self) -> None:
        super().render()
        canvas = self.game.canvas
        if self.surface is None or self.parent is None or canvas is None:
            return
        position = self.parent.render_position + self.offset
        canvas.blit(self.surface, (round(position.x), round(position.y)))

    def clean(self) -> None:
        """Release the rendered text."""
        self.surface = None

    def set_font(self, font_path, font_size: int) -> None:
        """Switch to a font file at a size; raises AssetError if it cannot load."""
        self._font_path = font_path
        self._font_size = font_size
        self._refresh()

    @property
    def font_path(self):
        return self._font_path

    @font_path.setter
    def font_path(self, value) -> None:
        self._font_path = value
        self._refresh()

    @property
    def font_size(self) -> int:
        return self._font_size

    @font_size.setter
    def font_size(self, value: int) -> None:
        self._font_size = value
        self._refresh()

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value
        self._refresh()

    def _refresh(self) -> None:
        self.game.asset_store.get_font(self._font_path, self._font_size)
        self.surface = self.game.create_text(self._text, self._font_path, self._font_size)
        self._update_size()

    def _update_size(self) -> None:
        self.size = self.surface.get_size() if self.surface is not None else (0, 0)