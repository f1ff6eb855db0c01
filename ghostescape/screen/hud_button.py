"""Clickable screen buttons with normal, hover and pressed images."""

from __future__ import annotations

import pygame

from ..affiliate.sprite import Sprite
from ..core.object import ObjectScreen
from ..defs import Anchor

_SOUND_PRESS = "assets/sound/UI_button08.wav"
_SOUND_HOVER = "assets/sound/UI_button12.wav"


def _is_left_button(event) -> bool:
    return getattr(event, "button", None) == pygame.BUTTON_LEFT


class HUDButton(ObjectScreen):
    """A button that triggers when the left mouse button is released over it."""

    def __init__(self) -> None:
        super().__init__()
        self.sprite_normal: Sprite | None = None
        self.sprite_hover: Sprite | None = None
        self.sprite_press: Sprite | None = None
        self.is_hover = False
        self.is_press = False
        self.is_trigger = False

    @classmethod
    def create(cls, parent, render_position, sprite_press_path: str, sprite_normal_path: str,
               sprite_hover_path: str, scale: float = 1.0,
               anchor: Anchor = Anchor.CENTER) -> HUDButton:
        button = cls()
        button.init()
        button.render_position = render_position
        button.sprite_press = Sprite.create(button, sprite_press_path, scale, anchor)
        button.sprite_normal = Sprite.create(button, sprite_normal_path, scale, anchor)
        button.sprite_hover = Sprite.create(button, sprite_hover_path, scale, anchor)
        button.sprite_hover.active = False
        button.sprite_press.active = False
        if parent is not None:
            parent.add_child(button)
        return button

    def handle_events(self, event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN:
            if _is_left_button(event) and self.is_hover:
                self.is_press = True
                self.game.play_sound(_SOUND_PRESS)
                return True
        elif event.type == pygame.MOUSEBUTTONUP:
            if _is_left_button(event):
                self.is_press = False
                if self.is_hover:
                    self.is_trigger = True
                    return True
        return False

    def update(self, delta_time: float) -> None:
        self.check_hover()
        self.check_state()

    def check_hover(self) -> None:
        """Track whether the mouse is over the normal image."""
        position = self.render_position + self.sprite_normal.offset
        hover = self.game.is_mouse_in_rect(position, position + self.sprite_normal.size)
        if hover == self.is_hover:
            return
        self.is_hover = hover
        if self.is_hover and not self.is_press:
            self.game.play_sound(_SOUND_HOVER)
            self._show(self.sprite_hover)

    def check_state(self) -> None:
        """Show the image that matches the hover and press flags."""
        if not self.is_press and not self.is_hover:
            self._show(self.sprite_normal)
        elif not self.is_press and self.is_hover:
            self._show(self.sprite_hover)
        elif self.is_hover and self.is_press:
            self._show(self.sprite_press)

    def consume_trigger(self) -> bool:
        """True once after each click; reading clears the flag."""
        fired, self.is_trigger = self.is_trigger, False
        return fired

    def set_scale(self, scale: float) -> None:
        for sprite in (self.sprite_normal, self.sprite_hover, self.sprite_press):
            sprite.set_scale(scale)

    def _show(self, visible: Sprite) -> None:
        for sprite in (self.sprite_normal, self.sprite_hover, self.sprite_press):
            sprite.active = sprite is visible