"""Title screen with the high score, start, credits and quit buttons."""

from __future__ import annotations

import math
import struct

import pygame

from .core.scene import Scene
from .defs import Anchor, Color
from .scene_main import SCORE_FILE, SCORE_FORMAT, SCORE_SIZE, SceneMain
from .screen.hud_button import HUDButton
from .screen.hud_text import HUDText
from .screen.ui_mouse import UIMouse

_MUSIC = "assets/bgm/Spooky music.mp3"
_FONT = "assets/font/VonwaonBitmap-16px.ttf"
_CREDITS = "assets/credits.txt"
_POINTER = "assets/UI/pointer_c_shaded.png"
_TITLE = "幽 灵 逃 生"
_HIGH_SCORE_LABEL = "最高分："


class SceneTitle(Scene):
    """Entry screen; its border slowly cycles through colours."""

    def __init__(self) -> None:
        super().__init__()
        self.boundary_color = Color(0.5, 0.5, 0.5, 1.0)
        self.color_timer = 0.0
        self.button_start: HUDButton | None = None
        self.button_credits: HUDButton | None = None
        self.button_quit: HUDButton | None = None
        self.credits_text: HUDText | None = None

    def init(self) -> None:
        super().init()
        self.load_data(SCORE_FILE)
        if pygame.display.get_init():
            pygame.mouse.set_visible(True)
        game = self.game
        game.play_music(_MUSIC, True)
        window = pygame.Vector2(game.window_size)
        centre = window / 2.0
        HUDText.create(self, _TITLE, centre - pygame.Vector2(0.0, 100.0),
                       pygame.Vector2(window.x / 2.0, window.y / 3.0), _FONT, 64)
        HUDText.create(self, f"{_HIGH_SCORE_LABEL}{game.high_score}",
                       centre + pygame.Vector2(0.0, 100.0), pygame.Vector2(200.0, 50.0), _FONT, 32)

        self.button_start = HUDButton.create(
            self, centre + pygame.Vector2(-200.0, 200.0),
            "assets/UI/A_Start3.png", "assets/UI/A_Start1.png", "assets/UI/A_Start2.png", 2.0)
        self.button_credits = HUDButton.create(
            self, centre + pygame.Vector2(0.0, 200.0),
            "assets/UI/A_Credits3.png", "assets/UI/A_Credits1.png", "assets/UI/A_Credits2.png", 2.0)
        self.button_quit = HUDButton.create(
            self, centre + pygame.Vector2(200.0, 200.0),
            "assets/UI/A_Quit3.png", "assets/UI/A_Quit1.png", "assets/UI/A_Quit2.png", 2.0)

        text = game.load_text_file(_CREDITS)
        self.credits_text = HUDText.create(self, text, centre, pygame.Vector2(500.0, 500.0), _FONT, 18)
        self.credits_text.set_bg_size_by_text(100.0)
        self.credits_text.active = False

        UIMouse.create(self, _POINTER, _POINTER, 1.0, Anchor.TOP_LEFT)

    def handle_events(self, event) -> bool:
        """While the credits show, a mouse release closes them."""
        if self._credits_shown() and event.type == pygame.MOUSEBUTTONUP:
            self.credits_text.active = False
            return True
        return super().handle_events(event)

    def update(self, delta_time: float) -> None:
        self.color_timer += delta_time
        self._update_color()
        if self._credits_shown():
            return
        super().update(delta_time)
        self._check_button_quit()
        self._check_button_start()
        self._check_button_credits()

    def render(self) -> None:
        self._render_background()
        super().render()

    def clean(self) -> None:
        super().clean()

    def load_data(self, file_path: str) -> None:
        """Read the stored high score; a missing or short file counts as 0."""
        try:
            with open(file_path, "rb") as handle:
                data = handle.read(SCORE_SIZE)
        except OSError:
            data = b""
        score = struct.unpack(SCORE_FORMAT, data)[0] if len(data) == SCORE_SIZE else 0
        self.game.high_score = score

    def _credits_shown(self) -> bool:
        return self.credits_text is not None and self.credits_text.active

    def _render_background(self) -> None:
        window = pygame.Vector2(self.game.window_size)
        margin = pygame.Vector2(30.0, 30.0)
        self.game.draw_border(margin, window - margin, pygame.Vector2(0.0, 10.0), self.boundary_color)

    def _update_color(self) -> None:
        t = self.color_timer
        self.boundary_color = Color(
            0.5 + 0.5 * math.sin(t * 0.8),
            0.5 + 0.5 * math.sin(t * 0.7),
            0.5 + 0.5 * math.sin(t * 0.6),
            self.boundary_color.a,
        )

    def _check_button_quit(self) -> None:
        if self.button_quit is not None and self.button_quit.consume_trigger():
            self.game.quit()

    def _check_button_start(self) -> None:
        if self.button_start is not None and self.button_start.consume_trigger():
            self.game.safe_change_scene(SceneMain())

    def _check_button_credits(self) -> None:
        if self.button_credits is not None and self.button_credits.consume_trigger():
            self.credits_text.active = True