"""The playing field: player, enemies, HUD and the end-of-game screen."""

from __future__ import annotations

import logging
import struct

import pygame

from .core.scene import Scene
from .defs import Anchor, Color
from .player import Player
from .raw.bg_star import BgStar
from .raw.timer import Timer
from .screen.hud_button import HUDButton
from .screen.hud_stats import HudStats
from .screen.hud_text import HUDText
from .screen.ui_mouse import UIMouse
from .spawner import Spawner

log = logging.getLogger(__name__)

SCORE_FILE = "assets/score.dat"
SCORE_FORMAT = "<i"
SCORE_SIZE = struct.calcsize(SCORE_FORMAT)

_MUSIC = "assets/bgm/OhMyGhost.ogg"
_SLOW_MOTION = 0.1
_GRID_COLOR = Color(0.5, 0.5, 0.5, 1.0)
_BORDER_COLOR = Color(1.0, 1.0, 1.0, 1.0)


def _slow_motion_held() -> bool:
    return pygame.display.get_init() and bool(pygame.mouse.get_pressed()[2])


class SceneMain(Scene):
    """The game itself; holding the right mouse button slows time down."""

    def __init__(self) -> None:
        super().__init__()
        self.player: Player | None = None
        self.spawner: Spawner | None = None
        self.ui_mouse: UIMouse | None = None
        self.hud_stats: HudStats | None = None
        self.hud_text_score: HUDText | None = None
        self.button_pause: HUDButton | None = None
        self.button_restart: HUDButton | None = None
        self.button_back: HUDButton | None = None
        self.end_timer: Timer | None = None

    def init(self) -> None:
        super().init()
        if pygame.display.get_init():
            pygame.mouse.set_visible(False)
        game = self.game
        game.play_music(_MUSIC, True)
        window = pygame.Vector2(game.window_size)
        self.map_size = window * 3.0
        self._window_position = self.map_size / 2.0 - window / 2.0

        self.player = Player()
        self.player.init()
        self.player.position = self.map_size / 2.0
        self.add_child(self.player)

        BgStar.create(self, 2000, 0.2, 0.5, 0.7)
        self.end_timer = Timer.create(self)

        self.spawner = Spawner()
        self.spawner.init()
        self.spawner.target = self.player
        self.add_child(self.spawner)

        self.button_pause = HUDButton.create(
            self, window - pygame.Vector2(230.0, 30.0),
            "assets/UI/A_Start3.png", "assets/UI/A_Start1.png", "assets/UI/A_Start2.png")
        self.button_restart = HUDButton.create(
            self, window - pygame.Vector2(140.0, 30.0),
            "assets/UI/A_Restart3.png", "assets/UI/A_Restart1.png", "assets/UI/A_Restart2.png")
        self.button_back = HUDButton.create(
            self, window - pygame.Vector2(50.0, 30.0),
            "assets/UI/A_Back3.png", "assets/UI/A_Back1.png", "assets/UI/A_Back2.png")

        self.hud_stats = HudStats.create(self, self.player, pygame.Vector2(30.0, 30.0))
        self.hud_text_score = HUDText.create(
            self, "Score: 0", pygame.Vector2(window.x - 120.0, 30.0), pygame.Vector2(200.0, 50.0))
        self.ui_mouse = UIMouse.create(
            self, "assets/UI/29.png", "assets/UI/30.png", 1.0, Anchor.CENTER)

    def handle_events(self, event) -> bool:
        return super().handle_events(event)

    def update(self, delta_time: float) -> None:
        if _slow_motion_held():
            delta_time *= _SLOW_MOTION
        super().update(delta_time)
        self._update_score()

        self._check_button_back()
        self._check_button_pause()
        self._check_button_restart()

        if self.player is not None and not self.player.active:
            self.end_timer.start()
            self.save_data(SCORE_FILE)
        self._check_end_timer()

    def render(self) -> None:
        self._render_background()
        super().render()

    def clean(self) -> None:
        super().clean()

    def save_data(self, file_path: str) -> None:
        """Store the high score as a 4-byte little-endian integer."""
        try:
            with open(file_path, "wb") as handle:
                handle.write(struct.pack(SCORE_FORMAT, self.game.high_score))
        except OSError as exc:
            log.warning("cannot save score to %s: %s", file_path, exc)

    def _render_background(self) -> None:
        start = -self.window_position
        end = self.map_size - self.window_position
        gap = pygame.Vector2(560.0, 5.0)
        self.game.draw_grid(start, end, gap, _GRID_COLOR)
        self.game.draw_border(start, end, gap, _BORDER_COLOR)

    def _update_score(self) -> None:
        self.hud_text_score.text = f"Score: {self.game.score}"

    def _check_button_pause(self) -> None:
        if not self.button_pause.consume_trigger():
            return
        self.save_data(SCORE_FILE)
        if self.is_paused:
            self.resume()
        else:
            self.pause()

    def _check_button_restart(self) -> None:
        if not self.button_restart.consume_trigger():
            return
        self.save_data(SCORE_FILE)
        self.game.score = 0
        self.game.safe_change_scene(SceneMain())
        self.game.enemy_count = 0

    def _check_button_back(self) -> None:
        if not self.button_back.consume_trigger():
            return
        from .scene_title import SceneTitle

        self.save_data(SCORE_FILE)
        self.game.score = 0
        self.game.safe_change_scene(SceneTitle())
        self.game.enemy_count = 0

    def _check_end_timer(self) -> None:
        """After the player dies and the timer fires, show big restart and back buttons."""
        if not self.end_timer.time_out():
            return
        self.pause()
        centre = pygame.Vector2(self.game.window_size) / 2.0
        self.button_restart.render_position = centre - pygame.Vector2(200.0, 0.0)
        self.button_restart.set_scale(4.0)
        self.button_back.render_position = centre + pygame.Vector2(200.0, 0.0)
        self.button_back.set_scale(4.0)
        self.button_pause.active = False
        self.end_timer.stop()