"""The game singleton: window, main loop, audio, drawing and utilities."""

from __future__ import annotations

import logging
import random
import time

import pygame

from .assets import AssetError, AssetStore
from .defs import Color

log = logging.getLogger(__name__)

_FPS = 60
_CHANNELS = 16
_VOLUME = 0.2
_CIRCLE_TEXTURE = "assets/UI/circle.png"
_TEXT_COLOR = (255, 255, 255)


def _rect(x: float, y: float, w: float, h: float) -> pygame.Rect:
    return pygame.Rect(round(x), round(y), round(w), round(h))


class Game:
    """Owns the window, the current scene and shared services."""

    _instance: Game | None = None

    def __init__(self) -> None:
        self.asset_store = AssetStore()
        self.window_size = pygame.Vector2(0, 0)
        self.mouse_position = pygame.Vector2(0, 0)
        self.mouse_buttons: tuple[bool, ...] = (False, False, False)
        self.is_running = True
        self.current_scene = None
        self.next_scene = None
        self.fps = _FPS
        self.frame_duration = 0
        self.delta_time = 0.0
        self._score = 0
        self.high_score = 0
        self.enemy_count = 0
        self.canvas: pygame.Surface | None = None
        self._rng = random.Random()

    @classmethod
    def get_instance(cls) -> Game:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    # lifecycle

    def init(self, title: str, width: int, height: int) -> None:
        """Open the window, start audio and fonts, and enter the title scene."""
        self.window_size = pygame.Vector2(width, height)
        pygame.init()
        try:
            pygame.mixer.init()
            pygame.mixer.set_num_channels(_CHANNELS)
            pygame.mixer.music.set_volume(_VOLUME)
            for index in range(_CHANNELS):
                pygame.mixer.Channel(index).set_volume(_VOLUME)
        except pygame.error as exc:
            log.error("audio initialisation failed: %s", exc)
        if not pygame.font.get_init():
            pygame.font.init()
        pygame.display.set_caption(title)
        pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.canvas = pygame.Surface((width, height))
        self.frame_duration = 1_000_000_000 // self.fps

        from .scene_title import SceneTitle

        self.current_scene = SceneTitle()
        self.current_scene.init()

    def run(self) -> None:
        """Run the main loop until quit, holding a steady frame rate."""
        while self.is_running:
            start = time.perf_counter_ns()
            if self.next_scene is not None:
                self.change_scene(self.next_scene)
                self.next_scene = None
            self.handle_events()
            self.update(self.delta_time)
            self.render()
            elapsed = time.perf_counter_ns() - start
            if elapsed < self.frame_duration:
                time.sleep((self.frame_duration - elapsed) / 1e9)
                self.delta_time = self.frame_duration / 1e9
            else:
                self.delta_time = elapsed / 1e9

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.is_running = False
            elif self.current_scene is not None:
                self.current_scene.handle_events(event)

    def update(self, delta_time: float) -> None:
        self._update_mouse()
        if self.current_scene is not None:
            self.current_scene.update(delta_time)

    def render(self) -> None:
        if self.canvas is None:
            return
        self.canvas.fill((0, 0, 0))
        if self.current_scene is not None:
            self.current_scene.render()
        self._present()

    def clean(self) -> None:
        if self.current_scene is not None:
            self.current_scene.clean()
            self.current_scene = None
        self.asset_store.clean()
        if pygame.mixer.get_init() is not None:
            pygame.mixer.quit()
        pygame.font.quit()
        pygame.display.quit()
        pygame.quit()
        self.canvas = None

    # score and scenes

    @property
    def score(self) -> int:
        return self._score

    @score.setter
    def score(self, value: int) -> None:
        self._score = value
        if self._score > self.high_score:
            self.high_score = self._score

    def add_score(self, score: int) -> None:
        self.score = self._score + score

    def quit(self) -> None:
        self.is_running = False

    def safe_change_scene(self, scene) -> None:
        """Switch to ``scene`` at the start of the next frame."""
        self.next_scene = scene

    def change_scene(self, scene) -> None:
        if self.current_scene is not None:
            self.current_scene.clean()
        self.current_scene = scene
        self.current_scene.init()

    # audio

    @staticmethod
    def _mixer_ready() -> bool:
        return pygame.mixer.get_init() is not None

    def play_music(self, music_path: str, loop: bool = True) -> None:
        if not self._mixer_ready():
            return
        try:
            pygame.mixer.music.load(self.asset_store.get_music(music_path))
            pygame.mixer.music.set_volume(_VOLUME)
            pygame.mixer.music.play(-1 if loop else 0)
        except (AssetError, pygame.error) as exc:
            log.error("cannot play music %s: %s", music_path, exc)

    def play_sound(self, sound_path: str) -> None:
        if not self._mixer_ready():
            return
        try:
            sound = self.asset_store.get_sound(sound_path)
        except AssetError as exc:
            log.error("cannot play sound %s: %s", sound_path, exc)
            return
        sound.set_volume(_VOLUME)
        sound.play()

    def stop_music(self) -> None:
        if self._mixer_ready():
            pygame.mixer.music.stop()

    def stop_sound(self) -> None:
        if self._mixer_ready():
            pygame.mixer.stop()

    def pause_music(self) -> None:
        if self._mixer_ready():
            pygame.mixer.music.pause()

    def pause_sound(self) -> None:
        if self._mixer_ready():
            pygame.mixer.pause()

    def resume_music(self) -> None:
        if self._mixer_ready():
            pygame.mixer.music.unpause()

    def resume_sound(self) -> None:
        if self._mixer_ready():
            pygame.mixer.unpause()

    # random numbers

    def random_float(self, low: float, high: float) -> float:
        return self._rng.uniform(low, high)

    def random_int(self, low: int, high: int) -> int:
        """Random integer in the closed range [low, high]."""
        return self._rng.randint(int(low), int(high))

    def random_vec2(self, low, high) -> pygame.Vector2:
        low, high = pygame.Vector2(low), pygame.Vector2(high)
        return pygame.Vector2(self.random_float(low.x, high.x), self.random_float(low.y, high.y))

    def random_ivec2(self, low, high) -> tuple[int, int]:
        low, high = pygame.Vector2(low), pygame.Vector2(high)
        return (self.random_int(low.x, high.x), self.random_int(low.y, high.y))

    # drawing

    def render_texture(self, texture, position, size, mask=(1.0, 1.0)) -> None:
        """Draw part of a texture; ``mask`` keeps a share of width and of height from the bottom."""
        if self.canvas is None or texture.surface is None:
            return
        position, size, mask = pygame.Vector2(position), pygame.Vector2(size), pygame.Vector2(mask)
        src = texture.src_rect
        area = _rect(
            src.x,
            src.y + src.h * (1 - mask.y),
            src.w * mask.x,
            src.h * mask.y,
        ).clip(texture.surface.get_rect())
        dst_x = position.x
        dst_y = position.y + size.y * (1 - mask.y)
        dst_w = size.x * mask.x
        dst_h = size.y * mask.y
        width, height = round(dst_w), round(dst_h)
        if width <= 0 or height <= 0 or area.width <= 0 or area.height <= 0:
            return
        image = pygame.transform.scale(texture.surface.subsurface(area), (width, height))
        if texture.is_flip:
            image = pygame.transform.flip(image, True, False)
        if texture.angle:
            image = pygame.transform.rotate(image, -texture.angle)
            center = (round(dst_x + dst_w / 2), round(dst_y + dst_h / 2))
            self.canvas.blit(image, image.get_rect(center=center))
        else:
            self.canvas.blit(image, (round(dst_x), round(dst_y)))

    def render_fill_circle(self, position, size, alpha: float) -> None:
        if self.canvas is None:
            return
        try:
            circle = self.asset_store.get_texture(_CIRCLE_TEXTURE)
        except AssetError as exc:
            log.error("%s", exc)
            return
        position, size = pygame.Vector2(position), pygame.Vector2(size)
        width, height = round(size.x), round(size.y)
        if width <= 0 or height <= 0:
            return
        image = pygame.transform.scale(circle, (width, height))
        image.set_alpha(round(alpha * 255))
        self.canvas.blit(image, (round(position.x), round(position.y)))

    def render_hbar(self, position, size, percent: float, color: Color) -> None:
        """Draw an outlined horizontal bar filled to ``percent``."""
        if self.canvas is None:
            return
        position, size = pygame.Vector2(position), pygame.Vector2(size)
        rgba = color.to_pygame()
        pygame.draw.rect(self.canvas, rgba, _rect(position.x, position.y, size.x, size.y), width=1)
        pygame.draw.rect(self.canvas, rgba, _rect(position.x, position.y, size.x * percent, size.y))

    def draw_grid(self, start, end, step, color: Color) -> None:
        """Draw grid lines spaced by ``step.x`` in both directions."""
        start, end, step = pygame.Vector2(start), pygame.Vector2(end), pygame.Vector2(step)
        if step.x <= 0:
            raise ValueError("grid step must be positive")
        if self.canvas is None:
            return
        rgba = color.to_pygame()
        x = start.x
        while x <= end.x:
            pygame.draw.line(self.canvas, rgba, (x, start.y), (x, end.y))
            x += step.x
        y = start.y
        while y <= end.y:
            pygame.draw.line(self.canvas, rgba, (start.x, y), (end.x, y))
            y += step.x

    def draw_border(self, start, end, step, color: Color) -> None:
        """Draw a border around the box, ``step.y`` pixels thick, growing outwards."""
        if self.canvas is None:
            return
        start, end, step = pygame.Vector2(start), pygame.Vector2(end), pygame.Vector2(step)
        rgba = color.to_pygame()
        i = 0
        while i < step.y:
            rect = _rect(start.x - i, start.y - i, end.x - start.x + 2 * i, end.y - start.y + 2 * i)
            pygame.draw.rect(self.canvas, rgba, rect, width=1)
            i += 1

    def draw_points(self, points, render_position, color: Color) -> None:
        if self.canvas is None:
            return
        offset = pygame.Vector2(render_position)
        rgba = color.to_pygame()
        for point in points:
            self.canvas.set_at((round(point[0] + offset.x), round(point[1] + offset.y)), rgba)

    # text

    def create_text(self, text: str, font_path: str, font_size: int = 16) -> pygame.Surface:
        """Render white text; each newline starts a new line."""
        font = self.asset_store.get_font(font_path, font_size)
        lines = [font.render(line, True, _TEXT_COLOR) for line in text.split("\n")]
        if len(lines) == 1:
            return lines[0]
        width = max(line.get_width() for line in lines)
        height = sum(line.get_height() for line in lines)
        surface = pygame.Surface((width, height), pygame.SRCALPHA)
        y = 0
        for line in lines:
            surface.blit(line, (0, y))
            y += line.get_height()
        return surface

    # utilities

    def is_mouse_in_rect(self, top_left, bottom_right) -> bool:
        top_left, bottom_right = pygame.Vector2(top_left), pygame.Vector2(bottom_right)
        return (
            top_left.x <= self.mouse_position.x <= bottom_right.x
            and top_left.y <= self.mouse_position.y <= bottom_right.y
        )

    def load_text_file(self, file_path: str) -> str:
        """Read a text file, each line ending in a newline; empty if unreadable."""
        try:
            with open(file_path, encoding="utf-8") as handle:
                text = handle.read()
        except OSError:
            return ""
        if text and not text.endswith("\n"):
            text += "\n"
        return text

    # internals

    def _letterbox(self, window_size: tuple[int, int]) -> pygame.Rect:
        win_w, win_h = window_size
        log_w, log_h = self.window_size.x, self.window_size.y
        if log_w <= 0 or log_h <= 0:
            return pygame.Rect(0, 0, 0, 0)
        scale = min(win_w / log_w, win_h / log_h)
        width, height = int(log_w * scale), int(log_h * scale)
        return pygame.Rect((win_w - width) // 2, (win_h - height) // 2, width, height)

    def _present(self) -> None:
        window = pygame.display.get_surface() if pygame.display.get_init() else None
        if window is None or self.canvas is None:
            return
        rect = self._letterbox(window.get_size())
        window.fill((0, 0, 0))
        if rect.width > 0 and rect.height > 0:
            window.blit(pygame.transform.scale(self.canvas, rect.size), rect)
        pygame.display.flip()

    def _update_mouse(self) -> None:
        window = pygame.display.get_surface() if pygame.display.get_init() else None
        if window is None:
            return
        self.mouse_buttons = tuple(pygame.mouse.get_pressed()[:3])
        x, y = pygame.mouse.get_pos()
        rect = self._letterbox(window.get_size())
        if rect.width == 0 or rect.height == 0:
            return
        self.mouse_position = pygame.Vector2(
            (x - rect.x) * self.window_size.x / rect.width,
            (y - rect.y) * self.window_size.y / rect.height,
        )