import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from dataclasses import dataclass
from pathlib import Path

import pygame
import pytest

from ghostescape.defs import Color
from ghostescape.game import Game

FONT_PATH = str(Path(pygame.__file__).parent / pygame.font.get_default_font())
WHITE = Color(1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)


@dataclass
class _Texture:
    surface: pygame.Surface
    src_rect: pygame.Rect
    angle: float = 0.0
    is_flip: bool = False


class _Scene:
    def __init__(self, name, calls):
        self.name = name
        self.calls = calls

    def init(self):
        self.calls.append(("init", self.name))

    def clean(self):
        self.calls.append(("clean", self.name))

    def update(self, delta_time):
        self.calls.append(("update", delta_time))


@pytest.fixture
def game():
    g = Game()
    g.canvas = pygame.Surface((40, 40))
    yield g
    Game.reset_instance()


def rgb(game, x, y):
    return tuple(game.canvas.get_at((x, y)))[:3]


def test_singleton_and_reset():
    Game.reset_instance()
    first = Game.get_instance()
    assert Game.get_instance() is first
    Game.reset_instance()
    assert Game.get_instance() is not first
    Game.reset_instance()


def test_add_score_raises_high_score(game):
    game.add_score(10)
    game.add_score(5)
    assert game.score == 15
    assert game.high_score == 15


def test_lower_score_keeps_high_score(game):
    game.score = 30
    game.score = 0
    assert game.score == 0
    assert game.high_score == 30


def test_quit_stops_running(game):
    game.quit()
    assert game.is_running is False


def test_change_scene_cleans_old_and_inits_new(game):
    calls = []
    first, second = _Scene("a", calls), _Scene("b", calls)
    game.change_scene(first)
    game.change_scene(second)
    assert calls == [("init", "a"), ("clean", "a"), ("init", "b")]
    assert game.current_scene is second


def test_safe_change_scene_defers(game):
    calls = []
    first, second = _Scene("a", calls), _Scene("b", calls)
    game.change_scene(first)
    game.safe_change_scene(second)
    assert game.current_scene is first
    assert game.next_scene is second


def test_update_passes_delta_to_scene(game):
    calls = []
    game.current_scene = _Scene("a", calls)
    game.update(0.25)
    assert calls == [("update", 0.25)]


def test_random_float_in_range(game):
    values = [game.random_float(2.0, 3.0) for _ in range(200)]
    assert all(2.0 <= v <= 3.0 for v in values)


def test_random_int_is_inclusive(game):
    values = {game.random_int(1, 2) for _ in range(200)}
    assert values == {1, 2}


def test_random_vec2_in_box(game):
    for _ in range(100):
        v = game.random_vec2((0, 10), (5, 20))
        assert 0 <= v.x <= 5 and 10 <= v.y <= 20


def test_random_ivec2_integers_in_box(game):
    for _ in range(100):
        x, y = game.random_ivec2((0, 10), (5, 20))
        assert isinstance(x, int) and 0 <= x <= 5
        assert isinstance(y, int) and 10 <= y <= 20


def test_mouse_in_rect_includes_edges(game):
    game.mouse_position = pygame.Vector2(10, 20)
    assert game.is_mouse_in_rect((10, 20), (30, 40))
    assert game.is_mouse_in_rect((0, 0), (10, 20))
    assert not game.is_mouse_in_rect((11, 0), (30, 40))


def test_load_text_file_ends_lines(game, tmp_path):
    path = tmp_path / "credits.txt"
    path.write_text("a\nb", encoding="utf-8")
    assert game.load_text_file(str(path)) == "a\nb\n"


def test_load_missing_text_file_is_empty(game, tmp_path):
    assert game.load_text_file(str(tmp_path / "absent.txt")) == ""


def test_draw_border_grows_outwards(game):
    game.draw_border((10, 10), (30, 30), (0, 2), WHITE)
    white = WHITE.to_pygame()[:3]
    assert rgb(game, 10, 10) == white
    assert rgb(game, 9, 9) == white
    assert rgb(game, 8, 8) != white
    assert rgb(game, 20, 20) != white


def test_draw_grid_uses_x_step(game):
    game.draw_grid((0, 0), (20, 20), (10, 99), WHITE)
    white = WHITE.to_pygame()[:3]
    assert rgb(game, 10, 5) == white
    assert rgb(game, 5, 10) == white
    assert rgb(game, 5, 5) != white


def test_draw_grid_rejects_zero_step(game):
    with pytest.raises(ValueError):
        game.draw_grid((0, 0), (20, 20), (0, 0), WHITE)


def test_render_hbar_fills_share(game):
    game.render_hbar((0, 0), (20, 4), 0.5, RED)
    red = RED.to_pygame()[:3]
    assert rgb(game, 5, 2) == red
    assert rgb(game, 15, 2) != red
    assert rgb(game, 19, 2) == red


def test_draw_points_offset(game):
    game.draw_points([pygame.Vector2(1, 1)], (2, 3), BLUE)
    assert rgb(game, 3, 4) == BLUE.to_pygame()[:3]


def _solid(color, size):
    surface = pygame.Surface(size)
    surface.fill(color.to_pygame())
    return surface


def test_render_texture_scales_to_size(game):
    texture = _Texture(_solid(RED, (4, 4)), pygame.Rect(0, 0, 4, 4))
    game.render_texture(texture, (2, 2), (8, 8))
    red = RED.to_pygame()[:3]
    assert rgb(game, 5, 5) == red
    assert rgb(game, 9, 9) == red
    assert rgb(game, 1, 1) != red
    assert rgb(game, 10, 10) != red


def test_render_texture_mask_keeps_bottom(game):
    texture = _Texture(_solid(RED, (4, 4)), pygame.Rect(0, 0, 4, 4))
    game.render_texture(texture, (2, 2), (8, 8), (1.0, 0.5))
    red = RED.to_pygame()[:3]
    assert rgb(game, 5, 3) != red
    assert rgb(game, 5, 8) == red


def test_render_texture_flip(game):
    surface = pygame.Surface((2, 1))
    surface.set_at((0, 0), RED.to_pygame())
    surface.set_at((1, 0), BLUE.to_pygame())
    texture = _Texture(surface, pygame.Rect(0, 0, 2, 1), is_flip=True)
    game.render_texture(texture, (0, 0), (2, 1))
    assert rgb(game, 0, 0) == BLUE.to_pygame()[:3]
    assert rgb(game, 1, 0) == RED.to_pygame()[:3]


def test_create_text_stacks_lines(game):
    single = game.create_text("ab", FONT_PATH, 16)
    double = game.create_text("ab\ncd", FONT_PATH, 16)
    assert double.get_height() > single.get_height()
    assert double.get_width() >= single.get_width() > 0