import pygame
import pytest

from ghostescape.core.object import GameObject
from ghostescape.defs import Color
from ghostescape.game import Game
from ghostescape.scene_title import SceneTitle


@pytest.fixture
def game():
    Game.reset_instance()
    instance = Game.get_instance()
    yield instance
    Game.reset_instance()


def test_load_missing_file_gives_zero(game, tmp_path):
    game.high_score = 99
    SceneTitle().load_data(str(tmp_path / "nothing.dat"))
    assert game.high_score == 0


def test_load_short_file_gives_zero(game, tmp_path):
    path = tmp_path / "short.dat"
    path.write_bytes(b"\x01\x02")
    game.high_score = 99
    SceneTitle().load_data(str(path))
    assert game.high_score == 0


def test_load_reads_little_endian(game, tmp_path):
    path = tmp_path / "score.dat"
    path.write_bytes((250).to_bytes(4, "little"))
    SceneTitle().load_data(str(path))
    assert game.high_score == 250


def test_update_at_zero_time_gives_grey_border(game):
    title = SceneTitle()
    title.update(0.0)
    assert title.boundary_color == Color(0.5, 0.5, 0.5, 1.0)


def test_border_colour_stays_in_range(game):
    title = SceneTitle()
    for step in (1.0, 2.5, 7.25):
        title.update(step)
        for channel in (title.boundary_color.r, title.boundary_color.g, title.boundary_color.b):
            assert 0.0 <= channel <= 1.0
    assert title.color_timer == pytest.approx(10.75)


def test_mouse_release_closes_credits(game):
    title = SceneTitle()
    title.credits_text = GameObject()
    event = pygame.event.Event(pygame.MOUSEBUTTONUP, button=1)
    assert title.handle_events(event) is True
    assert title.credits_text.active is False


def test_events_pass_through_without_credits(game):
    title = SceneTitle()
    title.credits_text = GameObject()
    title.credits_text.active = False
    event = pygame.event.Event(pygame.MOUSEBUTTONUP, button=1)
    assert title.handle_events(event) is False


def test_update_frozen_while_credits_shown(game):
    title = SceneTitle()
    title.credits_text = GameObject()
    child = GameObject()
    child.need_remove = True
    title.add_child(child)
    title.update(0.5)
    assert child in title.children
    title.credits_text.active = False
    title.update(0.5)
    assert child not in title.children