import pygame
import pytest

from ghostescape.affiliate.text_label import TextLabel
from ghostescape.assets import AssetError
from ghostescape.core.object import ObjectScreen
from ghostescape.defs import Anchor
from ghostescape.game import Game


@pytest.fixture(autouse=True)
def game():
    Game.reset_instance()
    yield Game.get_instance()
    Game.reset_instance()


def _parent(position=(0, 0)):
    parent = ObjectScreen()
    parent.init()
    parent.render_position = position
    return parent


def test_create_sizes_to_text(game):
    parent = _parent()
    label = TextLabel.create(parent, "Hello", None, 16)
    font = game.asset_store.get_font(None, 16)
    assert label.text == "Hello"
    assert label.font_size == 16
    assert label.size == pygame.Vector2(font.size("Hello"))
    assert label.offset == -label.size / 2
    assert label in parent.children
    assert label.parent is parent


def test_create_without_parent():
    label = TextLabel.create(None, "x", None, 16, Anchor.TOP_LEFT)
    assert label.parent is None
    assert label.offset == pygame.Vector2(0, 0)


def test_longer_text_is_wider():
    label = TextLabel.create(None, "Hi", None, 16)
    before = label.size.x
    label.text = "Hi there, ghost"
    assert label.size.x > before
    assert label.text == "Hi there, ghost"


def test_bigger_font_is_taller():
    label = TextLabel.create(None, "Hi", None, 16)
    before = label.size.y
    label.set_font(None, 48)
    assert label.font_size == 48
    assert label.size.y > before


def test_missing_font_raises(tmp_path):
    with pytest.raises(AssetError):
        TextLabel.create(None, "Hi", str(tmp_path / "missing.ttf"), 16)


def test_render_draws_text(game):
    game.canvas = pygame.Surface((200, 100))
    label = TextLabel.create(_parent((100, 50)), "HHHH", None, 32)
    label.render()
    assert max(tuple(pygame.transform.average_color(game.canvas))[:3]) > 0


def test_clean_drops_rendered_text(game):
    game.canvas = pygame.Surface((200, 100))
    label = TextLabel.create(_parent((100, 50)), "HHHH", None, 32)
    label.clean()
    label.render()
    assert label.surface is None
    assert tuple(pygame.transform.average_color(game.canvas))[:3] == (0, 0, 0)