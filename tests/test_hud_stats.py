import pygame
import pytest

from ghostescape.core.actor import Actor
from ghostescape.defs import Anchor, anchor_offset
from ghostescape.game import Game
from ghostescape.raw.stats import Stats
from ghostescape.screen.hud_stats import HudStats


def _image(path, size, color=(255, 255, 255)):
    path.parent.mkdir(parents=True, exist_ok=True)
    surface = pygame.Surface(size)
    surface.fill(color)
    pygame.image.save(surface, str(path))


@pytest.fixture
def game(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    ui = tmp_path / "assets" / "UI"
    for name in ("bar_bg.png", "bar_red.png", "bar_blue.png"):
        _image(ui / name, (40, 4))
    for name in ("Red Potion.png", "Blue Potion.png"):
        _image(ui / name, (16, 16))
    Game.reset_instance()
    yield Game.get_instance()
    Game.reset_instance()


@pytest.fixture
def actor(game):
    actor = Actor()
    actor.stats = Stats.create(actor)
    return actor


def test_create_builds_six_sprites(actor):
    hud = HudStats.create(None, actor, (30, 30))
    assert hud.target is actor
    assert hud.render_position == pygame.Vector2(30, 30)
    assert hud.children == [
        hud.health_bar_bg, hud.health_bar, hud.health_icon,
        hud.mana_bar_bg, hud.mana_bar, hud.mana_icon,
    ]


def test_bars_are_shifted_from_anchor(actor):
    hud = HudStats.create(None, actor, (0, 0))
    base = anchor_offset(Anchor.CENTER_LEFT, hud.health_bar.size)
    assert hud.health_bar.offset == base + pygame.Vector2(30, 0)
    assert hud.health_bar_bg.offset == hud.health_bar.offset
    assert hud.mana_bar_bg.offset == hud.mana_bar.offset
    assert hud.health_icon.offset == anchor_offset(Anchor.CENTER_LEFT, hud.health_icon.size)


def test_update_follows_health_and_mana(actor):
    hud = HudStats.create(None, actor, (0, 0))
    actor.stats.health = actor.stats.max_health / 2
    actor.stats.mana_regen = 0.0
    actor.stats.mana = actor.stats.max_mana / 4
    hud.update(0.0)
    assert hud.health_bar.percentage == pygame.Vector2(0.5, 1.0)
    assert hud.mana_bar.percentage == pygame.Vector2(0.25, 1.0)


def test_update_without_stats_keeps_full_bars(game):
    hud = HudStats.create(None, Actor(), (0, 0))
    hud.update(0.0)
    assert hud.health_bar.percentage == pygame.Vector2(1, 1)
    assert hud.mana_bar.percentage == pygame.Vector2(1, 1)


def test_missing_asset_raises(tmp_path, monkeypatch, game):
    (tmp_path / "assets" / "UI" / "bar_red.png").unlink()
    from ghostescape.assets import AssetError

    with pytest.raises(AssetError):
        HudStats.create(None, None, (0, 0))