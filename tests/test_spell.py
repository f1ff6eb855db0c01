import pygame
import pytest

from ghostescape.affiliate.collider import Collider
from ghostescape.core.actor import Actor
from ghostescape.core.scene import Scene
from ghostescape.defs import ObjectType
from ghostescape.game import Game
from ghostescape.raw.stats import Stats
from ghostescape.world.spell import Spell


@pytest.fixture(autouse=True)
def game():
    Game.reset_instance()
    yield Game.get_instance()
    Game.reset_instance()


@pytest.fixture
def scene(game):
    scene = Scene()
    scene.init()
    game.current_scene = scene
    return scene


def _sheet(tmp_path, frames=1, side=16):
    surface = pygame.Surface((frames * side, side))
    surface.fill((255, 255, 0))
    path = tmp_path / "spell.bmp"
    pygame.image.save(surface, str(path))
    return str(path)


def _target(scene, position, kind=ObjectType.ENEMY):
    actor = Actor()
    actor.init()
    actor.type = kind
    actor.position = position
    actor.collider = Collider.create(actor, (20, 20))
    actor.stats = Stats.create(actor)
    scene.add_child(actor)
    return actor


def test_create_matches_collider_to_sprite(tmp_path, scene):
    spell = Spell.create(None, _sheet(tmp_path), (100, 100), 40.0, 3.0)
    assert spell.damage == 40.0
    assert spell.collider.size == spell.sprite.size
    assert spell.sprite.size == pygame.Vector2(16, 16) * 3.0
    assert spell.sprite.is_loop is False
    assert spell.position == pygame.Vector2(100, 100)


def test_create_with_parent_adds_to_scene(tmp_path, scene):
    spell = Spell.create(scene, _sheet(tmp_path), (0, 0), 40.0)
    assert spell in scene.children_world


def test_update_damages_touching_enemy(tmp_path, scene):
    enemy = _target(scene, (100, 100))
    spell = Spell.create(None, _sheet(tmp_path, frames=4), (100, 100), 40.0)
    spell.update(0.0)
    assert enemy.stats.health == enemy.stats.max_health - spell.damage
    spell.update(0.0)
    assert enemy.stats.health == enemy.stats.max_health - spell.damage


def test_update_spares_distant_enemy(tmp_path, scene):
    enemy = _target(scene, (500, 500))
    spell = Spell.create(None, _sheet(tmp_path, frames=4), (100, 100), 40.0)
    spell.update(0.0)
    assert enemy.stats.health == enemy.stats.max_health


def test_update_spares_non_enemy(tmp_path, scene):
    other = _target(scene, (100, 100), ObjectType.OBJECT_WORLD)
    spell = Spell.create(None, _sheet(tmp_path, frames=4), (100, 100), 40.0)
    spell.update(0.0)
    assert other.stats.health == other.stats.max_health


def test_finished_spell_is_marked_for_removal(tmp_path, scene):
    spell = Spell.create(None, _sheet(tmp_path, frames=1), (0, 0), 40.0)
    assert spell.need_remove is False
    spell.update(1.0 / spell.sprite.fps)
    assert spell.need_remove is True