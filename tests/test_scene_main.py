import struct

import pytest

from ghostescape.game import Game
from ghostescape.scene_main import SceneMain
from ghostescape.scene_title import SceneTitle
from ghostescape.screen.hud_button import HUDButton


@pytest.fixture
def game(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "assets").mkdir()
    Game.reset_instance()
    instance = Game.get_instance()
    yield instance
    Game.reset_instance()


def test_save_data_writes_little_endian_int(game, tmp_path):
    game.high_score = 1234
    path = tmp_path / "score.dat"
    SceneMain().save_data(str(path))
    assert path.read_bytes() == struct.pack("<i", 1234)


def test_save_data_round_trips_through_title(game, tmp_path):
    game.high_score = 77
    path = tmp_path / "score.dat"
    SceneMain().save_data(str(path))
    game.high_score = 0
    SceneTitle().load_data(str(path))
    assert game.high_score == 77


def test_save_data_into_missing_directory_is_silent(game, tmp_path):
    game.high_score = 5
    path = tmp_path / "missing" / "score.dat"
    SceneMain().save_data(str(path))
    assert not path.exists()


def test_restart_button_resets_score_and_saves(game, tmp_path):
    game.high_score = 321
    game.enemy_count = 12
    scene = SceneMain()
    scene.button_restart = HUDButton()
    scene.button_restart.is_trigger = True
    scene._check_button_restart()
    assert game.score == 0
    assert game.enemy_count == 0
    assert scene.button_restart.is_trigger is False
    data = (tmp_path / "assets" / "score.dat").read_bytes()
    assert struct.unpack("<i", data) == (321,)


def test_restart_button_untriggered_does_nothing(game, tmp_path):
    game.enemy_count = 12
    scene = SceneMain()
    scene.button_restart = HUDButton()
    scene._check_button_restart()
    assert game.enemy_count == 12
    assert not (tmp_path / "assets" / "score.dat").exists()


def test_back_button_resets_counters(game, tmp_path):
    game.high_score = 40
    game.enemy_count = 3
    scene = SceneMain()
    scene.button_back = HUDButton()
    scene.button_back.is_trigger = True
    scene._check_button_back()
    assert game.score == 0
    assert game.enemy_count == 0
    assert (tmp_path / "assets" / "score.dat").exists()