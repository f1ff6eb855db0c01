"""Spawns waves of enemies around the camera."""

from __future__ import annotations

import pygame

from .core.object import GameObject
from .enemy import Enemy
from .world.effect import Effect

_SOUND_SPAWN = "assets/sound/silly-ghost-sound-242342.mp3"
_SPAWN_EFFECT = "assets/effect/184_3.png"


class Spawner(GameObject):
    """Every ``interval`` seconds brings ``num`` enemies into view, up to a cap."""

    def __init__(self) -> None:
        super().__init__()
        self.num = 15
        self.max_count = 60
        self.count = 0
        self.timer = 0.0
        self.interval = 3.0
        self.target = None

    def update(self, delta_time: float) -> None:
        game = self.game
        self.count = game.enemy_count
        if self.target is None or not self.target.active:
            return
        if self.count > self.max_count:
            return
        self.timer += delta_time
        if self.timer < self.interval:
            return
        self.timer = 0.0
        game.play_sound(_SOUND_SPAWN)
        scene = game.current_scene
        low = scene.window_position
        high = low + pygame.Vector2(game.window_size)
        for _ in range(self.num):
            position = game.random_vec2(low, high)
            enemy = Enemy.create(None, position, self.target)
            Effect.create(scene, _SPAWN_EFFECT, position, 1.0, enemy)
        game.enemy_count = self.count + self.num