"""Three parallax layers of twinkling background stars."""

from __future__ import annotations

import math

import pygame

from ..core.object import GameObject
from ..defs import Color
from ..game import Game


def _wave(timer: float, frequency: float) -> float:
    return 0.5 + 0.5 * math.sin(timer * frequency)


class BgStar(GameObject):
    """Far, middle and near star layers that scroll at different rates."""

    def __init__(self) -> None:
        super().__init__()
        self.star_far: list[pygame.Vector2] = []
        self.star_mid: list[pygame.Vector2] = []
        self.star_near: list[pygame.Vector2] = []
        self.scale_far = 0.2
        self.scale_mid = 0.5
        self.scale_near = 0.7
        self.color_far = Color(0, 0, 0, 1)
        self.color_mid = Color(0, 0, 0, 1)
        self.color_near = Color(0, 0, 0, 1)
        self.timer = 0.0
        self.num = 2000

    @classmethod
    def create(cls, parent=None, num: int = 2000, scale_far: float = 0.2,
               scale_mid: float = 0.5, scale_near: float = 0.7) -> BgStar:
        """Scatter ``num`` stars per layer over the part of the map each layer can show."""
        game = Game.get_instance()
        bg = cls()
        bg.init()
        bg.num = num
        bg.scale_far = scale_far
        bg.scale_mid = scale_mid
        bg.scale_near = scale_near
        window = pygame.Vector2(game.window_size)
        scene = game.current_scene
        extra = pygame.Vector2(scene.map_size) - window if scene is not None else pygame.Vector2()
        origin = pygame.Vector2()
        for _ in range(num):
            bg.star_far.append(game.random_vec2(origin, window + extra * scale_far))
            bg.star_mid.append(game.random_vec2(origin, window + extra * scale_mid))
            bg.star_near.append(game.random_vec2(origin, window + extra * scale_near))
        if parent is not None:
            parent.add_child(bg)
        return bg

    def update(self, delta_time: float) -> None:
        self.timer += delta_time
        t = self.timer
        self.color_far = Color(_wave(t, 0.9), _wave(t, 0.8), _wave(t, 0.7))
        self.color_mid = Color(_wave(t, 0.7), _wave(t, 0.8), _wave(t, 0.9))
        self.color_near = Color(_wave(t, 0.8), _wave(t, 0.9), _wave(t, 1.0))

    def render(self) -> None:
        scene = self.game.current_scene
        camera = -scene.window_position if scene is not None else pygame.Vector2()
        self.game.draw_points(self.star_far, camera * self.scale_far, self.color_far)
        self.game.draw_points(self.star_mid, camera * self.scale_mid, self.color_mid)
        self.game.draw_points(self.star_near, camera * self.scale_near, self.color_near)