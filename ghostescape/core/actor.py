"""Actors: world objects that move, have stats and can be hurt."""

from __future__ import annotations

import pygame

from .object import ObjectWorld


class Actor(ObjectWorld):
    """A moving world object with optional stats and health bar."""

    def __init__(self) -> None:
        super().__init__()
        self.stats = None
        self.health_bar = None
        self.velocity = pygame.Vector2()
        self.max_speed = 600.0

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        self._update_health_bar()

    def move(self, delta_time: float) -> None:
        """Advance by velocity, then keep the position inside the map."""
        self.position = self._position + pygame.Vector2(self.velocity) * delta_time
        scene = self.game.current_scene
        if scene is not None:
            bounds = pygame.Vector2(scene.map_size)
            self._position = pygame.Vector2(
                min(max(self._position.x, 0.0), bounds.x),
                min(max(self._position.y, 0.0), bounds.y),
            )

    def take_damage(self, damage: float) -> None:
        if self.stats is not None:
            self.stats.take_damage(damage)

    @property
    def is_alive(self) -> bool:
        return True if self.stats is None else self.stats.is_alive

    def _update_health_bar(self) -> None:
        if self.stats is None or self.health_bar is None:
            return
        self.health_bar.percentage = self.stats.health / self.stats.max_health