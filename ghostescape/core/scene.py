"""Scenes: roots of the object tree with world, screen and plain children."""

from __future__ import annotations

import logging

import pygame

from ..defs import ObjectType
from .object import GameObject, _discard

log = logging.getLogger(__name__)

_WINDOW_MARGIN = 30.0


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class Scene(GameObject):
    """Holds map objects, screen objects and a camera over the map."""

    def __init__(self) -> None:
        super().__init__()
        self._window_position = pygame.Vector2()
        self.map_size = pygame.Vector2()
        self.children_world: list = []
        self.children_screen: list = []
        self.is_paused = False

    def init(self) -> None:
        """Build the scene's content."""

    def handle_events(self, event) -> bool:
        for child in list(self.children_screen):
            if child.active and child.handle_events(event):
                return True
        if self.is_paused:
            return False
        super().handle_events(event)
        for child in list(self.children_world):
            if child.active and child.handle_events(event):
                return True
        return False

    def update(self, delta_time: float) -> None:
        """Update map objects unless paused; screen objects always update."""
        if not self.is_paused:
            super().update(delta_time)
            before = len(self.children_world)
            self._update_list(self.children_world, delta_time)
            if len(self.children_world) < before:
                log.debug("removed map objects")
        self._update_list(self.children_screen, delta_time)

    def render(self) -> None:
        super().render()
        for child in self.children_world:
            if child.active:
                child.render()
        for child in self.children_screen:
            if child.active:
                child.render()

    def clean(self) -> None:
        super().clean()
        for child in self.children_screen:
            child.clean()
        self.children_screen.clear()
        for child in self.children_world:
            child.clean()
        self.children_world.clear()

    def add_child(self, child) -> None:
        """File ``child`` in the list that matches its type."""
        if child.type in (ObjectType.OBJECT_WORLD, ObjectType.ENEMY):
            self.children_world.append(child)
        elif child.type is ObjectType.OBJECT_SCREEN:
            self.children_screen.append(child)
        else:
            self.children.append(child)

    def remove_child(self, child) -> None:
        """Take ``child`` out of its list without cleaning it."""
        if child.type in (ObjectType.OBJECT_WORLD, ObjectType.ENEMY):
            _discard(self.children_world, child)
        elif child.type is ObjectType.OBJECT_SCREEN:
            _discard(self.children_screen, child)
        else:
            _discard(self.children, child)

    def save_data(self, file_path: str) -> None:
        """Persist scene data; nothing to save by default."""

    def load_data(self, file_path: str) -> None:
        """Restore scene data; nothing to load by default."""

    def map_to_screen(self, map_position) -> pygame.Vector2:
        return pygame.Vector2(map_position) - self._window_position

    def screen_to_map(self, screen_position) -> pygame.Vector2:
        return pygame.Vector2(screen_position) + self._window_position

    def pause(self) -> None:
        self.is_paused = True
        self.game.pause_sound()
        self.game.pause_music()

    def resume(self) -> None:
        self.is_paused = False
        self.game.resume_sound()
        self.game.resume_music()

    @property
    def window_position(self) -> pygame.Vector2:
        return pygame.Vector2(self._window_position)

    @window_position.setter
    def window_position(self, value) -> None:
        """Move the camera, kept within the map plus a small margin."""
        value = pygame.Vector2(value)
        high = self.map_size - pygame.Vector2(self.game.window_size) + pygame.Vector2(_WINDOW_MARGIN)
        self._window_position = pygame.Vector2(
            _clamp(value.x, -_WINDOW_MARGIN, high.x),
            _clamp(value.y, -_WINDOW_MARGIN, high.y),
        )