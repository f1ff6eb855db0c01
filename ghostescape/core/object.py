"""Base game objects: the object tree, screen-space and world-space objects."""

from __future__ import annotations

import pygame

from ..defs import ObjectType
from ..game import Game


def _discard(children: list, child) -> None:
    """Remove every occurrence of ``child`` (by identity) from ``children``."""
    children[:] = [item for item in children if item is not child]


class GameObject:
    """A node in the object tree; updates, renders and forwards events to its children."""

    def __init__(self) -> None:
        self.type = ObjectType.NONE
        self.children: list[GameObject] = []
        self._to_add: list[GameObject] = []
        self.active = True
        self.need_remove = False

    @property
    def game(self) -> Game:
        return Game.get_instance()

    def init(self) -> None:
        """Prepare the object after construction."""

    def handle_events(self, event) -> bool:
        """Offer the event to active children; True once one of them handles it."""
        return any(child.handle_events(event) for child in list(self.children) if child.active)

    def update(self, delta_time: float) -> None:
        self._update_list(self.children, delta_time)
        pending, self._to_add = self._to_add, []
        for child in pending:
            self.add_child(child)

    def render(self) -> None:
        for child in self.children:
            if child.active:
                child.render()

    def clean(self) -> None:
        for child in self.children:
            child.clean()
        self.children.clear()

    def add_child(self, child: GameObject) -> None:
        self.children.append(child)

    def remove_child(self, child: GameObject) -> None:
        """Take ``child`` out of the tree without cleaning it."""
        _discard(self.children, child)

    def safe_add_child(self, child: GameObject) -> None:
        """Add ``child`` at the end of the next update."""
        self._to_add.append(child)

    @staticmethod
    def _update_list(children: list, delta_time: float) -> None:
        """Drop and clean children marked for removal, update the active rest."""
        for child in list(children):
            if child.need_remove:
                _discard(children, child)
                child.clean()
            elif child.active:
                child.update(delta_time)


class ObjectScreen(GameObject):
    """An object placed in screen coordinates."""

    def __init__(self) -> None:
        super().__init__()
        self._render_position = pygame.Vector2()

    def init(self) -> None:
        self.type = ObjectType.OBJECT_SCREEN

    @property
    def render_position(self) -> pygame.Vector2:
        return pygame.Vector2(self._render_position)

    @render_position.setter
    def render_position(self, value) -> None:
        self._render_position = pygame.Vector2(value)

    @property
    def position(self) -> pygame.Vector2:
        return pygame.Vector2()

    def take_damage(self, damage: float) -> None:
        """Screen objects ignore damage."""


class ObjectWorld(ObjectScreen):
    """An object placed in map coordinates, drawn relative to the camera."""

    def __init__(self) -> None:
        super().__init__()
        self._position = pygame.Vector2()
        self.collider = None

    def init(self) -> None:
        self.type = ObjectType.OBJECT_WORLD

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        self._render_position = self._map_to_screen(self._position)

    @property
    def position(self) -> pygame.Vector2:
        return pygame.Vector2(self._position)

    @position.setter
    def position(self, value) -> None:
        self._position = pygame.Vector2(value)
        self._render_position = self._map_to_screen(self._position)

    @property
    def render_position(self) -> pygame.Vector2:
        return pygame.Vector2(self._render_position)

    @render_position.setter
    def render_position(self, value) -> None:
        self._render_position = pygame.Vector2(value)
        self._position = self._screen_to_map(self._render_position)

    def _map_to_screen(self, point) -> pygame.Vector2:
        scene = self.game.current_scene
        return scene.map_to_screen(point) if scene is not None else pygame.Vector2(point)

    def _screen_to_map(self, point) -> pygame.Vector2:
        scene = self.game.current_scene
        return scene.screen_to_map(point) if scene is not None else pygame.Vector2(point)