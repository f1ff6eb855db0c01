"""Cache of textures, music, sounds and fonts loaded from disk."""

from __future__ import annotations

import os

import pygame


class AssetError(Exception):
    """Raised when an asset cannot be loaded."""

    def __init__(self, kind: str, path: str) -> None:
        super().__init__(f"failed to load {kind}: {path}")
        self.kind = kind
        self.path = path


class AssetStore:
    """Loads assets on first use and keeps them by path."""

    def __init__(self) -> None:
        self._textures: dict[str, pygame.Surface] = {}
        self._musics: dict[str, str] = {}
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        self._fonts: dict[tuple[str, int], pygame.font.Font] = {}

    def __len__(self) -> int:
        return len(self._textures) + len(self._musics) + len(self._sounds) + len(self._fonts)

    def clean(self) -> None:
        """Forget every cached asset."""
        self._textures.clear()
        self._fonts.clear()
        self._musics.clear()
        self._sounds.clear()

    def load_texture(self, path: str) -> None:
        """Load an image; an already cached one is kept."""
        try:
            surface = pygame.image.load(path)
        except (pygame.error, OSError) as exc:
            raise AssetError("texture", path) from exc
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        self._textures.setdefault(path, surface)

    def load_music(self, path: str) -> None:
        """Register a music file; it is streamed when played."""
        if not os.path.isfile(path):
            raise AssetError("music", path)
        self._musics.setdefault(path, path)

    def load_sound(self, path: str) -> None:
        """Load a sound effect; needs an initialised mixer."""
        try:
            sound = pygame.mixer.Sound(path)
        except (pygame.error, OSError) as exc:
            raise AssetError("sound", path) from exc
        self._sounds.setdefault(path, sound)

    def load_font(self, path: str, size: int) -> None:
        """Load a font at a point size."""
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            font = pygame.font.Font(path, size)
        except (pygame.error, OSError) as exc:
            raise AssetError("font", path) from exc
        self._fonts.setdefault((path, size), font)

    def get_texture(self, path: str) -> pygame.Surface:
        if path not in self._textures:
            self.load_texture(path)
        return self._textures[path]

    def get_music(self, path: str) -> str:
        if path not in self._musics:
            self.load_music(path)
        return self._musics[path]

    def get_sound(self, path: str) -> pygame.mixer.Sound:
        if path not in self._sounds:
            self.load_sound(path)
        return self._sounds[path]

    def get_font(self, path: str, size: int) -> pygame.font.Font:
        key = (path, size)
        if key not in self._fonts:
            self.load_font(path, size)
        return self._fonts[key]