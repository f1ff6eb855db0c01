"""The player's thunder weapon: strikes where the mouse is clicked."""

from __future__ import annotations

import pygame

from .defs import Anchor
from .raw.weapon import Weapon
from .screen.hud_skill import HUDSkill
from .world.spell import Spell

_ICON = "assets/UI/Electric-Icon.png"
_SOUND = "assets/sound/big-thunder.mp3"
_SPELL = "assets/effect/Thunderstrike w blur.png"
_SPELL_DAMAGE = 40.0
_SPELL_SCALE = 3.0


class WeaponThunder(Weapon):
    """Casts a thunder strike on left click, with a cooldown icon on screen."""

    def __init__(self) -> None:
        super().__init__()
        self.hud_skill: HUDSkill | None = None

    @classmethod
    def create(cls, parent, cool_down: float, mana_cost: float) -> WeaponThunder:
        weapon = cls()
        weapon.init()
        weapon.parent = parent
        weapon.cool_down = cool_down
        weapon.mana_cost = mana_cost
        parent.add_child(weapon)
        return weapon

    def init(self) -> None:
        super().init()
        scene = self.game.current_scene
        position = pygame.Vector2(self.game.window_size.x - 300.0, 30.0)
        self.hud_skill = HUDSkill.create(scene, _ICON, position, 0.1, Anchor.CENTER)

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        if self.hud_skill is not None:
            self.hud_skill.percentage = self.cool_down_timer / self.cool_down

    def handle_events(self, event) -> bool:
        if event.type != pygame.MOUSEBUTTONDOWN:
            return False
        if getattr(event, "button", None) != pygame.BUTTON_LEFT or not self.can_attack():
            return False
        self.game.play_sound(_SOUND)
        position = self.game.mouse_position + self.game.current_scene.window_position
        spell = Spell.create(None, _SPELL, position, _SPELL_DAMAGE, _SPELL_SCALE, Anchor.CENTER)
        self.attack(position, spell)
        return True