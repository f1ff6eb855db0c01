"""The player's ghost: keyboard movement, camera follow, thunder weapon."""

from __future__ import annotations

import pygame

from .affiliate.collider import Collider
from .affiliate.sprite_anim import SpriteAnim
from .core.actor import Actor
from .raw.stats import Stats
from .raw.timer import Timer
from .weapon_thunder import WeaponThunder
from .world.effect import Effect

_SPRITE_IDLE = "assets/sprite/ghost-idle.png"
_SPRITE_MOVE = "assets/sprite/ghost-move.png"
_DEATH_EFFECT = "assets/effect/1764.png"
_SOUND_HIT = "assets/sound/hit-flesh-02-266309.mp3"
_SOUND_DEATH = "assets/sound/female-scream-02-89290.mp3"

_FLASH_INTERVAL = 0.3
_VELOCITY_DAMPING = 0.9
_MOVING_THRESHOLD = 0.1


class Player(Actor):
    """A ghost steered with WASD that blinks while invincible."""

    def __init__(self) -> None:
        super().__init__()
        self.sprite_idle: SpriteAnim | None = None
        self.sprite_move: SpriteAnim | None = None
        self.effect: Effect | None = None
        self.is_moving = False
        self.weapon_thunder: WeaponThunder | None = None
        self.flash_timer: Timer | None = None

    def init(self) -> None:
        super().init()
        self.flash_timer = Timer.create(self, _FLASH_INTERVAL)
        self.flash_timer.start()
        self.max_speed = 500.0
        self.sprite_idle = SpriteAnim.create(self, _SPRITE_IDLE, 2.0)
        self.sprite_move = SpriteAnim.create(self, _SPRITE_MOVE, 2.0)
        self.sprite_move.active = False

        self.collider = Collider.create(self, self.sprite_idle.size / 2.0)
        self.stats = Stats.create(self)
        self.effect = Effect.create(None, _DEATH_EFFECT, pygame.Vector2(0.0, 0.0), 2.0)
        self.weapon_thunder = WeaponThunder.create(self, 2.0, 40.0)

    def handle_events(self, event) -> bool:
        return super().handle_events(event)

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        self.velocity = pygame.Vector2(self.velocity) * _VELOCITY_DAMPING
        self.keyboard_control()
        self.check_state()
        self.move(delta_time)
        self.sync_camera()
        self.check_is_dead()

    def render(self) -> None:
        """Skip every other flash phase while invincible."""
        if self.stats.is_invincible and self.flash_timer.progress < 0.5:
            return
        super().render()

    def clean(self) -> None:
        super().clean()

    def take_damage(self, damage: float) -> None:
        if self.stats is None or self.stats.is_invincible:
            return
        super().take_damage(damage)
        self.game.play_sound(_SOUND_HIT)

    def keyboard_control(self) -> None:
        """Set full speed along each axis whose key is held."""
        if not pygame.display.get_init():
            return
        keys = pygame.key.get_pressed()
        velocity = pygame.Vector2(self.velocity)
        if keys[pygame.K_w]:
            velocity.y = -self.max_speed
        if keys[pygame.K_s]:
            velocity.y = self.max_speed
        if keys[pygame.K_a]:
            velocity.x = -self.max_speed
        if keys[pygame.K_d]:
            velocity.x = self.max_speed
        self.velocity = velocity

    def sync_camera(self) -> None:
        """Centre the scene's camera on the player."""
        window = pygame.Vector2(self.game.window_size)
        self.game.current_scene.window_position = self.position - window / 2.0

    def check_state(self) -> None:
        facing_left = self.velocity.x < 0
        self.sprite_move.flip = facing_left
        self.sprite_idle.flip = facing_left
        moving = pygame.Vector2(self.velocity).length() > _MOVING_THRESHOLD
        if moving != self.is_moving:
            self.is_moving = moving
            self.change_state(moving)

    def change_state(self, is_moving: bool) -> None:
        """Swap idle and move animations, carrying the frame position over."""
        if is_moving:
            shown, hidden = self.sprite_move, self.sprite_idle
        else:
            shown, hidden = self.sprite_idle, self.sprite_move
        hidden.active = False
        shown.active = True
        shown.current_frame = hidden.current_frame
        shown.frame_timer = hidden.frame_timer

    def check_is_dead(self) -> None:
        """On death leave the death effect behind and deactivate."""
        if self.stats.is_alive:
            return
        self.game.current_scene.safe_add_child(self.effect)
        self.effect.position = self.position
        self.active = False
        self.game.play_sound(_SOUND_DEATH)