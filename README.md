# ghostescape

A small top-down arcade game built on pygame. You are a ghost in an arena
three times the size of the window; every few seconds a wave of hostile
ghosts appears around you. Dodge them and strike them with thunder before
your health runs out.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

```
ghostescape
```

The window is resizable; the picture is scaled to fit and letterboxed.
The logical size and the title can be chosen on the command line:

```
ghostescape --width 1280 --height 720 --title GhostEscape
```

| Option     | Default       | Meaning                                  |
|------------|---------------|------------------------------------------|
| `--title`  | `GhostEscape` | window title                             |
| `--width`  | `1280`        | logical width in pixels (positive)       |
| `--height` | `720`         | logical height in pixels (positive)      |

The game opens on a title screen showing the best score so far, with
buttons to start, show the credits (read from `assets/credits.txt`; any
mouse release closes them), or quit.

### Controls

| Input              | Action                                              |
|--------------------|-----------------------------------------------------|
| W / A / S / D      | Move                                                |
| Left mouse button  | Cast a thunder strike at the cursor                 |
| Right mouse button | Hold to slow time down to a tenth                   |

Three buttons near the bottom-right corner of the playing screen pause
(and resume), restart, or return to the title screen.

### Rules

- Each ghost you defeat is worth 10 points. Ghosts drift towards you and
  stop spawning while more than 60 are on the field; a wave brings 15 of
  them every 3 seconds.
- A ghost that touches you deals 40 damage out of your 100 health. After a
  hit you are invincible for 1.5 seconds and flicker on screen.
- A thunder strike deals 40 damage to every ghost it touches, costs 40 mana
  and has a 2-second cooldown, shown by the skill icon at the top of the
  screen. Mana refills at 10 per second. Your health and mana bars are in
  the top-left corner, the score in the top-right.
- When your health runs out the round ends; after a moment large restart
  and back buttons appear in the middle of the screen.

The high score is saved to `assets/score.dat` as a 4-byte little-endian
integer whenever you pause, restart, go back to the title, or die, and is
shown on the title screen the next time you play.

## Assets

The package contains code only. It does not ship the images, sounds, music
and fonts the game uses: it looks for them in an `assets/` directory under
the working directory (for example `assets/sprite/ghost-idle.png`,
`assets/UI/A_Start1.png`, `assets/font/VonwaonBitmap-16px.ttf`). Start the
game from the directory that holds `assets/`. A missing image or font stops
the game with `ghostescape.assets.AssetError`; a missing sound or piece of
music is logged and skipped.

## Using the pieces

The game is built from a small object tree that can be used on its own:

- `ghostescape.game.Game` – the shared instance (`Game.get_instance()`)
  holding the window, current scene, score, audio, random numbers and
  drawing helpers.
- `ghostescape.core.scene.Scene` – keeps world objects, screen objects and
  a camera (`window_position`, `map_to_screen`, `screen_to_map`), and can be
  paused.
- `ghostescape.core.object` – `GameObject`, `ObjectScreen` and
  `ObjectWorld`; `ghostescape.core.actor.Actor` adds velocity, stats and a
  health bar.
- `ghostescape.raw` – `Timer`, `Stats`, `Weapon` and `BgStar`.
- `ghostescape.affiliate` – `Sprite`, `SpriteAnim`, `Collider`,
  `AffiliateBar` and `TextLabel`, placed on their parent by an `Anchor`.
- `ghostescape.screen` – `HUDButton`, `HUDSkill`, `HudStats`, `HUDText`
  and `UIMouse`.
- `ghostescape.world` – `Effect` and `Spell`.

Colliders only test circles against circles; a `ColliderShape.RECTANGLE`
collider never reports a collision.