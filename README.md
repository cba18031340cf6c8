# foxgame

The rules and state of a small tile-based fox platformer, kept free of any
window, renderer or input library. Everything is plain Python: widgets and
scene objects take the mouse and keyboard state as arguments and return or
store the result, so they can be driven from any front end or from tests.

## What is inside

- `foxgame.util` – the immutable `Vec2` and `Rect` types, the view size
  (`VIEW_SIZE`, 22 × 14 tiles of 16 pixels) and `approach_target`.
- `foxgame.levelpack` – `LevelData`, one level record in the binary level
  format (name, world, background colour, size, tiles, background tiles,
  spawn, finish, checkpoints, signs, doors, entities), with `to_bytes` and
  `from_bytes`. Malformed data raises `LevelPackError`. Also
  `pos_to_level_pos`, `level_pos_to_pos`, `string_to_bytes` and
  `bytes_to_string` for the fixed 24-byte text fields.
- `foxgame.fonts` – metrics of the large and small fonts, which characters
  each can show (`valid_char`) and which may be typed and saved
  (`typable_char`), `text_size` and `text_origin`.
- `foxgame.powerups` – the movement `State`, `Dir`, `HeadPowerup`,
  `FeetPowerup`, `PowerupKind` (names and colours), `Invuln`, and
  `PlayerStatus` with `hurt`, `kill`, `tick_invuln` and `collect_powerup`;
  `fall_physics` gives gravity and fall speed for each powerup and state.
- `foxgame.player_parts` – atlas rectangles of the player's head, body, arms
  and feet, `choose_arms`, `sprite_y_offset`, `grab_hitbox` and
  `throw_velocity`.
- `foxgame.camera` – `Camera`, which follows the player, keeps the view inside
  the level and shakes.
- `foxgame.fader` – `Fader`, the fade to black used by doors.
- `foxgame.sign_display` – `SignDisplay`, the overlay for a sign's four lines.
- `foxgame.particles` – `Particles` and `Particle`: debris, stones, smoke,
  sparkles, explosions, one-ups and floating powerup names.
- `foxgame.resources` – `TileAnimationTimer`, the pausable tile animation clock.
- `foxgame.ui`, `foxgame.button`, `foxgame.slider`, `foxgame.text_input`,
  `foxgame.toast` – a small retained-mode UI: `Ui` (one interaction per frame,
  tooltips, `render_target_rect`, `mouse_pos`, `tooltip_rect`), `Button`,
  `SliderU8`, `TextInput` and `ToastManager`.
- `foxgame.submenu` – `Submenu`, the help and credits pages with a back button.

## Encoding a level

```python
from foxgame.levelpack import LevelData, LevelPackError

level = LevelData(
    name="first steps",
    world=1,
    bg_col=(99, 155, 255),
    width=2,
    height=1,
    tiles=[0, 1],
    tiles_bg=[0, 0],
    spawn=(0, 0),
    finish=(1, 0),
)
data = level.to_bytes()
decoded, end = LevelData.from_bytes(data)
assert decoded == level and end == len(data)

try:
    LevelData.from_bytes(data[:10])
except LevelPackError as error:
    print(error)
```

`from_bytes` takes a starting cursor and returns the cursor just past the
level, so records can be read one after another. Passing `max_signs` rejects
levels with more signs than that.

## Screen fades

```python
from foxgame.fader import Fader
from foxgame.util import Vec2

fader = Fader()
fader.begin_fade(Vec2(64.0, 32.0))
for _ in range(30):
    fader.update(1 / 60)
    destination = fader.move_player()
    if destination is not None:
        print("move the player to", destination)
```

## Buttons

```python
from foxgame.button import Button
from foxgame.ui import Ui
from foxgame.util import Rect, Vec2

ui = Ui()
button = Button(Rect(10.0, 10.0, 80.0, 16.0), "Play!", tooltip="Start the pack")
inside = Vec2(20.0, 15.0)
for pressed, down, released in [(False, False, False), (True, True, False),
                                (False, True, False), (False, False, True)]:
    ui.begin_frame()
    button.update(ui, inside, pressed, down, released)
print(button.released)  # True
```

## What this package does not do

- It encodes and decodes single level records only. It has no type for a
  whole pack file (pack header, pack name, author and world list), and no
  code to find pack files on disk or choose between them.
- It has no main menu, no level intro, death, game-over or pack-finish
  screens, and no scene that runs a level: tiles, entities, collisions and
  the player's frame-by-frame movement are not simulated here.
- It draws nothing, opens no window, reads no keyboard or mouse, and installs
  no command to play the game.

## Tests

The tests use pytest and are installed with the `test` extra.