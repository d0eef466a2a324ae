# dinorun

A tiny endless-runner game played in the terminal. Your dinosaur (the red
square) stands near the left edge of a 40×15 field while cacti (green) and
coins (yellow) scroll in from the right. Jump over the cacti and pick up the
coins.

## Installing

```
pip install .
```

## Playing

```
dinorun
```

The game needs a POSIX terminal with ANSI colour support.

| Key   | Action |
|-------|--------|
| `w`   | jump   |
| `Esc` | quit   |

- A jump lasts four frames: two frames rising, two frames falling. A new jump
  can only start once the previous one has finished.
- Each frame a new cactus or coin may appear at the right edge; two never
  appear in consecutive frames.
- A coin adds one point. Ten points win the game ("You win!!!").
- Hitting a cactus ends the game ("You lose.").

Each frame lasts 0.3 seconds. While playing, the terminal is switched to
non-echoing, non-blocking input and the cursor is hidden; afterwards the
terminal mode is restored and the cursor shown again.

When the game ends, an `ID:` banner is printed in highlighted, blinking text.
The ID shown can be set with `--id`:

```
dinorun --id 12345
```

## Using it as a library

The pieces of the game can be used on their own:

```python
from dinorun.ansi import ansi_print
from dinorun.units import Color
from dinorun.objects import create_player, create_cactus

print(ansi_print("hello", Color.YELLOW, Color.RED, True, False))

dino = create_player()
dino.start_jump()
dino.update()          # the dinosaur moves up one row

cactus = create_cactus()
cactus.update()        # the cactus moves one column to the left
```

- `dinorun.units` — `Color`, `Direction`, `Vec2` and the field dimensions.
- `dinorun.ansi` — `ansi_print` and `ansi_emphasis` build ANSI-formatted strings.
- `dinorun.icon` — `Cell`, `solid_icon`, `icon_width`, `icon_height`.
- `dinorun.objects` — `GameObject`, `Block`, `BlockType`, `Dino` and the
  `create_player`, `create_cactus`, `create_coin` factories.
- `dinorun.view` — `View` draws objects into a frame buffer and redraws only
  when the frame changes; `compose_frame` returns the bordered frame text.
- `dinorun.controller` — `Controller` runs the game; `RawTerminal` is the
  context manager that sets up the terminal.

`Controller.step` runs a single frame without a terminal, so games can be
scripted or tested. The view can write to any stream and take its terminal
size from any callable, and the controller accepts its own random generator:

```python
import io
import random

from dinorun.controller import Controller
from dinorun.view import View

view = View(stream=io.StringIO(), size_source=lambda: (24, 80))
game = Controller(view, rng=random.Random(1))
game.step(ord("w"))    # one frame with the jump key pressed
game.step(-1)          # one frame with no key pressed
print(game.player.score, game.player.alive)
```

`Controller.run` plays a full game and returns an `Outcome` (`QUIT`, `WIN` or
`LOSE`).

## What it does not do

There is no saved high-score table, no difficulty setting and no pause. The
field size and frame rate are fixed. Input is read from standard input with
POSIX terminal settings, so the game is not playable on consoles without them.

## Running the tests

```
pip install .[test]
pytest
```