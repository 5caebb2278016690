# orbcatch

A small arcade game. Yin-yang orbs fall from the top of a 640×520 window.
Steer the shrine maiden with the arrow keys and catch as many orbs as you can
before the countdown runs out.

## Installing

```
pip install .
```

## Playing

```
orbcatch
orbcatch --seed 42
orbcatch --font path/to/font.ttf
```

Options:

- `--font PATH`: TrueType font for the score bar. The default is
  `DFPPOPCorn-W12.ttf` in the working directory; if the file is not there,
  pygame's default font is used.
- `--seed N`: seed for the random positions the orbs drop from.

Controls and rules:

- Arrow keys: each press points the player in that direction and speeds her up
  by one, to a top speed of 3 pixels per frame.
- When she reaches an edge of the play area she is held there and stops.
- Escape or closing the window ends the game.
- Ten orbs are in play at a time. Each falls one pixel per frame; an orb that
  enters the player's catch box adds one point, and an orb that falls past the
  bottom of the play area is lost. Either way, a new one drops from a random
  spot along the top.
- The countdown starts at 30 and goes down once a second; the game ends on the
  tick after it reaches 0.

The score shows at the bottom left and the time left at the bottom right. When
the game ends, `Final score: N` is printed to the terminal.

## Using the pieces

The game logic does not need a window, so it can be driven from code. Keys are
pygame key codes:

```python
import random

import pygame

from orbcatch.game import Game

game = Game(rng=random.Random(1))
game.press(pygame.K_RIGHT)
game.tick_frame()   # launch any orbs that are not in play
game.update()       # move the player and orbs, count catches
game.tick_second()  # one second of the countdown
print(game.score, game.time_left, game.done)
```

`Game.draw(surface, font)` renders the scene and score bar onto a pygame
surface.

- `orbcatch.player`: `Player` (position, `direction`, `speed`; `up()`,
  `down()`, `left()`, `right()`, `move(width, height)`, `draw(surface, sprites)`),
  the `Direction` enum, and `make_player_sprites()`, which builds the four
  facing sprites.
- `orbcatch.orb`: `Orb` (`fire(rng)`, `move(player_x, player_y, width, length,
  height)`, which returns `True` on a catch, `draw(surface, sprite)`) and
  `make_orb_sprite()`.
- `orbcatch.game`: `Game` and `main(argv=None)`, the entry point of the
  `orbcatch` command.

## What it does not do

There is no title screen, no replay and no saved high scores: one round is
played, the final score is printed, and the program exits.

## Running the tests

```
pip install .[test]
pytest
```