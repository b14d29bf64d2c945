# glarcade

A handful of small arcade games and graphics demos drawn with pygame.
The game rules live in plain Python classes that run without a window,
so they can be driven from your own code or tests.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Commands

| Command                | What it starts                                          |
|------------------------|---------------------------------------------------------|
| `glarcade-asteroids`   | Asteroids: fly the ship and shoot every rock            |
| `glarcade-pong`        | Pong for two players on one keyboard                    |
| `glarcade-sierpinski`  | The chaos game drawing a Sierpinski triangle point by point |
| `glarcade-hello`       | A colour-interpolated triangle with a few text widgets  |
| `glarcade-first-app`   | A small window with a button, a checkbox and a status line |

Every command accepts `--width` and `--height` to set the window size
(600x600 by default, 800x600 for `glarcade-first-app`).
`glarcade-sierpinski` also takes `--points-per-frame N` (at least 1, default 1).

### Asteroids

- Left/Right arrows or A/D: turn the ship
- Up arrow, W or the right mouse button: thrust
- Space or the left mouse button: fire (at most one pair of bullets every 0.25 s)
- Moving the mouse points the ship at the cursor

Each shot pushes the ship slightly backwards. An asteroid that is hit and
is larger than scale 0.10 splits into three smaller ones at half its size;
smaller ones just disappear. Touch an asteroid and the game is over; clear
them all and you win. Either way a new round starts five seconds later.

### Pong

- Left player (player 1): W and S
- Right player (player 2): Up and Down arrows

A player wins when the ball leaves the court past the other player's
paddle. Where the ball meets a paddle decides its new vertical speed, and
the top and bottom walls bounce it back. A new round starts five seconds
after a win.

### Sierpinski

A point repeatedly jumps halfway towards a randomly chosen corner of a
triangle; every position is drawn. The "Clear window" button wipes the
canvas.

### Demos

- `glarcade-hello`: Up/Down cycle through the combo box entries, A toggles
  the "another window" text.
- `glarcade-first-app`: click "Press me!" to print "Button pressed.", click
  the checkbox to toggle the option, press M to toggle the compliment line.

## Using the game logic from code

```python
from glarcade.asteroids.game import AsteroidsGame
from glarcade.asteroids.gamedata import Input

game = AsteroidsGame()          # a round is already set up
game.press(Input.UP)
game.update(1 / 60)
print(game.message())           # "" while playing, "Game Over!" or "*You Win!*"
```

```python
from glarcade.pong.game import PongGame

game = PongGame()
game.handle_key("w", True)      # keys: "w", "s", "up", "down"
game.update(1 / 60)
print(game.message())           # "" or "*Player 1 Win!*" / "*Player 2 Win!*"
```

```python
import random
from glarcade.sierpinski import ChaosGame, to_screen

chaos = ChaosGame(random.Random(1))
pixels = [to_screen(p, 600, 600) for p in chaos.points(1000)]
```

```python
from glarcade.demos import interpolate_color, triangle_vertices

interpolate_color(triangle_vertices(), (0.0, 0.0))   # blended RGB, or None outside
```

Both games take a `clock` callable so timers can be controlled, and the
asteroids game and `ChaosGame` take a `random.Random` for repeatable runs.
`glarcade.geometry` holds the `Vec2` type and the helpers `wrap_angle`,
`wrap_around` and `regular_polygon`; `glarcade.timing` holds `ElapsedTimer`.

## What it does not do

The demo windows draw plain text and rectangles only: the slider and the
clear-colour editor are not interactive, and there is no menu bar or
built-in demo window. The games keep no score between rounds and play no
sound.