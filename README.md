# ecspong

A two-player Pong game for the desktop. Each frame runs on a small
entity-component-system core. The paddles, the ball and the score display are
entities. Systems move them, bounce the ball, detect goals, keep score and draw
the window.

## Installing

```
pip install .
```

This needs pygame. No font comes with the package. The score is drawn with the
font at `assets/ARIAL.TTF`, a path relative to the directory you start the game
from. If that file cannot be loaded, the game stops with
`RuntimeError: Failed to load font: assets/ARIAL.TTF`.

## Playing

```
ecspong
```

The window is 2500 × 1400 pixels.

| Player | Up  | Down |
|--------|-----|------|
| Left   | `W` | `S`  |
| Right  | `↑` | `↓`  |

- When you let go of a key while still holding the opposite one, the paddle
  turns round and moves that way.
- A new ball waits one second in the centre. Then it launches down and to the
  right.
- While in play the ball keeps speeding up.
- It bounces off the top and bottom walls and off the paddles.
- A point is scored when the ball reaches the side wall behind the opponent.
  Another ball is then served from the centre.
- The score is shown at the top as `left    |    right`.

Close the window to quit. The game has no menu, no pause, no computer opponent
and no score limit. It runs until you close the window.

## Using the pieces

The game is made of parts you can use separately:

- `ecspong.components` holds the settings, the component and event dataclasses,
  and the `PaddleSide` and `BallState` enums. It also holds `Registry` and
  `Dispatcher`.
  - `Registry` stores entities and their components. Its methods are `create`,
    `emplace`, `get`, `try_get`, `has`, `view`, `destroy` and `alive`.
  - `Dispatcher` queues events by type. It delivers them to the connected
    handlers on `update`, and `clear` discards them.
- `ecspong.factory.Factory` creates entities with `spawn_paddles`, `spawn_ball`
  and `spawn_score_ui`.
- `ecspong.systems` holds the per-frame logic: `ball_system`, `physics_system`,
  `border_check_system`, `collision_system`, `spawn_system` and `cleanup_system`.
  It also holds `is_ball_intersecting_with_paddle` and the event handlers
  `PaddleMovementSystem` and `ScoreSystem`.
- `ecspong.controls` turns keys into `PaddleMoveEvent`s with `on_key_pressed`,
  `on_key_released` and `event_system`. `event_system` returns `True` when the
  window should close.
- `ecspong.render` draws a frame with `render_system`. `format_score` fills the
  score text.
- `ecspong.game.Game` ties these together. `Game.step(dt)` advances the game by
  `dt` seconds. It draws only while a window is open. `Game.run()` opens the
  window and plays until it is closed.

Without a window, the game can be stepped directly:

```python
from ecspong.game import Game

game = Game()
for _ in range(600):
    game.step(1 / 60)
print(game.score.left, game.score.right)
```

## Running the tests

```
pip install .[test]
pytest
```